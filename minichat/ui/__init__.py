"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with markdown and highlighted code
    - Input validation and the single in-flight request guard
    - Optional character-by-character reveal of replies
    - Three styled page variants

Talks to the proxy only over HTTP, the same way a browser client would.
"""
