"""Test package for minichat.

Structure:
    - unit/: Individual function and class tests
    - integration/: The proxy app over HTTP, and the chat view talking to it

Leverages pytest with pytest-check for soft assertions and hypothesis for
input properties. No test needs a real upstream API key.
"""
