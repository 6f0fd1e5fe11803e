"""Integration tests for components working together as a system.

Coverage:
    - POST /api/chat and GET /health with real HTTP requests over ASGI
    - Full round trip from the chat controller through the proxy app

The completion service is replaced by in-process stand-ins.
"""
