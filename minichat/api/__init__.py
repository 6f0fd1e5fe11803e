"""FastAPI endpoints for the chat proxy.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Forward a conversation, return one assistant reply
"""

from minichat.api.app import app, create_app

__all__ = ["app", "create_app"]
