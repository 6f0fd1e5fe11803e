"""minichat - a small markdown chat client with a server-side completion proxy.

Combines FastAPI for the proxy route, the OpenAI SDK for the upstream call,
NiceGUI for the chat pages, and Pydantic for data validation.

Components:
    - api: HTTP endpoints (POST /api/chat, GET /health)
    - proxy: Upstream completion service and its configuration
    - ui: Chat view state, proxy client, markdown rendering and pages
    - models: Message schemas and exchange results
"""

__version__ = "0.1.0"
