"""Data models shared by the proxy and the chat view.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Conversation turn with a client-side id
    - ChatRequest / ChatReply / ErrorResponse: POST /api/chat wire format
    - Success / Empty / Failure: Tagged outcome of a round trip
"""

from minichat.models.results import Empty, ExchangeResult, Failure, Success
from minichat.models.schemas import (
    AssistantReply,
    ChatMessage,
    ChatReply,
    ChatRequest,
    ErrorResponse,
    Message,
    Role,
)

__all__ = [
    "AssistantReply",
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "Empty",
    "ErrorResponse",
    "ExchangeResult",
    "Failure",
    "Message",
    "Role",
    "Success",
]
