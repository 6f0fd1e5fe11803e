"""Pydantic models for chat messages and the proxy wire format.

Models:
    - ChatMessage: A {role, content} pair as sent over the wire
    - Message: A conversation turn held by the chat view
    - ChatRequest: Incoming payload for POST /api/chat
    - ChatReply: Successful response from POST /api/chat
    - ErrorResponse: Failure response from POST /api/chat
"""

import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    """A single chat message as exchanged with the proxy and upstream API.

    Unknown keys (such as a client-side ``id``) are ignored so that a
    conversation can be posted as-is.

    Attributes:
        role: The speaker, either user or assistant.
        content: The message text.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role = Field(..., description="Message role: 'user' or 'assistant'")
    content: str = Field(..., description="The message content")


class Message(ChatMessage):
    """A conversation turn owned by the chat view.

    Attributes:
        id: Opaque identifier generated when the turn is created.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    def to_wire(self) -> ChatMessage:
        """Strip client-only fields before sending."""
        return ChatMessage(role=self.role, content=self.content)


class ChatRequest(BaseModel):
    """Request payload for the chat proxy endpoint.

    Attributes:
        messages: The full conversation so far, oldest first.
    """

    messages: list[ChatMessage] = Field(..., description="Conversation history")


class AssistantReply(BaseModel):
    """The single reply message returned by the proxy."""

    role: Literal["assistant"] = "assistant"
    content: str


class ChatReply(BaseModel):
    """Successful response from the chat proxy endpoint."""

    reply: AssistantReply


class ErrorResponse(BaseModel):
    """Generic failure body. Never carries upstream details."""

    error: str
