"""Upstream completion service.

Thin wrapper around the OpenAI SDK's chat completions endpoint. Decouples the
HTTP route from the SDK so the route only sees our own types and a single
exception class.

The conversation is forwarded unmodified with a fixed model. There is no
retry, no streaming and no timeout override: one blocking round trip per
client submission.
"""

import logging
from collections.abc import Sequence

from openai import AsyncOpenAI, OpenAIError

from minichat.models.schemas import AssistantReply, ChatMessage
from minichat.proxy.config import ProxyConfig

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when the upstream completion call fails or returns no choice."""

    pass


class CompletionService:
    """Service that exchanges a conversation for one assistant reply.

    The SDK client is created on first use. Recent SDK releases refuse to
    construct a client without credentials, and a missing key must surface
    as a failed completion rather than a failed startup.
    """

    def __init__(self, config: ProxyConfig, client: AsyncOpenAI | None = None) -> None:
        """Initialize the completion service.

        Args:
            config: Proxy configuration holding credentials and model.
            client: Optional pre-built SDK client (used by tests).
        """
        self._config = config
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            # SDK retries are disabled; a failed call surfaces immediately.
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                max_retries=0,
            )
        return self._client

    @property
    def model(self) -> str:
        """Model identifier sent with every completion."""
        return self._config.model_name

    async def complete(self, messages: Sequence[ChatMessage]) -> AssistantReply:
        """Forward the conversation and return the first choice.

        Args:
            messages: Conversation history, oldest first.

        Returns:
            The assistant reply. Missing upstream content becomes "".

        Raises:
            UpstreamError: If the client cannot be built, the SDK call fails,
                or no choice is returned.
        """
        payload = [{"role": m.role, "content": m.content} for m in messages]

        try:
            completion = await self._get_client().chat.completions.create(
                model=self._config.model_name,
                messages=payload,
            )
        except OpenAIError as e:
            raise UpstreamError(f"Completion request failed: {e}") from e

        if not completion.choices:
            raise UpstreamError("Completion returned no choices")

        message = completion.choices[0].message
        logger.debug(f"Received completion from {self._config.model_name}")
        return AssistantReply(content=message.content or "")

    async def close(self) -> None:
        """Release the underlying HTTP connection pool, if one was opened."""
        if self._client is not None:
            await self._client.close()
