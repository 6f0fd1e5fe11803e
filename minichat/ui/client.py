"""HTTP client for the chat proxy endpoint."""

import logging
from collections.abc import Sequence

import httpx

from minichat.models.results import Empty, ExchangeResult, Failure, Success
from minichat.models.schemas import Message
from minichat.ui.config import ClientConfig

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"


class ProxyClient:
    """Posts the conversation to POST /api/chat and classifies the outcome."""

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def exchange(self, history: Sequence[Message]) -> ExchangeResult:
        """Send the full history and return the tagged outcome.

        Args:
            history: Every turn so far, oldest first.

        Returns:
            Success with the assistant message, Empty when the reply carries
            no content, or Failure with a short reason.
        """
        body = {"messages": [m.to_wire().model_dump() for m in history]}

        async with httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(CHAT_PATH, json=body)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                return Failure(f"HTTP {e.response.status_code}")
            except httpx.RequestError as e:
                return Failure(f"Connection failed: {e}")
            except ValueError:
                return Failure("Invalid response body")

        reply = data.get("reply") if isinstance(data, dict) else None
        content = reply.get("content") if isinstance(reply, dict) else None
        if not content or not isinstance(content, str):
            logger.debug("Proxy answered without reply content")
            return Empty()

        return Success(Message(role="assistant", content=content))
