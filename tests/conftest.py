"""Pytest fixtures and shared test configuration.

Fixtures:
    - proxy_config: ProxyConfig with a dummy key
    - echo_service: Completion service stand-in that echoes the last user turn
    - failing_service: Completion service stand-in that always fails upstream
    - echo_app / failing_app: FastAPI apps wired to those services
    - async_client: HTTPX client for the echo app
"""

from collections.abc import AsyncGenerator, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from minichat.api.app import create_app
from minichat.models.schemas import AssistantReply, ChatMessage
from minichat.proxy.config import ProxyConfig
from minichat.proxy.upstream import UpstreamError


class EchoCompletionService:
    """Replies with ECHO: followed by the last user message."""

    model = "echo"

    def __init__(self) -> None:
        self.calls: list[list[ChatMessage]] = []

    async def complete(self, messages: Sequence[ChatMessage]) -> AssistantReply:
        self.calls.append(list(messages))
        last_user = next(m.content for m in reversed(messages) if m.role == "user")
        return AssistantReply(content=f"ECHO:{last_user}")

    async def close(self) -> None:
        pass


class FailingCompletionService:
    """Fails every call the way an unreachable upstream would."""

    model = "failing"

    async def complete(self, messages: Sequence[ChatMessage]) -> AssistantReply:
        raise UpstreamError("Completion request failed: invalid api key sk-secret")

    async def close(self) -> None:
        pass


@pytest.fixture
def proxy_config() -> ProxyConfig:
    return ProxyConfig(api_key="sk-test-key", base_url=None, model_name="gpt-4o-mini")


@pytest.fixture
def echo_service() -> EchoCompletionService:
    return EchoCompletionService()


@pytest.fixture
def failing_service() -> FailingCompletionService:
    return FailingCompletionService()


@pytest.fixture
def echo_app(echo_service: EchoCompletionService):
    return create_app(service=echo_service)


@pytest.fixture
def failing_app(failing_service: FailingCompletionService):
    return create_app(service=failing_service)


@pytest.fixture
async def async_client(echo_app) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the echo app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=echo_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
