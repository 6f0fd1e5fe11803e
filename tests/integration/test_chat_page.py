"""Integration tests for the chat pages.

Drives the real NiceGUI pages through NiceGUI's simulated user. The proxy
client is replaced by a gated stand-in so tests can look at the page while a
request is still outstanding.
"""

import asyncio
from collections.abc import Callable

from nicegui import ui
from nicegui.testing import User

from minichat.models.results import ExchangeResult, Success
from minichat.models.schemas import Message
from minichat.ui.chat_page import register_pages
from minichat.ui.config import ClientConfig
from minichat.ui.state import DraftError
from minichat.ui.variants import DARK, REVEAL


class GatedExchanger:
    """Echoes the last message once the test releases it."""

    def __init__(self) -> None:
        self.calls: list[tuple[Message, ...]] = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.finished = asyncio.Event()

    async def exchange(self, history: tuple[Message, ...]) -> ExchangeResult:
        self.calls.append(tuple(history))
        self.started.set()
        await self.release.wait()
        self.finished.set()
        return Success(Message(role="assistant", content=f"ECHO:{history[-1].content}"))


async def eventually(check: Callable[[], bool], timeout: float = 2.0) -> None:
    """Wait until check() holds, giving background handlers a chance to run."""
    async with asyncio.timeout(timeout):
        while not check():
            await asyncio.sleep(0.01)


def only(user: User, marker: str) -> ui.element:
    (element,) = user.find(marker=marker).elements
    return element


async def open_page(user: User, exchanger: GatedExchanger, path: str = "/") -> None:
    register_pages(
        ClientConfig(reveal_interval=0.0),
        variants=(DARK, REVEAL),
        client_factory=lambda _config: exchanger,
    )
    await user.open(path)


class TestSending:
    """Submitting from the page."""

    async def test_valid_send_clears_input_and_disables_button(self, user: User) -> None:
        exchanger = GatedExchanger()
        await open_page(user, exchanger)

        user.find(marker="chat-input").type("hello")
        user.find(marker="send-button").click()
        await asyncio.wait_for(exchanger.started.wait(), timeout=2.0)

        field = only(user, "chat-input")
        button = only(user, "send-button")
        assert field.value == ""
        assert not button.enabled
        assert [m.content for m in exchanger.calls[0]] == ["hello"]

        exchanger.release.set()
        await user.should_see("ECHO:hello")
        await eventually(lambda: button.enabled)

    async def test_whitespace_draft_shows_error_and_sends_nothing(self, user: User) -> None:
        exchanger = GatedExchanger()
        await open_page(user, exchanger)

        user.find(marker="chat-input").type("   ")
        user.find(marker="send-button").click()

        field = only(user, "chat-input")
        await eventually(lambda: field.error is not None)
        assert field.error == DARK.errors[DraftError.EMPTY]
        assert field.value == "   "
        assert exchanger.calls == []
        assert only(user, "send-button").enabled

    async def test_too_long_draft_shows_localized_error(self, user: User) -> None:
        exchanger = GatedExchanger()
        await open_page(user, exchanger, REVEAL.path)

        user.find(marker="chat-input").type("x" * 501)
        user.find(marker="send-button").click()

        field = only(user, "chat-input")
        await eventually(lambda: field.error is not None)
        assert field.error == REVEAL.errors[DraftError.TOO_LONG]
        assert exchanger.calls == []


class TestPageLifecycle:
    """The view is torn down only when NiceGUI deletes the client."""

    async def test_disconnect_keeps_view_alive(self, user: User) -> None:
        exchanger = GatedExchanger()
        await open_page(user, exchanger)
        user.find(marker="chat-input").type("hello")
        user.find(marker="send-button").click()
        await asyncio.wait_for(exchanger.started.wait(), timeout=2.0)

        # NiceGUI 3 runs these on every disconnect, including before a reconnect.
        for handler in user.client.disconnect_handlers:
            user.client.safe_invoke(handler)
        exchanger.release.set()

        button = only(user, "send-button")
        await eventually(lambda: button.enabled)
        await user.should_see("ECHO:hello")

    async def test_delete_detaches_view(self, user: User) -> None:
        exchanger = GatedExchanger()
        await open_page(user, exchanger)
        user.find(marker="chat-input").type("hello")
        user.find(marker="send-button").click()
        await asyncio.wait_for(exchanger.started.wait(), timeout=2.0)

        for handler in user.client.delete_handlers:
            user.client.safe_invoke(handler)
        exchanger.release.set()
        await asyncio.wait_for(exchanger.finished.wait(), timeout=2.0)
        await asyncio.sleep(0.05)

        # A detached view gets no more updates.
        assert not only(user, "send-button").enabled
        await user.should_not_see("ECHO:hello")
