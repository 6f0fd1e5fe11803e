"""Chat view state and the submit cycle.

ChatState holds the conversation for one page instance. ChatController drives
a submission: validation, the user turn, the round trip through the proxy
client, and the assistant turn (optionally revealed one character at a time).
Neither class touches NiceGUI, so both can be exercised without a browser.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Protocol

from pydantic import StringConstraints, TypeAdapter, ValidationError

from minichat.models.results import Empty, ExchangeResult, Failure, Success
from minichat.models.schemas import Message

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 500

_draft_adapter = TypeAdapter(
    Annotated[str, StringConstraints(min_length=1, max_length=MAX_MESSAGE_LENGTH)]
)


class DraftError(str, Enum):
    """Reasons a draft is rejected before sending."""

    EMPTY = "empty"
    TOO_LONG = "too_long"


class SubmitOutcome(str, Enum):
    """What a call to ChatController.submit ended up doing."""

    INVALID = "invalid"
    BUSY = "busy"
    REPLIED = "replied"
    EMPTY = "empty"
    FAILED = "failed"


class Exchanger(Protocol):
    """Anything that turns the conversation into one tagged outcome."""

    async def exchange(self, history: tuple[Message, ...]) -> ExchangeResult: ...


def validate_draft(text: str) -> DraftError | None:
    """Check a draft: trimmed length must be within 1..500.

    Returns:
        None when the draft may be sent, otherwise the reason it may not.
    """
    try:
        _draft_adapter.validate_python(text.strip())
    except ValidationError as e:
        if e.errors()[0]["type"] == "string_too_long":
            return DraftError.TOO_LONG
        return DraftError.EMPTY
    return None


class ChatState:
    """Conversation for one chat view.

    Messages are append-only; the public view is an immutable tuple.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self.awaiting_reply: bool = False
        self.revealed: str = ""

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the conversation, oldest first."""
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)


class ChatController:
    """Runs submissions against a proxy client, one at a time.

    Args:
        client: Anything with an async ``exchange(history)`` method.
        reveal_interval: Seconds per revealed character, or None to append
            replies immediately.
        trim_content: Store the user's text trimmed.
        on_change: Called after every visible state change.
    """

    def __init__(
        self,
        client: Exchanger,
        *,
        reveal_interval: float | None = None,
        trim_content: bool = True,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.state = ChatState()
        self._client = client
        self._reveal_interval = reveal_interval
        self._trim_content = trim_content
        self._on_change = on_change
        self._reveal_task: asyncio.Task[None] | None = None
        self._pending: Message | None = None

    @property
    def can_submit(self) -> bool:
        """False while a reply is outstanding."""
        return not self.state.awaiting_reply

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str) -> SubmitOutcome:
        """Send one user message and wait for the assistant turn.

        Args:
            text: The raw text from the input field.

        Returns:
            The outcome of the submission.
        """
        if self.state.awaiting_reply:
            return SubmitOutcome.BUSY
        if validate_draft(text) is not None:
            return SubmitOutcome.INVALID

        self.cancel_reveal()

        content = text.strip() if self._trim_content else text
        self.state.append(Message(role="user", content=content))
        self.state.awaiting_reply = True
        self._notify()

        try:
            result = await self._client.exchange(self.state.messages)
        except Exception as e:
            logger.exception("Unexpected error during chat exchange")
            result = Failure(str(e))

        match result:
            case Success(message=message):
                self._pending = message
                if self._reveal_interval is None:
                    self._commit_pending()
                else:
                    self._reveal_task = asyncio.create_task(self._reveal(message.content))
                    await asyncio.wait({self._reveal_task})
                return SubmitOutcome.REPLIED
            case Empty():
                self._finish()
                return SubmitOutcome.EMPTY
            case Failure(reason=reason):
                logger.error(f"Chat request failed: {reason}")
                self._finish()
                return SubmitOutcome.FAILED

    async def _reveal(self, text: str) -> None:
        try:
            for char in text:
                self.state.revealed += char
                self._notify()
                await asyncio.sleep(self._reveal_interval)
        finally:
            self._commit_pending()

    def cancel_reveal(self) -> None:
        """Stop a running reveal; the full reply is committed at once."""
        if self._reveal_task is not None and not self._reveal_task.done():
            self._reveal_task.cancel()
        self._commit_pending()

    def close(self) -> None:
        """Detach from the view and stop any reveal (page torn down)."""
        self._on_change = None
        self.cancel_reveal()

    def _commit_pending(self) -> None:
        # Idempotent: the reveal task and cancel_reveal may both get here.
        if self._pending is None:
            return
        message, self._pending = self._pending, None
        self.state.append(message)
        self._finish()

    def _finish(self) -> None:
        self.state.revealed = ""
        self.state.awaiting_reply = False
        self._notify()
