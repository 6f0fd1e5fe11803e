"""Outcome of one round trip as seen by the chat view."""

from dataclasses import dataclass

from minichat.models.schemas import Message


@dataclass(frozen=True, slots=True)
class Success:
    """The proxy answered with usable reply content."""

    message: Message


@dataclass(frozen=True, slots=True)
class Empty:
    """The proxy answered, but without reply content."""


@dataclass(frozen=True, slots=True)
class Failure:
    """The round trip failed (transport error, error status, bad body)."""

    reason: str


ExchangeResult = Success | Empty | Failure
