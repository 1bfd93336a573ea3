"""Shared error types for deck persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cards.storage import DecodeFailed, ReadFailed


class CardsError(Exception):
    """Base class for cards errors."""


class DeckDecodeError(CardsError, ValueError):
    """Raised when bytes do not decode to a deck."""


class DeckLoadError(CardsError):
    """Raised by ``unwrap()`` on a failed load result."""

    def __init__(self, result: ReadFailed | DecodeFailed) -> None:
        super().__init__(result.message)
        self.result = result
