"""Deck persistence - binary encoding and file save/load with tagged results."""

import io
import logging
import os
import pickle
from dataclasses import dataclass
from typing import ClassVar, Sequence

from pydantic import StrictStr, TypeAdapter, ValidationError

from cards.deck import Card, Deck
from cards.errors import DeckDecodeError, DeckLoadError

logger = logging.getLogger(__name__)

_DECK_ADAPTER = TypeAdapter(list[StrictStr])


class _DeckUnpickler(pickle.Unpickler):
    """Unpickler that refuses every global, so only builtins come back."""

    def find_class(self, module: str, name: str):
        raise pickle.UnpicklingError(f"Forbidden global: {module}.{name}")


def encode_deck(deck: Sequence[Card]) -> bytes:
    """Encode a deck to bytes."""
    return pickle.dumps(list(deck), protocol=pickle.HIGHEST_PROTOCOL)


def decode_deck(data: bytes) -> Deck:
    """
    Decode bytes produced by encode_deck.

    Raises:
        DeckDecodeError: If the bytes are not a pickled list of strings
    """
    # Malformed pickles raise a wide range of builtin exceptions.
    try:
        payload = _DeckUnpickler(io.BytesIO(data)).load()
    except Exception as exc:
        raise DeckDecodeError(f"Invalid deck data: {exc}") from exc

    try:
        return _DECK_ADAPTER.validate_python(payload, strict=True)
    except ValidationError as exc:
        raise DeckDecodeError(
            f"Expected a list of card strings, got {type(payload).__name__}"
        ) from exc


@dataclass(frozen=True, slots=True)
class Loaded:
    """A deck read back from disk."""

    ok: ClassVar[bool] = True

    deck: Deck

    @property
    def message(self) -> str:
        return f"Loaded {len(self.deck)} cards"

    def unwrap(self) -> Deck:
        return self.deck


@dataclass(frozen=True, slots=True)
class ReadFailed:
    """The deck file could not be read."""

    ok: ClassVar[bool] = False

    filename: str
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Failed to read file: {self.filename}"

    def unwrap(self) -> Deck:
        raise DeckLoadError(self)


@dataclass(frozen=True, slots=True)
class DecodeFailed:
    """The deck file was read but did not hold a deck."""

    ok: ClassVar[bool] = False

    reason: str = ""

    @property
    def message(self) -> str:
        return "Failed to decode deck from binary"

    def unwrap(self) -> Deck:
        raise DeckLoadError(self)


LoadResult = Loaded | ReadFailed | DecodeFailed


def save(deck: Sequence[Card], filename: str | os.PathLike[str]) -> None:
    """
    Write a deck to a file, replacing any existing content.

    Raises:
        OSError: If the file cannot be written
    """
    data = encode_deck(deck)
    try:
        with open(filename, "wb") as f:
            f.write(data)
    except OSError as exc:
        logger.error("Failed to write deck to %s: %s", os.fspath(filename), exc)
        raise
    logger.debug("Saved %d cards to %s", len(deck), os.fspath(filename))


def load(filename: str | os.PathLike[str]) -> LoadResult:
    """
    Read a deck previously written by save.

    Returns:
        Loaded on success, ReadFailed if the file cannot be read,
        DecodeFailed if its contents are not a deck
    """
    path = os.fspath(filename)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        logger.warning("Failed to read deck file %s: %s", path, exc)
        return ReadFailed(path, reason=exc.strerror or str(exc))

    try:
        deck = decode_deck(data)
    except DeckDecodeError as exc:
        logger.warning("Failed to decode deck file %s: %s", path, exc)
        return DecodeFailed(reason=str(exc))

    logger.debug("Loaded %d cards from %s", len(deck), path)
    return Loaded(deck)
