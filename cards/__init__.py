"""Playing-card deck utility - build, shuffle, deal and persist decks."""

from cards.deck import (
    Suit,
    Value,
    card_name,
    create_deck,
    shuffle,
    contains,
    deal,
    create_hand,
)
from cards.errors import CardsError, DeckDecodeError, DeckLoadError
from cards.storage import (
    Loaded,
    ReadFailed,
    DecodeFailed,
    LoadResult,
    encode_deck,
    decode_deck,
    save,
    load,
)

__all__ = [
    "Suit",
    "Value",
    "card_name",
    "create_deck",
    "shuffle",
    "contains",
    "deal",
    "create_hand",
    "CardsError",
    "DeckDecodeError",
    "DeckLoadError",
    "Loaded",
    "ReadFailed",
    "DecodeFailed",
    "LoadResult",
    "encode_deck",
    "decode_deck",
    "save",
    "load",
]
