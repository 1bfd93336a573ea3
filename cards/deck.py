"""Card vocabulary and deck operations - decks are plain lists of card strings."""

import logging
from enum import Enum
from random import Random
from typing import Sequence

from config import config

logger = logging.getLogger(__name__)

Card = str
Deck = list[Card]
Hand = list[Card]


class Suit(Enum):
    """Card suits, in deck order."""

    SPADES = "Spades"
    CLUBS = "Clubs"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"

    def __str__(self) -> str:
        return self.value


class Value(Enum):
    """Card values, in deck order."""

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"
    TEN = "Ten"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value


DECK_SIZE = len(Suit) * len(Value)


def card_name(value: Value, suit: Suit) -> Card:
    """Format a card, e.g. ``card_name(Value.ACE, Suit.SPADES) == "Ace of Spades"``."""
    return f"{value} of {suit}"


# Global shuffle source
_default_rng: Random | None = None


def get_default_rng() -> Random:
    """Get or create the shared random source, seeded from config if set."""
    global _default_rng
    if _default_rng is None:
        _default_rng = Random(config.deck.seed)
    return _default_rng


def create_deck() -> Deck:
    """Return the 52-card deck, suit-major then value-minor."""
    return [card_name(value, suit) for suit in Suit for value in Value]


def shuffle(deck: Sequence[Card], rng: Random | None = None) -> Deck:
    """
    Return a shuffled copy of the deck.

    Args:
        deck: Cards to shuffle; left untouched
        rng: Random number generator; defaults to the shared source

    Returns:
        A new list holding the same cards in random order
    """
    rng = rng or get_default_rng()
    shuffled = list(deck)
    rng.shuffle(shuffled)
    logger.debug("Shuffled %d cards", len(shuffled))
    return shuffled


def contains(deck: Sequence[Card], card: Card) -> bool:
    """Check if a card is in the deck."""
    return card in deck


def deal(deck: Sequence[Card], hand_size: int) -> tuple[Hand, Deck]:
    """
    Split a deck into a hand and the remaining deck.

    A hand_size larger than the deck takes every card and leaves an
    empty remainder.

    Raises:
        TypeError: If hand_size is not an integer
        ValueError: If hand_size is negative
    """
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        raise TypeError(f"hand_size must be an integer, got {hand_size!r}")
    if hand_size < 0:
        raise ValueError(f"hand_size must be non-negative, got {hand_size}")

    cards = list(deck)
    hand, remaining = cards[:hand_size], cards[hand_size:]
    logger.debug("Dealt %d cards, %d remaining", len(hand), len(remaining))
    return hand, remaining


def create_hand(hand_size: int, rng: Random | None = None) -> Hand:
    """Deal a hand of hand_size cards from a freshly shuffled deck."""
    hand, _ = deal(shuffle(create_deck(), rng=rng), hand_size)
    return hand
