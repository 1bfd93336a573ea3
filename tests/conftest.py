"""Pytest fixtures for cards tests."""

import pytest
from random import Random

from cards.deck import create_deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """A fresh, unshuffled deck."""
    return create_deck()


@pytest.fixture
def deck_file(tmp_path):
    """Path for a deck file inside a temporary directory."""
    return tmp_path / "my_deck"
