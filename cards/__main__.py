"""Print a freshly dealt hand, one card per line."""

from cards.deck import create_hand
from config import config, setup_logging


def main() -> None:
    setup_logging()
    for card in create_hand(config.deck.hand_size):
        print(card)


if __name__ == "__main__":
    main()
