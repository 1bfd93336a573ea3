"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse CARDS_SEED environment variable."""
    seed = os.getenv("CARDS_SEED", "").strip()
    return int(seed) if seed else None


def _debug_enabled() -> bool:
    return os.getenv("DEBUG", "false").lower() == "true"


@dataclass(frozen=True)
class DeckConfig:
    """Deck defaults."""

    seed: int | None = field(default_factory=_parse_seed)
    hand_size: int = field(
        default_factory=lambda: int(os.getenv("CARDS_HAND_SIZE", "5"))
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=_debug_enabled)
    log_level: str = field(
        default_factory=lambda: os.getenv(
            "CARDS_LOG_LEVEL", "DEBUG" if _debug_enabled() else "INFO"
        ).upper()
    )

    deck: DeckConfig = field(default_factory=DeckConfig)


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the command line entry point."""
    level_name = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Global configuration instance
config = AppConfig()
