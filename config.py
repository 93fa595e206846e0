"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means an unseeded deck."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Table configuration."""

    min_players: int = 1
    max_players: int = 7
    # Repopulate and reshuffle before a round when fewer cards remain; 0 never does
    reshuffle_threshold: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_RESHUFFLE_THRESHOLD", "0"))
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.min_players < 1:
            raise ValueError("min_players must be at least 1")
        if self.max_players < self.min_players:
            raise ValueError("max_players must not be less than min_players")
        if self.reshuffle_threshold < 0:
            raise ValueError("reshuffle_threshold must not be negative")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
