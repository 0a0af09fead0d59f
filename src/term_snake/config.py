"""Fixed game constants and environment-derived settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from term_snake.snake import Direction

logger = logging.getLogger(__name__)

HIGHSCORE_FILENAME = ".snake_highscores.json"


@dataclass(frozen=True)
class GameConfig:
    """Constants for a single game.

    These are not exposed on the command line; tests construct smaller or
    faster variants directly.
    """

    grid_size: int = 10
    tick_interval_ms: int = 500
    start_cell: tuple[int, int] = (5, 5)
    start_direction: str = "right"
    max_high_scores: int = 5

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.max_high_scores < 1:
            raise ValueError("max_high_scores must be at least 1.")
        row, col = self.start_cell
        if not (0 <= row < self.grid_size and 0 <= col < self.grid_size):
            raise ValueError("start_cell must lie inside the grid.")
        Direction.from_name(self.start_direction)

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000.0


def default_highscore_path() -> Path:
    """Return the per-user high-score file path."""
    return Path.home() / HIGHSCORE_FILENAME


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, resolved once at startup."""

    highscore_path: Path = field(default_factory=default_highscore_path)
    log_level: str = "WARNING"
    game: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``SNAKE_HIGHSCORE_FILE`` and ``SNAKE_LOG_LEVEL``."""
        env = os.environ if environ is None else environ
        raw_path = env.get("SNAKE_HIGHSCORE_FILE")
        path = Path(raw_path).expanduser() if raw_path else default_highscore_path()
        level = env.get("SNAKE_LOG_LEVEL", "WARNING").upper()
        if level not in logging.getLevelNamesMapping():
            logger.warning("Unknown SNAKE_LOG_LEVEL %r, using WARNING.", level)
            level = "WARNING"
        return cls(highscore_path=path, log_level=level)
