"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.grid import Position
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Arena, spawn, timing, and sprite-scale settings.

    Supports JSON serialization for reproducible runs.
    """

    # Arena
    width: int = 10
    height: int = 10

    # Spawn
    start_x: int = 3
    start_y: int = 3
    start_direction: str = "up"

    # Cadences
    move_interval_ms: int = 150
    food_interval_ms: int = 1_000

    # Logical sprite sizes, as a fraction of one cell
    head_size: float = 0.8
    segment_size: float = 0.65
    food_size: float = 0.8

    # Food
    food_limit: int | None = None

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("width and height must each be at least 2.")
        if not (0 <= self.start_x < self.width and 0 <= self.start_y < self.height):
            raise ValueError("Start position must lie inside the grid.")
        Direction.from_name(self.start_direction)
        if self.move_interval_ms <= 0 or self.food_interval_ms <= 0:
            raise ValueError("Intervals must be positive.")
        for name in ("head_size", "segment_size", "food_size"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise ValueError(f"{name} must be in (0, 1], got {value}.")
        if self.food_limit is not None and self.food_limit < 1:
            raise ValueError("food_limit must be at least 1.")

    @property
    def start_position(self) -> Position:
        return Position(self.start_x, self.start_y)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
