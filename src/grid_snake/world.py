"""The simulation context shared by every phase."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.events import Channel, GameOverEvent, GrowthEvent
from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid, Position
from grid_snake.snake import Snake


class GamePhase(enum.Enum):
    """States of the reset state machine.

    ``RESETTING`` is entered and left within the same tick.
    """

    PLAYING = "playing"
    RESETTING = "resetting"


def spawn_snake(config: GameConfig) -> Snake:
    """Build a snake in its startup configuration."""
    return Snake(
        config.start_position,
        config.direction,
        head_size=config.head_size,
        segment_size=config.segment_size,
    )


@dataclass
class World:
    """Everything the simulation mutates, owned in one place.

    Phases receive the world explicitly; collaborators such as a renderer
    only read from it.
    """

    config: GameConfig
    grid: Grid
    snake: Snake
    food: FoodSpawner
    last_tail_position: Position | None = None
    growth_events: Channel[GrowthEvent] = field(default_factory=Channel)
    game_over_events: Channel[GameOverEvent] = field(default_factory=Channel)
    phase: GamePhase = GamePhase.PLAYING

    @classmethod
    def create(
        cls,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> World:
        cfg = config or GameConfig()
        grid = Grid(cfg.width, cfg.height)
        food = FoodSpawner(
            grid,
            rng=rng if rng is not None else np.random.default_rng(cfg.seed),
            limit=cfg.food_limit,
            size=cfg.food_size,
        )
        return cls(config=cfg, grid=grid, snake=spawn_snake(cfg), food=food)

    def head_positions(self) -> list[Position]:
        if not self.snake.segments:
            return []
        return [self.snake.head.position]

    def clear_events(self) -> None:
        self.growth_events.clear()
        self.game_over_events.clear()
