"""Food spawning logic."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from grid_snake.grid import Grid, Position

logger = logging.getLogger(__name__)

FOOD_SIZE = 0.8

_food_ids = itertools.count()


@dataclass(eq=False)
class Food:
    """A single food item on the grid."""

    position: Position
    size: float = FOOD_SIZE
    id: int = field(default_factory=lambda: next(_food_ids))


class FoodSpawner:
    """Places food on the grid by rejection sampling.

    Uses a NumPy RNG for deterministic, reproducible placement. The
    spawner only avoids head cells; by default it does not look at food
    that is already live, so several items can pile up when they are not
    eaten fast enough. Pass *limit* to cap the number of live items.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        limit: int | None = None,
        size: float = FOOD_SIZE,
    ) -> None:
        if limit is not None and limit < 1:
            raise ValueError("Food limit must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.limit = limit
        self.size = size
        self.items: list[Food] = []

    @property
    def positions(self) -> list[Position]:
        return [food.position for food in self.items]

    def spawn_if_absent(self, head_positions: Iterable[Position]) -> Position | None:
        """Spawn one food item on a cell not covered by a head.

        Returns the new position, or ``None`` when the live-item limit is
        already reached.
        """
        if self.limit is not None and len(self.items) >= self.limit:
            logger.debug("Food limit %d reached; skipping spawn.", self.limit)
            return None

        excluded = {pos for pos in head_positions if self.grid.in_bounds(pos)}
        if len(excluded) >= self.grid.cell_count:
            logger.warning("No free cells available for food spawning.")
            raise ValueError("Every grid cell is excluded from food placement.")

        while True:
            x = int(self.rng.integers(0, self.grid.width))
            y = int(self.rng.integers(0, self.grid.height))
            candidate = Position(x, y)
            if candidate not in excluded:
                break

        self.items.append(Food(candidate, self.size))
        logger.debug("Food spawned at (%d, %d).", x, y)
        return candidate

    def at(self, pos: Position) -> list[Food]:
        """Return every live food item located at *pos*."""
        return [food for food in self.items if food.position == pos]

    def remove(self, food: Food) -> bool:
        """Remove a food item. Returns True if it was live."""
        for i, item in enumerate(self.items):
            if item is food:
                del self.items[i]
                return True
        return False

    def clear(self) -> None:
        self.items.clear()
