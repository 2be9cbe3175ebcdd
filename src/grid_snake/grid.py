"""Grid model: arena bounds and coordinate validity."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.snake import Direction


class CellType(enum.IntEnum):
    """Integer codes used by :meth:`Grid.occupancy`."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


@dataclass(frozen=True)
class Position:
    """An integer grid coordinate. ``y`` grows upwards."""

    x: int
    y: int

    def offset(self, direction: Direction) -> Position:
        """Return the neighbouring cell one unit towards *direction*."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


class Grid:
    """Fixed-size, non-wrapping arena.

    The grid holds no cell state of its own; it only answers bounds
    questions and builds occupancy arrays on demand.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        return self._width * self._height

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def occupancy(
        self,
        snake: Iterable[Position],
        food: Iterable[Position] = (),
    ) -> np.ndarray:
        """Return a ``(height, width)`` array of :class:`CellType` codes.

        The first snake position is marked as the head and wins over any
        body segment stacked on the same cell. Out-of-bounds positions are
        skipped. Row 0 of the array is ``y == 0``.
        """
        cells = np.zeros((self._height, self._width), dtype=np.int8)
        for pos in food:
            if self.in_bounds(pos):
                cells[pos.y, pos.x] = CellType.FOOD
        for i, pos in reversed(list(enumerate(snake))):
            if self.in_bounds(pos):
                cells[pos.y, pos.x] = CellType.HEAD if i == 0 else CellType.SNAKE
        return cells
