"""Snake representation and movement logic."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass, field

from grid_snake.errors import SimulationInvariantError
from grid_snake.grid import Grid, Position

HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name (``"up"``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class SegmentKind(str, enum.Enum):
    HEAD = "head"
    BODY = "body"


_segment_ids = itertools.count()


@dataclass(eq=False)
class Segment:
    """One unit of the snake's body.

    Segments compare by identity; the owning :class:`Snake` decides their
    order.
    """

    position: Position
    kind: SegmentKind = SegmentKind.BODY
    size: float = SEGMENT_SIZE
    id: int = field(default_factory=lambda: next(_segment_ids))


@dataclass(frozen=True)
class Movement:
    """Outcome of a single :meth:`Snake.advance` call."""

    snapshot: tuple[Position, ...]
    head: Position
    vacated: Position
    hit_wall: bool = False
    hit_self: bool = False

    @property
    def terminal(self) -> bool:
        return self.hit_wall or self.hit_self


class Snake:
    """A snake made of an ordered list of :class:`Segment` entities.

    ``segments[0]`` is the head; ``segments[-1]`` is the tail. A fresh
    snake has a head and one body segment stacked on the start cell.
    """

    def __init__(
        self,
        start: Position,
        direction: Direction = Direction.UP,
        head_size: float = HEAD_SIZE,
        segment_size: float = SEGMENT_SIZE,
    ) -> None:
        self.direction = direction
        self.segment_size = segment_size
        self.segments: list[Segment] = [
            Segment(start, SegmentKind.HEAD, head_size),
            Segment(start, SegmentKind.BODY, segment_size),
        ]

    @property
    def head(self) -> Segment:
        """Return the head segment."""
        if not self.segments:
            raise SimulationInvariantError("Snake has no segments.")
        return self.segments[0]

    @property
    def positions(self) -> list[Position]:
        """Return every segment position in chain order."""
        return [seg.position for seg in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    def set_direction(self, requested: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if requested != self.direction.opposite():
            self.direction = requested

    def advance(self, grid: Grid) -> Movement:
        """Move the snake one step forward.

        The body follows from a snapshot taken before the head moves, so
        every segment takes its predecessor's pre-move cell. Collisions
        are reported, not acted on: the move always completes.
        """
        head = self.head
        snapshot = tuple(self.positions)

        head.position = head.position.offset(self.direction)
        new_head = head.position

        hit_wall = not grid.in_bounds(new_head)
        # The pre-move tail slot counts as occupied.
        hit_self = new_head in snapshot

        for segment, pos in zip(self.segments[1:], snapshot[:-1], strict=True):
            segment.position = pos

        return Movement(
            snapshot=snapshot,
            head=new_head,
            vacated=snapshot[-1],
            hit_wall=hit_wall,
            hit_self=hit_self,
        )

    def append_segment(self, position: Position) -> Segment:
        """Attach a new body segment at the end of the chain."""
        segment = Segment(position, SegmentKind.BODY, self.segment_size)
        self.segments.append(segment)
        return segment

    def clear(self) -> None:
        """Drop every segment, head included."""
        self.segments.clear()
