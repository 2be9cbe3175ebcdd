"""One-shot per-tick messages passed between simulation phases."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class GameOverReason(str, enum.Enum):
    """Why a game-over was raised."""

    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class GrowthEvent:
    """Request for exactly one new tail segment."""


@dataclass(frozen=True)
class GameOverEvent:
    reason: GameOverReason


class Channel(Generic[T]):
    """A queue written by one phase and drained by the next.

    Nothing survives a :meth:`drain`; the engine also clears every
    channel at the end of a tick so no event leaks into the next one.
    """

    def __init__(self) -> None:
        self._events: list[T] = []

    def send(self, event: T) -> None:
        self._events.append(event)

    def drain(self) -> list[T]:
        """Remove and return every pending event, oldest first."""
        events, self._events = self._events, []
        return events

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)
