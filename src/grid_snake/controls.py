"""Keyboard-to-direction mapping for input collaborators."""

from __future__ import annotations

from collections.abc import Iterable

from grid_snake.snake import Direction

# Checked in this order; the first pressed key wins.
KEY_PRIORITY: list[tuple[frozenset[str], Direction]] = [
    (frozenset({"arrow_left", "left", "a"}), Direction.LEFT),
    (frozenset({"arrow_down", "down", "s"}), Direction.DOWN),
    (frozenset({"arrow_up", "up", "w"}), Direction.UP),
    (frozenset({"arrow_right", "right", "d"}), Direction.RIGHT),
]


def intent_from_keys(pressed: Iterable[str]) -> Direction | None:
    """Return the direction requested by the currently pressed keys."""
    keys = {key.lower() for key in pressed}
    for names, direction in KEY_PRIORITY:
        if keys & names:
            return direction
    return None
