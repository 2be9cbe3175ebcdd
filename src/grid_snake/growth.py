"""Eating and deferred growth."""

from __future__ import annotations

import logging

from grid_snake.errors import SimulationInvariantError
from grid_snake.events import GrowthEvent
from grid_snake.world import World

logger = logging.getLogger(__name__)


def check_eating(world: World) -> int:
    """Consume every food item under the head.

    Each item eaten raises its own growth event. Returns the number of
    items eaten. Must run after movement.
    """
    eaten = 0
    for head_pos in world.head_positions():
        for food in world.food.at(head_pos):
            world.food.remove(food)
            world.growth_events.send(GrowthEvent())
            eaten += 1
            logger.debug("Food eaten at (%d, %d).", head_pos.x, head_pos.y)
    return eaten


def apply_growth(world: World) -> int:
    """Append one tail segment per pending growth event.

    New segments go where the tail was before the last move. Returns the
    number of segments added.
    """
    events = world.growth_events.drain()
    if not events:
        return 0

    tail = world.last_tail_position
    if tail is None:
        raise SimulationInvariantError(
            "Growth requested before the snake has moved."
        )
    for _ in events:
        world.snake.append_segment(tail)
    return len(events)
