"""Game-over detection and reset."""

from __future__ import annotations

import logging

from grid_snake.world import GamePhase, World, spawn_snake

logger = logging.getLogger(__name__)


def game_over(world: World, tick: int = 0) -> bool:
    """Reset the world if any game-over event is pending.

    Drains the game-over channel. On a pending event every food item and
    every segment is discarded and the startup snake is respawned.
    *tick* is only used for logging. Returns True when a reset happened.
    """
    events = world.game_over_events.drain()
    if not events:
        return False

    world.phase = GamePhase.RESETTING
    length = len(world.snake)
    reasons = sorted({event.reason.value for event in events})

    world.food.clear()
    world.snake.clear()
    world.last_tail_position = None
    world.growth_events.clear()
    world.snake = spawn_snake(world.config)

    world.phase = GamePhase.PLAYING
    logger.info(
        "Game over (%s) at tick %d, length %d; snake respawned.",
        ", ".join(reasons),
        tick,
        length,
    )
    return True
