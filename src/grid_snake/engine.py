"""Tick-driven game engine wiring the simulation phases together."""

from __future__ import annotations

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.events import GameOverEvent, GameOverReason
from grid_snake.grid import Position
from grid_snake.growth import apply_growth, check_eating
from grid_snake.lifecycle import game_over
from grid_snake.schedule import TickSchedule
from grid_snake.snake import Direction, Movement
from grid_snake.views import EntityKind, EntityView, GridView, WorldSnapshot
from grid_snake.world import World


class GameEngine:
    """Single-snake game engine.

    The engine owns the :class:`World` and the cadence timers but no
    clock: callers report elapsed time through :meth:`update`. Each
    movement tick runs movement, eating, growth and game-over in that
    order, and each stage sees only the committed output of the ones
    before it.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.world = World.create(self.config, rng=self.rng)
        self.schedule = TickSchedule(
            self.config.move_interval_ms, self.config.food_interval_ms,
        )
        self.tick = 0
        self.score = 0
        self.resets = 0

    # --- phases -----------------------------------------------------------

    def apply_input(self, intent: Direction | None) -> None:
        """Input phase: apply a directional intent, if any."""
        if intent is not None:
            self.world.snake.set_direction(intent)

    def move(self) -> Movement:
        """Movement phase: advance the snake and raise terminal signals."""
        world = self.world
        movement = world.snake.advance(world.grid)
        if movement.hit_wall:
            world.game_over_events.send(GameOverEvent(GameOverReason.WALL))
        if movement.hit_self:
            world.game_over_events.send(GameOverEvent(GameOverReason.SELF))
        world.last_tail_position = movement.vacated
        return movement

    def step(self) -> dict:
        """Run one movement tick and return the published state."""
        self.move()
        self.score += check_eating(self.world)
        apply_growth(self.world)
        if game_over(self.world, tick=self.tick + 1):
            self.resets += 1
            self.score = 0
        self.world.clear_events()
        self.tick += 1
        return self.get_state()

    def spawn_food(self) -> Position | None:
        """Food phase: place a food item away from the head."""
        return self.world.food.spawn_if_absent(self.world.head_positions())

    def update(self, elapsed_ms: float, intent: Direction | None = None) -> int:
        """Run one frame covering *elapsed_ms* of external time.

        Returns the number of movement ticks that ran.
        """
        self.apply_input(intent)
        moves, spawns = self.schedule.advance(elapsed_ms)
        for _ in range(moves):
            self.step()
        for _ in range(spawns):
            self.spawn_food()
        return moves

    # --- published state --------------------------------------------------

    def snapshot(self) -> WorldSnapshot:
        """Return a read-only view of the world for renderers."""
        world = self.world
        snake = [
            EntityView(
                id=seg.id,
                kind=EntityKind(seg.kind.value),
                x=seg.position.x,
                y=seg.position.y,
                size=seg.size,
            )
            for seg in world.snake.segments
        ]
        food = [
            EntityView(
                id=item.id,
                kind=EntityKind.FOOD,
                x=item.position.x,
                y=item.position.y,
                size=item.size,
            )
            for item in world.food.items
        ]
        return WorldSnapshot(
            tick=self.tick,
            score=self.score,
            resets=self.resets,
            direction=world.snake.direction.name.lower(),
            grid=GridView(width=world.grid.width, height=world.grid.height),
            snake=snake,
            food=food,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return self.snapshot().model_dump(mode="json")

    def render_text(self) -> str:
        """Draw the board as ASCII, top row first."""
        world = self.world
        cells = world.grid.occupancy(world.snake.positions, world.food.positions)
        glyphs = np.array([".", "o", "*", "@"])
        rows = ["".join(glyphs[row]) for row in cells[::-1]]
        return "\n".join(rows)
