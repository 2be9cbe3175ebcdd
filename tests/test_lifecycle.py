"""Tests for game-over detection and reset."""

import logging

from grid_snake.config import GameConfig
from grid_snake.events import GameOverEvent, GameOverReason
from grid_snake.food import Food
from grid_snake.grid import Position
from grid_snake.lifecycle import game_over
from grid_snake.snake import Direction
from grid_snake.world import GamePhase, World


class TestGameOver:
    def test_no_event_no_reset(self):
        world = World.create(GameConfig(seed=0))
        snake = world.snake
        assert not game_over(world)
        assert world.snake is snake
        assert world.phase == GamePhase.PLAYING

    def test_reset_restores_startup_configuration(self):
        world = World.create(GameConfig(seed=0))
        for _ in range(3):
            world.last_tail_position = world.snake.advance(world.grid).vacated
        world.snake.set_direction(Direction.RIGHT)
        world.snake.append_segment(Position(3, 4))
        world.food.items.append(Food(Position(8, 8)))
        world.game_over_events.send(GameOverEvent(GameOverReason.SELF))

        assert game_over(world)
        assert len(world.snake) == 2
        assert world.snake.positions == [Position(3, 3), Position(3, 3)]
        assert world.snake.direction == Direction.UP
        assert world.food.items == []
        assert world.last_tail_position is None
        assert world.phase == GamePhase.PLAYING
        assert not world.game_over_events

    def test_old_segments_discarded(self):
        world = World.create(GameConfig(seed=0))
        old_ids = {seg.id for seg in world.snake.segments}
        world.game_over_events.send(GameOverEvent(GameOverReason.WALL))
        game_over(world)
        assert old_ids.isdisjoint(seg.id for seg in world.snake.segments)

    def test_multiple_events_reset_once(self):
        world = World.create(GameConfig(seed=0))
        world.game_over_events.send(GameOverEvent(GameOverReason.WALL))
        world.game_over_events.send(GameOverEvent(GameOverReason.SELF))
        assert game_over(world)
        assert not game_over(world)

    def test_reset_uses_configured_start(self):
        cfg = GameConfig(start_x=6, start_y=1, start_direction="left", seed=0)
        world = World.create(cfg)
        world.game_over_events.send(GameOverEvent(GameOverReason.WALL))
        game_over(world)
        assert world.snake.positions == [Position(6, 1), Position(6, 1)]
        assert world.snake.direction == Direction.LEFT

    def test_reset_is_logged_with_tick(self, caplog):
        world = World.create(GameConfig(seed=0))
        world.game_over_events.send(GameOverEvent(GameOverReason.WALL))
        with caplog.at_level(logging.INFO, logger="grid_snake.lifecycle"):
            game_over(world, tick=17)
        assert "tick 17" in caplog.text
        assert "wall" in caplog.text
