"""Grid Snake — tick-driven snake simulation core."""

from grid_snake.config import GameConfig
from grid_snake.controls import intent_from_keys
from grid_snake.engine import GameEngine
from grid_snake.errors import SimulationInvariantError
from grid_snake.events import GameOverReason
from grid_snake.food import Food, FoodSpawner
from grid_snake.grid import Grid, Position
from grid_snake.snake import Direction, Segment, Snake
from grid_snake.world import GamePhase, World

__all__ = [
    "Direction",
    "Food",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GamePhase",
    "Grid",
    "Position",
    "Segment",
    "SimulationInvariantError",
    "Snake",
    "World",
    "intent_from_keys",
]
