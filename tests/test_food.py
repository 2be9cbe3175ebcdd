"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from grid_snake.food import Food, FoodSpawner
from grid_snake.grid import Grid, Position


class TestFoodSpawnerInit:
    def test_default(self):
        spawner = FoodSpawner(Grid())
        assert spawner.items == []
        assert spawner.limit is None

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodSpawner(Grid(), limit=0)


class TestFoodSpawning:
    def test_spawn_one(self):
        spawner = FoodSpawner(Grid(), rng=np.random.default_rng(42))
        pos = spawner.spawn_if_absent([Position(3, 3)])
        assert pos is not None
        assert spawner.positions == [pos]
        assert spawner.items[0].size == 0.8

    def test_never_on_head_and_always_in_bounds(self):
        grid = Grid(10, 10)
        head = Position(4, 4)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(7))
        for _ in range(500):
            pos = spawner.spawn_if_absent([head])
            assert pos != head
            assert grid.in_bounds(pos)

    def test_single_free_cell_is_found(self):
        grid = Grid(2, 2)
        heads = [Position(0, 0), Position(1, 0), Position(0, 1)]
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        for _ in range(20):
            assert spawner.spawn_if_absent(heads) == Position(1, 1)

    def test_fully_excluded_grid_raises(self):
        grid = Grid(2, 2)
        heads = [Position(x, y) for x in range(2) for y in range(2)]
        spawner = FoodSpawner(grid)
        with pytest.raises(ValueError, match="excluded"):
            spawner.spawn_if_absent(heads)

    def test_does_not_check_existing_food_by_default(self):
        spawner = FoodSpawner(Grid(), rng=np.random.default_rng(1))
        spawner.spawn_if_absent([Position(3, 3)])
        spawner.spawn_if_absent([Position(3, 3)])
        assert len(spawner.items) == 2

    def test_limit_skips_spawn(self):
        spawner = FoodSpawner(Grid(), rng=np.random.default_rng(1), limit=1)
        assert spawner.spawn_if_absent([Position(3, 3)]) is not None
        assert spawner.spawn_if_absent([Position(3, 3)]) is None
        assert len(spawner.items) == 1

    def test_spawn_deterministic(self):
        """Same seed produces same food positions."""
        assert self._spawn_with_seed(42) == self._spawn_with_seed(42)

    def test_spawn_different_seeds(self):
        # Very unlikely to match with different seeds.
        assert self._spawn_with_seed(1) != self._spawn_with_seed(2)

    @staticmethod
    def _spawn_with_seed(seed: int) -> list[Position]:
        spawner = FoodSpawner(Grid(10, 10), rng=np.random.default_rng(seed))
        return [spawner.spawn_if_absent([Position(3, 3)]) for _ in range(5)]


class TestFoodRemoval:
    def test_remove_existing(self):
        spawner = FoodSpawner(Grid())
        food = Food(Position(1, 1))
        spawner.items.append(food)
        assert spawner.remove(food)
        assert spawner.items == []

    def test_remove_nonexistent(self):
        spawner = FoodSpawner(Grid())
        assert not spawner.remove(Food(Position(1, 1)))

    def test_remove_uses_identity(self):
        spawner = FoodSpawner(Grid())
        first, second = Food(Position(1, 1)), Food(Position(1, 1))
        spawner.items.extend([first, second])
        spawner.remove(second)
        assert spawner.items == [first]

    def test_at(self):
        spawner = FoodSpawner(Grid())
        spawner.items.extend([Food(Position(1, 1)), Food(Position(2, 2))])
        assert [f.position for f in spawner.at(Position(2, 2))] == [Position(2, 2)]
        assert spawner.at(Position(0, 0)) == []

    def test_clear(self):
        spawner = FoodSpawner(Grid(), rng=np.random.default_rng(0))
        spawner.spawn_if_absent([])
        spawner.clear()
        assert spawner.items == []

