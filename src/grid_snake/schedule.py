"""Fixed-interval run conditions driven by externally supplied time."""

from __future__ import annotations


class FixedTimer:
    """Accumulates elapsed time and reports how often an interval passed."""

    def __init__(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.interval_ms = interval_ms
        self._elapsed = 0.0

    @property
    def elapsed_ms(self) -> float:
        """Time accumulated towards the next firing."""
        return self._elapsed

    def tick(self, elapsed_ms: float) -> int:
        """Advance by *elapsed_ms*; return the number of firings."""
        if elapsed_ms < 0:
            raise ValueError("elapsed_ms must not be negative.")
        self._elapsed += elapsed_ms
        fired = int(self._elapsed // self.interval_ms)
        self._elapsed -= fired * self.interval_ms
        return fired


class TickSchedule:
    """One timer per cadence: movement pipeline and food spawning."""

    def __init__(self, move_interval_ms: float = 150, food_interval_ms: float = 1_000) -> None:
        self.movement = FixedTimer(move_interval_ms)
        self.food = FixedTimer(food_interval_ms)

    def advance(self, elapsed_ms: float) -> tuple[int, int]:
        """Return ``(movement_ticks, food_ticks)`` due after *elapsed_ms*."""
        return self.movement.tick(elapsed_ms), self.food.tick(elapsed_ms)
