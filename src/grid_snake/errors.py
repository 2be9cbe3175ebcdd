"""Exceptions raised by the simulation core."""

from __future__ import annotations


class SimulationInvariantError(RuntimeError):
    """An internal invariant of the simulation was broken.

    Raised unconditionally; this indicates a programming error, never a
    game outcome.
    """
