"""Pydantic models for the state published to render collaborators."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class EntityKind(str, enum.Enum):
    HEAD = "head"
    BODY = "body"
    FOOD = "food"


class EntityView(BaseModel):
    """One drawable entity: a grid cell plus a logical footprint."""

    id: int
    kind: EntityKind
    x: int
    y: int
    size: float = Field(gt=0, le=1)


class GridView(BaseModel):
    width: int = Field(ge=2)
    height: int = Field(ge=2)


class WorldSnapshot(BaseModel):
    """Read-only view of the world after a frame."""

    tick: int = Field(ge=0)
    score: int = Field(ge=0)
    resets: int = Field(ge=0)
    direction: str
    grid: GridView
    snake: list[EntityView]
    food: list[EntityView]
