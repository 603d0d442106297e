"""Pydantic schemas for the rendered grid.

These models mirror the live ``TerrainGrid``/``VisibilityMap`` pair but only
carry what a presentation layer may see, so snapshots stay serializable and
can never leak hidden enemies or dark terrain.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class TileKind(str, Enum):
    """What a renderer should draw for one cell."""

    DARK = "dark"
    PLAYER = "player"
    ENEMY = "enemy"
    COIN = "coin"
    BATTERY_PACK = "battery_pack"
    OXYGEN_TANK = "oxygen_tank"
    WALL = "wall"
    OPEN = "open"


class TileView(BaseModel):
    """Render view of a single cell."""

    position: Tuple[int, int] = Field(..., description="(x, y) coordinate of the tile")
    visible: bool = Field(False, description="Whether the tile has been revealed")
    kind: TileKind = Field(TileKind.DARK, description="Top-most thing to draw on this tile")


class GridView(BaseModel):
    """Row-major render view of the whole grid (``rows[y][x]``)."""

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    rows: List[List[TileView]] = Field(default_factory=list)

    def tile(self, x: int, y: int) -> TileView:
        return self.rows[y][x]
