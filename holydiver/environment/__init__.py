"""Terrain, visibility and grid rendering for Holy Diver."""

from .grid import CellKind, TerrainGrid
from .visibility import VisibilityMap
from .schemas import GridView, TileKind, TileView
from .helpers import (
    CARDINAL_DIRECTIONS,
    chebyshev_distance,
    is_cardinal_step,
    render_ascii,
)

__all__ = [
    "CellKind",
    "TerrainGrid",
    "VisibilityMap",
    "GridView",
    "TileKind",
    "TileView",
    "CARDINAL_DIRECTIONS",
    "chebyshev_distance",
    "is_cardinal_step",
    "render_ascii",
]
