"""Utilities for grid geometry and text rendering."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .schemas import GridView, TileKind


# Up, down, left, right. Random walks index into this list, so changing the
# order changes seeded replays.
CARDINAL_DIRECTIONS: List[Tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


def is_cardinal_step(dx: int, dy: int) -> bool:
    """True for the four unit moves; diagonals, zero and long jumps are rejected."""
    return (dx, dy) in CARDINAL_DIRECTIONS


def chebyshev_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Square-ring distance: diagonal neighbours are 1 apart."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


_DEFAULT_TILE_SYMBOLS: Dict[TileKind, str] = {
    TileKind.DARK: " ",
    TileKind.PLAYER: "P",
    TileKind.ENEMY: "M",
    TileKind.COIN: "*",
    TileKind.BATTERY_PACK: "B",
    TileKind.OXYGEN_TANK: "O",
    TileKind.WALL: "x",
    TileKind.OPEN: "o",
}


def render_ascii(
    grid: GridView,
    *,
    symbols: Optional[Dict[TileKind, str]] = None,
) -> str:
    """Render a grid view as one line of symbols per row, top row first.

    ``symbols`` overrides individual entries of the default mapping; unknown
    kinds fall back to ``?``.
    """

    mapping = {**_DEFAULT_TILE_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    lines: List[str] = []
    for row in grid.rows:
        lines.append("".join(mapping.get(tile.kind, "?") for tile in row))
    return "\n".join(lines)
