"""Static terrain for the dive site.

The terrain is classified once when a map is loaded or generated and never
changes afterwards. Cells live in a flat, row-major list so every accessor
shares the same bounds check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Tuple


class CellKind(str, Enum):
    """Terrain classification of a single cell."""

    OPEN = "open"
    WALL = "wall"


@dataclass
class TerrainGrid:
    """Fixed-size 2D wall/open classification indexed by (x, y)."""

    width: int
    height: int
    cells: List[CellKind] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [CellKind.OPEN] * (self.width * self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Terrain needs {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_walls(cls, width: int, height: int, walls: Iterable[Tuple[int, int]]) -> "TerrainGrid":
        grid = cls(width=width, height=height)
        for x, y in walls:
            if grid.in_bounds(x, y):
                grid.cells[grid._index(x, y)] = CellKind.WALL
        return grid

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def classify(self, x: int, y: int) -> CellKind:
        """Return the cell kind; anything off the grid counts as wall."""
        if not self.in_bounds(x, y):
            return CellKind.WALL
        return self.cells[self._index(x, y)]

    def is_open(self, x: int, y: int) -> bool:
        return self.classify(x, y) is CellKind.OPEN

    def walls(self) -> Iterator[Tuple[int, int]]:
        for index, kind in enumerate(self.cells):
            if kind is CellKind.WALL:
                yield index % self.width, index // self.width
