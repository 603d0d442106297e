"""Revealed-tile bookkeeping.

Visibility is monotonic: a tile switches from dark to revealed through
illumination or by the diver standing on it, and only ``reset()`` turns it
dark again. The renderer and the enemy detection rule both read it.
"""

from __future__ import annotations

from typing import List


class VisibilityMap:
    """Flat boolean grid parallel to ``TerrainGrid``."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._revealed: List[bool] = [False] * (width * height)

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def reveal(self, x: int, y: int) -> bool:
        """Mark a tile visible. Returns True if it was dark before the call."""
        index = self._index(x, y)
        if index is None:
            return False
        was_dark = not self._revealed[index]
        self._revealed[index] = True
        return was_dark

    def is_visible(self, x: int, y: int) -> bool:
        index = self._index(x, y)
        return index is not None and self._revealed[index]

    def reset(self) -> None:
        self._revealed = [False] * (self.width * self.height)

    def revealed_count(self) -> int:
        return sum(self._revealed)
