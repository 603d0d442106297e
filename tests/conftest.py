"""Shared helpers for the Holy Diver test suite."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from holydiver.collectibles import CollectibleKind
from holydiver.entities import EnemyKind
from holydiver.map_loader import MapLayout


class ScriptedRandom:
    """Deterministic stand-in for ``random.Random``.

    ``randoms`` feeds ``random()``; ``choices`` are indices picked by
    ``choice(seq)``. Running out of script fails the test loudly.
    """

    def __init__(self, randoms: Sequence[float] = (), choices: Sequence[int] = ()):
        self.randoms: List[float] = list(randoms)
        self.choices: List[int] = list(choices)

    def random(self) -> float:
        if not self.randoms:
            raise AssertionError("ScriptedRandom.random() called with an empty script")
        return self.randoms.pop(0)

    def choice(self, seq):
        if not self.choices:
            raise AssertionError("ScriptedRandom.choice() called with an empty script")
        return seq[self.choices.pop(0)]


def border_walls(width: int = 20, height: int = 20) -> set[Tuple[int, int]]:
    walls = set()
    for x in range(width):
        walls.add((x, 0))
        walls.add((x, height - 1))
    for y in range(height):
        walls.add((0, y))
        walls.add((width - 1, y))
    return walls


def make_layout(
    *,
    start: Tuple[int, int] = (5, 5),
    walls: Iterable[Tuple[int, int]] = (),
    enemies: Iterable[Tuple[EnemyKind, Tuple[int, int]]] = (),
    collectibles: Iterable[Tuple[CollectibleKind, Tuple[int, int]]] = (),
    with_border: bool = True,
    width: int = 20,
    height: int = 20,
) -> MapLayout:
    wall_set = set(walls)
    if with_border:
        wall_set |= border_walls(width, height)
    return MapLayout(
        width=width,
        height=height,
        walls=wall_set,
        player_start=start,
        enemies=list(enemies),
        collectibles=list(collectibles),
        source="test",
    )
