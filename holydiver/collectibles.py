"""One-shot pickups scattered over the dive site.

The registry only tracks *whether* an item has been taken; what the item does
is described by ``COLLECTIBLE_EFFECTS`` and applied by the World. Collected
items stay in storage, flagged, so a reset can put them back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .rules import GameRules


class CollectibleKind(str, Enum):
    COIN = "coin"
    BATTERY_PACK = "battery_pack"
    OXYGEN_TANK = "oxygen_tank"


@dataclass(frozen=True)
class CollectibleEffect:
    """Resource and score deltas granted by one pickup."""

    score: int = 0
    battery: int = 0
    oxygen: int = 0


def collectible_effects(rules: GameRules) -> Dict[CollectibleKind, CollectibleEffect]:
    """Effect table for a rules object (coins score, packs refill and score)."""
    return {
        CollectibleKind.COIN: CollectibleEffect(score=rules.coin_score),
        CollectibleKind.BATTERY_PACK: CollectibleEffect(
            score=rules.pack_score, battery=rules.battery_pack_charge
        ),
        CollectibleKind.OXYGEN_TANK: CollectibleEffect(
            score=rules.pack_score, oxygen=rules.oxygen_tank_refill
        ),
    }


COLLECTIBLE_EFFECTS: Dict[CollectibleKind, CollectibleEffect] = collectible_effects(GameRules())


@dataclass
class Collectible:
    x: int
    y: int
    kind: CollectibleKind
    collected: bool = False

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class CollectiblesRegistry:
    """Positioned pickups, at most one per tile."""

    def __init__(self, items: Iterable[Collectible] = ()):
        self._items: List[Collectible] = []
        self._by_position: Dict[Tuple[int, int], Collectible] = {}
        for item in items:
            self.add(item)

    def add(self, item: Collectible) -> bool:
        """Register a pickup. Returns False if the tile already holds one."""
        if item.position in self._by_position:
            return False
        self._items.append(item)
        self._by_position[item.position] = item
        return True

    def collect_at(self, x: int, y: int) -> Optional[CollectibleKind]:
        """Take the item on (x, y), if there is one not yet taken."""
        item = self._by_position.get((x, y))
        if item is None or item.collected:
            return None
        item.collected = True
        return item.kind

    def uncollected_at(self, x: int, y: int) -> Optional[CollectibleKind]:
        item = self._by_position.get((x, y))
        if item is None or item.collected:
            return None
        return item.kind

    def remaining(self) -> int:
        return sum(1 for item in self._items if not item.collected)

    def reset(self) -> None:
        for item in self._items:
            item.collected = False

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
