"""
Actors in the dive: the player and the enemies lurking in the dark.

Player resource operations clamp into ``[0, max]`` and ignore negative
amounts, so no sequence of calls can push a readout out of range.

Enemies are a tagged variant rather than a class hierarchy: every enemy is the
same ``Enemy`` record with a ``kind`` discriminant, and ``ENEMY_STEP`` maps
each kind to its movement behaviour. World keeps all of them in one list.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .environment import CARDINAL_DIRECTIONS, TerrainGrid
from .rules import GameRules


class Player:
    """The diver. Position plus three bounded resources and a lives counter."""

    def __init__(self, start: Tuple[int, int], rules: GameRules):
        self.max_health = rules.max_health
        self.max_oxygen = rules.max_oxygen
        self.max_battery = rules.max_battery
        self.restore(start, rules)

    def restore(self, start: Tuple[int, int], rules: GameRules) -> None:
        """Put the diver back at ``start`` with a fresh set of resources."""
        self.x, self.y = start
        self.health = min(rules.initial_health, self.max_health)
        self.oxygen = self.max_oxygen
        self.battery = self.max_battery
        self.lives = rules.initial_lives

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def apply_damage(self, amount: int) -> None:
        if amount <= 0:
            return
        self.health = max(0, self.health - amount)

    def consume_oxygen(self, amount: int) -> None:
        if amount <= 0:
            return
        self.oxygen = max(0, self.oxygen - amount)

    def add_oxygen(self, amount: int) -> None:
        if amount <= 0:
            return
        self.oxygen = min(self.max_oxygen, self.oxygen + amount)

    def use_battery(self, cost: int) -> bool:
        """Spend ``cost`` charge. Fails without side effects if the cell is too low."""
        if cost < 0 or self.battery < cost:
            return False
        self.battery -= cost
        return True

    def recharge_battery(self, amount: int) -> None:
        if amount <= 0:
            return
        self.battery = min(self.max_battery, self.battery + amount)

    def is_dead(self) -> bool:
        return self.health == 0 or self.oxygen == 0

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return (
            f"Player(pos={self.position}, health={self.health}, "
            f"oxygen={self.oxygen}, battery={self.battery})"
        )


class EnemyKind(str, Enum):
    STATIONARY = "stationary"
    MOVING = "moving"


@dataclass
class Enemy:
    """A single enemy. ``spawn`` is remembered so a reset can put it back."""

    kind: EnemyKind
    x: int
    y: int
    damage: int
    active: bool = False
    visible: bool = False
    spawn: Optional[Tuple[int, int]] = None

    def __post_init__(self) -> None:
        if self.spawn is None:
            self.spawn = (self.x, self.y)

    @classmethod
    def spawn_at(cls, kind: EnemyKind, position: Tuple[int, int], rules: GameRules) -> "Enemy":
        damage = rules.stationary_damage if kind is EnemyKind.STATIONARY else rules.moving_damage
        return cls(kind=kind, x=position[0], y=position[1], damage=damage)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def activate(self) -> bool:
        """Wake the enemy and expose it. Returns True on the first activation only."""
        newly = not self.active
        self.active = True
        self.visible = True
        return newly

    def step(self, grid: TerrainGrid, rng, rules: GameRules) -> Tuple[int, int]:
        """Advance this enemy by one turn and return its (possibly unchanged) position."""
        return ENEMY_STEP[self.kind](self, grid, rng, rules)

    def restore(self) -> None:
        self.x, self.y = self.spawn
        self.active = False
        self.visible = False


def _stationary_step(enemy: Enemy, grid: TerrainGrid, rng, rules: GameRules) -> Tuple[int, int]:
    return enemy.position


def _moving_step(enemy: Enemy, grid: TerrainGrid, rng, rules: GameRules) -> Tuple[int, int]:
    # Dormant movers stay put; ``rng`` is only consulted once awake.
    if not enemy.active:
        return enemy.position
    if rng.random() < rules.moving_skip_chance:
        return enemy.position
    dx, dy = rng.choice(CARDINAL_DIRECTIONS)
    nx, ny = enemy.x + dx, enemy.y + dy
    if grid.is_open(nx, ny):
        enemy.x, enemy.y = nx, ny
    return enemy.position


ENEMY_STEP: Dict[EnemyKind, Callable[[Enemy, TerrainGrid, object, GameRules], Tuple[int, int]]] = {
    EnemyKind.STATIONARY: _stationary_step,
    EnemyKind.MOVING: _moving_step,
}
