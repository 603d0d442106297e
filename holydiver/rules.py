"""
Deterministic game rules for Holy Diver.

Every number the simulation uses lives here: grid size, resource maxima,
per-action costs, enemy damage and the pickup rewards. ``GameRules`` bundles
them into one immutable object that the World receives at construction, so a
test or a variant can tweak a single value without touching module state.

Design principle: if it can be calculated, calculate it. The rules never roll
dice themselves; randomness always comes from the injected random source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Grid
MAP_WIDTH = 20
MAP_HEIGHT = 20

# Resource maxima
MAX_HEALTH = 100
MAX_OXYGEN = 100
MAX_BATTERY = 100
INITIAL_LIVES = 3

# Per-action costs
MOVE_OXYGEN_COST = 2
ILLUMINATE_BATTERY_COST = 5

# Enemies
DETECTION_RADIUS = 3
STATIONARY_DAMAGE = 20
MOVING_DAMAGE = 15
MOVING_SKIP_CHANCE = 1 / 3

# Pickups
COIN_SCORE = 50
PACK_SCORE = 20
BATTERY_PACK_CHARGE = 30   # 30% of MAX_BATTERY
OXYGEN_TANK_REFILL = 40    # 40% of MAX_OXYGEN

DEFAULT_START: Tuple[int, int] = (5, 5)


@dataclass(frozen=True)
class GameRules:
    """Tunable constants for one World instance.

    Defaults give the standard game. ``initial_health`` is kept separate
    from ``max_health`` so a dive can start wounded.
    """

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    max_health: int = MAX_HEALTH
    max_oxygen: int = MAX_OXYGEN
    max_battery: int = MAX_BATTERY
    initial_health: int = MAX_HEALTH
    initial_lives: int = INITIAL_LIVES
    move_oxygen_cost: int = MOVE_OXYGEN_COST
    illuminate_battery_cost: int = ILLUMINATE_BATTERY_COST
    detection_radius: int = DETECTION_RADIUS
    stationary_damage: int = STATIONARY_DAMAGE
    moving_damage: int = MOVING_DAMAGE
    moving_skip_chance: float = MOVING_SKIP_CHANCE
    coin_score: int = COIN_SCORE
    pack_score: int = PACK_SCORE
    battery_pack_charge: int = BATTERY_PACK_CHARGE
    oxygen_tank_refill: int = OXYGEN_TANK_REFILL

    def __post_init__(self) -> None:
        if not 0 < self.initial_health <= self.max_health:
            raise ValueError(
                f"initial_health must be in (0, {self.max_health}], got {self.initial_health}"
            )
        if not 0.0 <= self.moving_skip_chance <= 1.0:
            raise ValueError("moving_skip_chance must be a probability")
