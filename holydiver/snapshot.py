"""
Snapshot construction: what a presentation layer is allowed to see.

A snapshot filters the complete World state through the diver's eyes:

- Revealed tiles show their top-most occupant, in priority order
  player > uncollected pickup > spotted enemy > terrain
- Dark tiles show nothing at all, not even walls
- Dormant enemies never appear, even on a revealed tile, until spotted
- Resource readouts (health, oxygen, battery, score, lives) are always shown

Snapshots are deep copies built from scratch; holding on to one never keeps a
reference into the World.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from .collectibles import CollectibleKind
from .environment import CellKind, GridView, TileKind, TileView
from .schemas import Stat, WorldSnapshot

if TYPE_CHECKING:  # pragma: no cover
    from .world import World


_PICKUP_TILES: Dict[CollectibleKind, TileKind] = {
    CollectibleKind.COIN: TileKind.COIN,
    CollectibleKind.BATTERY_PACK: TileKind.BATTERY_PACK,
    CollectibleKind.OXYGEN_TANK: TileKind.OXYGEN_TANK,
}


def build_resource_readouts(world: "World") -> Dict[str, Stat]:
    rules = world.rules
    return {
        "health": Stat(value=world.health, maximum=rules.max_health, label="Health"),
        "oxygen": Stat(value=world.oxygen, maximum=rules.max_oxygen, unit="%", label="Oxygen"),
        "battery": Stat(value=world.battery, maximum=rules.max_battery, unit="%", label="Battery"),
        "score": Stat(value=world.score, unit="pts", label="Score"),
        "lives": Stat(value=world.lives, label="Lives"),
    }


def build_world_snapshot(world: "World") -> WorldSnapshot:
    """Build the render view of ``world`` for the current turn."""

    visible_enemies = {enemy.position for enemy in world.enemies if enemy.visible}
    player_pos = world.player_position

    rows: List[List[TileView]] = []
    for y in range(world.terrain.height):
        row: List[TileView] = []
        for x in range(world.terrain.width):
            visible = world.is_visible(x, y)
            kind = _tile_kind(world, x, y, visible, player_pos, visible_enemies)
            row.append(TileView(position=(x, y), visible=visible, kind=kind))
        rows.append(row)

    return WorldSnapshot(
        turn=world.turn,
        status=world.status,
        death_cause=world.death_cause(),
        player_position=player_pos,
        resources=build_resource_readouts(world),
        grid=GridView(width=world.terrain.width, height=world.terrain.height, rows=rows),
    )


def _tile_kind(world: "World", x: int, y: int, visible: bool, player_pos, visible_enemies) -> TileKind:
    # The diver always knows where they are
    if (x, y) == player_pos:
        return TileKind.PLAYER
    if not visible:
        return TileKind.DARK
    pickup: Optional[CollectibleKind] = world.uncollected_at(x, y)
    if pickup is not None:
        return _PICKUP_TILES[pickup]
    if (x, y) in visible_enemies:
        return TileKind.ENEMY
    if world.terrain.classify(x, y) is CellKind.WALL:
        return TileKind.WALL
    return TileKind.OPEN


def format_resource_summary(snapshot: WorldSnapshot) -> str:
    """Format resource readouts as one HUD line.

    Example output:
    "Health=100, Oxygen=98%, Battery=95%, Score=50 pts, Lives=3"
    """

    if not snapshot.resources:
        return ""

    parts: list[str] = []
    for key, stat in snapshot.resources.items():
        label = stat.label or key.replace("_", " ").title()
        unit = stat.unit or ""
        if unit == "%":
            parts.append(f"{label}={stat.value}%")
        elif unit:
            parts.append(f"{label}={stat.value} {unit}")
        else:
            parts.append(f"{label}={stat.value}")
    return ", ".join(parts)
