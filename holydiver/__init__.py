"""
Holy Diver - turn-based exploration of a dark dive site.

A diver moves around a fixed grid while oxygen drains, lights tiles with a
limited battery, picks up coins and supplies, and avoids enemies that wake
when spotted.

The simulation core is synchronous and free of terminal I/O. Presentation
layers send intents to ``World.step`` and render from ``World.snapshot``.
"""

__version__ = "0.1.0"

# Main simulation components
from .world import World
from .orchestrator import Orchestrator

# Rules and configuration
from .rules import GameRules
from .config import Config

# Entities and pickups
from .entities import Enemy, EnemyKind, Player
from .collectibles import (
    COLLECTIBLE_EFFECTS,
    Collectible,
    CollectibleEffect,
    CollectibleKind,
    CollectiblesRegistry,
)

# Map sources
from .map_loader import MapLayout, MapLoader, MapLoadError, generate_map, parse_map_text

# Environment
from .environment import (
    CellKind,
    GridView,
    TerrainGrid,
    TileKind,
    TileView,
    VisibilityMap,
    render_ascii,
)

# Core schemas
from .schemas import (
    DeathCause,
    GameEvent,
    GameStatus,
    Intent,
    Stat,
    StepResult,
    WorldSnapshot,
    intent_from_key,
)
from .snapshot import build_world_snapshot, format_resource_summary

__all__ = [
    # Main classes
    "World",
    "Orchestrator",
    "GameRules",
    "Config",
    # Entities
    "Player",
    "Enemy",
    "EnemyKind",
    "Collectible",
    "CollectibleKind",
    "CollectibleEffect",
    "CollectiblesRegistry",
    "COLLECTIBLE_EFFECTS",
    # Maps
    "MapLayout",
    "MapLoader",
    "MapLoadError",
    "generate_map",
    "parse_map_text",
    # Environment
    "CellKind",
    "TerrainGrid",
    "VisibilityMap",
    "GridView",
    "TileKind",
    "TileView",
    "render_ascii",
    # Schemas
    "DeathCause",
    "GameEvent",
    "GameStatus",
    "Intent",
    "Stat",
    "StepResult",
    "WorldSnapshot",
    "intent_from_key",
    # Utilities
    "build_world_snapshot",
    "format_resource_summary",
]
