"""
Pydantic schemas for Holy Diver.

All data that crosses the boundary between the simulation core and a
presentation layer is defined here: intents going in, events and snapshots
coming out.

Design Philosophy:
- Generic `Stat` model for every readout (health, oxygen, battery, score, lives)
- Snapshots are copies; mutating one never touches the World
- Enums are `str` based so snapshots serialize to plain JSON
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from holydiver.environment import GridView


# ============================================================================
# Readouts
# ============================================================================

StatValue = Union[int, float, str, bool]


class Stat(BaseModel):
    """Generic bounded readout shown on the HUD.

    ``maximum`` is None for unbounded counters such as the score.
    """

    value: StatValue = Field(..., description="Current value of the readout")
    maximum: Optional[int] = Field(None, description="Upper bound, if the readout has one")
    unit: Optional[str] = Field(None, description="Optional unit label (%, pts, etc.)")
    label: Optional[str] = Field(None, description="Human-friendly name for the HUD")


# ============================================================================
# Intents
# ============================================================================


class Intent(str, Enum):
    """One discrete player intent, consumed once per turn."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ILLUMINATE_UP = "illuminate_up"
    ILLUMINATE_DOWN = "illuminate_down"
    ILLUMINATE_LEFT = "illuminate_left"
    ILLUMINATE_RIGHT = "illuminate_right"
    RESET = "reset"
    QUIT = "quit"


# Row/column deltas in (dx, dy); y grows downward so "up" is -1.
INTENT_DELTAS: Dict[Intent, Tuple[int, int]] = {
    Intent.MOVE_UP: (0, -1),
    Intent.MOVE_DOWN: (0, 1),
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
    Intent.ILLUMINATE_UP: (0, -1),
    Intent.ILLUMINATE_DOWN: (0, 1),
    Intent.ILLUMINATE_LEFT: (-1, 0),
    Intent.ILLUMINATE_RIGHT: (1, 0),
}

MOVE_INTENTS = frozenset(
    {Intent.MOVE_UP, Intent.MOVE_DOWN, Intent.MOVE_LEFT, Intent.MOVE_RIGHT}
)
ILLUMINATE_INTENTS = frozenset(
    {Intent.ILLUMINATE_UP, Intent.ILLUMINATE_DOWN, Intent.ILLUMINATE_LEFT, Intent.ILLUMINATE_RIGHT}
)

KEY_BINDINGS: Dict[str, Intent] = {
    "w": Intent.MOVE_UP,
    "s": Intent.MOVE_DOWN,
    "a": Intent.MOVE_LEFT,
    "d": Intent.MOVE_RIGHT,
    "i": Intent.ILLUMINATE_UP,
    "k": Intent.ILLUMINATE_DOWN,
    "j": Intent.ILLUMINATE_LEFT,
    "l": Intent.ILLUMINATE_RIGHT,
    "r": Intent.RESET,
    "q": Intent.QUIT,
}


def intent_from_key(key: Optional[str]) -> Optional[Intent]:
    """Map a single key press to an intent; anything unbound yields None."""
    if not key:
        return None
    return KEY_BINDINGS.get(key[0].lower())


# ============================================================================
# Game status
# ============================================================================


class GameStatus(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class DeathCause(str, Enum):
    """Why the dive ended, for end-of-run messaging."""

    HEALTH_DEPLETED = "health_depleted"
    OXYGEN_DEPLETED = "oxygen_depleted"


# ============================================================================
# Events and step results
# ============================================================================


class GameEvent(BaseModel):
    """Something notable that happened while resolving a turn.

    Categories: moved, blocked, enemy_bump, collected, illuminated,
    illumination_failed, enemy_activated, enemy_hit, game_over, reset, quit.
    """

    turn: int = Field(..., ge=0, description="Turn during which the event occurred")
    category: str = Field(..., description="Event category")
    description: str = Field(..., description="Human-readable description")
    position: Optional[Tuple[int, int]] = Field(None, description="Tile the event refers to")
    amount: Optional[int] = Field(None, description="Damage, cost or score delta, if any")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional context")


class StepResult(BaseModel):
    """Outcome of one call to ``World.step``."""

    intent: Optional[Intent] = Field(None, description="Intent that was applied, None if ignored")
    turn: int = Field(..., ge=0, description="Turn counter after the step")
    status: GameStatus
    events: List[GameEvent] = Field(default_factory=list)

    def categories(self) -> List[str]:
        return [event.category for event in self.events]


# ============================================================================
# Snapshot
# ============================================================================


class WorldSnapshot(BaseModel):
    """Read-only view of a World, sufficient to render one frame.

    Dark tiles carry no information about what lies on them; dormant enemies
    never appear, even on revealed tiles, until they are spotted.
    """

    turn: int = Field(..., ge=0)
    status: GameStatus
    death_cause: Optional[DeathCause] = None
    player_position: Tuple[int, int]
    resources: Dict[str, Stat] = Field(default_factory=dict)
    grid: GridView

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def resource(self, key: str) -> int:
        return int(self.resources[key].value)
