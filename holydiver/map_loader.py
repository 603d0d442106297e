"""
Map loading and procedural generation for Holy Diver.

A map is a plain character grid, one row per line:

```
xxxxxxxxxxxxxxxxxxxx
xP.................x
x....M.....x.......x
...
```

- ``P`` marks the single player start (exactly one required)
- ``M`` marks an enemy spawn; stationary or moving is decided at load time
- ``x`` marks a wall
- any other character is open water

Loading is best-effort. A missing file, an unreadable file, a grid of the
wrong size or a bad player marker raises ``MapLoadError`` internally;
``MapLoader.load`` catches it, logs the reason and generates a map instead,
so a bad map never stops a game from starting.

Generated maps follow fixed layout rules: border walls, scattered
interior obstacles, a start tile at (5, 5), a mix of enemies and a sprinkling
of coins, battery packs and oxygen tanks. All randomness comes from the
injected source, so the same seed always yields the same dive site.

Usage:
    loader = MapLoader(rng=random.Random(7))
    layout = loader.load("reef")          # examples/maps/reef.txt
    layout = loader.load(Path("my.txt"))  # explicit path
    layout = loader.generate()
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union

from .collectibles import CollectibleKind
from .config import Config
from .entities import EnemyKind
from .logging_utils import log_info, log_warning
from .rules import DEFAULT_START, GameRules


class MapLoadError(Exception):
    """Raised when a map source cannot be turned into a layout."""

    def __init__(self, *, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        message = (
            f"Could not load map from {source}: {reason}\n\n"
            "Remediation tips:\n"
            "  - Maps must be 20 rows of at least 20 characters\n"
            "  - Place exactly one 'P' for the player start\n"
            "  - Unset HOLYDIVER_MAP_PATH to play on a generated map"
        )
        super().__init__(message)


@dataclass
class MapLayout:
    """Static description of a dive site, before any World state exists."""

    width: int
    height: int
    walls: Set[Tuple[int, int]] = field(default_factory=set)
    player_start: Tuple[int, int] = DEFAULT_START
    enemies: List[Tuple[EnemyKind, Tuple[int, int]]] = field(default_factory=list)
    collectibles: List[Tuple[CollectibleKind, Tuple[int, int]]] = field(default_factory=list)
    source: str = "generated"


# Characters with meaning in a map file
PLAYER_MARK = "P"
ENEMY_MARK = "M"
WALL_MARK = "x"


def parse_map_text(
    text: str,
    *,
    rng: random.Random,
    rules: Optional[GameRules] = None,
    source: str = "<text>",
) -> MapLayout:
    """Parse a character grid into a layout.

    Rows longer than the grid width and lines past the grid height are
    ignored. Raises ``MapLoadError`` when the grid is too small or the player
    marker is missing or repeated.
    """
    rules = rules or GameRules()
    rows = text.splitlines()
    if len(rows) < rules.height:
        raise MapLoadError(
            source=source, reason=f"expected {rules.height} rows, found {len(rows)}"
        )

    layout = MapLayout(width=rules.width, height=rules.height, source=source)
    starts: List[Tuple[int, int]] = []

    for y, row in enumerate(rows[: rules.height]):
        row = row.rstrip("\r")
        if len(row) < rules.width:
            raise MapLoadError(
                source=source,
                reason=f"row {y} has {len(row)} columns, expected {rules.width}",
            )
        for x, ch in enumerate(row[: rules.width]):
            if ch == PLAYER_MARK:
                starts.append((x, y))
            elif ch == ENEMY_MARK:
                # Coin flip per spawn
                kind = EnemyKind.STATIONARY if rng.random() < 0.5 else EnemyKind.MOVING
                layout.enemies.append((kind, (x, y)))
            elif ch == WALL_MARK:
                layout.walls.add((x, y))

    if len(starts) != 1:
        raise MapLoadError(
            source=source,
            reason=f"expected exactly one '{PLAYER_MARK}', found {len(starts)}",
        )
    layout.player_start = starts[0]
    return layout


# Generation tuning
INTERIOR_OBSTACLES = 25
ENEMY_ATTEMPTS = 15
COIN_RANGE = (10, 15)
BATTERY_PACK_RANGE = (3, 5)
OXYGEN_TANK_RANGE = (3, 5)


def generate_map(rng: random.Random, rules: Optional[GameRules] = None) -> MapLayout:
    """Build a layout procedurally from ``rng``."""
    rules = rules or GameRules()
    width, height = rules.width, rules.height
    layout = MapLayout(width=width, height=height, player_start=DEFAULT_START)

    # Border walls
    for x in range(width):
        layout.walls.add((x, 0))
        layout.walls.add((x, height - 1))
    for y in range(height):
        layout.walls.add((0, y))
        layout.walls.add((width - 1, y))

    # Interior obstacles stay off the ring just inside the border
    for _ in range(INTERIOR_OBSTACLES):
        x = rng.randint(2, width - 3)
        y = rng.randint(2, height - 3)
        layout.walls.add((x, y))
    # The start tile must be open, whatever the dice said
    layout.walls.discard(layout.player_start)

    taken: Set[Tuple[int, int]] = {layout.player_start}
    for _ in range(ENEMY_ATTEMPTS):
        pos = (rng.randint(2, width - 3), rng.randint(2, height - 3))
        if pos in layout.walls or pos in taken:
            continue
        kind = EnemyKind.STATIONARY if rng.randrange(3) == 0 else EnemyKind.MOVING
        layout.enemies.append((kind, pos))
        taken.add(pos)

    item_spots: Set[Tuple[int, int]] = {layout.player_start}
    for kind, (low, high) in (
        (CollectibleKind.COIN, COIN_RANGE),
        (CollectibleKind.BATTERY_PACK, BATTERY_PACK_RANGE),
        (CollectibleKind.OXYGEN_TANK, OXYGEN_TANK_RANGE),
    ):
        for _ in range(rng.randint(low, high)):
            pos = (rng.randint(1, width - 2), rng.randint(1, height - 2))
            if pos in layout.walls or pos in item_spots:
                continue
            layout.collectibles.append((kind, pos))
            item_spots.add(pos)

    return layout


class MapLoader:
    """Load map files by name or path, falling back to generation.

    Directory structure:
    - Default: {PROJECT_ROOT}/examples/maps/
    - Override via constructor: MapLoader(maps_dir=Path("/custom/maps"))
    - Map files: {map_name}.txt (e.g., "reef.txt")
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        rules: Optional[GameRules] = None,
        maps_dir: Optional[Path] = None,
        verbose: bool = True,
    ):
        self.rng = rng or random.Random()
        self.rules = rules or GameRules()
        self.maps_dir = maps_dir or Config.MAPS_DIR
        self.verbose = verbose

    def resolve(self, name_or_path: Union[str, Path]) -> Path:
        """Map a bare name to ``maps_dir/<name>.txt``; paths are used as given."""
        path = Path(name_or_path)
        if path.suffix or path.parent != Path("."):
            return path
        return self.maps_dir / f"{path.name}.txt"

    def read(self, name_or_path: Union[str, Path]) -> MapLayout:
        """Strict variant of ``load``: raises ``MapLoadError`` instead of falling back."""
        path = self.resolve(name_or_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MapLoadError(source=str(path), reason=str(exc)) from exc
        return parse_map_text(text, rng=self.rng, rules=self.rules, source=str(path))

    def load(self, name_or_path: Union[str, Path, None]) -> MapLayout:
        """Load a map, or generate one when the source is missing or malformed."""
        if name_or_path is None or str(name_or_path).strip() == "":
            return self.generate()
        try:
            layout = self.read(name_or_path)
        except MapLoadError as exc:
            if self.verbose:
                log_warning(f"[Map] {exc.source}: {exc.reason}; generating a map instead")
            return self.generate()
        if self.verbose:
            log_info(f"[Map] Loaded {layout.source} ({len(layout.enemies)} enemies)")
        return layout

    def generate(self) -> MapLayout:
        return generate_map(self.rng, self.rules)
