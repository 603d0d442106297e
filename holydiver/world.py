"""
The World: one dive, resolved one turn at a time.

World owns every piece of mutable game state (the player, the enemies, the
collectibles, the visibility map and the score) and is the only thing that
changes it. Presentation code talks to it through ``step(intent)`` and reads
it back through ``snapshot()``.

Turn ordering (fixed, and observable through damage attribution):
1. Resolve the player's single action, including its resource cost and any
   immediate collision (bumping into an enemy)
2. Run the enemy tick: for each enemy in spawn order, apply the
   proximity/visibility activation rule, let it step if active, then apply
   its damage if it now shares the player's tile
3. Evaluate game over (health or oxygen at zero)

Nothing in here raises on a bad intent. Moves off the grid are treated as
walls, illumination with a flat battery does nothing, unknown intents are
ignored. GAME_OVER is a terminal state for the instance until ``reset()``.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Any, List, Optional, Tuple

from .collectibles import (
    Collectible,
    CollectibleKind,
    CollectiblesRegistry,
    collectible_effects,
)
from .config import Config
from .entities import Enemy, Player
from .environment import TerrainGrid, VisibilityMap, chebyshev_distance, is_cardinal_step
from .map_loader import MapLayout, MapLoader, generate_map
from .rules import GameRules
from .schemas import (
    DeathCause,
    GameEvent,
    GameStatus,
    ILLUMINATE_INTENTS,
    INTENT_DELTAS,
    Intent,
    MOVE_INTENTS,
    StepResult,
    WorldSnapshot,
)
from .snapshot import build_world_snapshot


class World:
    """A single game instance built from a static ``MapLayout``.

    Args:
        layout: Terrain, start tile, enemy spawns and pickups
        rules: Tunable constants (defaults to the standard game)
        rng: Random source used by moving enemies. Anything exposing
            ``random()`` and ``choice()`` works; tests pass scripted stubs.
    """

    def __init__(
        self,
        layout: MapLayout,
        *,
        rules: Optional[GameRules] = None,
        rng: Optional[Any] = None,
    ):
        self.rules = rules or GameRules()
        self.rng = rng if rng is not None else random.Random()
        self.layout = layout

        # Static terrain: built once, shared by every reset of this instance
        self.terrain = TerrainGrid.from_walls(layout.width, layout.height, layout.walls)
        self.start: Tuple[int, int] = layout.player_start

        self._effects = collectible_effects(self.rules)
        self._visibility = VisibilityMap(layout.width, layout.height)
        self._player = Player(self.start, self.rules)
        self._enemies: List[Enemy] = [
            Enemy.spawn_at(kind, pos, self.rules) for kind, pos in layout.enemies
        ]
        self._collectibles = CollectiblesRegistry(
            Collectible(x=pos[0], y=pos[1], kind=kind) for kind, pos in layout.collectibles
        )

        self.score = 0
        self.turn = 0
        self.quit_requested = False
        # Latched at the end of a tick; lets the enemy phase of the fatal turn still run
        self._over_latched = False
        self._events: List[GameEvent] = []

        self._visibility.reveal(*self.start)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def generate(cls, *, rng: Optional[random.Random] = None, rules: Optional[GameRules] = None) -> "World":
        """World on a procedurally generated map; ``rng`` drives both map and enemies."""
        rng = rng or random.Random()
        rules = rules or GameRules()
        return cls(generate_map(rng, rules), rules=rules, rng=rng)

    @classmethod
    def from_config(cls, config: type[Config] = Config) -> "World":
        """World built from environment configuration (seed, map path, initial health)."""
        config.validate()
        rng = random.Random(config.SEED)
        rules = GameRules(initial_health=config.INITIAL_HEALTH)
        layout = MapLoader(rng=rng, rules=rules).load(config.MAP_PATH)
        return cls(layout, rules=rules, rng=rng)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def player_position(self) -> Tuple[int, int]:
        return self._player.position

    @property
    def health(self) -> int:
        return self._player.health

    @property
    def oxygen(self) -> int:
        return self._player.oxygen

    @property
    def battery(self) -> int:
        return self._player.battery

    @property
    def lives(self) -> int:
        return self._player.lives

    @property
    def enemies(self) -> Tuple[Enemy, ...]:
        """Copies of the enemies; mutating them does not affect the World."""
        return tuple(replace(enemy) for enemy in self._enemies)

    @property
    def collectibles(self) -> Tuple[Collectible, ...]:
        return tuple(replace(item) for item in self._collectibles)

    @property
    def status(self) -> GameStatus:
        return GameStatus.GAME_OVER if self.is_over() else GameStatus.PLAYING

    def is_visible(self, x: int, y: int) -> bool:
        return self._visibility.is_visible(x, y)

    def uncollected_at(self, x: int, y: int) -> Optional[CollectibleKind]:
        return self._collectibles.uncollected_at(x, y)

    def is_over(self) -> bool:
        return self._player.is_dead()

    def death_cause(self) -> Optional[DeathCause]:
        if not self.is_over():
            return None
        if self._player.health == 0:
            return DeathCause.HEALTH_DEPLETED
        return DeathCause.OXYGEN_DEPLETED

    def snapshot(self) -> WorldSnapshot:
        return build_world_snapshot(self)

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def request_move(self, dx: int, dy: int) -> bool:
        """Try to move the player one tile. Returns True if the player moved.

        Walls and the grid edge still cost the move's oxygen. Bumping into an
        enemy costs that enemy's damage instead, and the player stays put.
        """
        if self.is_over() or not is_cardinal_step(dx, dy):
            return False

        player = self._player
        tx, ty = player.x + dx, player.y + dy

        if not self.terrain.is_open(tx, ty):
            player.consume_oxygen(self.rules.move_oxygen_cost)
            self._emit(
                "blocked",
                f"Bumped into rock at {(tx, ty)}",
                position=(tx, ty),
                amount=self.rules.move_oxygen_cost,
            )
            return False

        blocker = self._enemy_at(tx, ty)
        if blocker is not None:
            player.apply_damage(blocker.damage)
            self._emit(
                "enemy_bump",
                f"Swam into a {blocker.kind.value} enemy at {(tx, ty)}",
                position=(tx, ty),
                amount=blocker.damage,
                metadata={"enemy_kind": blocker.kind.value},
            )
            return False

        player.move_to(tx, ty)
        player.consume_oxygen(self.rules.move_oxygen_cost)
        self._visibility.reveal(tx, ty)
        self._emit("moved", f"Moved to {(tx, ty)}", position=(tx, ty), amount=self.rules.move_oxygen_cost)
        self._pick_up(tx, ty)
        return True

    def illuminate(self, dx: int, dy: int) -> bool:
        """Light the adjacent tile in direction (dx, dy). Returns True on success.

        Costs battery. With too little charge nothing happens at all: no
        charge is spent, the tile stays dark and no enemy wakes up.
        """
        if self.is_over() or not is_cardinal_step(dx, dy):
            return False

        tx, ty = self._player.x + dx, self._player.y + dy
        if not self.terrain.in_bounds(tx, ty):
            self._emit("illumination_failed", "Nothing to light beyond the edge", position=(tx, ty))
            return False

        if not self._player.use_battery(self.rules.illuminate_battery_cost):
            self._emit(
                "illumination_failed",
                "Battery too low to illuminate",
                position=(tx, ty),
                metadata={"battery": self._player.battery},
            )
            return False

        self._visibility.reveal(tx, ty)
        self._emit(
            "illuminated",
            f"Illuminated {(tx, ty)}",
            position=(tx, ty),
            amount=self.rules.illuminate_battery_cost,
        )
        # Direct light wakes everything on the tile, regardless of distance
        for enemy in self._enemies:
            if enemy.position == (tx, ty):
                self._activate(enemy)
        return True

    # ------------------------------------------------------------------
    # Enemy phase
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Run the enemy phase of a turn and then evaluate game over."""
        if self._over_latched:
            return

        radius = self.rules.detection_radius
        for enemy in self._enemies:
            # Spotting: close enough AND standing on a revealed tile
            if (
                chebyshev_distance(enemy.position, self._player.position) <= radius
                and self._visibility.is_visible(enemy.x, enemy.y)
            ):
                self._activate(enemy)

            if enemy.active:
                enemy.step(self.terrain, self.rng, self.rules)

            if enemy.position == self._player.position:
                self._player.apply_damage(enemy.damage)
                self._emit(
                    "enemy_hit",
                    f"A {enemy.kind.value} enemy hit you for {enemy.damage}",
                    position=enemy.position,
                    amount=enemy.damage,
                    metadata={"enemy_kind": enemy.kind.value},
                )

        self.turn += 1
        self._evaluate_game_over()

    # ------------------------------------------------------------------
    # Step function
    # ------------------------------------------------------------------

    def step(self, intent: Optional[Intent]) -> StepResult:
        """Consume one intent and resolve the resulting turn.

        Move and illuminate intents are followed by the enemy tick, even when
        the action itself failed. RESET and QUIT never tick. Anything else,
        including None or an unknown value, is ignored.
        """
        self._events = []
        try:
            intent = Intent(intent) if intent is not None else None
        except (TypeError, ValueError):
            intent = None

        if intent is Intent.QUIT:
            self.quit_requested = True
            self._emit("quit", "Quit requested", turn=self.turn)
        elif intent is Intent.RESET:
            self.reset()
        elif intent is None or self._over_latched:
            intent = None
        elif intent in MOVE_INTENTS:
            self.request_move(*INTENT_DELTAS[intent])
            self.tick()
        elif intent in ILLUMINATE_INTENTS:
            self.illuminate(*INTENT_DELTAS[intent])
            self.tick()

        return StepResult(
            intent=intent,
            turn=self.turn,
            status=self.status,
            events=self.drain_events(),
        )

    def reset(self) -> None:
        """Restore the initial configuration without rebuilding the terrain."""
        self._player.restore(self.start, self.rules)
        self._visibility.reset()
        self._visibility.reveal(*self.start)
        for enemy in self._enemies:
            enemy.restore()
        self._collectibles.reset()
        self.score = 0
        self.turn = 0
        self._over_latched = False
        self._events = []
        self._emit("reset", "Dive restarted", turn=0)

    def drain_events(self) -> List[GameEvent]:
        """Return and clear the events recorded since the last drain."""
        events, self._events = self._events, []
        return events

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enemy_at(self, x: int, y: int) -> Optional[Enemy]:
        for enemy in self._enemies:
            if enemy.position == (x, y):
                return enemy
        return None

    def _activate(self, enemy: Enemy) -> None:
        if enemy.activate():
            self._emit(
                "enemy_activated",
                f"Spotted a {enemy.kind.value} enemy at {enemy.position}",
                position=enemy.position,
                metadata={"enemy_kind": enemy.kind.value},
            )

    def _pick_up(self, x: int, y: int) -> None:
        kind = self._collectibles.collect_at(x, y)
        if kind is None:
            return
        effect = self._effects[kind]
        self.score += effect.score
        self._player.recharge_battery(effect.battery)
        self._player.add_oxygen(effect.oxygen)
        self._emit(
            "collected",
            f"Picked up a {kind.value.replace('_', ' ')}",
            position=(x, y),
            amount=effect.score,
            metadata={"collectible_kind": kind.value},
        )

    def _evaluate_game_over(self) -> None:
        if self._over_latched or not self.is_over():
            return
        self._over_latched = True
        cause = self.death_cause()
        self._emit(
            "game_over",
            f"Dive over: {cause.value.replace('_', ' ')}",
            metadata={"cause": cause.value, "score": self.score},
            turn=self.turn,
        )

    def _emit(
        self,
        category: str,
        description: str,
        *,
        position: Optional[Tuple[int, int]] = None,
        amount: Optional[int] = None,
        metadata: Optional[dict] = None,
        turn: Optional[int] = None,
    ) -> None:
        self._events.append(
            GameEvent(
                turn=self.turn + 1 if turn is None else turn,
                category=category,
                description=description,
                position=position,
                amount=amount,
                metadata=metadata or {},
            )
        )
