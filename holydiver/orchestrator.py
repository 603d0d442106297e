"""
Game loop orchestrator.

Decoupled from terminal I/O: the intent source, the renderer and any extra
observers are injected by the caller.

Coordinates the loop:
1. Pull one intent from the intent source
2. Resolve the turn via ``World.step``
3. Notify tick listeners with (result, snapshot)
4. Stop on quit, game over or after ``max_steps`` intents
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .logging_utils import (
    Color,
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    colored,
)
from .schemas import GameStatus, Intent, StepResult, WorldSnapshot
from .snapshot import format_resource_summary
from .world import World

IntentSource = Callable[[WorldSnapshot], Optional[Intent]]
TickListener = Callable[[StepResult, WorldSnapshot], None]


class Orchestrator:
    """Drive a World from an intent source.

    The orchestrator never blocks on its own; if the intent source blocks
    (reading a key, waiting on a socket) that is the caller's choice.
    """

    def __init__(
        self,
        world: World,
        intent_source: IntentSource,
        *,
        tick_listeners: Optional[List[TickListener]] = None,
        verbose: bool = False,
    ):
        """Initialize with all dependencies injected.

        Args:
            world: The World to drive
            intent_source: Called with the latest snapshot; returns the next
                intent, or None to skip (an idle input)
            tick_listeners: Optional callables invoked after every step with
                (result, snapshot), e.g. a renderer
            verbose: Print one tagged line per resolved turn
        """
        self.world = world
        self.intent_source = intent_source
        self.tick_listeners = tick_listeners or []
        self.verbose = verbose
        self.history: List[StepResult] = []

    def run(self, max_steps: Optional[int] = None, *, stop_on_game_over: bool = True) -> Dict:
        """Run until quit, game over or ``max_steps`` intents.

        Returns:
            Dict with final_snapshot, steps, status and quit flag
        """
        steps = 0
        snapshot = self.world.snapshot()
        while max_steps is None or steps < max_steps:
            intent = self.intent_source(snapshot)
            result = self.world.step(intent)
            snapshot = self.world.snapshot()
            steps += 1
            self.history.append(result)

            if self.verbose:
                self._log_step(result, snapshot)

            for listener in self.tick_listeners:
                listener(result, snapshot)

            if self.world.quit_requested:
                break
            if stop_on_game_over and result.status is GameStatus.GAME_OVER:
                break

        return {
            "final_snapshot": snapshot,
            "steps": steps,
            "status": snapshot.status,
            "quit": self.world.quit_requested,
        }

    def _log_step(self, result: StepResult, snapshot: WorldSnapshot) -> None:
        label = result.intent.value if result.intent else "idle"
        summary = format_resource_summary(snapshot)
        print(colored(f"  {LOG_TAG_DETERMINISTIC} [Turn {result.turn}] {label}: {summary}", Color.BLUE))
        for event in result.events:
            if event.category == "game_over":
                print(colored(f"  {LOG_TAG_ERROR} [Turn {result.turn}] {event.description}", Color.RED, bold=True))
            elif event.category == "collected":
                print(colored(f"  {LOG_TAG_SUCCESS} [Turn {result.turn}] {event.description}", Color.GREEN))
