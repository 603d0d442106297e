"""Line-based Holy Diver runner.

Type one or more keys and press Enter; each key is one turn:

    python examples/dive/run.py
    python examples/dive/run.py --map reef --seed 7
    python examples/dive/run.py --script "dddsssiikk" --verbose

Keys: WASD move, IJKL illuminate (I=up, J=left, K=down, L=right),
R restart, Q quit.

Settings fall back to the environment (see holydiver.config):
- `HOLYDIVER_SEED`, `HOLYDIVER_MAP_PATH`, `HOLYDIVER_INITIAL_HEALTH`
- `HOLYDIVER_VERBOSE`, `HOLYDIVER_NO_COLOR`
"""

from __future__ import annotations

import argparse
import random
from collections import deque
from typing import Deque, Optional

from holydiver import (
    Config,
    GameRules,
    Intent,
    MapLoader,
    Orchestrator,
    StepResult,
    World,
    WorldSnapshot,
    format_resource_summary,
    intent_from_key,
    render_ascii,
)
from holydiver.logging_utils import Color, colored


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Holy Diver")
    parser.add_argument("--map", default=None, help="Map name under examples/maps or a path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for map and enemies")
    parser.add_argument("--script", default=None, help="Play these keys instead of reading input")
    parser.add_argument("--verbose", action="store_true", help="Print a line per resolved turn")
    return parser.parse_args()


def draw(result: StepResult, snapshot: WorldSnapshot) -> None:
    print()
    print(colored("=== HOLY DIVER - Exploration Mode ===", Color.CYAN, bold=True))
    print(format_resource_summary(snapshot))
    print(render_ascii(snapshot.grid))
    for event in result.events:
        if event.category in ("collected", "enemy_hit", "enemy_bump", "illumination_failed"):
            print(f"  {event.description}")


class KeyboardIntents:
    """Buffers typed keys so several turns can be entered on one line."""

    def __init__(self, script: Optional[str] = None):
        self.pending: Deque[str] = deque(script or "")
        self.scripted = script is not None

    def __call__(self, snapshot: WorldSnapshot) -> Optional[Intent]:
        if not self.pending:
            if self.scripted:
                return Intent.QUIT
            try:
                line = input("> ")
            except EOFError:
                return Intent.QUIT
            self.pending.extend(line.strip() or " ")
        return intent_from_key(self.pending.popleft())


def main(args: argparse.Namespace) -> None:
    Config.validate()
    seed = args.seed if args.seed is not None else Config.SEED
    rng = random.Random(seed)
    rules = GameRules(initial_health=Config.INITIAL_HEALTH)
    layout = MapLoader(rng=rng, rules=rules).load(args.map or Config.MAP_PATH)
    world = World(layout, rules=rules, rng=rng)

    print(Config.display())
    print(render_ascii(world.snapshot().grid))

    orchestrator = Orchestrator(
        world,
        KeyboardIntents(args.script),
        tick_listeners=[draw],
        verbose=args.verbose or Config.VERBOSE,
    )
    result = orchestrator.run()

    final = result["final_snapshot"]
    if final.death_cause is not None:
        print(colored("\n=== GAME OVER ===", Color.RED, bold=True))
        print(f"Cause: {final.death_cause.value.replace('_', ' ')}")
    print(f"Final Score: {final.resource('score')}")
    print("\nThanks for playing!")


if __name__ == "__main__":
    main(parse_args())
