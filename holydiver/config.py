"""
Holy Diver Configuration

Loads configuration from environment variables with sensible defaults.
The simulation core never reads these values itself; runners pass them in.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from .rules import MAX_HEALTH

# Load .env file if it exists
load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration loaded from environment variables."""

    # Random source seed. None means a fresh, unseeded source per game.
    SEED: int | None = _optional_int("HOLYDIVER_SEED")

    # Optional map file; a generated map is used when unset or unreadable
    MAP_PATH: Path | None = (
        Path(os.environ["HOLYDIVER_MAP_PATH"]) if os.getenv("HOLYDIVER_MAP_PATH") else None
    )

    # Player starting health; a hard mode starts at 5
    INITIAL_HEALTH: int = int(os.getenv("HOLYDIVER_INITIAL_HEALTH", str(MAX_HEALTH)))

    # Print one tagged line per resolved turn
    VERBOSE: bool = _flag("HOLYDIVER_VERBOSE")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = PROJECT_ROOT / "examples" / "maps"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if not 1 <= cls.INITIAL_HEALTH <= MAX_HEALTH:
            raise ValueError(
                f"HOLYDIVER_INITIAL_HEALTH must be between 1 and {MAX_HEALTH}, "
                f"got {cls.INITIAL_HEALTH}"
            )

        if cls.SEED is not None and cls.SEED < 0:
            raise ValueError("HOLYDIVER_SEED must be a non-negative integer")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Holy Diver Configuration:",
            f"  Seed: {cls.SEED if cls.SEED is not None else 'random'}",
            f"  Map: {cls.MAP_PATH or 'generated'}",
            f"  Initial Health: {cls.INITIAL_HEALTH}",
            f"  Verbose: {cls.VERBOSE}",
        ]
        return "\n".join(lines)
