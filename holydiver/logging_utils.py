"""Logging utilities for Holy Diver.

Provides color-coded console output so turn summaries, fallbacks and game-over
notices are easy to tell apart in a terminal. Every line also carries a text
tag, so nothing depends on color alone.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Turn resolution
    YELLOW = "\033[93m"    # Map fallbacks, ignored input
    RED = "\033[91m"       # Errors and game over
    GREEN = "\033[92m"     # Pickups, completion
    CYAN = "\033[96m"      # Info/metadata

    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for message types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_WARNING = "[?]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"


def colors_enabled() -> bool:
    """False when HOLYDIVER_NO_COLOR is set to anything non-empty."""
    return not os.getenv("HOLYDIVER_NO_COLOR")


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI codes, or return it unchanged when colors are off."""
    if not colors_enabled():
        return text
    codes = (Color.BOLD.value if bold else "") + color.value
    return f"{codes}{text}{Color.RESET.value}"


def _log(tag: str, color: Color, message: str) -> None:
    print(colored(f"{tag} {message}", color))


def log_deterministic(message: str) -> None:
    """Turn-resolution message (blue)."""
    _log(LOG_TAG_DETERMINISTIC, Color.BLUE, message)


def log_warning(message: str) -> None:
    """Recoverable problem such as a map fallback (yellow)."""
    _log(LOG_TAG_WARNING, Color.YELLOW, message)


def log_error(message: str) -> None:
    _log(LOG_TAG_ERROR, Color.RED, message)


def log_success(message: str) -> None:
    _log(LOG_TAG_SUCCESS, Color.GREEN, message)


def log_info(message: str) -> None:
    _log(LOG_TAG_INFO, Color.CYAN, message)
