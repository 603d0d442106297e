"""Tests for tagged, color-coded console output."""

import contextlib
import io

from holydiver.logging_utils import (
    Color,
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_INFO,
    LOG_TAG_WARNING,
    colored,
    log_deterministic,
    log_error,
    log_info,
    log_success,
    log_warning,
)


def test_colored_wraps_text_in_ansi_codes(monkeypatch):
    monkeypatch.delenv("HOLYDIVER_NO_COLOR", raising=False)

    assert colored("hi", Color.RED) == "\033[91mhi\033[0m"
    assert colored("hi", Color.GREEN, bold=True) == "\033[1m\033[92mhi\033[0m"


def test_no_color_env_disables_ansi(monkeypatch):
    monkeypatch.setenv("HOLYDIVER_NO_COLOR", "1")

    assert colored("plain", Color.CYAN, bold=True) == "plain"


def test_log_helpers_prefix_their_tags(monkeypatch):
    monkeypatch.setenv("HOLYDIVER_NO_COLOR", "1")

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        log_deterministic("turn")
        log_warning("careful")
        log_error("broken")
        log_success("done")
        log_info("note")

    assert buf.getvalue().splitlines() == [
        "[•] turn",
        "[?] careful",
        "[!] broken",
        "[✓] done",
        "[i] note",
    ]


def test_tags_are_distinct():
    assert len({LOG_TAG_DETERMINISTIC, LOG_TAG_WARNING, LOG_TAG_INFO}) == 3
