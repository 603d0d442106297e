"""Unit tests for intents, readouts and step results."""

import pytest
from pydantic import ValidationError

from holydiver.schemas import (
    GameEvent,
    GameStatus,
    ILLUMINATE_INTENTS,
    INTENT_DELTAS,
    Intent,
    MOVE_INTENTS,
    Stat,
    StepResult,
    intent_from_key,
)


def test_stat_basic_fields():
    stat = Stat(value=72, maximum=100, unit="%", label="Battery")
    assert stat.value == 72
    assert stat.maximum == 100
    assert stat.unit == "%"

    score = Stat(value=0, unit="pts")
    assert score.maximum is None
    assert score.label is None


@pytest.mark.parametrize(
    "key,intent",
    [
        ("w", Intent.MOVE_UP),
        ("S", Intent.MOVE_DOWN),
        ("a", Intent.MOVE_LEFT),
        ("d", Intent.MOVE_RIGHT),
        ("i", Intent.ILLUMINATE_UP),
        ("k", Intent.ILLUMINATE_DOWN),
        ("j", Intent.ILLUMINATE_LEFT),
        ("L", Intent.ILLUMINATE_RIGHT),
        ("r", Intent.RESET),
        ("q", Intent.QUIT),
    ],
)
def test_key_bindings(key, intent):
    assert intent_from_key(key) is intent


def test_unbound_keys_yield_no_intent():
    assert intent_from_key("z") is None
    assert intent_from_key(" ") is None
    assert intent_from_key("") is None
    assert intent_from_key(None) is None


def test_directional_intents_have_unit_deltas():
    assert set(INTENT_DELTAS) == MOVE_INTENTS | ILLUMINATE_INTENTS
    assert not MOVE_INTENTS & ILLUMINATE_INTENTS
    assert INTENT_DELTAS[Intent.MOVE_UP] == (0, -1)
    assert INTENT_DELTAS[Intent.ILLUMINATE_RIGHT] == (1, 0)
    assert Intent.RESET not in INTENT_DELTAS


def test_step_result_lists_event_categories():
    events = [
        GameEvent(turn=3, category="moved", description="Moved"),
        GameEvent(turn=3, category="collected", description="Coin", amount=50),
    ]
    result = StepResult(intent=Intent.MOVE_LEFT, turn=3, status=GameStatus.PLAYING, events=events)

    assert result.categories() == ["moved", "collected"]
    assert result.events[1].metadata == {}


def test_event_turn_cannot_be_negative():
    with pytest.raises(ValidationError):
        GameEvent(turn=-1, category="moved", description="Moved")
