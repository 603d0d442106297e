"""Tests for environment-driven configuration and World.from_config()."""

from pathlib import Path

import pytest

from holydiver.config import Config
from holydiver.world import World

MAPS_DIR = Path(__file__).parent.parent / "examples" / "maps"


def test_validate_accepts_defaults(monkeypatch):
    monkeypatch.setattr(Config, "INITIAL_HEALTH", 100)
    monkeypatch.setattr(Config, "SEED", None)

    Config.validate()


@pytest.mark.parametrize("health", [0, 101])
def test_validate_rejects_out_of_range_health(monkeypatch, health):
    monkeypatch.setattr(Config, "INITIAL_HEALTH", health)

    with pytest.raises(ValueError, match="HOLYDIVER_INITIAL_HEALTH"):
        Config.validate()


def test_validate_rejects_negative_seed(monkeypatch):
    monkeypatch.setattr(Config, "INITIAL_HEALTH", 100)
    monkeypatch.setattr(Config, "SEED", -4)

    with pytest.raises(ValueError, match="HOLYDIVER_SEED"):
        Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "SEED", None)
    monkeypatch.setattr(Config, "MAP_PATH", None)
    monkeypatch.setattr(Config, "INITIAL_HEALTH", 5)

    text = Config.display()

    assert text.startswith("Holy Diver Configuration:")
    assert "Seed: random" in text
    assert "Map: generated" in text
    assert "Initial Health: 5" in text


def test_maps_dir_points_at_bundled_maps():
    assert Config.MAPS_DIR.resolve() == MAPS_DIR.resolve()
    assert (Config.MAPS_DIR / "reef.txt").exists()


def test_world_from_config_uses_map_seed_and_health():
    class ReefConfig(Config):
        SEED = 3
        MAP_PATH = MAPS_DIR / "reef.txt"
        INITIAL_HEALTH = 5

    world = World.from_config(ReefConfig)

    assert world.player_position == (1, 1)
    assert world.health == 5
    assert len(world.enemies) == 9
    assert world.snapshot().resources["health"].maximum == 100


def test_world_from_config_generates_without_a_map():
    class SeededConfig(Config):
        SEED = 21
        MAP_PATH = None
        INITIAL_HEALTH = 100

    first = World.from_config(SeededConfig)
    second = World.from_config(SeededConfig)

    assert first.layout.source == "generated"
    assert first.layout == second.layout
