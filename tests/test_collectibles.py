"""Tests for the collectibles registry and pickup effects."""

from holydiver.collectibles import (
    COLLECTIBLE_EFFECTS,
    Collectible,
    CollectibleKind,
    CollectiblesRegistry,
    collectible_effects,
)
from holydiver.rules import GameRules


def test_default_effects_table():
    assert COLLECTIBLE_EFFECTS[CollectibleKind.COIN].score == 50
    assert COLLECTIBLE_EFFECTS[CollectibleKind.COIN].battery == 0

    pack = COLLECTIBLE_EFFECTS[CollectibleKind.BATTERY_PACK]
    assert (pack.score, pack.battery, pack.oxygen) == (20, 30, 0)

    tank = COLLECTIBLE_EFFECTS[CollectibleKind.OXYGEN_TANK]
    assert (tank.score, tank.battery, tank.oxygen) == (20, 0, 40)


def test_effects_follow_rules():
    effects = collectible_effects(GameRules(coin_score=7))
    assert effects[CollectibleKind.COIN].score == 7


def test_registry_rejects_a_second_item_on_a_tile():
    registry = CollectiblesRegistry()

    assert registry.add(Collectible(x=2, y=3, kind=CollectibleKind.COIN)) is True
    assert registry.add(Collectible(x=2, y=3, kind=CollectibleKind.OXYGEN_TANK)) is False
    assert len(registry) == 1
    assert registry.uncollected_at(2, 3) is CollectibleKind.COIN


def test_collect_is_one_shot_until_reset():
    registry = CollectiblesRegistry(
        [
            Collectible(x=1, y=1, kind=CollectibleKind.COIN),
            Collectible(x=4, y=4, kind=CollectibleKind.BATTERY_PACK),
        ]
    )

    assert registry.collect_at(1, 1) is CollectibleKind.COIN
    assert registry.collect_at(1, 1) is None
    assert registry.collect_at(9, 9) is None
    assert registry.remaining() == 1

    registry.reset()
    assert registry.remaining() == 2
    assert registry.uncollected_at(1, 1) is CollectibleKind.COIN
    assert [item.position for item in registry] == [(1, 1), (4, 4)]
