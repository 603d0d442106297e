"""Tests for the render view produced by World.snapshot()."""

from holydiver.collectibles import CollectibleKind
from holydiver.entities import EnemyKind
from holydiver.environment import TileKind, render_ascii
from holydiver.schemas import GameStatus, Intent
from holydiver.snapshot import format_resource_summary
from holydiver.world import World

from conftest import ScriptedRandom, make_layout


def test_fresh_snapshot_is_dark_except_the_diver():
    world = World(make_layout(), rng=ScriptedRandom())
    snapshot = world.snapshot()

    assert snapshot.width == 20 and snapshot.height == 20
    assert snapshot.turn == 0
    assert snapshot.status is GameStatus.PLAYING
    assert snapshot.player_position == (5, 5)
    assert snapshot.grid.tile(5, 5).kind is TileKind.PLAYER
    # Walls are not shown until lit
    assert snapshot.grid.tile(0, 0).kind is TileKind.DARK
    assert snapshot.grid.tile(0, 0).visible is False
    kinds = {tile.kind for row in snapshot.grid.rows for tile in row}
    assert kinds == {TileKind.DARK, TileKind.PLAYER}


def test_lit_tiles_show_terrain_and_pickups():
    layout = make_layout(
        start=(1, 1), collectibles=[(CollectibleKind.BATTERY_PACK, (2, 1))]
    )
    world = World(layout, rng=ScriptedRandom())

    world.step(Intent.ILLUMINATE_UP)
    world.step(Intent.ILLUMINATE_RIGHT)
    snapshot = world.snapshot()

    assert snapshot.grid.tile(1, 0).kind is TileKind.WALL
    assert snapshot.grid.tile(2, 1).kind is TileKind.BATTERY_PACK

    world.step(Intent.MOVE_RIGHT)
    snapshot = world.snapshot()
    assert snapshot.grid.tile(2, 1).kind is TileKind.PLAYER
    assert snapshot.grid.tile(1, 1).kind is TileKind.OPEN


def test_dormant_enemy_is_hidden_on_a_lit_tile():
    layout = make_layout(enemies=[(EnemyKind.STATIONARY, (5, 5))])
    world = World(layout, rng=ScriptedRandom())

    for _ in range(4):
        world.request_move(1, 0)
    world.tick()

    assert world.snapshot().grid.tile(5, 5).kind is TileKind.OPEN


def test_spotted_enemy_is_shown_below_a_pickup():
    layout = make_layout(
        enemies=[(EnemyKind.MOVING, (6, 5)), (EnemyKind.STATIONARY, (4, 5))],
        collectibles=[(CollectibleKind.COIN, (6, 5))],
    )
    world = World(layout, rng=ScriptedRandom(randoms=[0.1, 0.1]))

    world.step(Intent.ILLUMINATE_RIGHT)
    world.step(Intent.ILLUMINATE_LEFT)
    snapshot = world.snapshot()

    assert snapshot.grid.tile(6, 5).kind is TileKind.COIN
    assert snapshot.grid.tile(4, 5).kind is TileKind.ENEMY
    assert render_ascii(snapshot.grid).splitlines()[5][4:7] == "MP*"


def test_snapshot_is_detached_from_the_world():
    world = World(make_layout(), rng=ScriptedRandom())
    before = world.snapshot()

    world.step(Intent.MOVE_RIGHT)

    assert before.player_position == (5, 5)
    assert before.resource("oxygen") == 100
    assert before.grid.tile(6, 5).kind is TileKind.DARK
    assert world.snapshot().resource("oxygen") == 98


def test_resource_summary_line():
    world = World(make_layout(collectibles=[(CollectibleKind.COIN, (6, 5))]), rng=ScriptedRandom())
    world.step(Intent.ILLUMINATE_UP)
    world.step(Intent.MOVE_RIGHT)
    snapshot = world.snapshot()

    assert snapshot.resources["oxygen"].maximum == 100
    assert snapshot.resources["score"].maximum is None
    assert format_resource_summary(snapshot) == (
        "Health=100, Oxygen=98%, Battery=95%, Score=50 pts, Lives=3"
    )


def test_snapshot_serializes_to_json():
    world = World(make_layout(), rng=ScriptedRandom())
    payload = world.snapshot().model_dump(mode="json")

    assert payload["status"] == "playing"
    assert payload["grid"]["rows"][5][5]["kind"] == "player"
    assert payload["resources"]["battery"]["value"] == 100
