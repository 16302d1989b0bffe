import math

import pytest

from tank_duel.core.controls import InputState
from tank_duel.core.game import Game


def test_forward_moves_along_heading(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.forward)

    game.step(keys)

    assert tank.x == pytest.approx(103.0)
    assert tank.y == pytest.approx(350.0)


def test_backward_moves_at_half_speed(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.backward)

    game.step(keys)

    assert tank.x == pytest.approx(98.5)


def test_rotation_and_translation_apply_in_same_frame(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.forward)
    keys.press(p1_controls.right)

    game.step(keys)

    # Translation uses the heading from the start of the frame.
    assert tank.x == pytest.approx(103.0)
    assert tank.y == pytest.approx(350.0)
    assert tank.heading == pytest.approx(0.05)

    keys.release(p1_controls.forward)
    keys.release(p1_controls.right)
    keys.press(p1_controls.left)
    game.step(keys)
    game.step(keys)

    assert tank.heading == pytest.approx(-0.05)


def test_wall_rejects_move_but_keeps_rotation(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    tank.x = 26.0
    tank.heading = math.pi
    keys.press(p1_controls.forward)
    keys.press(p1_controls.right)

    game.step(keys)

    assert tank.x == pytest.approx(26.0)
    assert tank.heading == pytest.approx(math.pi + 0.05)


def test_obstacle_rejects_move(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.forward)

    tank.x = 172.0
    game.step(keys)
    assert tank.x == pytest.approx(175.0), "edge contact is not an overlap"

    tank.x = 174.0
    game.step(keys)
    assert tank.x == pytest.approx(174.0)


def test_enemy_tank_blocks_move(game: Game, keys: InputState, p1_controls):
    tank, enemy = game.tanks
    enemy.x = tank.x + 52.0
    keys.press(p1_controls.forward)

    game.step(keys)

    assert tank.x == pytest.approx(100.0)
    assert math.hypot(tank.x - enemy.x, tank.y - enemy.y) >= tank.radius * 2


def test_fire_spawns_projectile_at_muzzle(game: Game, keys: InputState, clock, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.shoot)

    game.step(keys)

    assert len(tank.projectiles) == 1
    projectile = tank.projectiles[0]
    # Spawned 35 units ahead, then advanced once in the same frame.
    assert projectile.x == pytest.approx(100.0 + 35.0 + 7.0)
    assert projectile.y == pytest.approx(350.0)
    assert projectile.owner == 1
    assert tank.last_shot == clock.now


def test_fire_is_rate_limited(game: Game, keys: InputState, clock, p1_controls):
    tank = game.player_one
    keys.press(p1_controls.shoot)

    game.step(keys)
    clock.advance(499)
    game.step(keys)
    assert len(tank.projectiles) == 1

    clock.advance(1)
    game.step(keys)
    assert len(tank.projectiles) == 2


def test_dead_tank_is_inert(game: Game, keys: InputState, p1_controls):
    tank = game.player_one
    tank.hp = 0
    keys.press(p1_controls.forward)
    keys.press(p1_controls.right)
    keys.press(p1_controls.shoot)

    game.step(keys)

    assert tank.x == pytest.approx(100.0)
    assert tank.heading == pytest.approx(0.0)
    assert tank.projectiles == []


def test_hit_clamps_display_hp(game: Game):
    tank = game.player_one
    tank.hp = 0

    tank.hit()

    assert tank.hp == -1
    assert tank.display_hp == 0
    assert not tank.alive
