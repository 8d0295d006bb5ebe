import math

import pytest

from mightydoom.camera import Camera
from mightydoom.collision import Vec3
from mightydoom.player import (
    BOX_SIZE,
    HEALTH_BAR_OFFSET,
    Player,
    lerp,
    lerp_angle,
)
from mightydoom.zombie import Zombie


@pytest.mark.parametrize("a,b", [(0.0, 10.0), (-3.0, 7.5), (2.0, 2.0)])
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == pytest.approx(a)
    assert lerp(a, b, 1.0) == pytest.approx(b)


def test_lerp_midpoint_is_between():
    value = lerp(2.0, 6.0, 0.5)
    assert 2.0 < value < 6.0
    assert value - 2.0 == pytest.approx(6.0 - value)


def test_lerp_angle_zero_step_keeps_start():
    assert lerp_angle(1.2, -2.0, 0.0) == pytest.approx(1.2)


def test_lerp_angle_small_difference_reaches_target():
    assert lerp_angle(0.2, 0.5, 1.0) == pytest.approx(0.5)


def test_lerp_angle_takes_short_way_round():
    result = lerp_angle(3.0, -3.0, 1.0)
    assert abs(result - 3.0) < math.pi
    assert math.cos(result) == pytest.approx(math.cos(-3.0))
    assert math.sin(result) == pytest.approx(math.sin(-3.0))


def test_no_input_applies_friction():
    player = Player(speed=1.0)
    player.update(1 / 60, 0, 0, [])
    assert player.speed == pytest.approx(0.8)


def test_small_stick_is_dead_zone():
    player = Player(rotation_y=0.5)
    player.update(1 / 60, 2, 0, [])
    assert player.rotation_y == 0.5
    assert player.move_dir == Vec3()


def test_full_stick_moves_player():
    player = Player()
    player.update(1 / 60, 80, 0, [])
    assert player.move_dir.length() == pytest.approx(1.0)
    assert player.speed > 0.0
    assert player.position.x > 0.0
    assert player.position.z == pytest.approx(0.0)
    assert 0.0 <= player.blend_factor <= 1.0


def test_stick_up_moves_towards_negative_z():
    player = Player()
    player.update(1 / 60, 0, 80, [])
    assert player.position.z < 0.0


def test_blend_factor_is_capped():
    player = Player()
    for _ in range(200):
        player.update(1 / 60, 85, 85, [])
    assert player.blend_factor <= 1.0


def test_walk_animation_speed_follows_blend():
    player = Player()
    player.update(1 / 60, 80, 0, [])
    assert player.anim_walk.speed == pytest.approx(player.blend_factor + 0.15)


def test_living_zombie_blocks_movement():
    player = Player()
    blocker = Zombie(Vec3(5.0, 0.0, 0.0))
    player.update(1 / 60, 80, 0, [blocker])
    assert player.position == Vec3()


def test_dead_zombie_does_not_block():
    player = Player()
    corpse = Zombie(Vec3(5.0, 0.0, 0.0), alive=False)
    player.update(1 / 60, 80, 0, [corpse])
    assert player.position.x > 0.0


def test_position_clamped_to_arena():
    player = Player(
        position=Vec3(BOX_SIZE - 0.01, 0.0, -BOX_SIZE + 0.01),
        move_dir=Vec3(1.0, 0.0, -1.0),
        speed=5.0,
    )
    player.update(1 / 60, 0, 0, [])
    assert player.position.x == BOX_SIZE
    assert player.position.z == -BOX_SIZE


def test_health_bar_is_centred_above_player():
    camera = Camera()
    player = Player(position=Vec3(10.0, 0.0, 20.0))
    camera.update(player.position, player.rotation_y)
    bar = player.health_bar(camera)
    screen = camera.world_to_screen(
        Vec3(10.0, HEALTH_BAR_OFFSET, 20.0)
    )
    assert bar.x + bar.width / 2.0 == pytest.approx(screen.x)
    assert bar.y == pytest.approx(screen.y)
    assert bar.width == 30.0
    assert bar.fill == 0.0