import pytest

from mightydoom.collision import Vec3
from mightydoom.level_update import RESET_FRAMES, LevelProgress
from mightydoom.levels import LEVEL_1, LEVEL_2
from mightydoom.player import Player
from mightydoom.zombie import Zombie

GOAL = Vec3(0.0, 0.15, -135.0)


def _dead_zombies(level):
    return [
        Zombie(spawn.position, health=0, alive=False, blood_scale=0.0)
        for spawn in level.zombies
    ]


def _run_until_level_change(progress, player, zombies):
    results = []
    while True:
        result = progress.update(player, zombies, 0)
        results.append(result)
        if result.level is not None:
            return results


def test_outside_goal_nothing_happens():
    progress = LevelProgress()
    player = Player(position=Vec3(0.0, 0.0, 50.0))
    result = progress.update(player, [], 0)
    assert not result.skip_frame
    assert result.level is None
    assert result.enemy_count == 0
    assert not progress.reset_pending


def test_goal_with_enemies_left_does_not_trigger():
    progress = LevelProgress()
    player = Player(position=GOAL)
    zombies = [Zombie(Vec3(0.0, 0.0, 0.0))]
    result = progress.update(player, zombies, 1)
    assert not result.skip_frame
    assert result.enemy_count == 1
    assert progress.level is LEVEL_1


def test_black_frames_then_next_level():
    progress = LevelProgress()
    player = Player(position=GOAL, speed=0.4, move_dir=Vec3(1.0, 0.0, 0.0))
    zombies = _dead_zombies(LEVEL_1)
    results = _run_until_level_change(progress, player, zombies)

    assert len(results) == RESET_FRAMES + 1
    assert all(r.skip_frame for r in results[:-1])
    last = results[-1]
    assert not last.skip_frame
    assert last.level is LEVEL_2
    assert last.enemy_count == LEVEL_2.zombie_count
    assert progress.level is LEVEL_2

    assert player.position == LEVEL_2.player.position
    assert player.rotation_y == LEVEL_2.player.rotation_y
    assert player.speed == 0.0
    assert player.move_dir == Vec3()

    assert len(zombies) == LEVEL_2.zombie_count
    assert zombies[0].position == LEVEL_2.zombies[0].position
    assert zombies[0].alive
    assert zombies[0].health == 5
    assert zombies[0].blood_scale == pytest.approx(0.3)


def test_pending_reset_is_not_cancelled_by_leaving_goal():
    progress = LevelProgress()
    player = Player(position=GOAL)
    zombies = _dead_zombies(LEVEL_1)
    assert progress.update(player, zombies, 0).skip_frame
    player.position = Vec3(0.0, 0.0, 100.0)
    assert progress.update(player, zombies, 0).skip_frame
    assert progress.reset_pending


def test_levels_wrap_around_and_zombies_grow_back():
    progress = LevelProgress()
    player = Player(position=GOAL)
    zombies = _dead_zombies(LEVEL_1)
    _run_until_level_change(progress, player, zombies)

    for zombie in zombies:
        zombie.alive = False
        zombie.health = 0
    player.position = GOAL
    results = _run_until_level_change(progress, player, zombies)

    assert results[-1].level is LEVEL_1
    assert progress.index == 0
    assert len(zombies) == LEVEL_1.zombie_count
    assert [z.position for z in zombies] == [s.position for s in LEVEL_1.zombies]
    assert all(z.alive for z in zombies)


def test_empty_level_list_rejected():
    with pytest.raises(ValueError):
        LevelProgress(levels=())