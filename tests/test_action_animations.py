import math

import pytest

from dungeonkit.action_animations import (
    FLASH_DURATION_SECONDS,
    FLASH_NUMBER,
    LAST_FLASH_DURATION_SECONDS,
    SHAKE_AMPLITUDE,
    AnimationStatus,
    DeathAnimation,
    MoveAnimation,
    ProjectileAnimation,
    Visibility,
    hurt_shake,
)
from dungeonkit.geometry import POKEMON_Z, IVec2, Orientation, world_position


def _dist(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def test_death_waits_for_timer():
    anim = DeathAnimation(attacker="a")
    assert anim.tick(FLASH_DURATION_SECONDS / 4) is AnimationStatus.IDLE
    assert anim.flash_count == 0
    assert anim.visibility is Visibility.INHERITED


def test_death_alternates_visibility():
    anim = DeathAnimation(attacker="a")
    assert anim.tick(FLASH_DURATION_SECONDS) is AnimationStatus.PLAYING
    assert anim.visibility is Visibility.HIDDEN
    assert anim.tick(FLASH_DURATION_SECONDS) is AnimationStatus.PLAYING
    assert anim.visibility is Visibility.INHERITED
    assert anim.flash_count == 2


def test_death_finishes_after_all_flashes():
    anim = DeathAnimation(attacker="a")
    statuses = [anim.tick(FLASH_DURATION_SECONDS) for _ in range(FLASH_NUMBER)]
    assert all(s is AnimationStatus.PLAYING for s in statuses)
    assert anim.flash_count == FLASH_NUMBER
    # The last flash lasts longer.
    assert anim.tick(FLASH_DURATION_SECONDS) is AnimationStatus.IDLE
    assert anim.tick(LAST_FLASH_DURATION_SECONDS) is AnimationStatus.FINISHED
    assert anim.tick(0.0) is AnimationStatus.FINISHED
    assert anim.flash_count == FLASH_NUMBER


def test_move_from_tiles_uses_world_positions():
    anim = MoveAnimation.from_tiles("e", IVec2(1, 2), IVec2(2, 2))
    assert anim.start == world_position(IVec2(1, 2), POKEMON_Z)
    assert anim.end == world_position(IVec2(2, 2), POKEMON_Z)
    assert anim.t == 0.0
    assert anim.entity == "e"


def test_move_partial_step_gets_closer():
    anim = MoveAnimation.from_tiles("e", IVec2(0, 0), IVec2(1, 0))
    pos, status = anim.step(anim.start, 0.1, 1.0)
    assert status is AnimationStatus.PLAYING
    assert 0.0 < anim.t < 1.0
    assert _dist(pos, anim.end) < _dist(anim.start, anim.end)
    assert pos[2] == POKEMON_Z


def test_move_reaches_destination_then_next():
    anim = MoveAnimation.from_tiles("e", IVec2(0, 0), IVec2(0, 1))
    pos, status = anim.step(anim.start, 10.0, 1.0)
    assert status is AnimationStatus.PLAYING
    assert anim.t == 1.0
    assert pos == pytest.approx(anim.end)
    pos2, status2 = anim.step(pos, 0.1, 1.0)
    assert status2 is AnimationStatus.NEXT
    assert pos2 == pos


def test_projectile_snaps_to_target_on_arrival():
    start = (0.0, 0.0, 15.0)
    end = (48.0, 0.0, 15.0)
    anim = ProjectileAnimation(caster="c", start=start, end=end)
    pos, status = anim.step(start, 0.05, 1.0)
    assert status is AnimationStatus.PLAYING
    assert start[0] < pos[0] < end[0]
    near = (end[0] - 0.01, end[1], end[2])
    final, status = anim.step(near, 0.05, 1.0)
    assert status is AnimationStatus.FINISHED
    assert final == end


def test_projectile_faster_with_game_speed():
    start = (0.0, 0.0, 0.0)
    end = (100.0, 0.0, 0.0)
    slow = ProjectileAnimation(caster="c", start=start, end=end)
    fast = ProjectileAnimation(caster="c", start=start, end=end)
    slow.step(start, 0.1, 1.0)
    fast.step(start, 0.1, 2.0)
    assert fast.t > slow.t


@pytest.mark.parametrize("orientation", [Orientation.NORTH, Orientation.SOUTH])
def test_hurt_shake_vertical(orientation):
    dx, dy = hurt_shake(0.0, orientation)
    assert dx == 0.0
    assert dy == pytest.approx(SHAKE_AMPLITUDE)


@pytest.mark.parametrize(
    "orientation", [Orientation.EAST, Orientation.WEST, Orientation.NORTH_EAST]
)
def test_hurt_shake_horizontal(orientation):
    dx, dy = hurt_shake(0.0, orientation)
    assert dy == 0.0
    assert dx == pytest.approx(SHAKE_AMPLITUDE)


def test_hurt_shake_bounded():
    for i in range(50):
        dx, dy = hurt_shake(i * 0.013, Orientation.WEST)
        assert abs(dx) <= SHAKE_AMPLITUDE + 1e-9
        assert dy == 0.0