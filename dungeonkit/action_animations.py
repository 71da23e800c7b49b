"""Animations that play out the actions of a turn: moving, projectiles, hurt and death."""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum, auto

from dungeonkit.geometry import (
    POKEMON_Z,
    POSITION_TOLERANCE,
    PROJECTILE_SPEED,
    WALK_SPEED,
    IVec2,
    Orientation,
    world_position,
)

Vec3 = tuple[float, float, float]

FLASH_NUMBER = 27
FLASH_DURATION_SECONDS = 0.02
LAST_FLASH_DURATION_SECONDS = 0.10

SHAKE_FREQUENCY = 40.0
SHAKE_AMPLITUDE = 0.6


class AnimationStatus(Enum):
    """What an action animation reports after a step.

    IDLE: nothing to report this step.
    PLAYING: the animation is still running.
    NEXT: the next action may start, but this animation is not over yet.
    FINISHED: the animation is over and the next action may start.
    """

    IDLE = auto()
    PLAYING = auto()
    NEXT = auto()
    FINISHED = auto()


class Visibility(Enum):
    INHERITED = auto()
    HIDDEN = auto()
    VISIBLE = auto()


def _lerp(start: Vec3, end: Vec3, t: float) -> Vec3:
    return tuple(a + (b - a) * t for a, b in zip(start, end))  # type: ignore[return-value]


def _distance(a: Vec3, b: Vec3) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def _advance(
    start: Vec3,
    end: Vec3,
    t: float,
    current: Vec3,
    speed: float,
    delta: float,
    game_speed: float,
) -> tuple[float, Vec3] | None:
    """New (t, position) while still travelling, or None once arrived."""
    if _distance(end, current) <= POSITION_TOLERANCE:
        return None
    t = min(max(t + speed * delta * game_speed, 0.0), 1.0)
    return t, _lerp(start, end, t)


@dataclass
class DeathAnimation:
    """Flashes the dying piece in and out before it is removed."""

    attacker: Hashable
    flash_count: int = 0
    visibility: Visibility = Visibility.INHERITED
    _flash_duration: float = field(default=FLASH_DURATION_SECONDS, repr=False)
    _elapsed: float = field(default=0.0, repr=False)

    def tick(self, delta: float) -> AnimationStatus:
        """Advance the flash timer by delta seconds."""
        self._elapsed = min(self._elapsed + delta, self._flash_duration)
        if self._elapsed < self._flash_duration:
            return AnimationStatus.IDLE

        if self.flash_count >= FLASH_NUMBER:
            return AnimationStatus.FINISHED

        self.flash_count += 1
        self._elapsed = 0.0
        self._flash_duration = (
            LAST_FLASH_DURATION_SECONDS
            if self.flash_count == FLASH_NUMBER
            else FLASH_DURATION_SECONDS
        )
        self.visibility = (
            Visibility.INHERITED if self.flash_count % 2 == 0 else Visibility.HIDDEN
        )
        return AnimationStatus.PLAYING


@dataclass
class MoveAnimation:
    """Walks a piece from one world position to another."""

    entity: Hashable
    start: Vec3
    end: Vec3
    t: float = 0.0

    @classmethod
    def from_tiles(cls, entity: Hashable, start: IVec2, end: IVec2) -> MoveAnimation:
        """Walk between two grid tiles at the depth of characters."""
        return cls(
            entity=entity,
            start=world_position(start, POKEMON_Z),
            end=world_position(end, POKEMON_Z),
        )

    def step(
        self, current: Vec3, delta: float, game_speed: float
    ) -> tuple[Vec3, AnimationStatus]:
        """New position and status after delta seconds.

        Once at the destination the status is NEXT; the walk is finished when
        the character's own animator is finished as well.
        """
        advanced = _advance(
            self.start, self.end, self.t, current, WALK_SPEED, delta, game_speed
        )
        if advanced is None:
            return current, AnimationStatus.NEXT
        self.t, position = advanced
        return position, AnimationStatus.PLAYING


@dataclass
class ProjectileAnimation:
    """Flies a spell projectile from its caster to the target."""

    caster: Hashable
    start: Vec3
    end: Vec3
    t: float = 0.0

    def step(
        self, current: Vec3, delta: float, game_speed: float
    ) -> tuple[Vec3, AnimationStatus]:
        """New position and status after delta seconds; snaps to the target on arrival."""
        advanced = _advance(
            self.start, self.end, self.t, current, PROJECTILE_SPEED, delta, game_speed
        )
        if advanced is None:
            return self.end, AnimationStatus.FINISHED
        self.t, position = advanced
        return position, AnimationStatus.PLAYING


def hurt_shake(elapsed_seconds: float, orientation: Orientation) -> tuple[float, float]:
    """Offset to shake a hurt piece by: vertically when facing north or south."""
    shake = math.cos(elapsed_seconds * SHAKE_FREQUENCY) * SHAKE_AMPLITUDE
    if orientation in (Orientation.NORTH, Orientation.SOUTH):
        return 0.0, shake
    return shake, 0.0