"""Frame-by-frame sprite animation, character animators and shadow frames."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from dungeonkit.game import AnimKey, Faction
from dungeonkit.gamemap import EnvironmentType, TerrainData, TerrainType
from dungeonkit.geometry import FRAME_DURATION_MILLIS, Orientation

SHADOW_FRAME_TICKS = 10

_ORIENTATION_ORDER: dict[Orientation, int] = {
    Orientation.SOUTH: 0,
    Orientation.SOUTH_EAST: 1,
    Orientation.EAST: 2,
    Orientation.NORTH_EAST: 3,
    Orientation.NORTH: 4,
    Orientation.NORTH_WEST: 5,
    Orientation.WEST: 6,
    Orientation.SOUTH_WEST: 7,
}


def _frame_seconds(ticks: int, game_speed: float) -> float:
    """Duration of a frame lasting a number of ticks, in whole milliseconds."""
    millis = math.floor((ticks * FRAME_DURATION_MILLIS) / game_speed)
    return millis / 1000


@dataclass(frozen=True)
class AnimationFrame:
    """One frame of an animation: its sprite in the atlas and how long it shows."""

    atlas_index: int
    duration: float  # seconds


@dataclass(frozen=True)
class FrameChanged:
    """Reported when an animator switches to a new frame."""

    frame_index: int
    frame: AnimationFrame


class Animator:
    """Plays a sequence of frames, once or in a loop."""

    def __init__(
        self,
        frames: Sequence[AnimationFrame],
        is_loop: bool = False,
        return_frame: int | None = None,
        hit_frame: int | None = None,
        rush_frame: int | None = None,
    ) -> None:
        if not frames:
            raise ValueError("an animator needs at least one frame")
        self.frames: list[AnimationFrame] = list(frames)
        self.is_loop = is_loop
        last_frame = len(self.frames) - 1
        self.return_frame = last_frame if return_frame is None else return_frame
        self.hit_frame = last_frame if hit_frame is None else hit_frame
        self.rush_frame = 0 if rush_frame is None else rush_frame
        self.current_frame = 0
        self._elapsed = 0.0
        self._duration = 0.0
        self._finished = False

    def is_finished(self) -> bool:
        return self._finished

    def is_hit_frame(self) -> bool:
        return self.current_frame == self.hit_frame

    def is_rush_frame(self) -> bool:
        return self.current_frame == self.rush_frame

    def is_return_frame(self) -> bool:
        return self.current_frame == self.return_frame

    def tick(self, delta: float) -> FrameChanged | None:
        """Advance the clock by delta seconds.

        Returns the frame switched to, or None when the current frame keeps
        showing. A one-shot animation that has shown its last frame becomes
        finished once that frame's time is up.
        """
        self._elapsed = min(self._elapsed + delta, self._duration)
        if self._elapsed < self._duration:
            return None

        if not self.is_loop and self.current_frame > len(self.frames) - 1:
            self._finished = True
            return None

        frame = self.frames[self.current_frame]
        self._duration = frame.duration
        self._elapsed = 0.0
        changed = FrameChanged(frame_index=self.current_frame, frame=frame)

        if self.current_frame + 1 < len(self.frames):
            self.current_frame += 1
        elif self.is_loop:
            self.current_frame = 0
        else:
            # Step past the end so the next elapsed frame marks the end.
            self.current_frame += 1
        return changed


@dataclass(frozen=True)
class AnimationIndices:
    """First and last atlas index of one orientation's row of frames."""

    first: int
    last: int

    @classmethod
    def from_animation(cls, orientation: Orientation, anim_step: int) -> AnimationIndices:
        """Indices for an orientation when each row holds anim_step + 1 frames."""
        start = _ORIENTATION_ORDER[orientation] * (anim_step + 1)
        return cls(first=start, last=start + anim_step)


def pokemon_animator(
    durations: Sequence[int],
    anim_key: AnimKey,
    orientation: Orientation,
    return_frame: int | None,
    hit_frame: int | None,
    rush_frame: int | None,
    game_speed: float,
) -> Animator:
    """Animator for a character animation facing an orientation.

    Durations are in ticks; only the idle animation loops.
    """
    if not durations:
        raise ValueError("an animation needs at least one frame duration")
    indices = AnimationIndices.from_animation(orientation, len(durations) - 1)
    frames = [
        AnimationFrame(
            atlas_index=indices.first + index,
            duration=_frame_seconds(ticks, game_speed),
        )
        for index, ticks in enumerate(durations)
    ]
    return Animator(
        frames,
        is_loop=anim_key is AnimKey.IDLE,
        return_frame=return_frame,
        hit_frame=hit_frame,
        rush_frame=rush_frame,
    )


def _shadow_row(terrain: TerrainData) -> int:
    if terrain.type is TerrainType.GROUND:
        return 1
    if terrain.type is TerrainType.WALL:
        return 0
    if terrain.environment is EnvironmentType.WATER:
        return 3
    return 4


_SHADOW_FACTION_COLUMN: dict[Faction, int] = {
    Faction.NONE: 1,
    Faction.PLAYER: 0,
    Faction.FRIEND: 0,
    Faction.FOE: 2,
}


def shadow_frames(
    faction: Faction, terrain: TerrainData, game_speed: float
) -> list[AnimationFrame]:
    """The three looping shadow frames for a faction standing on a terrain."""
    base = _shadow_row(terrain) * 3 * 3 + _SHADOW_FACTION_COLUMN[faction] * 3
    duration = _frame_seconds(SHADOW_FRAME_TICKS, game_speed)
    return [AnimationFrame(atlas_index=base + i, duration=duration) for i in range(3)]