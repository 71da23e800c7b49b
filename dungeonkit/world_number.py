"""Floating numbers shown over pieces for damage, healing and experience."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

RISE_SPEED = 10.0
FADE_SPEED = 1.0
LIFETIME_SECONDS = 1.0
START_HEIGHT = 15.0
DEPTH = 10.0


class WorldNumberType(Enum):
    DAMAGE = auto()
    HEAL = auto()
    EXP = auto()


@dataclass(frozen=True)
class WorldNumber:
    value: int
    type: WorldNumberType = WorldNumberType.DAMAGE

    def label(self) -> str:
        """Text shown: positive values carry a plus sign."""
        sign = "+" if self.value > 0 else ""
        return f"{sign}{self.value}"


@dataclass
class AnimatedWorldNumber:
    """A number that rises, fades in its second half and then expires."""

    y: float = START_HEIGHT
    z: float = DEPTH
    alpha: float = 1.0
    duration: float = LIFETIME_SECONDS
    elapsed: float = 0.0

    def fraction(self) -> float:
        if self.duration <= 0.0:
            return 1.0
        return self.elapsed / self.duration

    def tick(self, delta: float) -> bool:
        """Advance by delta seconds; True on the tick the number expires."""
        was_finished = self.elapsed >= self.duration
        self.elapsed = min(self.elapsed + delta, self.duration)
        just_finished = not was_finished and self.elapsed >= self.duration

        self.y += delta * RISE_SPEED
        if self.fraction() > 0.5:
            self.alpha = max(self.alpha - delta * FADE_SPEED, 0.0)
        return just_finished