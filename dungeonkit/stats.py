"""Creature stats and health."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_STAT = 255
MAX_HP = 999


@dataclass
class Stat:
    """A stat made of a base value and a bonus."""

    base: int = 0
    bonus: int = 0

    def value(self) -> int:
        return self.base + self.bonus


@dataclass
class Stats:
    health: Stat = field(default_factory=Stat)
    attack: Stat = field(default_factory=Stat)
    special_attack: Stat = field(default_factory=Stat)
    defense: Stat = field(default_factory=Stat)
    special_defense: Stat = field(default_factory=Stat)
    speed: Stat = field(default_factory=Stat)

    def set_base(
        self,
        hp: int,
        attack: int,
        special_attack: int,
        defense: int,
        special_defense: int,
        speed: int,
    ) -> None:
        """Replace every base value, keeping bonuses."""
        self.health.base = hp
        self.attack.base = attack
        self.special_attack.base = special_attack
        self.defense.base = defense
        self.special_defense.base = special_defense
        self.speed.base = speed


@dataclass
class Health:
    value: int = 0
    max: int = 0

    def is_dead(self) -> bool:
        return self.value <= 0

    @classmethod
    def from_stats(cls, stats: Stats) -> Health:
        """Full health sized by the health stat."""
        hp = stats.health.value()
        return cls(value=hp, max=hp)