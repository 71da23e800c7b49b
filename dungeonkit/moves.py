"""Move categories and spell descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dungeonkit.game import AnimKey


class AttackStat(Enum):
    """The attacking stat used in damage calculation."""

    ATTACK = auto()
    SPECIAL_ATTACK = auto()

    def label(self) -> str:
        return "Attack" if self is AttackStat.ATTACK else "Special Attack"


class DefenseStat(Enum):
    """The defending stat used in damage calculation."""

    DEFENSE = auto()
    SPECIAL_DEFENSE = auto()

    def label(self) -> str:
        return "Defense" if self is DefenseStat.DEFENSE else "Special Defense"


class MoveCategory(Enum):
    """Category of a move; decides which stats drive its damage."""

    PHYSICAL = auto()
    SPECIAL = auto()
    STATUS = auto()

    def damage_stats(self) -> tuple[AttackStat, DefenseStat] | None:
        """Attacking and defending stats for damage, or None for status moves."""
        if self is MoveCategory.PHYSICAL:
            return AttackStat.ATTACK, DefenseStat.DEFENSE
        if self is MoveCategory.SPECIAL:
            return AttackStat.SPECIAL_ATTACK, DefenseStat.SPECIAL_DEFENSE
        return None


@dataclass(frozen=True)
class ProjectileSpell:
    visual_effect: str


@dataclass(frozen=True)
class SpellHit:
    visual_effect: str
    damage: int
    move_type: MoveCategory


@dataclass(frozen=True)
class SpellCast:
    visual_effect: str
    animation: AnimKey


@dataclass(frozen=True)
class Spell:
    """A castable spell with an inclusive range of tiles."""

    name: str
    min_range: int
    max_range: int
    spell_type: ProjectileSpell
    hit: SpellHit
    cast: SpellCast

    def in_range(self, distance: int) -> bool:
        """Whether a target at this distance can be reached."""
        return self.min_range <= distance <= self.max_range