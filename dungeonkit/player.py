"""Player controls: actions, key bindings and the player's spells."""

from __future__ import annotations

from enum import Enum, auto

from dungeonkit.game import AnimKey
from dungeonkit.geometry import IVec2
from dungeonkit.moves import MoveCategory, ProjectileSpell, Spell, SpellCast, SpellHit


class PlayerAction(Enum):
    """Something the player can ask for with a key press."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SKIP = auto()
    SPELL_SLOT_1 = auto()
    SPELL_SLOT_2 = auto()
    SPELL_SLOT_3 = auto()
    SPELL_SLOT_4 = auto()


DIR_KEY_MAPPING: tuple[tuple[PlayerAction, IVec2], ...] = (
    (PlayerAction.UP, IVec2(0, 1)),
    (PlayerAction.DOWN, IVec2(0, -1)),
    (PlayerAction.LEFT, IVec2(-1, 0)),
    (PlayerAction.RIGHT, IVec2(1, 0)),
)

_DIRECTIONS: dict[PlayerAction, IVec2] = dict(DIR_KEY_MAPPING)

_KEY_BINDINGS: tuple[tuple[PlayerAction, str], ...] = (
    (PlayerAction.SKIP, "Space"),
    (PlayerAction.UP, "KeyW"),
    (PlayerAction.UP, "ArrowUp"),
    (PlayerAction.DOWN, "KeyS"),
    (PlayerAction.DOWN, "ArrowDown"),
    (PlayerAction.LEFT, "KeyA"),
    (PlayerAction.LEFT, "ArrowLeft"),
    (PlayerAction.RIGHT, "KeyD"),
    (PlayerAction.RIGHT, "ArrowRight"),
    (PlayerAction.SPELL_SLOT_1, "Digit1"),
    (PlayerAction.SPELL_SLOT_2, "Digit2"),
    (PlayerAction.SPELL_SLOT_3, "Digit3"),
    (PlayerAction.SPELL_SLOT_4, "Digit4"),
)


def direction_for(action: PlayerAction) -> IVec2 | None:
    """Step taken by a movement action, or None for other actions."""
    return _DIRECTIONS.get(action)


def default_key_bindings() -> list[tuple[PlayerAction, str]]:
    """The default bindings, each an action with the key that triggers it."""
    return list(_KEY_BINDINGS)


def actions_for_key(key: str) -> list[PlayerAction]:
    """Actions triggered by a key, in binding order."""
    return [action for action, bound in _KEY_BINDINGS if bound == key]


def flamethrower() -> Spell:
    """The spell bound to the first spell slot."""
    return Spell(
        name="Flamethrower",
        min_range=1,
        max_range=3,
        spell_type=ProjectileSpell(visual_effect="Flamethrower_2"),
        hit=SpellHit(
            visual_effect="Flamethrower",
            damage=1,
            move_type=MoveCategory.SPECIAL,
        ),
        cast=SpellCast(
            visual_effect="Circle_Small_Blue_In",
            animation=AnimKey.SHOOT,
        ),
    )