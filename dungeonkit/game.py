"""Game states, system phases, pieces and asset loading progress."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Top-level state of the game; the game starts in LOADING."""

    LOADING = auto()
    ASSETS_LOADED = auto()
    INITIALIZING = auto()
    PLAYING = auto()
    MENU = auto()


class GamePlayingSet(Enum):
    """Phases of a playing frame, in the order they run."""

    INPUTS = auto()
    CONTROLS = auto()
    AI = auto()
    TURN_LOGICS = auto()
    ANIMATIONS = auto()
    ACTIONS = auto()
    LATE_LOGICS = auto()


class AnimKey(Enum):
    """Character animation names."""

    IDLE = "Idle"
    WALK = "Walk"
    ATTACK = "Attack"
    HURT = "Hurt"
    SHOOT = "Shoot"


class Faction(Enum):
    NONE = auto()
    PLAYER = auto()
    FRIEND = auto()
    FOE = auto()


class PieceKind(Enum):
    PLAYER = auto()
    NPC = auto()


@dataclass
class Piece:
    kind: PieceKind


@dataclass
class Pokemon:
    id: int
    form_index: int = 0


class ScalingMode(Enum):
    """How a camera projection maps world units to the window."""

    FIXED_VERTICAL = auto()
    FIXED_HORIZONTAL = auto()
    WINDOW_SIZE = auto()
    AUTO_MIN = auto()
    AUTO_MAX = auto()


class LoadState(Enum):
    NOT_LOADED = auto()
    LOADING = auto()
    LOADED = auto()
    FAILED = auto()


def ui_scale(
    scaling_mode: ScalingMode,
    fixed_ratio: float,
    window_width: float,
    window_height: float,
    projection_scale: float,
) -> float | None:
    """UI scale factor matching the camera, or None for unsupported modes."""
    if scaling_mode is ScalingMode.FIXED_VERTICAL:
        return window_height / fixed_ratio / projection_scale
    if scaling_mode is ScalingMode.FIXED_HORIZONTAL:
        return window_width / fixed_ratio / projection_scale
    return None


def next_loading_state(load_states: Iterable[LoadState | None]) -> GameState:
    """State to be in given the load states of the tracked assets.

    Stays in LOADING while any asset is still loading; failed assets are
    logged and do not hold loading back.
    """
    for state in load_states:
        if state is LoadState.LOADING:
            return GameState.LOADING
        if state is LoadState.FAILED:
            logger.error("asset loading error")
    logger.info("Assets loaded")
    return GameState.ASSETS_LOADED