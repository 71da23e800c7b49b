"""The start menu: its buttons and how they react to the pointer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from dungeonkit.game import GameState

Color = tuple[float, float, float, float]

TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)
TEXT_COLOR: Color = (0.9, 0.9, 0.9, 1.0)


class Interaction(Enum):
    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


@dataclass(frozen=True)
class ButtonColors:
    normal: Color = (0.15, 0.15, 0.15, 1.0)
    hovered: Color = (0.25, 0.25, 0.25, 1.0)


@dataclass
class MenuButton:
    """A menu button; pressing it may switch the game to another state."""

    label: str
    width: float
    height: float
    font_size: float
    colors: ButtonColors = field(default_factory=ButtonColors)
    change_state: GameState | None = None
    background: Color = field(init=False)

    def __post_init__(self) -> None:
        self.background = self.colors.normal

    def interact(self, interaction: Interaction) -> GameState | None:
        """React to the pointer; returns the state to switch to, if any."""
        if interaction is Interaction.PRESSED:
            return self.change_state
        if interaction is Interaction.HOVERED:
            self.background = self.colors.hovered
        else:
            self.background = self.colors.normal
        return None


def default_menu() -> list[MenuButton]:
    """The play button followed by the two footer buttons."""
    footer_colors = ButtonColors(normal=TRANSPARENT)
    return [
        MenuButton(
            label="Play",
            width=140.0,
            height=50.0,
            font_size=40.0,
            change_state=GameState.PLAYING,
        ),
        MenuButton(
            label="Made with Bevy",
            width=170.0,
            height=50.0,
            font_size=15.0,
            colors=footer_colors,
        ),
        MenuButton(
            label="Open source",
            width=170.0,
            height=50.0,
            font_size=15.0,
            colors=footer_colors,
        ),
    ]