"""Text made of styled sections, drawn with bitmap fonts."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field, replace
from enum import Enum, auto

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class JustifyText(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()
    JUSTIFIED = auto()


class LineBreak(Enum):
    """How text wraps when it runs out of room."""

    WORD_BOUNDARY = auto()
    ANY_CHARACTER = auto()
    NO_WRAP = auto()


@dataclass
class SpriteTextStyle:
    font: Hashable | None = None
    font_size: float = 0.0
    color: Color = WHITE
    background_color: Color | None = None


@dataclass
class SpriteTextSection:
    value: str = ""
    style: SpriteTextStyle = field(default_factory=SpriteTextStyle)

    @classmethod
    def from_style(cls, style: SpriteTextStyle) -> SpriteTextSection:
        """An empty section, for text filled in later."""
        return cls(value="", style=style)


@dataclass
class SpriteText:
    sections: list[SpriteTextSection] = field(default_factory=list)
    alignment: JustifyText = JustifyText.LEFT
    linebreak_behavior: LineBreak = LineBreak.WORD_BOUNDARY

    @classmethod
    def from_section(cls, value: str, style: SpriteTextStyle) -> SpriteText:
        return cls(sections=[SpriteTextSection(value, style)])

    @classmethod
    def from_sections(cls, sections: Iterable[SpriteTextSection]) -> SpriteText:
        return cls(sections=list(sections))

    def with_alignment(self, alignment: JustifyText) -> SpriteText:
        """A copy aligned differently."""
        return replace(self, alignment=alignment)

    def with_no_wrap(self) -> SpriteText:
        """A copy without soft wrapping; explicit line breaks still apply."""
        return replace(self, linebreak_behavior=LineBreak.NO_WRAP)

    def total_chars_count(self) -> int:
        """Number of characters across all sections."""
        return sum(len(section.value) for section in self.sections)