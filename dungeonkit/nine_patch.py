"""Nine-patch geometry for bordered UI frames."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_min_size(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Margin:
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class PatchQuad:
    """One patch: where it is drawn and which part of the texture it shows."""

    dest: Rect
    uv: Rect


def build_nine_patch(
    dest_rect: Rect,
    atlas_size: tuple[float, float],
    texture_rect: Rect,
    border: Margin,
) -> list[PatchQuad]:
    """The nine patches, row by row from the top left, that draw a frame over dest_rect.

    texture_rect is the frame's area within an atlas of atlas_size pixels;
    border gives the width of each edge in pixels.
    """
    atlas_w, atlas_h = atlas_size
    tex_w = texture_rect.width()
    tex_h = texture_rect.height()

    tx0 = texture_rect.min_x / atlas_w
    ty0 = texture_rect.min_y / atlas_h
    tx1 = (texture_rect.min_x + tex_w) / atlas_w
    ty1 = (texture_rect.min_y + tex_h) / atlas_h

    uv_left = tx0 + border.left / tex_w * (tx1 - tx0)
    uv_right = tx1 - border.right / tex_w * (tx1 - tx0)
    uv_top = ty0 + border.top / tex_h * (ty1 - ty0)
    uv_bottom = ty1 - border.bottom / tex_h * (ty1 - ty0)

    b = border
    x0, y0 = dest_rect.min_x, dest_rect.min_y
    w, h = dest_rect.width(), dest_rect.height()
    inner_w = w - b.left - b.right
    inner_h = h - b.top - b.bottom

    return [
        PatchQuad(Rect.from_min_size(x0, y0, b.left, b.top), Rect(tx0, ty0, uv_left, uv_top)),
        PatchQuad(
            Rect.from_min_size(x0 + b.left, y0, inner_w, b.top),
            Rect(uv_left, ty0, uv_left, uv_top),
        ),
        PatchQuad(
            Rect.from_min_size(dest_rect.max_x - b.right, y0, b.right, b.top),
            Rect(uv_right, ty0, tx1, uv_top),
        ),
        PatchQuad(
            Rect.from_min_size(x0, y0 + b.top, b.left, inner_h),
            Rect(tx0, uv_top, uv_left, uv_bottom),
        ),
        PatchQuad(
            Rect.from_min_size(x0 + b.left, y0 + b.top, inner_w, inner_h),
            Rect(uv_left, uv_top, uv_right, uv_bottom),
        ),
        PatchQuad(
            Rect.from_min_size(x0 + w - b.right, y0 + b.top, b.right, inner_h),
            Rect(uv_right, uv_top, tx1, uv_bottom),
        ),
        PatchQuad(
            Rect.from_min_size(x0, y0 + h - b.bottom, b.left, b.bottom),
            Rect(tx0, uv_bottom, uv_left, ty1),
        ),
        PatchQuad(
            Rect.from_min_size(x0 + b.left, y0 + h - b.bottom, inner_w, b.bottom),
            Rect(uv_left, uv_bottom, uv_right, ty1),
        ),
        PatchQuad(
            Rect.from_min_size(x0 + w - b.right, y0 + h - b.bottom, b.right, b.bottom),
            Rect(uv_right, uv_bottom, tx1, ty1),
        ),
    ]


@dataclass
class BorderedFrame:
    """A nine-patch frame, optionally with a background drawn under the same borders.

    Padding applies inside the border, margin outside it.
    """

    texture: Hashable
    texture_rect: Rect
    border: Margin
    atlas_size: tuple[float, float]
    padding: Margin = field(default_factory=Margin)
    margin: Margin = field(default_factory=Margin)
    background_texture: Hashable | None = None
    background_rect: Rect | None = None
    background_atlas_size: tuple[float, float] | None = None

    def content_rect(self, available: Rect) -> Rect:
        """Area left for the contents of the frame, never of negative size."""
        min_x = available.min_x + self.padding.left + self.margin.left
        min_y = available.min_y + self.padding.top + self.margin.top
        max_x = available.max_x - (self.padding.right + self.margin.right)
        max_y = available.max_y - (self.padding.bottom + self.margin.bottom)
        return Rect(min_x, min_y, max(max_x, min_x), max(max_y, min_y))

    def paint_rect(self, content_min_rect: Rect) -> Rect:
        """Area the frame is painted over, given the area its contents used."""
        p = self.padding
        return Rect(
            content_min_rect.min_x - p.left,
            content_min_rect.min_y - p.top,
            content_min_rect.max_x + p.right,
            content_min_rect.max_y + p.bottom,
        )

    def paint(self, paint_rect: Rect) -> list[tuple[Hashable, list[PatchQuad]]]:
        """Meshes to draw, border first: each a texture with its patches."""
        meshes = [
            (
                self.texture,
                build_nine_patch(paint_rect, self.atlas_size, self.texture_rect, self.border),
            )
        ]
        if (
            self.background_texture is not None
            and self.background_rect is not None
            and self.background_atlas_size is not None
        ):
            meshes.append(
                (
                    self.background_texture,
                    build_nine_patch(
                        paint_rect,
                        self.background_atlas_size,
                        self.background_rect,
                        self.border,
                    ),
                )
            )
        return meshes