"""Text shape builder and drawing routine."""

from typing import TYPE_CHECKING, Any

import math

from PIL import Image, ImageDraw, ImageFont

from ...constants import DEFAULT_FONT_SIZE, DEFAULT_TEXT_COLOR
from ..attributes import Angle, Color, FontSize, Opacity, PathCompletion, Position
from ..store import AttributeKind, AttributeStore, EntityId, ShapeKind
from .shape import ShapeBuilder

if TYPE_CHECKING:
    from ..render_context import ViewTransform
    from ..scene import Scene


class TextBuilder(ShapeBuilder):
    """Builds a single line of text centered on its position."""

    shape_kind = ShapeKind.TEXT

    def __init__(self, scene: "Scene"):
        super().__init__(scene)
        self.content = ""
        self.font_size = FontSize(DEFAULT_FONT_SIZE)
        self.fill_color = Color.parse(DEFAULT_TEXT_COLOR)

    def with_text(self, content: str) -> "TextBuilder":
        self.content = content
        return self

    def with_font_size(self, size: float) -> "TextBuilder":
        self.font_size = FontSize(size)
        return self

    def attributes(self) -> dict[AttributeKind, Any]:
        return {
            AttributeKind.POSITION: self.position,
            AttributeKind.ANGLE: self.angle,
            AttributeKind.OPACITY: self.opacity,
            AttributeKind.FILL_COLOR: self.fill_color,
            AttributeKind.FONT_SIZE: self.font_size,
            AttributeKind.PATH_COMPLETION: PathCompletion(1.0),
        }

    def text(self) -> str | None:
        return self.content


def text(scene: "Scene") -> TextBuilder:
    return TextBuilder(scene)


def draw_text(
    store: AttributeStore, entity: EntityId, draw: ImageDraw.ImageDraw, transform: "ViewTransform"
) -> None:
    """Draw the text rotated about its center, revealing characters left to right."""
    content = store.texts.get(entity, "")
    font_px = round(transform.to_pixels(store.get(AttributeKind.FONT_SIZE, entity).value))
    if not content or font_px < 1:
        return

    completion = store.get(AttributeKind.PATH_COMPLETION, entity, PathCompletion(1.0)).value
    visible = content[: round(len(content) * completion)]
    if not visible:
        return

    font = ImageFont.load_default(size=font_px)
    center_x, center_y = transform.to_pixel(store.get(AttributeKind.POSITION, entity, Position()))
    # Anchor on the full string so revealed characters do not shift.
    left, top, right, bottom = font.getbbox(content, anchor="lm")
    opacity = store.get(AttributeKind.OPACITY, entity, Opacity(1.0)).value
    red, green, blue, alpha = store.get(AttributeKind.FILL_COLOR, entity).to_rgba8(opacity)
    angle = store.get(AttributeKind.ANGLE, entity, Angle()).value
    if angle == 0:
        draw.text(
            (center_x - (right - left) / 2, center_y),
            visible,
            font=font,
            fill=(red, green, blue, alpha),
            anchor="lm",
        )
        return

    # Glyph mask centered on the anchor point, so rotating it keeps the text in place.
    half_height = max(-top, bottom, 1)
    mask = Image.new("L", (max(right - left, 1), 2 * half_height), 0)
    ImageDraw.Draw(mask).text((-left, half_height), visible, font=font, fill=alpha, anchor="lm")
    mask = mask.rotate(math.degrees(angle), resample=Image.Resampling.BICUBIC, expand=True)
    origin = (round(center_x - mask.width / 2), round(center_y - mask.height / 2))
    draw.bitmap(origin, mask, fill=(red, green, blue))
