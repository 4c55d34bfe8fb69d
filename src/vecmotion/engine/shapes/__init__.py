"""Shape builders and their drawing routines."""

from typing import TYPE_CHECKING, Callable

from PIL import ImageDraw

from ..store import AttributeStore, EntityId, ShapeKind
from .circle import CircleBuilder, circle, draw_circle
from .line import LineBuilder, draw_line, line
from .rectangle import RectangleBuilder, draw_rectangle, rectangle
from .shape import ShapeBuilder, ShapeHandle, draw_outline
from .text import TextBuilder, draw_text, text

if TYPE_CHECKING:
    from ..render_context import ViewTransform

DrawFunction = Callable[[AttributeStore, EntityId, ImageDraw.ImageDraw, "ViewTransform"], None]

DRAW_FUNCTIONS: dict[ShapeKind, DrawFunction] = {
    ShapeKind.CIRCLE: draw_circle,
    ShapeKind.RECTANGLE: draw_rectangle,
    ShapeKind.LINE: draw_line,
    ShapeKind.TEXT: draw_text,
}

__all__ = [
    "CircleBuilder",
    "DRAW_FUNCTIONS",
    "DrawFunction",
    "LineBuilder",
    "RectangleBuilder",
    "ShapeBuilder",
    "ShapeHandle",
    "TextBuilder",
    "circle",
    "draw_circle",
    "draw_line",
    "draw_outline",
    "draw_rectangle",
    "draw_text",
    "line",
    "rectangle",
    "text",
]
