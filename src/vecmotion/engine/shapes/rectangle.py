"""Rectangle shape builder and drawing routine."""

from typing import TYPE_CHECKING, Any

from PIL import ImageDraw

from ..attributes import PathCompletion, Scale, Size
from ..path import Path
from ..store import AttributeKind, AttributeStore, EntityId, ShapeKind
from .shape import ShapeBuilder, draw_outline

if TYPE_CHECKING:
    from ..render_context import ViewTransform
    from ..scene import Scene


class RectangleBuilder(ShapeBuilder):
    """Builds an axis-aligned rectangle centered on its position."""

    shape_kind = ShapeKind.RECTANGLE

    def __init__(self, scene: "Scene"):
        super().__init__(scene)
        self.size = Size(1.0, 1.0)

    def with_size(self, width: float, height: float) -> "RectangleBuilder":
        self.size = Size(width, height)
        return self

    def attributes(self) -> dict[AttributeKind, Any]:
        return {
            AttributeKind.POSITION: self.position,
            AttributeKind.SIZE: self.size,
            AttributeKind.SCALE: Scale(1.0),
            AttributeKind.ANGLE: self.angle,
            AttributeKind.OPACITY: self.opacity,
            AttributeKind.FILL_COLOR: self.fill_color,
            AttributeKind.STROKE_COLOR: self.stroke_color,
            AttributeKind.STROKE_WEIGHT: self.stroke_weight,
            AttributeKind.PATH: Path.rectangle(self.size.width, self.size.height),
            AttributeKind.PATH_COMPLETION: PathCompletion(1.0),
        }


def rectangle(scene: "Scene") -> RectangleBuilder:
    return RectangleBuilder(scene)


def draw_rectangle(
    store: AttributeStore, entity: EntityId, draw: ImageDraw.ImageDraw, transform: "ViewTransform"
) -> None:
    draw_outline(store, entity, draw, transform, filled=True)
