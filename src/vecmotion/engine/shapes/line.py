"""Line shape builder and drawing routine."""

from typing import TYPE_CHECKING, Any

from PIL import ImageDraw

from ..attributes import PathCompletion, Point, Position, Scale
from ..path import Path
from ..store import AttributeKind, AttributeStore, EntityId, ShapeKind
from .shape import ShapeBuilder, draw_outline

if TYPE_CHECKING:
    from ..render_context import ViewTransform
    from ..scene import Scene


class LineBuilder(ShapeBuilder):
    """Builds a straight stroke; its position is the segment midpoint."""

    shape_kind = ShapeKind.LINE

    def __init__(self, scene: "Scene"):
        super().__init__(scene)
        self.start = Point(-0.5, 0.0)
        self.end = Point(0.5, 0.0)

    def from_points(self, x1: float, y1: float, x2: float, y2: float) -> "LineBuilder":
        self.start = Point(x1, y1)
        self.end = Point(x2, y2)
        return self

    def attributes(self) -> dict[AttributeKind, Any]:
        middle = self.start.interp(self.end, 0.5)
        return {
            AttributeKind.POSITION: Position(middle.x, middle.y),
            AttributeKind.SCALE: Scale(1.0),
            AttributeKind.ANGLE: self.angle,
            AttributeKind.OPACITY: self.opacity,
            AttributeKind.STROKE_COLOR: self.stroke_color,
            AttributeKind.STROKE_WEIGHT: self.stroke_weight,
            AttributeKind.PATH: Path.segment(self.start - middle, self.end - middle),
            AttributeKind.PATH_COMPLETION: PathCompletion(1.0),
        }


def line(scene: "Scene") -> LineBuilder:
    return LineBuilder(scene)


def draw_line(
    store: AttributeStore, entity: EntityId, draw: ImageDraw.ImageDraw, transform: "ViewTransform"
) -> None:
    draw_outline(store, entity, draw, transform, filled=False)
