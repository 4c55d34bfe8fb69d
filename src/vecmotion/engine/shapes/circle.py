"""Circle shape builder and drawing routine."""

from typing import TYPE_CHECKING, Any

from PIL import ImageDraw

from ..attributes import PathCompletion, Scale, Size
from ..path import Path
from ..store import AttributeKind, AttributeStore, EntityId, ShapeKind
from .shape import ShapeBuilder, draw_outline

if TYPE_CHECKING:
    from ..render_context import ViewTransform
    from ..scene import Scene


class CircleBuilder(ShapeBuilder):
    """Builds a filled, stroked circle."""

    shape_kind = ShapeKind.CIRCLE

    def __init__(self, scene: "Scene"):
        super().__init__(scene)
        self.radius = 0.5

    def with_radius(self, radius: float) -> "CircleBuilder":
        self.radius = radius
        return self

    def attributes(self) -> dict[AttributeKind, Any]:
        diameter = self.radius * 2
        return {
            AttributeKind.POSITION: self.position,
            AttributeKind.SIZE: Size(diameter, diameter),
            AttributeKind.SCALE: Scale(1.0),
            AttributeKind.ANGLE: self.angle,
            AttributeKind.OPACITY: self.opacity,
            AttributeKind.FILL_COLOR: self.fill_color,
            AttributeKind.STROKE_COLOR: self.stroke_color,
            AttributeKind.STROKE_WEIGHT: self.stroke_weight,
            AttributeKind.PATH: Path.ellipse(self.radius, self.radius),
            AttributeKind.PATH_COMPLETION: PathCompletion(1.0),
        }


def circle(scene: "Scene") -> CircleBuilder:
    return CircleBuilder(scene)


def draw_circle(
    store: AttributeStore, entity: EntityId, draw: ImageDraw.ImageDraw, transform: "ViewTransform"
) -> None:
    draw_outline(store, entity, draw, transform, filled=True)
