"""Shared builder options, animation handles and outline drawing for shapes."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from PIL import ImageDraw

from ...constants import (
    DEFAULT_FILL_COLOR,
    DEFAULT_STROKE_COLOR,
    STROKE_WEIGHT_NORMAL,
    STROKE_WEIGHT_THICK,
    STROKE_WEIGHT_THIN,
)
from ..attributes import (
    Angle,
    BlendMode,
    Color,
    FontSize,
    Opacity,
    PathCompletion,
    Position,
    Size,
    StrokeWeight,
)
from ..bounds import Direction
from ..path import Path
from ..store import AttributeKind, AttributeStore, EntityId, ShapeKind
from ..timeline import Animation

if TYPE_CHECKING:
    from ..render_context import ViewTransform
    from ..scene import Scene


class ShapeHandle:
    """Reference to a created entity that builds animations for it."""

    def __init__(self, scene: "Scene", entity: EntityId):
        self.scene = scene
        self.entity = entity

    @property
    def depth(self) -> float:
        return self.scene.store.depths[self.entity]

    def current(self, kind: AttributeKind) -> Any:
        return self.scene.store.get(kind, self.entity)

    def _animate(
        self,
        kind: AttributeKind,
        value: Any,
        blend: BlendMode | None = None,
        initial: Any = None,
    ) -> Animation:
        return Animation(self.entity, kind, value, blend=blend, initial=initial)

    def move_to(self, x: float, y: float) -> Animation:
        return self._animate(AttributeKind.POSITION, Position(x, y))

    def shift(self, dx: float, dy: float) -> Animation:
        return self._animate(AttributeKind.POSITION, (dx, dy), blend=BlendMode.RELATIVE)

    def move_off(self, direction: Direction) -> Animation:
        """Move to the viewport edge faced by ``direction``."""
        position = self.current(AttributeKind.POSITION) or Position()
        return self._animate(AttributeKind.POSITION, self.scene.bounds.get_edge(position, direction))

    def set_size(self, width: float, height: float) -> Animation:
        return self._animate(AttributeKind.SIZE, Size(width, height), blend=BlendMode.ABSOLUTE)

    def resize(self, factor_x: float, factor_y: float | None = None) -> Animation:
        """Multiply width and height; a single factor scales both."""
        factor_y = factor_x if factor_y is None else factor_y
        return self._animate(AttributeKind.SIZE, (factor_x, factor_y))

    def scale(self, factor: float) -> Animation:
        return self._animate(AttributeKind.SCALE, factor)

    def rotate(self, angle: float) -> Animation:
        return self._animate(AttributeKind.ANGLE, angle)

    def set_angle(self, angle: float) -> Animation:
        return self._animate(AttributeKind.ANGLE, Angle(angle), blend=BlendMode.ABSOLUTE)

    def fade(self, delta: float) -> Animation:
        return self._animate(AttributeKind.OPACITY, delta)

    def set_opacity(self, opacity: float) -> Animation:
        return self._animate(AttributeKind.OPACITY, Opacity(opacity), blend=BlendMode.ABSOLUTE)

    def fade_in(self) -> Animation:
        return self._animate(
            AttributeKind.OPACITY, Opacity(1.0), blend=BlendMode.ABSOLUTE, initial=Opacity(0.0)
        )

    def fade_out(self) -> Animation:
        return self.set_opacity(0.0)

    def set_fill_color(self, color: "str | Color") -> Animation:
        return self._animate(AttributeKind.FILL_COLOR, Color.parse(color))

    def set_stroke_color(self, color: "str | Color") -> Animation:
        return self._animate(AttributeKind.STROKE_COLOR, Color.parse(color))

    def set_stroke_weight(self, weight: float) -> Animation:
        return self._animate(AttributeKind.STROKE_WEIGHT, StrokeWeight(weight))

    def grow_font(self, delta: float) -> Animation:
        return self._animate(AttributeKind.FONT_SIZE, delta)

    def set_font_size(self, size: float) -> Animation:
        return self._animate(AttributeKind.FONT_SIZE, FontSize(size), blend=BlendMode.ABSOLUTE)

    def morph(self, path: Path) -> Animation:
        """Morph the outline into ``path``, given in the shape's local coordinates."""
        return self._animate(AttributeKind.PATH, path)

    def show_creation(self) -> Animation:
        """Hide the outline now and trace it in when the animation plays."""
        return self._animate(
            AttributeKind.PATH_COMPLETION,
            PathCompletion(1.0),
            blend=BlendMode.ABSOLUTE,
            initial=PathCompletion(0.0),
        )


class ShapeBuilder(ABC):
    """Collects initial attribute values, then spawns the entity on make()."""

    shape_kind: ShapeKind

    def __init__(self, scene: "Scene"):
        self.scene = scene
        self.position = Position(0.0, 0.0)
        self.angle = Angle(0.0)
        self.opacity = Opacity(1.0)
        self.fill_color = Color.parse(DEFAULT_FILL_COLOR)
        self.stroke_color = Color.parse(DEFAULT_STROKE_COLOR)
        self.stroke_weight = StrokeWeight(STROKE_WEIGHT_NORMAL)

    def with_position(self, x: float, y: float) -> "ShapeBuilder":
        self.position = Position(x, y)
        return self

    def with_angle(self, angle: float) -> "ShapeBuilder":
        self.angle = Angle(angle)
        return self

    def with_opacity(self, opacity: float) -> "ShapeBuilder":
        self.opacity = Opacity(opacity)
        return self

    def with_fill_color(self, color: "str | Color") -> "ShapeBuilder":
        self.fill_color = Color.parse(color)
        return self

    def with_color(self, color: "str | Color") -> "ShapeBuilder":
        return self.with_fill_color(color)

    def with_stroke_color(self, color: "str | Color") -> "ShapeBuilder":
        self.stroke_color = Color.parse(color)
        return self

    def with_stroke_weight(self, weight: float) -> "ShapeBuilder":
        self.stroke_weight = StrokeWeight(weight)
        return self

    def with_thin_stroke(self) -> "ShapeBuilder":
        return self.with_stroke_weight(STROKE_WEIGHT_THIN)

    def with_thick_stroke(self) -> "ShapeBuilder":
        return self.with_stroke_weight(STROKE_WEIGHT_THICK)

    @abstractmethod
    def attributes(self) -> dict[AttributeKind, Any]:
        """Initial value of every attribute kind this shape carries."""
        raise NotImplementedError

    def text(self) -> str | None:
        return None

    def make(self) -> ShapeHandle:
        """Spawn the entity at the next depth and return its handle."""
        depth = self.scene.increment_counter()
        entity = self.scene.store.spawn(self.shape_kind, depth, self.attributes(), text=self.text())
        return ShapeHandle(self.scene, entity)


def draw_outline(
    store: AttributeStore,
    entity: EntityId,
    draw: ImageDraw.ImageDraw,
    transform: "ViewTransform",
    filled: bool = True,
) -> None:
    """
    Draw an entity's rendered outline, positioned and rotated in world space.

    Closed sub-paths are filled when ``filled`` is set; every sub-path is stroked.
    """
    outline = store.rendered_paths.get(entity)
    if outline is None:
        return

    position = store.get(AttributeKind.POSITION, entity, Position())
    angle = store.get(AttributeKind.ANGLE, entity, Angle()).value
    opacity = store.get(AttributeKind.OPACITY, entity, Opacity(1.0)).value
    fill = store.get(AttributeKind.FILL_COLOR, entity) if filled else None
    stroke = store.get(AttributeKind.STROKE_COLOR, entity)
    weight = store.get(AttributeKind.STROKE_WEIGHT, entity, StrokeWeight(0.0)).value
    stroke_px = max(1, round(transform.to_pixels(weight))) if weight > 0 else 0

    world = outline.transformed(angle=angle, offset=position)
    for polyline in world.flatten(transform.flatten_tolerance()):
        points = [transform.to_pixel(point) for point in polyline.points]
        if len(points) < 2:
            continue
        if fill is not None and polyline.closed and len(points) >= 3:
            draw.polygon(points, fill=fill.to_rgba8(opacity))
        if stroke is not None and stroke_px > 0:
            if polyline.closed:
                points.append(points[0])
            draw.line(points, fill=stroke.to_rgba8(opacity), width=stroke_px, joint="curve")
