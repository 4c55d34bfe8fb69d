"""Entity ids and the typed attribute side tables they index."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NewType

from .attributes import (
    Angle,
    BlendMode,
    Color,
    FontSize,
    Opacity,
    PathCompletion,
    Position,
    Scale,
    Size,
    StrokeWeight,
)
from .path import Path

EntityId = NewType("EntityId", int)


class AttributeKind(Enum):
    """Every animatable attribute an entity may carry."""

    POSITION = "position"
    SIZE = "size"
    SCALE = "scale"
    ANGLE = "angle"
    OPACITY = "opacity"
    FILL_COLOR = "fill_color"
    STROKE_COLOR = "stroke_color"
    STROKE_WEIGHT = "stroke_weight"
    PATH = "path"
    PATH_COMPLETION = "path_completion"
    FONT_SIZE = "font_size"

    @property
    def value_type(self) -> type:
        return _VALUE_TYPES[self]

    @property
    def default_blend(self) -> BlendMode:
        return DEFAULT_BLEND_MODES[self]


_VALUE_TYPES: dict[AttributeKind, type] = {
    AttributeKind.POSITION: Position,
    AttributeKind.SIZE: Size,
    AttributeKind.SCALE: Scale,
    AttributeKind.ANGLE: Angle,
    AttributeKind.OPACITY: Opacity,
    AttributeKind.FILL_COLOR: Color,
    AttributeKind.STROKE_COLOR: Color,
    AttributeKind.STROKE_WEIGHT: StrokeWeight,
    AttributeKind.PATH: Path,
    AttributeKind.PATH_COMPLETION: PathCompletion,
    AttributeKind.FONT_SIZE: FontSize,
}

# Size and scale compound multiplicatively; angle, opacity, completion and
# font size accumulate deltas; everything else is set outright.
DEFAULT_BLEND_MODES: dict[AttributeKind, BlendMode] = {
    AttributeKind.POSITION: BlendMode.ABSOLUTE,
    AttributeKind.SIZE: BlendMode.MULTIPLICATIVE,
    AttributeKind.SCALE: BlendMode.MULTIPLICATIVE,
    AttributeKind.ANGLE: BlendMode.RELATIVE,
    AttributeKind.OPACITY: BlendMode.RELATIVE,
    AttributeKind.FILL_COLOR: BlendMode.ABSOLUTE,
    AttributeKind.STROKE_COLOR: BlendMode.ABSOLUTE,
    AttributeKind.STROKE_WEIGHT: BlendMode.ABSOLUTE,
    AttributeKind.PATH: BlendMode.ABSOLUTE,
    AttributeKind.PATH_COMPLETION: BlendMode.RELATIVE,
    AttributeKind.FONT_SIZE: BlendMode.RELATIVE,
}

# Kinds animated before the path stage; the rendered outline depends on them.
REGULAR_KINDS: tuple[AttributeKind, ...] = tuple(
    kind for kind in AttributeKind if kind is not AttributeKind.PATH
)


class ShapeKind(Enum):
    """Which drawing routine renders an entity."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    LINE = "line"
    TEXT = "text"


class AttributeStore:
    """Arena of entities with one side table per attribute kind."""

    def __init__(self) -> None:
        self._tables: dict[AttributeKind, dict[EntityId, Any]] = {kind: {} for kind in AttributeKind}
        self._previous: dict[AttributeKind, dict[EntityId, Any]] = {kind: {} for kind in AttributeKind}
        self.depths: dict[EntityId, float] = {}
        self.shapes: dict[EntityId, ShapeKind] = {}
        self.texts: dict[EntityId, str] = {}
        self.rendered_paths: dict[EntityId, Path] = {}
        # Size each entity's PATH is expressed at; the outline is rescaled from it.
        self.reference_sizes: dict[EntityId, Size] = {}
        self.render_inputs: dict[EntityId, tuple] = {}
        self._next_id = 0

    def spawn(
        self,
        shape: ShapeKind,
        depth: float,
        attributes: Mapping[AttributeKind, Any],
        text: str | None = None,
    ) -> EntityId:
        """
        Register a new entity with its initial attribute values.

        Args:
            shape: Drawing routine for the entity
            depth: Occlusion order; larger depths are drawn later
            attributes: Initial value for every attribute kind the entity has
            text: Text content for text entities

        Returns:
            The id of the new entity
        """
        entity = EntityId(self._next_id)
        self._next_id += 1
        self.shapes[entity] = shape
        self.depths[entity] = depth
        if text is not None:
            self.texts[entity] = text
        for kind, value in attributes.items():
            self.set(kind, entity, value)
        if AttributeKind.SIZE in attributes:
            self.reference_sizes[entity] = attributes[AttributeKind.SIZE]
        return entity

    def __contains__(self, entity: object) -> bool:
        return entity in self.shapes

    def __len__(self) -> int:
        return len(self.shapes)

    def has(self, kind: AttributeKind, entity: EntityId) -> bool:
        return entity in self._tables[kind]

    def get(self, kind: AttributeKind, entity: EntityId, default: Any = None) -> Any:
        return self._tables[kind].get(entity, default)

    def set(self, kind: AttributeKind, entity: EntityId, value: Any) -> None:
        if not isinstance(value, kind.value_type):
            raise TypeError(
                f"{kind.value} expects {kind.value_type.__name__}, got {type(value).__name__}"
            )
        self._tables[kind][entity] = value

    def table(self, kind: AttributeKind) -> Mapping[EntityId, Any]:
        """Read-only view of the current values of one attribute kind."""
        return MappingProxyType(self._tables[kind])

    def snapshot(self, kind: AttributeKind, entity: EntityId) -> None:
        """Copy the current value into the previous-value shadow."""
        self._previous[kind][entity] = self._tables[kind][entity]

    def previous(self, kind: AttributeKind, entity: EntityId) -> Any:
        return self._previous[kind].get(entity)

    def entities_by_depth(self) -> list[EntityId]:
        """Entity ids in back-to-front drawing order."""
        return sorted(self.shapes, key=lambda entity: (self.depths[entity], entity))
