"""Attribute animation engine: entities, timelines, paths and rendering."""

from .animator import Animator
from .attributes import (
    Angle,
    BlendMode,
    Color,
    FontSize,
    Opacity,
    PathCompletion,
    Point,
    Position,
    Scale,
    Size,
    StrokeWeight,
)
from .bounds import Bounds, Direction, Rect
from .easing import EaseType
from .path import DegeneratePathError, Path, PathBuilder
from .raster_animation import generate_raster_frames
from .render_context import RenderContext, ViewTransform
from .renderer import Renderer
from .scene import Scene
from .shapes import ShapeHandle
from .store import AttributeKind, AttributeStore, EntityId, ShapeKind
from .timeline import AnimBuilder, Animation, Timeline

__all__ = [
    "Angle",
    "AnimBuilder",
    "Animation",
    "Animator",
    "AttributeKind",
    "AttributeStore",
    "BlendMode",
    "Bounds",
    "Color",
    "DegeneratePathError",
    "Direction",
    "EaseType",
    "EntityId",
    "FontSize",
    "generate_raster_frames",
    "Opacity",
    "Path",
    "PathBuilder",
    "PathCompletion",
    "Point",
    "Position",
    "Rect",
    "RenderContext",
    "Renderer",
    "Scale",
    "Scene",
    "ShapeHandle",
    "ShapeKind",
    "Size",
    "StrokeWeight",
    "Timeline",
    "ViewTransform",
]
