"""Animatable attribute values and the blend rules that combine them."""

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar

from PIL import ImageColor

InterpT = TypeVar("InterpT", bound="Interpolate")


class Interpolate(Protocol):
    """Capability shared by every animatable attribute value."""

    def interp(self: InterpT, other: InterpT, progress: float) -> InterpT:
        """Blend toward ``other``; progress 0 is ``self`` and 1 is ``other``."""
        ...


def clamp_unit(value: float) -> float:
    """Clamp a ratio into [0, 1]."""
    return min(max(value, 0.0), 1.0)


def lerp(start: float, end: float, progress: float) -> float:
    """Linear interpolation that returns the exact endpoints at 0 and 1."""
    if progress <= 0.0:
        return start
    if progress >= 1.0:
        return end
    return start + (end - start) * progress


def _pair(value: Any) -> tuple[float, float]:
    """Read a 2D factor or delta from a number, a pair, or a 2D value."""
    if isinstance(value, (int, float)):
        return float(value), float(value)
    if isinstance(value, Point):
        return value.x, value.y
    if isinstance(value, Size):
        return value.width, value.height
    first, second = value
    return float(first), float(second)


def _scalar(value: Any) -> float:
    if isinstance(value, Scalar):
        return value.value
    return float(value)


@dataclass(frozen=True)
class Point:
    """A 2D point or vector in world units."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def interp(self, other: "Point", progress: float) -> "Point":
        if progress <= 0.0:
            return self
        if progress >= 1.0:
            return other
        return type(self)(lerp(self.x, other.x, progress), lerp(self.y, other.y, progress))

    def offset(self, delta: Any) -> "Point":
        dx, dy = _pair(delta)
        return type(self)(self.x + dx, self.y + dy)

    def scale_by(self, factor: Any) -> "Point":
        fx, fy = _pair(factor)
        return type(self)(self.x * fx, self.y * fy)

    def rotated(self, angle: float) -> "Point":
        """Rotate counter-clockwise around the origin by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return type(self)(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


class Position(Point):
    """Entity position in world coordinates."""


@dataclass(frozen=True)
class Size:
    """Width and height of a shape in world units."""

    width: float = 1.0
    height: float = 1.0

    def interp(self, other: "Size", progress: float) -> "Size":
        if progress <= 0.0:
            return self
        if progress >= 1.0:
            return other
        return Size(
            lerp(self.width, other.width, progress),
            lerp(self.height, other.height, progress),
        )

    def offset(self, delta: Any) -> "Size":
        dw, dh = _pair(delta)
        return Size(self.width + dw, self.height + dh)

    def scale_by(self, factor: Any) -> "Size":
        fw, fh = _pair(factor)
        return Size(self.width * fw, self.height * fh)

    def ratio_to(self, other: "Size") -> tuple[float, float] | None:
        """Per-axis factor turning ``other`` into this size, if defined."""
        if other.width == 0 or other.height == 0:
            return None
        return self.width / other.width, self.height / other.height


@dataclass(frozen=True)
class Scalar:
    """A single animatable number."""

    value: float = 0.0

    def interp(self, other: "Scalar", progress: float) -> "Scalar":
        if progress <= 0.0:
            return self
        if progress >= 1.0:
            return other
        return type(self)(lerp(self.value, other.value, progress))

    def offset(self, delta: Any) -> "Scalar":
        return type(self)(self.value + _scalar(delta))

    def scale_by(self, factor: Any) -> "Scalar":
        return type(self)(self.value * _scalar(factor))


@dataclass(frozen=True)
class _UnitScalar(Scalar):
    """Scalar clamped into [0, 1] whenever it is constructed."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clamp_unit(float(self.value)))


class Angle(Scalar):
    """Rotation in radians, counter-clockwise."""


class Opacity(_UnitScalar):
    """Alpha multiplier applied to fill and stroke."""


class PathCompletion(_UnitScalar):
    """Fraction of the outline that is drawn."""


class StrokeWeight(Scalar):
    """Outline width in world units."""


class FontSize(Scalar):
    """Text height in world units."""


class Scale(Scalar):
    """Uniform scale applied to the rendered outline."""


@dataclass(frozen=True)
class Color:
    """An sRGB color with alpha; channels are floats in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def parse(cls, spec: "str | Color | tuple[int, ...]") -> "Color":
        """
        Build a color from a CSS-style string, an 8-bit tuple, or a Color.

        Args:
            spec: ``"#ff8800"``, ``"teal"``, ``"rgb(1, 2, 3)"``, ``(255, 0, 0)`` ...

        Raises:
            ValueError: If Pillow cannot parse the string
        """
        if isinstance(spec, Color):
            return spec
        channels = ImageColor.getrgb(spec) if isinstance(spec, str) else tuple(spec)
        alpha = channels[3] if len(channels) == 4 else 255
        red, green, blue = channels[:3]
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    @classmethod
    def random(cls, rng: random.Random | None = None) -> "Color":
        rng = rng or random.Random()
        return cls(rng.random(), rng.random(), rng.random())

    def interp(self, other: "Color", progress: float) -> "Color":
        if progress <= 0.0:
            return self
        if progress >= 1.0:
            return other
        return Color(
            lerp(self.red, other.red, progress),
            lerp(self.green, other.green, progress),
            lerp(self.blue, other.blue, progress),
            lerp(self.alpha, other.alpha, progress),
        )

    def to_rgba8(self, opacity: float = 1.0) -> tuple[int, int, int, int]:
        """Convert to an 8-bit RGBA tuple for Pillow, folding in ``opacity``."""
        return (
            round(clamp_unit(self.red) * 255),
            round(clamp_unit(self.green) * 255),
            round(clamp_unit(self.blue) * 255),
            round(clamp_unit(self.alpha * opacity) * 255),
        )


class BlendMode(Enum):
    """How an animation's value combines with the attribute's baseline."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    MULTIPLICATIVE = "multiplicative"

    def resolve(self, baseline: Any, value: Any) -> Any:
        """
        Compute the end value an animation moves toward.

        Args:
            baseline: Attribute value captured when the animation began
            value: The requested target, delta, or factor

        Returns:
            The absolute end value of the animation
        """
        if self is BlendMode.ABSOLUTE:
            return value
        if self is BlendMode.RELATIVE:
            return baseline.offset(value)
        return baseline.scale_by(value)

    def supports(self, value_type: type) -> bool:
        """Check whether values of ``value_type`` can be blended this way."""
        if self is BlendMode.ABSOLUTE:
            return True
        method = "offset" if self is BlendMode.RELATIVE else "scale_by"
        return hasattr(value_type, method)
