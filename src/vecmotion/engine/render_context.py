"""Rendering configuration and the world-to-pixel transform."""

from dataclasses import dataclass

from ..constants import BACKGROUND_COLOR, DEFAULT_PIXEL_HEIGHT, DEFAULT_PIXEL_WIDTH
from .attributes import Point
from .bounds import Rect


@dataclass(frozen=True)
class ViewTransform:
    """Maps world coordinates inside ``rect`` onto a pixel canvas, y flipped."""

    rect: Rect
    width: int
    height: int
    tolerance_px: float = 0.25

    @property
    def pixels_per_unit(self) -> float:
        # Uniform scale keeps circles round when aspect ratios differ.
        return min(self.width / self.rect.width, self.height / self.rect.height)

    def to_pixel(self, point: Point) -> tuple[float, float]:
        center_x = (self.rect.left + self.rect.right) / 2
        center_y = (self.rect.bottom + self.rect.top) / 2
        ppu = self.pixels_per_unit
        return (
            self.width / 2 + (point.x - center_x) * ppu,
            self.height / 2 - (point.y - center_y) * ppu,
        )

    def to_pixels(self, length: float) -> float:
        return length * self.pixels_per_unit

    def to_world(self, pixels: float) -> float:
        return pixels / self.pixels_per_unit

    def flatten_tolerance(self) -> float:
        """Curve flattening tolerance in world units."""
        return self.to_world(self.tolerance_px)


@dataclass(frozen=True)
class RenderContext:
    """Canvas size, theme and drawing precision for rendered frames."""

    width: int = DEFAULT_PIXEL_WIDTH
    height: int = DEFAULT_PIXEL_HEIGHT
    background_color: tuple[int, int, int] = BACKGROUND_COLOR
    flatten_tolerance_px: float = 0.25  # Max chord error when drawing curves

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")

    @classmethod
    def darkmode(cls, width: int = DEFAULT_PIXEL_WIDTH, height: int = DEFAULT_PIXEL_HEIGHT) -> "RenderContext":
        return cls(width=width, height=height)

    @classmethod
    def lightmode(cls, width: int = DEFAULT_PIXEL_WIDTH, height: int = DEFAULT_PIXEL_HEIGHT) -> "RenderContext":
        return cls(width=width, height=height, background_color=(246, 244, 238))

    def transform_for(self, rect: Rect) -> ViewTransform:
        return ViewTransform(rect, self.width, self.height, self.flatten_tolerance_px)
