"""Viewport rectangle and the edge queries derived from it."""

from dataclasses import dataclass
from enum import Enum

from .attributes import Point, Position


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world units, y pointing up."""

    left: float
    right: float
    bottom: float
    top: float

    def __post_init__(self) -> None:
        if self.right <= self.left or self.top <= self.bottom:
            raise ValueError(f"Rect must have positive width and height, got {self}")

    @classmethod
    def from_w_h(cls, width: float, height: float) -> "Rect":
        """Rectangle of the given size centered on the origin."""
        return cls(-width / 2, width / 2, -height / 2, height / 2)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Bounds:
    """Edges of the current viewport, rebuilt by the scene every frame."""

    def __init__(self, rect: Rect):
        self.rect = rect

    def edge_upper(self) -> float:
        return self.rect.top

    def edge_lower(self) -> float:
        return self.rect.bottom

    def edge_left(self) -> float:
        return self.rect.left

    def edge_right(self) -> float:
        return self.rect.right

    def clamp(self, point: Point) -> Position:
        """Closest point inside the viewport."""
        return Position(
            min(max(point.x, self.rect.left), self.rect.right),
            min(max(point.y, self.rect.bottom), self.rect.top),
        )

    def get_edge(self, point: Point, direction: Direction) -> Position:
        """
        Clamp ``point`` into the viewport, then snap it to the edge faced by ``direction``.

        Args:
            point: Starting point, possibly outside the viewport
            direction: Edge to snap to

        Returns:
            The point on that edge, keeping the other coordinate
        """
        clamped = self.clamp(point)
        if direction is Direction.UP:
            return Position(clamped.x, self.edge_upper())
        if direction is Direction.DOWN:
            return Position(clamped.x, self.edge_lower())
        if direction is Direction.LEFT:
            return Position(self.edge_left(), clamped.y)
        return Position(self.edge_right(), clamped.y)
