"""Vector paths: flattening, arc length, partial extraction and morphing."""

import math
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Iterator, Sequence

from ..constants import MORPH_END_CUTOFF, MORPH_START_CUTOFF, MORPH_TOLERANCE, PATH_TOLERANCE
from .attributes import Point, clamp_unit

# Control point distance that makes four cubic arcs approximate a circle.
KAPPA = 0.5522847498


class DegeneratePathError(ValueError):
    """Raised when a path has no measurable length."""


@dataclass(frozen=True, slots=True)
class MoveTo:
    to: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    to: Point


@dataclass(frozen=True, slots=True)
class QuadTo:
    ctrl: Point
    to: Point


@dataclass(frozen=True, slots=True)
class CubicTo:
    ctrl1: Point
    ctrl2: Point
    to: Point


@dataclass(frozen=True, slots=True)
class Close:
    pass


PathCommand = MoveTo | LineTo | QuadTo | CubicTo | Close


@dataclass(frozen=True)
class Polyline:
    """A flattened sub-path."""

    points: tuple[Point, ...]
    closed: bool

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield line segments, including the closing one for closed polylines."""
        yield from zip(self.points, self.points[1:])
        if self.closed and len(self.points) > 1:
            yield self.points[-1], self.points[0]


def _as_point(value: "Point | tuple[float, float]") -> Point:
    if isinstance(value, Point):
        return Point(value.x, value.y)
    x, y = value
    return Point(float(x), float(y))


def _quadratic_steps(p0: Point, p1: Point, p2: Point, tolerance: float) -> int:
    dd = (p0 - p1 * 2 + p2).length()
    return max(1, math.ceil(math.sqrt(dd / (4 * tolerance))))


def _cubic_steps(p0: Point, p1: Point, p2: Point, p3: Point, tolerance: float) -> int:
    dd = max((p0 - p1 * 2 + p2).length(), (p1 - p2 * 2 + p3).length())
    return max(1, math.ceil(math.sqrt(3 * dd / (4 * tolerance))))


def _quadratic_at(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    mt = 1 - t
    return p0 * (mt * mt) + p1 * (2 * mt * t) + p2 * (t * t)


def _cubic_at(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    return (
        p0 * (mt * mt * mt)
        + p1 * (3 * mt * mt * t)
        + p2 * (3 * mt * t * t)
        + p3 * (t * t * t)
    )


def merge_normalized(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """
    Merge two increasing sequences after normalizing each by its last value.

    Values of ``v2`` are emitted before each value of ``v1`` they are strictly
    smaller than; ``v2`` values left over once ``v1`` is exhausted are dropped.

    Args:
        v1: Cumulative arc lengths of the first path
        v2: Cumulative arc lengths of the second path

    Returns:
        The merged breakpoints in [0, 1], non-decreasing
    """
    s1 = v1[-1]
    s2 = v2[-1]
    combined: list[float] = []
    pending = iter(v2)
    upcoming = next(pending, None)
    for value in v1:
        ratio = value / s1
        while upcoming is not None and upcoming / s2 < ratio:
            combined.append(upcoming / s2)
            upcoming = next(pending, None)
        combined.append(ratio)
    return combined


@dataclass(frozen=True)
class Path:
    """An immutable sequence of path construction commands."""

    commands: tuple[PathCommand, ...] = ()

    @staticmethod
    def builder() -> "PathBuilder":
        return PathBuilder()

    @classmethod
    def ellipse(cls, radius_x: float, radius_y: float) -> "Path":
        """Closed ellipse centered on the origin, drawn counter-clockwise from +x."""
        kx, ky = radius_x * KAPPA, radius_y * KAPPA
        return (
            cls.builder()
            .move_to((radius_x, 0.0))
            .cubic_to((radius_x, ky), (kx, radius_y), (0.0, radius_y))
            .cubic_to((-kx, radius_y), (-radius_x, ky), (-radius_x, 0.0))
            .cubic_to((-radius_x, -ky), (-kx, -radius_y), (0.0, -radius_y))
            .cubic_to((kx, -radius_y), (radius_x, -ky), (radius_x, 0.0))
            .close()
            .build()
        )

    @classmethod
    def rectangle(cls, width: float, height: float) -> "Path":
        """Closed rectangle centered on the origin."""
        half_w, half_h = width / 2, height / 2
        return (
            cls.builder()
            .move_to((-half_w, -half_h))
            .line_to((half_w, -half_h))
            .line_to((half_w, half_h))
            .line_to((-half_w, half_h))
            .close()
            .build()
        )

    @classmethod
    def segment(cls, start: "Point | tuple[float, float]", end: "Point | tuple[float, float]") -> "Path":
        return cls.builder().move_to(start).line_to(end).build()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def is_closed(self) -> bool:
        return any(isinstance(command, Close) for command in self.commands)

    def flatten(self, tolerance: float = PATH_TOLERANCE) -> list[Polyline]:
        """
        Approximate curves with straight segments.

        Args:
            tolerance: Maximum distance between a curve and its chords

        Returns:
            One polyline per sub-path, in drawing order
        """
        polylines: list[Polyline] = []
        current: list[Point] = []
        start: Point | None = None

        def finish(closed: bool) -> None:
            if current:
                polylines.append(Polyline(tuple(current), closed))

        for command in self.commands:
            if isinstance(command, MoveTo):
                finish(False)
                current = [command.to]
                start = command.to
                continue
            if isinstance(command, Close):
                finish(True)
                # Drawing after a close continues from the sub-path start.
                current = []
                continue
            if not current:
                # Drawing without a move continues from the last sub-path start.
                start = start if start is not None else command.to
                current = [start]
            cursor = current[-1]
            if isinstance(command, LineTo):
                current.append(command.to)
            elif isinstance(command, QuadTo):
                steps = _quadratic_steps(cursor, command.ctrl, command.to, tolerance)
                current.extend(
                    _quadratic_at(cursor, command.ctrl, command.to, i / steps)
                    for i in range(1, steps)
                )
                current.append(command.to)
            elif isinstance(command, CubicTo):
                steps = _cubic_steps(cursor, command.ctrl1, command.ctrl2, command.to, tolerance)
                current.extend(
                    _cubic_at(cursor, command.ctrl1, command.ctrl2, command.to, i / steps)
                    for i in range(1, steps)
                )
                current.append(command.to)
        finish(False)
        return polylines

    def segments(self, tolerance: float = PATH_TOLERANCE) -> Iterator[tuple[Point, Point]]:
        for polyline in self.flatten(tolerance):
            yield from polyline.segments()

    def approximate_length(self, tolerance: float = PATH_TOLERANCE) -> float:
        return sum(start.distance_to(end) for start, end in self.segments(tolerance))

    def cumulative_lengths(self, tolerance: float = PATH_TOLERANCE) -> list[float]:
        """Running arc length at the end of every flattened segment."""
        return list(accumulate(start.distance_to(end) for start, end in self.segments(tolerance)))

    def upto(self, ratio: float, tolerance: float = PATH_TOLERANCE) -> "Path":
        """
        Truncate the path to a fraction of its arc length.

        Args:
            ratio: Fraction of the length to keep; >= 1 keeps the path untouched
            tolerance: Flattening tolerance for measuring

        Returns:
            A flattened path ending exactly at ``ratio`` of the total length
        """
        if ratio >= 1.0:
            return self
        stop_at = max(ratio, 0.0) * self.approximate_length(tolerance)
        if stop_at <= 0.0:
            return Path()

        builder = PathBuilder()
        length = 0.0
        for polyline in self.flatten(tolerance):
            if length > stop_at:
                break
            points = polyline.points
            builder.move_to(points[0])
            for start, end in zip(points, points[1:]):
                seg_length = start.distance_to(end)
                if length + seg_length > stop_at:
                    builder.line_to(start.interp(end, (stop_at - length) / seg_length))
                    return builder.build()
                length += seg_length
                builder.line_to(end)
            if polyline.closed and len(points) > 1:
                seg_length = points[-1].distance_to(points[0])
                if length + seg_length > stop_at:
                    builder.line_to(points[-1].interp(points[0], (stop_at - length) / seg_length))
                    return builder.build()
                length += seg_length
                builder.close()
        return builder.build()

    def interp(self, other: "Path", progress: float) -> "Path":
        """
        Morph toward ``other`` by resampling both paths on shared breakpoints.

        Raises:
            DegeneratePathError: If either path has zero length
        """
        progress = clamp_unit(progress)
        if progress <= MORPH_START_CUTOFF:
            return self
        if progress >= MORPH_END_CUTOFF:
            return other

        lengths_a = self.cumulative_lengths(MORPH_TOLERANCE)
        lengths_b = other.cumulative_lengths(MORPH_TOLERANCE)
        if not lengths_a or lengths_a[-1] <= 0 or not lengths_b or lengths_b[-1] <= 0:
            raise DegeneratePathError("Cannot morph a path with zero length")

        stops = [0.0, *merge_normalized(lengths_a, lengths_b)]
        intervals = [end - start for start, end in zip(stops, stops[1:])]
        points_a = self._walk([step * lengths_a[-1] for step in intervals], MORPH_TOLERANCE)
        points_b = other._walk([step * lengths_b[-1] for step in intervals], MORPH_TOLERANCE)

        builder = PathBuilder()
        for point_a, point_b in zip(points_a, points_b):
            builder.line_to(point_a.interp(point_b, progress))
        return builder.close().build()

    def _walk(self, intervals: Sequence[float], tolerance: float) -> list[Point]:
        """Points at the path start and after each successive interval of arc length."""
        segments = list(self.segments(tolerance))
        lengths = [start.distance_to(end) for start, end in segments]
        points = [segments[0][0]]
        index = 0
        travelled = 0.0
        for target in accumulate(intervals):
            while index < len(segments) and travelled + lengths[index] < target:
                travelled += lengths[index]
                index += 1
            if index == len(segments):
                points.append(segments[-1][1])
                continue
            start, end = segments[index]
            if lengths[index] == 0:
                points.append(end)
            else:
                points.append(start.interp(end, (target - travelled) / lengths[index]))
        return points

    def transformed(
        self,
        scale: tuple[float, float] = (1.0, 1.0),
        angle: float = 0.0,
        offset: Point = Point(),
    ) -> "Path":
        """Scale, then rotate, then translate every point of the path."""

        def apply(point: Point) -> Point:
            return Point(point.x * scale[0], point.y * scale[1]).rotated(angle) + offset

        commands: list[PathCommand] = []
        for command in self.commands:
            if isinstance(command, Close):
                commands.append(command)
            elif isinstance(command, QuadTo):
                commands.append(QuadTo(apply(command.ctrl), apply(command.to)))
            elif isinstance(command, CubicTo):
                commands.append(CubicTo(apply(command.ctrl1), apply(command.ctrl2), apply(command.to)))
            else:
                commands.append(type(command)(apply(command.to)))
        return Path(tuple(commands))


class PathBuilder:
    """Fluent builder collecting path commands."""

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []
        self._open = False

    def move_to(self, to: "Point | tuple[float, float]") -> "PathBuilder":
        self._commands.append(MoveTo(_as_point(to)))
        self._open = True
        return self

    def line_to(self, to: "Point | tuple[float, float]") -> "PathBuilder":
        # Like SVG builders, drawing without a current point begins a sub-path.
        if not self._open:
            return self.move_to(to)
        self._commands.append(LineTo(_as_point(to)))
        return self

    def quadratic_to(self, ctrl: "Point | tuple[float, float]", to: "Point | tuple[float, float]") -> "PathBuilder":
        if not self._open:
            self.move_to(ctrl)
        self._commands.append(QuadTo(_as_point(ctrl), _as_point(to)))
        return self

    def cubic_to(
        self,
        ctrl1: "Point | tuple[float, float]",
        ctrl2: "Point | tuple[float, float]",
        to: "Point | tuple[float, float]",
    ) -> "PathBuilder":
        if not self._open:
            self.move_to(ctrl1)
        self._commands.append(CubicTo(_as_point(ctrl1), _as_point(ctrl2), _as_point(to)))
        return self

    def close(self) -> "PathBuilder":
        if self._open:
            self._commands.append(Close())
            self._open = False
        return self

    def extend(self, commands: Iterable[PathCommand]) -> "PathBuilder":
        for command in commands:
            if isinstance(command, MoveTo):
                self.move_to(command.to)
            elif isinstance(command, LineTo):
                self.line_to(command.to)
            elif isinstance(command, QuadTo):
                self.quadratic_to(command.ctrl, command.to)
            elif isinstance(command, CubicTo):
                self.cubic_to(command.ctrl1, command.ctrl2, command.to)
            else:
                self.close()
        return self

    def build(self) -> Path:
        return Path(tuple(self._commands))
