"""Tests for path geometry: flattening, truncation and morphing."""

import pytest

from vecmotion.engine.path import (
    Close,
    CubicTo,
    DegeneratePathError,
    LineTo,
    MoveTo,
    Path,
    merge_normalized,
)

TOLERANCE = 0.01


def square(side: float = 2.0) -> Path:
    return Path.rectangle(side, side)


def test_merge_normalized_example():
    """Breakpoints of both sequences should merge in non-decreasing order."""
    v1 = [0.0, 0.3, 0.6, 0.8, 1.0]
    v2 = [0.2, 0.5, 0.55, 0.8, 2.0]

    merged = merge_normalized(v1, v2)

    assert merged == pytest.approx([0.0, 0.1, 0.25, 0.275, 0.3, 0.4, 0.6, 0.8, 1.0])
    assert merged == sorted(merged)


def test_merge_normalized_keeps_every_distinct_breakpoint():
    """Without duplicate normalized values all breakpoints should survive."""
    merged = merge_normalized([1.0, 2.0, 4.0], [0.5, 3.0, 8.0])

    assert merged == pytest.approx([0.0625, 0.25, 0.375, 0.5, 1.0])
    assert merged == sorted(merged)


def test_builder_starts_subpath_on_first_line():
    """line_to without a current point should begin a new sub-path."""
    path = Path.builder().line_to((1.0, 0.0)).line_to((1.0, 1.0)).close().build()

    assert isinstance(path.commands[0], MoveTo)
    assert isinstance(path.commands[1], LineTo)
    assert isinstance(path.commands[-1], Close)


def test_ellipse_is_closed_cubic_outline():
    """Ellipses should be four cubic segments followed by a close."""
    path = Path.ellipse(1.0, 0.5)

    assert sum(isinstance(command, CubicTo) for command in path) == 4
    assert path.is_closed()


def test_closed_polygon_length_includes_closing_segment():
    """The edge back to the start should count toward the length."""
    assert square(2.0).approximate_length(TOLERANCE) == pytest.approx(8.0)
    assert Path.segment((0.0, 0.0), (3.0, 4.0)).approximate_length(TOLERANCE) == pytest.approx(5.0)


def test_circle_length_approximates_circumference():
    """A flattened unit circle should be close to 2*pi long."""
    assert Path.ellipse(1.0, 1.0).approximate_length(TOLERANCE) == pytest.approx(6.2832, rel=1e-2)


def test_upto_identity_at_full_ratio():
    """Ratios of one or more should return the path unchanged."""
    path = Path.ellipse(1.0, 1.0)

    assert path.upto(1.0, TOLERANCE) is path
    assert path.upto(1.5, TOLERANCE) is path


def test_upto_zero_is_empty():
    """Nothing should be drawn at zero completion."""
    assert len(square().upto(0.0, TOLERANCE)) == 0
    assert len(square().upto(-1.0, TOLERANCE)) == 0


def test_upto_length_is_proportional_and_monotonic():
    """Truncated length should grow with the ratio and match ratio * length."""
    path = Path.ellipse(1.5, 1.0)
    total = path.approximate_length(TOLERANCE)
    ratios = [0.1, 0.25, 0.5, 0.6, 0.9, 0.99]

    lengths = [path.upto(ratio, TOLERANCE).approximate_length(TOLERANCE) for ratio in ratios]

    assert lengths == sorted(lengths)
    for ratio, length in zip(ratios, lengths):
        assert length == pytest.approx(ratio * total, abs=TOLERANCE)


def test_upto_partial_segment_ends_at_crossing_point():
    """The final segment should stop exactly at the cutoff."""
    truncated = square(2.0).upto(0.375, TOLERANCE)

    # 0.375 of a perimeter of 8 is 3: one full edge and half of the next.
    end = truncated.commands[-1].to
    assert end.x == pytest.approx(1.0)
    assert end.y == pytest.approx(0.0)
    assert not truncated.is_closed()


def test_upto_keeps_close_reached_before_cutoff():
    """A close reached before the cutoff should be preserved."""
    two_squares = (
        Path.builder()
        .extend(square(2.0).commands)
        .extend(Path.segment((3.0, 0.0), (5.0, 0.0)).commands)
        .build()
    )

    truncated = two_squares.upto(0.9, TOLERANCE)

    assert truncated.is_closed()
    assert truncated.approximate_length(TOLERANCE) == pytest.approx(9.0)


def test_interp_boundaries_return_endpoints_unchanged():
    """Morphs near either end should return the original paths themselves."""
    a = Path.ellipse(1.0, 1.0)
    b = square(2.0)

    assert a.interp(b, 0.0005) is a
    assert a.interp(b, 0.9995) is b


def test_interp_midway_is_closed_and_between_shapes():
    """A half-way morph should be a closed outline between both shapes."""
    small = square(2.0)
    large = square(4.0)

    halfway = small.interp(large, 0.5)

    assert halfway.is_closed()
    xs = [point.x for polyline in halfway.flatten(TOLERANCE) for point in polyline.points]
    assert max(xs) == pytest.approx(1.5)
    assert min(xs) == pytest.approx(-1.5)


def test_interp_rejects_zero_length_paths():
    """Morphing from or to a zero-length path should raise."""
    point = Path.segment((1.0, 1.0), (1.0, 1.0))

    with pytest.raises(DegeneratePathError):
        point.interp(square(), 0.5)
    with pytest.raises(DegeneratePathError):
        Path().interp(square(), 0.5)


def test_transformed_scales_rotates_and_offsets():
    """transformed should apply scale, then rotation, then translation."""
    path = Path.segment((1.0, 0.0), (2.0, 0.0))

    moved = path.transformed(scale=(2.0, 1.0), angle=1.5707963267948966).transformed(
        offset=path.commands[0].to
    )

    start, end = moved.commands[0].to, moved.commands[1].to
    assert (start.x, start.y) == pytest.approx((1.0, 2.0))
    assert (end.x, end.y) == pytest.approx((1.0, 4.0))


def test_quadratic_curves_flatten_through_endpoints():
    """Quadratic segments should flatten into a polyline ending at the target."""
    path = Path.builder().move_to((0.0, 0.0)).quadratic_to((1.0, 2.0), (2.0, 0.0)).build()

    (polyline,) = path.flatten(TOLERANCE)

    assert len(polyline.points) > 2
    assert polyline.points[-1] == path.commands[-1].to
    assert max(point.y for point in polyline.points) == pytest.approx(1.0, abs=TOLERANCE)
