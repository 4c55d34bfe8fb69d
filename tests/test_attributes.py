"""Tests for attribute values and blend modes."""

import pytest

from vecmotion.engine.attributes import (
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
    lerp,
)


def test_lerp_returns_exact_endpoints():
    """lerp should return the exact start and end values at 0 and 1."""
    assert lerp(0.1, 0.7, 0.0) == 0.1
    assert lerp(0.1, 0.7, 1.0) == 0.7
    assert lerp(0.0, 10.0, 0.25) == 2.5


ENDPOINT_PAIRS = [
    (Position(-1.25, 0.5), Position(3.0, -2.75)),
    (Size(0.3, 1.7), Size(2.9, 0.1)),
    (Angle(-0.7), Angle(2.2)),
    (Opacity(0.1), Opacity(0.7)),
    (PathCompletion(0.3), PathCompletion(0.9)),
    (Scale(0.1), Scale(3.3)),
    (StrokeWeight(0.02), StrokeWeight(0.13)),
    (FontSize(0.6), FontSize(1.9)),
    (Color(0.1, 0.2, 0.3, 0.4), Color(0.9, 0.7, 0.05, 1.0)),
]


@pytest.mark.parametrize("start, end", ENDPOINT_PAIRS, ids=lambda value: type(value).__name__)
@pytest.mark.parametrize("progress, expected", [(0.0, "start"), (-0.1, "start"), (1.0, "end"), (1.1, "end")])
def test_interp_returns_exact_endpoints(start, end, progress, expected):
    """Every attribute type should hit its endpoints exactly, even past the ends."""
    result = start.interp(end, progress)
    assert result == (start if expected == "start" else end)
    assert type(result) is type(start)


def test_unit_scalars_are_clamped():
    """Opacity and completion should never leave [0, 1]."""
    assert Opacity(1.4).value == 1.0
    assert Opacity(-0.2).value == 0.0
    assert PathCompletion(0.5).offset(0.75).value == 1.0


def test_scalar_interp_keeps_type():
    """Interpolating a scalar should keep its concrete attribute type."""
    mid = Angle(0.0).interp(Angle(2.0), 0.5)

    assert isinstance(mid, Angle)
    assert mid.value == pytest.approx(1.0)


def test_position_interp_and_offset():
    """Positions should interpolate per axis and accept tuple deltas."""
    start = Position(0.0, 0.0)

    assert start.interp(Position(4.0, -2.0), 0.5) == Position(2.0, -1.0)
    assert start.offset((1.0, 2.0)) == Position(1.0, 2.0)


def test_size_scale_by_factor_pair_and_number():
    """Sizes should scale by a single factor or a per-axis pair."""
    size = Size(2.0, 4.0)

    assert size.scale_by(0.5) == Size(1.0, 2.0)
    assert size.scale_by((2.0, 1.0)) == Size(4.0, 4.0)


def test_size_ratio_to_zero_size_is_undefined():
    """ratio_to should report None instead of dividing by zero."""
    assert Size(2.0, 2.0).ratio_to(Size(1.0, 4.0)) == (2.0, 0.5)
    assert Size(2.0, 2.0).ratio_to(Size(0.0, 1.0)) is None


def test_point_rotation():
    """Rotating (1, 0) by a quarter turn should give (0, 1)."""
    rotated = Point(1.0, 0.0).rotated(1.5707963267948966)

    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(1.0)


def test_color_parse_formats():
    """Colors should parse CSS strings, 8-bit tuples and existing colors."""
    red = Color.parse("#ff0000")

    assert red == Color(1.0, 0.0, 0.0, 1.0)
    assert Color.parse((0, 0, 255, 0)) == Color(0.0, 0.0, 1.0, 0.0)
    assert Color.parse(red) is red


def test_color_parse_rejects_unknown_names():
    """Unknown color names should raise ValueError."""
    with pytest.raises(ValueError):
        Color.parse("not-a-color")


def test_color_to_rgba8_folds_opacity():
    """to_rgba8 should multiply alpha by the opacity."""
    assert Color(1.0, 0.5, 0.0).to_rgba8(0.5) == (255, 128, 0, 128)


def test_blend_modes_resolve_end_values():
    """Each blend mode should combine the baseline with the value differently."""
    assert BlendMode.ABSOLUTE.resolve(Opacity(0.2), Opacity(0.9)) == Opacity(0.9)
    assert BlendMode.RELATIVE.resolve(Opacity(0.2), 0.5).value == pytest.approx(0.7)
    assert BlendMode.MULTIPLICATIVE.resolve(Scale(2.0), 1.5) == Scale(3.0)


def test_blend_mode_support_checks_value_capability():
    """Colors cannot be offset; every type can be set absolutely."""
    assert BlendMode.ABSOLUTE.supports(Color)
    assert not BlendMode.RELATIVE.supports(Color)
    assert BlendMode.MULTIPLICATIVE.supports(Size)
