"""Tests for easing curves."""

import pytest

from vecmotion.engine.easing import EaseType


@pytest.mark.parametrize("ease", list(EaseType))
def test_curves_hit_exact_endpoints(ease: EaseType):
    """Every curve should map 0 to 0 and 1 to 1 exactly."""
    assert ease.calculate(0.0) == 0.0
    assert ease.calculate(1.0) == 1.0


@pytest.mark.parametrize("ease", list(EaseType))
def test_curves_clamp_out_of_range_input(ease: EaseType):
    """Times outside [0, 1] should be clamped before easing."""
    assert ease.calculate(-0.5) == 0.0
    assert ease.calculate(1.5) == 1.0


def test_linear_and_quadratic_values():
    """Spot-check a few well known curve values."""
    assert EaseType.LINEAR.calculate(0.25) == pytest.approx(0.25)
    assert EaseType.QUAD_IN.calculate(0.5) == pytest.approx(0.25)
    assert EaseType.QUAD_OUT.calculate(0.5) == pytest.approx(0.75)
    assert EaseType.QUAD.calculate(0.5) == pytest.approx(0.5)


def test_in_out_curves_are_monotonic():
    """In-out curves should never decrease."""
    samples = [i / 50 for i in range(51)]
    for ease in (EaseType.CUBIC, EaseType.SINE, EaseType.EXPO, EaseType.CIRC):
        values = [ease.calculate(t) for t in samples]
        assert values == sorted(values)
