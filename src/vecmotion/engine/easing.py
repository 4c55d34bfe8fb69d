"""Easing curves mapping linear time progress to animation progress."""

import math
from enum import Enum
from typing import Callable

from .attributes import clamp_unit


def _in_out(ease_in: Callable[[float], float]) -> Callable[[float], float]:
    """Mirror an ease-in curve into a symmetric ease-in-out curve."""

    def curve(t: float) -> float:
        if t < 0.5:
            return ease_in(2 * t) / 2
        return 1 - ease_in(2 - 2 * t) / 2

    return curve


def _out(ease_in: Callable[[float], float]) -> Callable[[float], float]:
    return lambda t: 1 - ease_in(1 - t)


def _sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def _expo_in(t: float) -> float:
    return 0.0 if t == 0 else 2 ** (10 * t - 10)


def _circ_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


_EASE_IN: dict[str, Callable[[float], float]] = {
    "QUAD": lambda t: t**2,
    "CUBIC": lambda t: t**3,
    "QUART": lambda t: t**4,
    "QUINT": lambda t: t**5,
    "SINE": _sine_in,
    "EXPO": _expo_in,
    "CIRC": _circ_in,
}


class EaseType(Enum):
    """Monotonic easing curves available to animations."""

    LINEAR = "linear"
    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD = "quad"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC = "cubic"
    QUART_IN = "quart_in"
    QUART_OUT = "quart_out"
    QUART = "quart"
    QUINT_IN = "quint_in"
    QUINT_OUT = "quint_out"
    QUINT = "quint"
    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE = "sine"
    EXPO_IN = "expo_in"
    EXPO_OUT = "expo_out"
    EXPO = "expo"
    CIRC_IN = "circ_in"
    CIRC_OUT = "circ_out"
    CIRC = "circ"

    def calculate(self, t: float) -> float:
        """
        Map linear progress to eased progress.

        Args:
            t: Linear progress; values outside [0, 1] are clamped

        Returns:
            Eased progress in [0, 1], exactly 0 at t=0 and 1 at t=1
        """
        t = clamp_unit(t)
        if t == 0.0 or t == 1.0:
            return t
        return clamp_unit(_CURVES[self](t))


def _build_curves() -> dict[EaseType, Callable[[float], float]]:
    curves: dict[EaseType, Callable[[float], float]] = {EaseType.LINEAR: lambda t: t}
    for family, ease_in in _EASE_IN.items():
        curves[EaseType[f"{family}_IN"]] = ease_in
        curves[EaseType[f"{family}_OUT"]] = _out(ease_in)
        curves[EaseType[family]] = _in_out(ease_in)
    return curves


_CURVES = _build_curves()
