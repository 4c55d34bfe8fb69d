"""Demo morphing outlines between circles, squares and stars."""

import math
from typing import TYPE_CHECKING

from ..engine.easing import EaseType
from ..engine.path import Path
from .base_scene import BaseScene

if TYPE_CHECKING:
    from ..engine.scene import Scene


def star(outer: float, inner: float, points: int = 5) -> Path:
    """Closed star outline centered on the origin."""
    builder = Path.builder()
    for index in range(points * 2):
        radius = outer if index % 2 == 0 else inner
        theta = math.pi / 2 + index * math.pi / points
        corner = (radius * math.cos(theta), radius * math.sin(theta))
        if index == 0:
            builder.move_to(corner)
        else:
            builder.line_to(corner)
    return builder.close().build()


class MorphScene(BaseScene):
    """A circle that becomes a square, then a star, then a circle again."""

    description = "Morph a circle into a square and a star"

    def construct(self, scene: "Scene") -> None:
        shape = scene.circle().with_radius(1.5).with_color("#06d6a0").make()

        scene.play(shape.fade_in()).run_time(0.5)
        scene.play(shape.morph(Path.rectangle(3.0, 3.0))).rate_func(EaseType.SINE)
        scene.wait_for(0.25)
        scene.play(shape.morph(star(2.0, 0.8)), shape.set_fill_color("#ffd166")).rate_func(
            EaseType.SINE
        )
        scene.wait_for(0.25)
        scene.play(shape.morph(Path.ellipse(1.5, 1.5)), shape.rotate(math.pi)).run_time(1.5)
