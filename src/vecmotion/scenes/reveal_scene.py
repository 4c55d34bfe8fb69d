"""Demo tracing outlines and typing text in."""

import random
from typing import TYPE_CHECKING

from ..engine.easing import EaseType
from .base_scene import BaseScene

if TYPE_CHECKING:
    from ..engine.scene import Scene


class RevealScene(BaseScene):
    """Title text typed in, a frame traced around it, then scattered dots."""

    description = "Trace outlines and reveal text"

    def __init__(self, dot_count: int = 8):
        self.dot_count = dot_count
        self.rng = random.Random()

    def set_rng(self, rng: random.Random) -> None:
        self.rng = rng

    def construct(self, scene: "Scene") -> None:
        title = scene.text().with_text("vecmotion").with_font_size(1.0).make()
        frame = (
            scene.rectangle()
            .with_size(7.0, 2.0)
            .with_fill_color("#1d3557")
            .with_stroke_color("#a8dadc")
            .make()
        )

        scene.play(title.show_creation()).run_time(1.5)
        scene.play(frame.show_creation()).rate_func(EaseType.QUAD_OUT)

        bounds = scene.bounds
        dots = [
            scene.circle()
            .with_position(
                self.rng.uniform(bounds.edge_left() + 1, bounds.edge_right() - 1),
                self.rng.uniform(bounds.edge_lower() + 0.5, -1.5),
            )
            .with_radius(0.25)
            .with_color("#e63946")
            .make()
            for _ in range(self.dot_count)
        ]
        scene.play(*(dot.show_creation() for dot in dots)).run_time(0.5).lag(0.1)
        scene.play(title.grow_font(0.25), frame.resize(1.1)).rate_func(EaseType.QUAD)
