"""Demo moving, scaling and recoloring each kind of shape."""

from typing import TYPE_CHECKING

from ..engine.bounds import Direction
from ..engine.easing import EaseType
from .base_scene import BaseScene

if TYPE_CHECKING:
    from ..engine.scene import Scene


class ShapesScene(BaseScene):
    """Circle, rectangle and line moving through a choreographed sequence."""

    description = "Move, scale, rotate and recolor basic shapes"

    def construct(self, scene: "Scene") -> None:
        dot = scene.circle().with_position(-4.0, 0.0).with_radius(1.0).with_color("#ff006e").make()
        box = (
            scene.rectangle()
            .with_position(0.0, 0.0)
            .with_size(2.0, 1.5)
            .with_color("#8338ec")
            .with_thick_stroke()
            .make()
        )
        rule = scene.line().from_points(-6.0, -3.0, 6.0, -3.0).with_stroke_color("#ffbe0b").make()

        scene.play(rule.show_creation(), dot.show_creation(), box.show_creation())
        scene.play(dot.shift(2.0, 1.5), box.rotate(1.57)).rate_func(EaseType.CUBIC)
        scene.play(dot.scale(1.5), box.resize(1.5, 0.75)).run_time(0.75)
        scene.play(box.set_fill_color("#3a86ff"), dot.fade(-0.5))
        scene.wait_for(0.5)
        scene.play(dot.move_to(-2.0, 5.5), box.move_off(Direction.RIGHT)).rate_func(
            EaseType.QUAD_IN
        )
