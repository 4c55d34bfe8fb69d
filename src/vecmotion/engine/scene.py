"""Scene context owning the entities, the clock and the per-frame pipeline."""

import logging
import random
from typing import TYPE_CHECKING, Iterable

from PIL import ImageDraw

from ..constants import DEPTH_STEP_DIVISOR, INITIAL_EVENT_TIME, WAIT_TIME
from .attributes import Color
from .bounds import Bounds, Rect
from .pipeline import UPDATE_STAGES, FrameContext, Stage, run_stages
from .shapes import (
    DRAW_FUNCTIONS,
    CircleBuilder,
    LineBuilder,
    RectangleBuilder,
    TextBuilder,
    circle,
    line,
    rectangle,
    text,
)
from .store import AttributeStore
from .timeline import AnimBuilder, Animation, Timeline

if TYPE_CHECKING:
    from .render_context import ViewTransform

logger = logging.getLogger(__name__)


class Scene:
    """A set of animated entities and the clock that drives them."""

    def __init__(self, viewport: Rect, rng: random.Random | None = None):
        """
        Initialize an empty scene.

        Args:
            viewport: World-space rectangle visible on screen
            rng: Random source for helpers that pick colors
        """
        self.store = AttributeStore()
        self.timeline = Timeline()
        self.bounds = Bounds(viewport)
        self.rng = rng or random.Random()
        self.stages: tuple[Stage, ...] = UPDATE_STAGES
        self.event_time = INITIAL_EVENT_TIME
        self.clock_time = 0.0
        self.creation_count = 0

    def increment_counter(self) -> float:
        """
        Derive the depth of a new entity from the running creation counter.

        Every entity gets a depth (z value) once, at creation, so later
        entities occlude earlier ones.
        """
        self.creation_count += 1
        return self.creation_count / DEPTH_STEP_DIVISOR

    def circle(self) -> CircleBuilder:
        return circle(self)

    def rectangle(self) -> RectangleBuilder:
        return rectangle(self)

    def line(self) -> LineBuilder:
        return line(self)

    def text(self) -> TextBuilder:
        return text(self)

    def add_circle(self, x: float, y: float) -> None:
        """Drop a small randomly colored circle revealed at the current clock time."""
        handle = (
            self.circle()
            .with_position(x, y)
            .with_radius(0.2)
            .with_color(Color.random(self.rng))
            .make()
        )
        self.play(handle.show_creation()).start_time(self.clock_time).run_time(0.1)

    def queue(self, animation: Animation) -> None:
        """Add an animation to the timeline; its initial value is applied by the pipeline."""
        self.timeline.add(animation)

    def play(self, *animations: "Animation | Iterable[Animation]") -> AnimBuilder:
        """Queue a batch of animations at the scheduling cursor."""
        return AnimBuilder(self, animations)

    def wait(self) -> None:
        self.event_time += WAIT_TIME

    def wait_for(self, time: float) -> None:
        self.event_time += time

    def update(self, now: float, viewport: Rect | None = None) -> None:
        """
        Advance every animation to ``now`` and rebuild derived state.

        Args:
            now: Scene time in seconds; moving backward rewinds animations
            viewport: New visible rectangle, if it changed
        """
        self.bounds = Bounds(viewport or self.bounds.rect)
        if now < self.clock_time:
            logger.debug("Clock moved back from %.3f to %.3f", self.clock_time, now)
            self.timeline.rewind(now, self.store)

        context = FrameContext(self.store, self.timeline, now, self.bounds)
        run_stages(context, self.stages)
        self.clock_time = now

    def draw(self, draw: ImageDraw.ImageDraw, transform: "ViewTransform") -> None:
        """Draw every entity back to front; reads state only."""
        for entity in self.store.entities_by_depth():
            DRAW_FUNCTIONS[self.store.shapes[entity]](self.store, entity, draw, transform)
