"""Animator for stepping scripted scenes through time."""

import math
from typing import TYPE_CHECKING, Callable, Iterator

from ..constants import DEFAULT_VIEWPORT_HEIGHT, DEFAULT_VIEWPORT_WIDTH
from .bounds import Rect
from .runtime import create_seeded_scene, derive_scene_seed
from .scene import Scene

if TYPE_CHECKING:
    from ..scenes.base_scene import BaseScene

# Hold the final state briefly after the last animation finishes
END_PADDING = 0.5


class Animator:
    """Generates frame timelines from scene scripts."""

    def __init__(
        self,
        script: "BaseScene",
        fps: int,
        duration: float | None = None,
        viewport: Rect | None = None,
        seed: int | None = None,
        seed_factory: Callable[["BaseScene", int], int] = derive_scene_seed,
        scene_factory: Callable[["BaseScene", Rect, int], Scene] = create_seeded_scene,
    ):
        """
        Initialize animator.

        Args:
            script: The scene script to play
            fps: Frames per second for the animation
            duration: Seconds to render; defaults to the end of the last animation
            viewport: Visible world rectangle
            seed: Optional deterministic seed for random-driven behavior
            seed_factory: Seed policy callable used when seed is not provided
            scene_factory: Runtime factory for deterministic Scene setup
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.script = script
        self.fps = fps
        self.duration = duration
        self.viewport = viewport or Rect.from_w_h(DEFAULT_VIEWPORT_WIDTH, DEFAULT_VIEWPORT_HEIGHT)
        self.scene_factory = scene_factory
        self.seed = seed if seed is not None else seed_factory(script, fps)
        self.frame_duration = 1000 // fps
        # Seconds of scene time per frame
        self.delta_time = 1.0 / fps

    def _create_scene(self) -> Scene:
        return self.scene_factory(self.script, self.viewport, self.seed)

    def total_duration(self, scene: Scene) -> float:
        if self.duration is not None:
            return self.duration
        return scene.timeline.end_time() + END_PADDING

    def iter_state_timeline(
        self, max_frames: int | None = None
    ) -> Iterator[tuple[Scene, int]]:
        """Yield the updated scene for each frame with elapsed time in milliseconds."""
        scene = self._create_scene()
        frame_count = math.floor(self.total_duration(scene) * self.fps) + 1
        if max_frames is not None:
            frame_count = min(frame_count, max_frames)
        for index in range(frame_count):
            now = index * self.delta_time
            scene.update(now)
            yield scene, round(now * 1000)
