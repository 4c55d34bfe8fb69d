"""Tests for Animator and raster frame generation."""

import pytest

from vecmotion.engine.animator import Animator
from vecmotion.engine.raster_animation import generate_raster_frames
from vecmotion.engine.render_context import RenderContext
from vecmotion.engine.store import AttributeKind
from vecmotion.scenes import MorphScene, RevealScene, ShapesScene

SMALL_CANVAS = RenderContext(width=64, height=36)


def test_generate_frames_returns_images():
    """Raster adapter should return an iterator of PIL Images."""
    animator = Animator(ShapesScene(), fps=10, duration=0.5)

    frames = list(generate_raster_frames(animator, render_context=SMALL_CANVAS))

    assert len(frames) == 6
    assert all(frame.size == (64, 36) for frame in frames)


def test_max_frames_limits_output():
    """max_frames should cap the number of rendered frames."""
    animator = Animator(ShapesScene(), fps=10, duration=2.0)

    frames = list(generate_raster_frames(animator, max_frames=3, render_context=SMALL_CANVAS))

    assert len(frames) == 3


def test_timeline_reports_elapsed_milliseconds():
    """Each yielded frame should carry its scene time in milliseconds."""
    animator = Animator(ShapesScene(), fps=4, duration=1.0)

    elapsed = [elapsed_ms for _scene, elapsed_ms in animator.iter_state_timeline()]

    assert elapsed == [0, 250, 500, 750, 1000]
    assert animator.frame_duration == 250


def test_default_duration_covers_every_animation():
    """Without a duration the timeline should run past the last animation."""
    animator = Animator(MorphScene(), fps=10)

    timeline = list(animator.iter_state_timeline())
    scene, last_ms = timeline[-1]

    assert last_ms / 1000 >= scene.timeline.end_time()
    assert scene.timeline.is_idle()


def test_same_script_is_deterministic():
    """Two animators for the same script should place random dots identically."""

    def dot_positions() -> list:
        animator = Animator(RevealScene(), fps=10)
        scene, _elapsed = next(animator.iter_state_timeline())
        return list(scene.store.table(AttributeKind.POSITION).values())

    assert dot_positions() == dot_positions()


def test_explicit_seed_overrides_seed_factory():
    """A seed argument should bypass the seed factory."""
    animator = Animator(ShapesScene(), fps=10, seed=42, seed_factory=lambda script, fps: 0)

    assert animator.seed == 42


def test_rejects_non_positive_fps():
    """fps must be positive."""
    with pytest.raises(ValueError, match="fps must be positive"):
        Animator(ShapesScene(), fps=0)
