"""Shared animation orchestration used by the CLI."""

import logging

from .engine.animator import Animator
from .engine.bounds import Rect
from .engine.raster_animation import generate_raster_frames
from .engine.render_context import RenderContext
from .output import resolve_output_provider
from .output.base import OutputProvider
from .scenes.base_scene import BaseScene

logger = logging.getLogger(__name__)


def encode_animation(
    script: BaseScene,
    output_path: str,
    *,
    fps: int,
    duration: float | None = None,
    max_frames: int | None = None,
    render_context: RenderContext | None = None,
    viewport: Rect | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Render ``script`` and encode the frames for the given output path."""
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(script, fps=fps, duration=duration, viewport=viewport)
    logger.info(
        "Rendering %s at %d fps with seed %d", script.__class__.__name__, fps, animator.seed
    )
    frames = generate_raster_frames(animator, max_frames, render_context=render_context)
    return target_provider.encode(frames, frame_duration=animator.frame_duration)
