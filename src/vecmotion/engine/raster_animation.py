"""Raster (Pillow) animation frame generators built on top of Animator timelines."""

from typing import Iterator

from PIL import Image

from .animator import Animator
from .render_context import RenderContext
from .renderer import Renderer


def generate_raster_frames(
    animator: Animator,
    max_frames: int | None = None,
    render_context: RenderContext | None = None,
) -> Iterator[Image.Image]:
    """Render raster frame payloads from an animator timeline."""
    context = render_context or RenderContext.darkmode()
    renderer: Renderer | None = None
    for scene, _elapsed_ms in animator.iter_state_timeline(max_frames=max_frames):
        if renderer is None:
            renderer = Renderer(scene, context)
        yield renderer.render_frame()
