"""Renderer for drawing scene frames using Pillow."""

from PIL import Image, ImageDraw

from .render_context import RenderContext
from .scene import Scene


class Renderer:
    """Renders scene state as PIL Images."""

    def __init__(self, scene: Scene, render_context: RenderContext):
        """
        Initialize renderer.

        Args:
            scene: The scene to render
            render_context: Canvas size and theming
        """
        self.scene = scene
        self.context = render_context

    def render_frame(self) -> Image.Image:
        """
        Render the current scene state as an image.

        Returns:
            Palette image of the current frame
        """
        img = Image.new("RGB", (self.context.width, self.context.height), self.context.background_color)
        # RGBA ink on an RGB image blends each shape over what is already drawn
        draw = ImageDraw.Draw(img, "RGBA")
        self.scene.draw(draw, self.context.transform_for(self.scene.bounds.rect))
        return img.convert("P", palette=Image.Palette.ADAPTIVE)
