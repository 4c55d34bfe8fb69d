"""GIF output."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    output_format = "GIF"

    @property
    def save_options(self) -> dict[str, object]:
        # Frames are full redraws, so each one replaces the last.
        return {"optimize": False, "disposal": 2}
