"""WebP output."""

from .base import PillowSequenceOutputProvider


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Lossless animated WebP, which keeps thin strokes crisp."""

    output_format = "WEBP"

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 80, "method": 4}
