"""Base classes for animation output formats."""

import logging
from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image

logger = logging.getLogger(__name__)


class OutputProvider(ABC):
    """Encodes rendered frames and writes the result to ``path``."""

    def __init__(self, path: str = "", loop: int = 0):
        """
        Initialize the provider.

        Args:
            path: Path to the output file
            loop: Number of times the animation repeats; 0 loops forever
        """
        self.path = path
        self.loop = loop

    @abstractmethod
    def encode(self, frames: Iterable[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Rendered frames in playback order
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        if not self.path:
            raise ValueError("Output path not set")
        Path(self.path).write_bytes(data)


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Animated image formats Pillow can save with ``save_all``."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (``GIF`` or ``WEBP``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        return {}

    def encode(self, frames: Iterable[Image.Image], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            logger.warning("No frames rendered; nothing to encode")
            return b""

        logger.debug("Encoding %d frames as %s", len(frame_list), self.output_format)
        buffer = BytesIO()
        first, *rest = frame_list
        first.save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=rest,
            duration=frame_duration,
            loop=self.loop,
            **self.save_options,
        )
        return buffer.getvalue()
