"""Output providers for animated image formats."""

from dataclasses import dataclass
from pathlib import Path

from .base import OutputProvider, PillowSequenceOutputProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(
        extension=".gif",
        provider_class=GifOutputProvider,
    ),
    "webp": OutputFormatSpec(
        extension=".webp",
        provider_class=WebPOutputProvider,
    ),
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Resolve the output provider from a file extension.

    Raises:
        ValueError: If the extension is not a supported format
    """
    ext = Path(file_path).suffix.lower()
    spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if spec is None:
        supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {ext or '(none)'}. Supported formats: {supported}")
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def output_path_for_format(output_format: str, base_name: str = "output") -> str:
    """Build an output file name for a format name."""
    spec = _OUTPUT_FORMATS.get(output_format.lower())
    if spec is None:
        supported = ", ".join(supported_output_formats())
        raise ValueError(f"Invalid format. Choose from: {supported}")
    return f"{base_name}{spec.extension}"


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "PillowSequenceOutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
    "output_path_for_format",
]
