"""Tests for output providers."""

from io import BytesIO

import pytest
from PIL import Image

from vecmotion.output import (
    GifOutputProvider,
    WebPOutputProvider,
    output_path_for_format,
    resolve_output_provider,
    supported_output_formats,
)


def create_test_frames(count: int = 3) -> list[Image.Image]:
    """Create a few small solid-color frames."""
    return [
        Image.new("RGB", (10, 10), (i * 40, 100, 200)).convert("P", palette=Image.Palette.ADAPTIVE)
        for i in range(count)
    ]


def test_gif_provider_encodes_animation():
    """GifOutputProvider should encode frames as an animated GIF."""
    provider = GifOutputProvider()

    result = provider.encode(iter(create_test_frames()), frame_duration=100)

    assert result.startswith(b"GIF89a")
    with Image.open(BytesIO(result)) as decoded:
        assert decoded.n_frames == 3


def test_webp_provider_encodes_animation():
    """WebPOutputProvider should encode frames as an animated WebP."""
    provider = WebPOutputProvider()

    result = provider.encode(iter(create_test_frames()), frame_duration=100)

    assert result[:4] == b"RIFF"
    assert result[8:12] == b"WEBP"


@pytest.mark.parametrize("provider_class", [GifOutputProvider, WebPOutputProvider])
def test_providers_handle_empty_frames(provider_class):
    """Encoding no frames should produce no bytes."""
    assert provider_class().encode(iter([]), frame_duration=100) == b""


def test_write_requires_path():
    """write should refuse to run without an output path."""
    with pytest.raises(ValueError, match="Output path not set"):
        GifOutputProvider().write(b"data")


def test_write_saves_bytes(tmp_path):
    """write should store the encoded bytes at the provider path."""
    target = tmp_path / "out.gif"
    provider = resolve_output_provider(str(target))

    provider.write(b"GIF89a")

    assert target.read_bytes() == b"GIF89a"


def test_resolve_providers_by_extension():
    """resolve_output_provider should pick providers case-insensitively."""
    assert isinstance(resolve_output_provider("output.gif"), GifOutputProvider)
    assert isinstance(resolve_output_provider("output.WEBP"), WebPOutputProvider)


def test_resolve_unsupported_format():
    """resolve_output_provider should raise ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.mp4")


def test_output_path_for_format():
    """Format names should map to file names with the right extension."""
    assert supported_output_formats() == ("gif", "webp")
    assert output_path_for_format("webp", base_name="demo") == "demo.webp"
    with pytest.raises(ValueError, match="Invalid format"):
        output_path_for_format("svg")
