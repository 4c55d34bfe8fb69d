"""Tests for the command line interface."""

from typer.testing import CliRunner

from vecmotion.cli import app

runner = CliRunner()

SMALL_RENDER = ["--fps", "5", "--max-frame", "3", "--width", "64", "--height", "36"]


def test_list_scenes():
    """--list should print every registered scene and exit cleanly."""
    result = runner.invoke(app, ["--list"])

    assert result.exit_code == 0
    for name in ("shapes", "morph", "reveal"):
        assert name in result.output


def test_unknown_scene_is_an_error():
    """An unknown scene name should exit with status 1."""
    result = runner.invoke(app, ["bogus"])

    assert result.exit_code == 1
    assert "Unknown scene" in result.output


def test_unsupported_output_extension_is_an_error(tmp_path):
    """Only GIF and WebP outputs are accepted."""
    result = runner.invoke(app, ["shapes", "--output", str(tmp_path / "out.mp4"), *SMALL_RENDER])

    assert result.exit_code == 1
    assert "Unsupported output format" in result.output


def test_invalid_fps_is_an_error():
    """Non-positive fps should be rejected before rendering."""
    result = runner.invoke(app, ["shapes", "--fps", "0"])

    assert result.exit_code == 1
    assert "--fps must be a positive integer" in result.output


def test_renders_gif(tmp_path):
    """Rendering a scene should write a GIF file."""
    target = tmp_path / "shapes.gif"

    result = runner.invoke(app, ["shapes", "--output", str(target), *SMALL_RENDER])

    assert result.exit_code == 0
    assert target.read_bytes().startswith(b"GIF89a")


def test_renders_webp_with_env_fps(tmp_path):
    """Options should accept environment overrides."""
    target = tmp_path / "morph.webp"

    result = runner.invoke(
        app,
        ["morph", "--output", str(target), "--max-frame", "2", "--width", "64", "--height", "36"],
        env={"VECMOTION_FPS": "8", "VECMOTION_DURATION": "1"},
    )

    assert result.exit_code == 0
    assert target.read_bytes()[8:12] == b"WEBP"


def test_renders_light_theme(tmp_path):
    """--light should still produce an animation."""
    target = tmp_path / "reveal.gif"

    result = runner.invoke(app, ["reveal", "--light", "--output", str(target), *SMALL_RENDER])

    assert result.exit_code == 0
    assert target.exists()
