"""CLI interface for vecmotion."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .animation_pipeline import encode_animation
from .constants import DEFAULT_FPS, DEFAULT_PIXEL_HEIGHT, DEFAULT_PIXEL_WIDTH
from .engine.render_context import RenderContext
from .output import output_path_for_format, resolve_output_provider, supported_output_formats
from .scenes import DEFAULT_SCENE_NAME, SCENE_TYPES, create_scene, supported_scene_names
from .scenes.base_scene import BaseScene

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""


def main(
    scene: str = typer.Argument(
        DEFAULT_SCENE_NAME,
        help=f"Demo scene to render ({', '.join(supported_scene_names())})",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Output file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    fps: int = typer.Option(
        DEFAULT_FPS,
        "--fps",
        envvar="VECMOTION_FPS",
        help="Frames per second for the animation",
    ),
    duration: float | None = typer.Option(
        None,
        "--duration",
        envvar="VECMOTION_DURATION",
        help="Seconds to render (defaults to the end of the last animation)",
    ),
    width: int = typer.Option(DEFAULT_PIXEL_WIDTH, "--width", help="Frame width in pixels"),
    height: int = typer.Option(DEFAULT_PIXEL_HEIGHT, "--height", help="Frame height in pixels"),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to generate",
    ),
    light: bool = typer.Option(False, "--light", help="Render on a light background"),
    list_scenes: bool = typer.Option(False, "--list", help="List available scenes and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Render a scripted demo scene to an animated GIF or WebP.

    Examples:
      # Render the default scene
      vecmotion

      # Render the morph demo as WebP at 60 fps
      vecmotion morph --output morph.webp --fps 60
    """
    _configure_logging(verbose)
    try:
        if list_scenes:
            _print_scenes()
            return

        if fps <= 0:
            raise CLIError("--fps must be a positive integer")
        if duration is not None and duration < 0:
            raise CLIError("--duration cannot be negative")

        script = _resolve_scene(scene)
        output_path = out or output_path_for_format("gif", base_name=f"{scene}-vecmotion")
        render_context = _resolve_render_context(width, height, light)
        _generate_output(script, output_path, fps, duration, max_frames, render_context)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _print_scenes() -> None:
    table = Table(title="Available scenes")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description")
    for name, scene_class in SCENE_TYPES.items():
        table.add_row(name, scene_class.description)
    console.print(table)


def _resolve_scene(scene_name: str) -> BaseScene:
    try:
        return create_scene(scene_name)
    except ValueError as exc:
        raise CLIError(str(exc))


def _resolve_render_context(width: int, height: int, light: bool) -> RenderContext:
    preset = RenderContext.lightmode if light else RenderContext.darkmode
    try:
        return preset(width=width, height=height)
    except ValueError as exc:
        raise CLIError(str(exc))


def _generate_output(
    script: BaseScene,
    output_path: str,
    fps: int,
    duration: float | None,
    max_frames: int | None,
    render_context: RenderContext,
) -> None:
    """Render the scene and write it in the format chosen by the file extension."""
    try:
        provider = resolve_output_provider(output_path)
    except ValueError as exc:
        raise CLIError(str(exc))

    ext = Path(output_path).suffix[1:].upper()
    # Warn about GIF FPS limitation
    if ext == "GIF" and fps > 50:
        console.print(
            f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
            f"(GIF delay will be {1000 // fps}ms, but browsers clamp delays < 20ms to ~100ms)"
        )

    console.print(f"[bold blue]Generating {ext} animation...[/bold blue]")
    try:
        encoded = encode_animation(
            script,
            output_path,
            fps=fps,
            duration=duration,
            max_frames=max_frames,
            render_context=render_context,
            provider=provider,
        )
        console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
        provider.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to write '{output_path}': {e}")

    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
