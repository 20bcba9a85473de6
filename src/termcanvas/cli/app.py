"""Typer CLI application: demos, image drawing and color lookup."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from termcanvas.core import palette


class Demo(str, Enum):
    sine = "sine"
    rain = "rain"
    palette = "palette"


def setup_logging(log_file: Optional[Path]) -> Optional[logging.Logger]:
    """Send diagnostics to a file; stdout belongs to the canvas."""
    if log_file is None:
        return None
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger = logging.getLogger("termcanvas")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.debug("Starting...")
    return logger


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termcanvas",
        help="Draw on a 256-color terminal canvas.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def demo(
        name: Annotated[Demo, typer.Argument(help="Animation to play")],
        duration: Annotated[Optional[float], typer.Option("--duration", "-d", help="Stop after N seconds instead of Ctrl+C")] = None,
        speed: Annotated[float, typer.Option("--speed", envvar="TERMCANVAS_SPEED", help="Frame rate multiplier")] = 1.0,
        drops: Annotated[int, typer.Option("--drops", help="Number of raindrops (rain only)")] = 4,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="TERMCANVAS_LOG_FILE", help="Write diagnostics to this file")] = None,
    ) -> None:
        """Play one of the built-in animations."""
        if speed <= 0:
            console.print("[red]--speed must be positive[/]")
            raise typer.Exit(1)
        logger = setup_logging(log_file)

        if name is Demo.sine:
            from termcanvas.demos import sinewave
            sinewave.run(duration=duration, speed=speed, logger=logger)
        elif name is Demo.rain:
            from termcanvas.demos import rain
            fps = None if speed == 1.0 else max(1, int(25 * speed))
            rain.run(drops=drops, duration=duration, fps=fps, logger=logger)
        else:
            from termcanvas.demos import palette as palette_demo
            palette_demo.run(delay=0.01 / speed, logger=logger)

    @app.command()
    def image(
        path: Annotated[Path, typer.Argument(help="Image file to draw", exists=True, dir_okay=False)],
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Canvas width (default: terminal width)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", help="Canvas height in rows")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="TERMCANVAS_LOG_FILE", help="Write diagnostics to this file")] = None,
    ) -> None:
        """Draw an image with half blocks in 256 colors."""
        from termcanvas.core.canvas import Canvas
        from termcanvas.core.color import Color
        from termcanvas.image import draw_image
        from termcanvas.terminal import Terminal

        size = Terminal.size()
        cols = width or size.cols
        rows = height or max(1, size.rows - 1)
        logger = setup_logging(log_file)

        try:
            canvas = Canvas(cols, rows, cursor_on_end=True, logger=logger)
            draw_image(canvas, path)
        except (ImportError, OSError, ValueError) as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        canvas.set_foreground(Color.DEFAULT)
        canvas.set_background(Color.DEFAULT)
        canvas.flush()

    @app.command()
    def resolve(
        color: Annotated[str, typer.Argument(help="Name, index, #hex or r,g,b")],
    ) -> None:
        """Show which palette entry a color resolves to."""
        from termcanvas.core.color import Color

        try:
            parsed = Color.parse(color)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        index = parsed.resolve()
        if index is None:
            console.print("[bold]default[/] (terminal default color)")
            return
        r, g, b = palette.to_rgb(index)
        console.print(
            f"[on color({index})]    [/] [bold]{index}[/]  #{r:02x}{g:02x}{b:02x}  ({r}, {g}, {b})"
        )

    return app
