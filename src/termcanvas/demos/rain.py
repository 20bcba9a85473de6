"""Raindrops falling in random columns and colors, one task per drop."""

from __future__ import annotations

import logging
import random
import time
from typing import TextIO

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.core.constants import BULLET
from termcanvas.core.style import Style
from termcanvas.demos import finish
from termcanvas.tasks import ShutdownCoordinator
from termcanvas.terminal import Terminal


class Raindrop:
    """One call drops a single raindrop from the top row and splashes it."""

    def __init__(self, canvas: Canvas, fps: int | None = None) -> None:
        if canvas.width < 4 or canvas.height < 3:
            raise ValueError("rain needs a canvas of at least 4x3")
        self.canvas = canvas
        self.fps = fps if fps is not None else 15 + random.randrange(20)

    def _sleep(self) -> None:
        time.sleep(1 / self.fps)

    def _draw(self, x: int, y: int, color: Color, style: Style, text: str) -> None:
        self.canvas.write_at_safe(x, y, color, Color.DEFAULT, style, text)
        self.canvas.flush_safe()

    def __call__(self) -> None:
        height = self.canvas.height
        x = 2 + random.randrange(self.canvas.width - 3)
        color = Color.random()

        for y in range(height - 1):
            self._draw(x, y, color, Style.NORMAL, BULLET)
            self._sleep()
            if y == height - 2:
                # Linger on the ground row
                self._sleep()
            self._draw(x, y, Color.DEFAULT, Style.HIDDEN, BULLET)

        self._splash(x - 1, height - 3, color, ". .")
        self._splash(x - 2, height - 2, color, ".   .")

    def _splash(self, x: int, y: int, color: Color, text: str) -> None:
        self._draw(x, y, color, Style.NORMAL, text)
        self._sleep()
        self._draw(x, y, Color.DEFAULT, Style.HIDDEN, text)


def run(
    width: int = 40,
    height: int = 15,
    drops: int = 4,
    *,
    duration: float | None = None,
    fps: int | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Animate until Ctrl+C, or for ``duration`` seconds."""
    canvas = Canvas(width, height, Color.DEFAULT, logger=logger, stream=stream)
    with Terminal.session(stream):
        canvas.move(min(10, width - 1), height - 1)
        canvas.set_foreground(Color.WHITE)
        canvas.write("Press Ctrl+C to quit")
        canvas.flush()

        coordinator = ShutdownCoordinator()
        for i in range(drops):
            coordinator.spawn(Raindrop(canvas, fps), name=f"drop-{i}")
        coordinator.run_until_interrupted(duration)

        finish(canvas)
