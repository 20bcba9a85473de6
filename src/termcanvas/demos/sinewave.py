"""Two sine waves travelling in opposite directions, one task each."""

from __future__ import annotations

import logging
import math
import time
from typing import TextIO

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.core.constants import BULLET
from termcanvas.demos import finish
from termcanvas.tasks import ShutdownCoordinator
from termcanvas.terminal import Terminal

AMPLITUDE = 5


class SineWave:
    """Renders one animation frame of a wave per call."""

    def __init__(
        self,
        canvas: Canvas,
        cycles: int,
        direction: int,
        fps: int,
        color: Color,
    ) -> None:
        self.canvas = canvas
        self.cycles = cycles
        self.direction = direction
        self.fps = fps
        self.color = color
        self.phase = 0.0
        self.wave_y = [0] * canvas.width

    def __call__(self) -> None:
        self.phase += 0.5
        width = self.canvas.width
        for x in range(width):
            angle = x * 2 * self.cycles * (math.pi / width) + self.phase * self.direction
            # Shift the zero line to the middle of the canvas
            self.wave_y[x] = int(AMPLITUDE * math.sin(angle)) + AMPLITUDE

        self._render(self.color)
        time.sleep(1 / self.fps)
        # Erase by redrawing in the canvas background
        self._render(self.canvas.background)

    def _render(self, color: Color) -> None:
        for x, y in enumerate(self.wave_y):
            with self.canvas.locked():
                self.canvas.set_foreground(color)
                self.canvas.set(x, y, BULLET)
        self.canvas.flush_safe()


def run(
    width: int = 60,
    height: int = 13,
    *,
    duration: float | None = None,
    speed: float = 1.0,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Animate until Ctrl+C, or for ``duration`` seconds."""
    canvas = Canvas(width, height, Color.BLACK, logger=logger, stream=stream)
    with Terminal.session(stream):
        canvas.move(min(20, width - 1), height - 1)
        canvas.set_foreground(Color.WHITE)
        canvas.write("Press Ctrl+C to quit")

        coordinator = ShutdownCoordinator()
        coordinator.spawn(
            SineWave(canvas, 1, +1, max(1, int(20 * speed)), Color.YELLOW), name="wave-yellow"
        )
        coordinator.spawn(
            SineWave(canvas, 3, -1, max(1, int(15 * speed)), Color.RED), name="wave-red"
        )
        coordinator.run_until_interrupted(duration)

        # Every task has acknowledged, so unguarded calls are safe again
        finish(canvas)
