"""Sweep the canvas background through all 256 palette colors."""

from __future__ import annotations

import logging
import time
from typing import TextIO

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.demos import finish
from termcanvas.terminal import Terminal


def run(
    width: int = 40,
    height: int = 10,
    *,
    delay: float = 0.01,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> None:
    canvas = Canvas(width, height, Color.DEFAULT, logger=logger, stream=stream)
    with Terminal.session(stream):
        try:
            for index in range(256):
                canvas.set_background(Color.from_256(index))
                canvas.clear()
                canvas.flush()
                time.sleep(delay)
        except KeyboardInterrupt:
            pass
        finish(canvas)
