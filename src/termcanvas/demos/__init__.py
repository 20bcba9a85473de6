"""Animations that exercise the canvas from concurrent drawing tasks."""

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color


def finish(canvas: Canvas) -> None:
    """Blank the canvas and park the cursor at its origin.

    Call only after every drawing task has acknowledged stop; the
    unguarded calls assume a single owner.
    """
    canvas.set_background(Color.DEFAULT)
    canvas.clear()
    canvas.move(0, 0)
    canvas.flush()


__all__ = ["finish"]
