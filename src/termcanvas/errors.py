"""Exceptions raised or reported by the canvas."""

from __future__ import annotations


class CanvasError(Exception):
    """Base class for canvas errors."""


class OutOfBoundsError(CanvasError, IndexError):
    """A coordinate lies outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"out of bounds: ({x},{y}) on {width}x{height} canvas")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class TruncatedError(CanvasError):
    """
    Text was longer than the columns left on the row.

    Never raised by the drawing API; reported to the diagnostic sink.
    """

    def __init__(self, text: str, written: int) -> None:
        super().__init__(f"string truncated to {written} characters: {text!r}")
        self.text = text
        self.written = written
