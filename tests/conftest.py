"""Shared fixtures: canvases drawn onto in-memory streams."""

import io
import logging
from typing import Callable

import pytest

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color


class RecordingStream(io.StringIO):
    """StringIO that remembers each write call separately."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    def write(self, s: str) -> int:
        self.writes.append(s)
        return super().write(s)

    def reset(self) -> None:
        self.writes.clear()
        self.seek(0)
        self.truncate()


@pytest.fixture
def stream() -> RecordingStream:
    return RecordingStream()


@pytest.fixture
def diagnostics() -> logging.Logger:
    """Logger handed to canvases so caplog can see their diagnostics."""
    logger = logging.getLogger("termcanvas.test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def make_canvas(stream: RecordingStream) -> Callable[..., Canvas]:
    """Build a canvas and discard its construction output."""

    def factory(width: int = 10, height: int = 5, background: Color = Color.DEFAULT, **kwargs) -> Canvas:
        canvas = Canvas(width, height, background, stream=stream, **kwargs)
        stream.reset()
        return canvas

    return factory
