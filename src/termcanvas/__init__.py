"""
termcanvas: draw on a 256-color terminal in-line

A fixed-size grid of character cells over the terminal. Drawing calls
emit only the escape sequences needed to get from the cached cursor,
color and style state to the requested one, and several threads can
share one canvas through the ``*_safe`` variants.

Quick Start:
    >>> from termcanvas import Canvas, Color, Style
    >>> canvas = Canvas(20, 5, Color.BLUE)
    >>> canvas.write_at(2, 1, Color.WHITE, Color.BLUE, Style.BOLD, "hello")
    >>> canvas.flush()

Features:
    - Cached cursor/color/style with minimal escape-sequence output
    - 256-color palette with nearest-color RGB quantization
    - Thread-safe drawing variants and a cooperative shutdown protocol
    - Terminal session handling (cursor visibility, echo)
    - Half-block image drawing (with Pillow)
"""

__version__ = "0.1.0"

# Core types
from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color, resolve
from termcanvas.core.style import Style

# Errors
from termcanvas.errors import CanvasError, OutOfBoundsError, TruncatedError

# Concurrency
from termcanvas.tasks import ShutdownCoordinator, TaskHandle

# Terminal modes
from termcanvas.terminal import Terminal

__all__ = [
    # Version
    "__version__",
    # Core types
    "Canvas",
    "Color",
    "Style",
    "resolve",
    # Errors
    "CanvasError",
    "OutOfBoundsError",
    "TruncatedError",
    # Concurrency
    "ShutdownCoordinator",
    "TaskHandle",
    # Terminal
    "Terminal",
]
