"""Core drawing engine: colors, styles and the terminal canvas."""

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.core.style import Style

__all__ = ["Canvas", "Color", "Style"]
