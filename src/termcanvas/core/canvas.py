"""Canvas - fixed-size grid of character cells drawn in-line on a terminal."""

from __future__ import annotations

import logging
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, TextIO

from termcanvas.core.color import Color
from termcanvas.core.constants import (
    BLANK,
    CSI,
    CURSOR_BACK,
    CURSOR_DOWN,
    CURSOR_FORWARD,
    CURSOR_UP,
    RESET,
)
from termcanvas.core.style import STYLE_CODES, Style
from termcanvas.errors import OutOfBoundsError, TruncatedError


class Canvas:
    """
    A painting canvas on a terminal that supports 256 colors.

    The canvas is rendered in-line, starting at the terminal cursor
    position at construction time. Cursor position, colors and style are
    cached so every drawing call emits only the escape sequences needed
    to move from the cached state to the requested one. Output is
    buffered until :meth:`flush`.

    Every drawing method has a ``*_safe`` counterpart guarded by the
    canvas lock. Use those when several threads share one canvas; the
    plain methods offer no isolation and are meant for single-threaded,
    high-throughput drawing.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color.DEFAULT,
        *,
        cursor_on_end: bool = False,
        logger: logging.Logger | None = None,
        stream: TextIO | None = None,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"canvas {name} must be an int, got {value!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self.background = background
        # Move the cursor to (width-1, height-1) on flush so a shell
        # prompt lands after the canvas on abrupt termination.
        self.cursor_on_end = cursor_on_end
        self.logger = logger
        self._stream = stream if stream is not None else sys.stdout

        self._buf: list[str] = []
        self._lock = threading.RLock()
        self._x = 0
        self._y = 0
        self._fg: Color | None = None
        self._bg: Color | None = None
        self._style: Style | None = None

        self._prefill()

    def _prefill(self) -> None:
        """Paint the blank block the canvas occupies and home the cursor."""
        self.set_style(Style.NORMAL)
        self.set_background(self.background)
        for row in range(self._height):
            self._emit(BLANK * self._width)
            if row < self._height - 1:
                # Keep [width, terminal width) free of the canvas background
                self.set_background(Color.DEFAULT)
                self._emit("\n")
                self.set_background(self.background)
        # The only time x is out of range: forces the first move to emit.
        self._x, self._y = self._width, self._height - 1
        self.move(0, 0)
        self._debug("canvas %dx%d created", self._width, self._height)
        self.flush()

    # Properties

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cursor(self) -> tuple[int, int]:
        """Cached cursor position."""
        return self._x, self._y

    @property
    def current_foreground(self) -> Color | None:
        return self._fg

    @property
    def current_background(self) -> Color | None:
        return self._bg

    @property
    def current_style(self) -> Style | None:
        return self._style

    @property
    def pending(self) -> str:
        """Output buffered since the last flush."""
        return "".join(self._buf)

    # Drawing API

    def move(self, x: int, y: int) -> None:
        """
        Move the cursor to (x, y) using relative motion.

        Emits nothing when the cursor is already there.

        Raises:
            OutOfBoundsError: If (x, y) is outside the canvas. The cursor
                is left where it was.
        """
        if x == self._x and y == self._y:
            return
        if not (0 <= x < self._width and 0 <= y < self._height):
            err = OutOfBoundsError(x, y, self._width, self._height)
            self._error("%s", err)
            raise err
        self._motion(self._x, x, CURSOR_FORWARD, CURSOR_BACK)
        self._motion(self._y, y, CURSOR_DOWN, CURSOR_UP)
        self._x, self._y = x, y

    def _motion(self, current: int, target: int, forward: str, backward: str) -> None:
        if current < target:
            self._emit(f"{CSI}{target - current}{forward}")
        elif current > target:
            self._emit(f"{CSI}{current - target}{backward}")

    def write(self, text: str) -> int:
        """
        Write text at the cursor without wrapping.

        Text running past the right edge is cut to the remaining columns
        (on character boundaries) and reported as truncated. The cursor
        advances by the characters written but never past the last
        column.

        Returns:
            Number of characters actually written.
        """
        remaining = self._width - self._x
        if len(text) > remaining:
            self._error("%s", TruncatedError(text, remaining))
            text = text[:remaining]
        if not text:
            return 0
        self._emit(text)
        self._x += len(text)
        if self._x >= self._width:
            self.move(self._width - 1, self._y)
        return len(text)

    def set(self, x: int, y: int, char: str) -> None:
        """Put a single character at (x, y); dropped if out of bounds."""
        if len(char) != 1:
            raise ValueError(f"set() takes exactly one character, got {char!r}")
        try:
            self.move(x, y)
        except OutOfBoundsError:
            return
        self.write(char)

    def write_at(
        self,
        x: int,
        y: int,
        foreground: Color,
        background: Color,
        style: Style,
        text: str,
    ) -> int:
        """
        Move, apply style and colors, then write text.

        Nothing is applied when (x, y) is out of bounds.

        Returns:
            Number of characters written.
        """
        try:
            self.move(x, y)
        except OutOfBoundsError:
            return 0
        self.set_style(style)
        self.set_foreground(foreground)
        self.set_background(background)
        return self.write(text)

    def set_foreground(self, color: Color) -> None:
        if color == self._fg:
            return
        self._emit(f"{CSI}{color.to_sgr_fg()}m")
        self._fg = color

    def set_background(self, color: Color) -> None:
        if color == self._bg:
            return
        self._emit(f"{CSI}{color.to_sgr_bg()}m")
        self._bg = color

    def set_style(self, style: Style) -> None:
        """
        Apply a style bitmask.

        ``Style.NORMAL`` emits a full reset first. A reset also returns
        the terminal to its default colors, so the color cache follows.
        """
        style = Style(style)
        if style == self._style:
            return
        if style & Style.NORMAL:
            self._emit(RESET)
            self._fg = Color.DEFAULT
            self._bg = Color.DEFAULT
        for flag, code in STYLE_CODES:
            if style & flag:
                self._emit(f"{CSI}{code}m")
        self._style = style

    def clear(self) -> None:
        """Blank every cell with the current background and style."""
        self.move(0, 0)
        for row in range(self._height):
            self.write(BLANK * self._width)
            if row < self._height - 1:
                self.move(0, row + 1)
        self.move(0, 0)

    def flush(self) -> None:
        """Write the pending output to the stream in one call."""
        if self.cursor_on_end:
            self.move(self._width - 1, self._height - 1)
        if not self._buf:
            return
        data = "".join(self._buf)
        self._stream.write(data)
        self._stream.flush()
        self._buf.clear()

    # Thread-safe variants

    @contextmanager
    def locked(self) -> Iterator["Canvas"]:
        """Hold the canvas lock across a custom sequence of calls."""
        with self._lock:
            yield self

    def move_safe(self, x: int, y: int) -> None:
        with self._lock:
            self.move(x, y)

    def write_safe(self, text: str) -> int:
        with self._lock:
            return self.write(text)

    def set_safe(self, x: int, y: int, char: str) -> None:
        with self._lock:
            self.set(x, y, char)

    def write_at_safe(
        self,
        x: int,
        y: int,
        foreground: Color,
        background: Color,
        style: Style,
        text: str,
    ) -> int:
        with self._lock:
            return self.write_at(x, y, foreground, background, style, text)

    def set_foreground_safe(self, color: Color) -> None:
        with self._lock:
            self.set_foreground(color)

    def set_background_safe(self, color: Color) -> None:
        with self._lock:
            self.set_background(color)

    def set_style_safe(self, style: Style) -> None:
        with self._lock:
            self.set_style(style)

    def clear_safe(self) -> None:
        with self._lock:
            self.clear()

    def flush_safe(self) -> None:
        with self._lock:
            self.flush()

    # Diagnostics

    def _emit(self, fragment: str) -> None:
        self._buf.append(fragment)

    def _error(self, msg: str, *args: object) -> None:
        if self.logger is not None:
            self.logger.error(msg, *args)

    def _debug(self, msg: str, *args: object) -> None:
        if self.logger is not None:
            self.logger.debug(msg, *args)
