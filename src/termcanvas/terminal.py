"""Process-wide terminal modes: cursor visibility and input echo."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from termcanvas.core.constants import HIDE_CURSOR, SHOW_CURSOR


@dataclass(frozen=True)
class TerminalSize:
    """Rows and columns available to a canvas."""
    rows: int
    cols: int


class Terminal:
    """Immediate (unbuffered) terminal mode switches."""

    @staticmethod
    def size(fallback: TerminalSize = TerminalSize(24, 80)) -> TerminalSize:
        """Rows and columns of the controlling terminal, or ``fallback``."""
        try:
            cols, rows = os.get_terminal_size()
        except OSError:
            return fallback
        return TerminalSize(rows, cols)

    @staticmethod
    def hide_cursor(stream: TextIO | None = None) -> None:
        """Hide the cursor."""
        out = stream or sys.stdout
        out.write(HIDE_CURSOR)
        out.flush()

    @staticmethod
    def show_cursor(stream: TextIO | None = None) -> None:
        """Show the cursor."""
        out = stream or sys.stdout
        out.write(SHOW_CURSOR)
        out.flush()

    @staticmethod
    def disable_echo() -> None:
        """Stop the terminal from echoing typed keys (Unix only)."""
        _set_echo(False)

    @staticmethod
    def enable_echo() -> None:
        """Restore echoing of typed keys (Unix only)."""
        _set_echo(True)

    @staticmethod
    @contextmanager
    def session(stream: TextIO | None = None) -> Iterator[None]:
        """Hidden cursor and no echo for the duration of the block."""
        Terminal.hide_cursor(stream)
        Terminal.disable_echo()
        try:
            yield
        finally:
            Terminal.enable_echo()
            Terminal.show_cursor(stream)


def _set_echo(enabled: bool) -> None:
    # Failures are ignored: stdin may not be a tty, or termios may be absent.
    try:
        import termios
    except ImportError:
        return
    try:
        fd = sys.stdin.fileno()
        attrs = termios.tcgetattr(fd)
        if enabled:
            attrs[3] |= termios.ECHO
        else:
            attrs[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
    except (termios.error, OSError, ValueError):
        pass
