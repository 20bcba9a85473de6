"""Shared constants for escape-sequence output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Relative cursor motion opcodes (CSI n <op>)
CURSOR_UP = "A"
CURSOR_DOWN = "B"
CURSOR_FORWARD = "C"
CURSOR_BACK = "D"

# Cursor visibility (applied immediately, never buffered)
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"

# SGR channel prefixes: 3x = foreground, 4x = background
FG_CHANNEL = "3"
BG_CHANNEL = "4"

# Blank cell
BLANK = " "

# Drawing glyphs used by the demos and image painter
BULLET = "•"
UPPER_HALF = "▀"   # FG = top pixel, BG = bottom pixel

# Standard 16-color names mapped to palette indices
COLORS_16 = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "light_gray": 7,
    "dark_gray": 8,
    "light_red": 9,
    "light_green": 10,
    "light_yellow": 11,
    "light_blue": 12,
    "light_magenta": 13,
    "light_cyan": 14,
    "white": 15,
}
