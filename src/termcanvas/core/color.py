"""Color representation for 256-color terminals."""

from __future__ import annotations

import random as _random
import re
from dataclasses import dataclass
from typing import ClassVar

from termcanvas.core import palette
from termcanvas.core.constants import BG_CHANNEL, COLORS_16, FG_CHANNEL


@dataclass(frozen=True)
class Color:
    """
    A color request for a 256-color terminal.

    Either an explicit palette index, an RGB value that is quantized to
    the closest palette entry, or the terminal's own default color.
    When ``rgb`` is set it takes precedence over ``index``; ``is_default``
    overrides both.
    """
    index: int = 0
    rgb: tuple[int, int, int] | None = None
    is_default: bool = False

    # Standard 16 colors (index 0-15)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    LIGHT_GRAY: ClassVar["Color"]
    DARK_GRAY: ClassVar["Color"]
    LIGHT_RED: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_MAGENTA: ClassVar["Color"]
    LIGHT_CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    # Terminal default (emits a reset, not an index)
    DEFAULT: ClassVar["Color"]

    def __post_init__(self) -> None:
        # Drop fields that are overridden so equality follows meaning
        if self.is_default:
            object.__setattr__(self, "index", 0)
            object.__setattr__(self, "rgb", None)
        elif self.rgb is not None:
            object.__setattr__(self, "index", 0)
            object.__setattr__(self, "rgb", tuple(self.rgb))

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(index=index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(rgb=(r, g, b))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a Color from ``#RRGGBB`` or ``#RGB``."""
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = text[0] * 2 + text[1] * 2 + text[2] * 2
        if len(text) != 6:
            raise ValueError(f"Cannot parse hex color: {value!r}")
        try:
            r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Cannot parse hex color: {value!r}") from None
        return cls.from_rgb(r, g, b)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a color string.

        Accepts:
            - "default"
            - Named colors: "red", "light_blue", ... (see COLORS_16)
            - Palette indices: "0" .. "255"
            - Hex colors: "#FF00FF", "FF00FF", "#F0F"
            - RGB tuples: "255,0,255" or "255 0 255"
        """
        value = text.strip().lower()
        if value == "default":
            return cls.DEFAULT
        if value in COLORS_16:
            return cls(index=COLORS_16[value])
        if value.isdigit():
            return cls.from_256(int(value))
        match = re.fullmatch(r"(\d+)[,\s]+(\d+)[,\s]+(\d+)", value)
        if match:
            return cls.from_rgb(*(int(g) for g in match.groups()))
        return cls.from_hex(value)

    @classmethod
    def random(cls) -> "Color":
        """A uniformly chosen palette index (never the default color)."""
        return cls(index=_random.randrange(256))

    def resolve(self) -> int | None:
        """Palette index for this color, or None for the terminal default."""
        if self.is_default:
            return None
        if self.rgb is not None:
            return palette.nearest_index(self.rgb)
        return self.index

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return _sgr(FG_CHANNEL, self.resolve())

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return _sgr(BG_CHANNEL, self.resolve())


def _sgr(channel: str, index: int | None) -> str:
    if index is None:
        return f"{channel}9"
    return f"{channel}8;5;{index}"


def resolve(color: Color) -> int | None:
    """Module-level alias of :meth:`Color.resolve`."""
    return color.resolve()


# Initialize class-level color constants
Color.BLACK = Color(index=0)
Color.RED = Color(index=1)
Color.GREEN = Color(index=2)
Color.YELLOW = Color(index=3)
Color.BLUE = Color(index=4)
Color.MAGENTA = Color(index=5)
Color.CYAN = Color(index=6)
Color.LIGHT_GRAY = Color(index=7)
Color.DARK_GRAY = Color(index=8)
Color.LIGHT_RED = Color(index=9)
Color.LIGHT_GREEN = Color(index=10)
Color.LIGHT_YELLOW = Color(index=11)
Color.LIGHT_BLUE = Color(index=12)
Color.LIGHT_MAGENTA = Color(index=13)
Color.LIGHT_CYAN = Color(index=14)
Color.WHITE = Color(index=15)
Color.DEFAULT = Color(is_default=True)
