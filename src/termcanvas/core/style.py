"""Text style attributes."""

from enum import IntFlag


class Style(IntFlag):
    """
    Bitmask of SGR text attributes.

    ``NORMAL`` resets every attribute before the others are applied.
    Contradictory combinations (``BOLD | DIM``) are emitted as given.
    """
    NORMAL = 1 << 0
    BOLD = 1 << 1
    DIM = 1 << 2
    UNDERLINED = 1 << 3
    BLINK = 1 << 4
    INVERTED = 1 << 5
    HIDDEN = 1 << 6


# SGR code per attribute, in emission order
STYLE_CODES: tuple[tuple[Style, int], ...] = (
    (Style.BOLD, 1),
    (Style.DIM, 2),
    (Style.UNDERLINED, 4),
    (Style.BLINK, 5),
    (Style.INVERTED, 7),
    (Style.HIDDEN, 8),
)
