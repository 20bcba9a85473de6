"""The standard 256-color terminal palette and nearest-color lookup."""

from __future__ import annotations

from functools import lru_cache

RGB = tuple[int, int, int]

# xterm system colors (indices 0-15)
_SYSTEM: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00), (0x80, 0x00, 0x00), (0x00, 0x80, 0x00), (0x80, 0x80, 0x00),
    (0x00, 0x00, 0x80), (0x80, 0x00, 0x80), (0x00, 0x80, 0x80), (0xC0, 0xC0, 0xC0),
    (0x80, 0x80, 0x80), (0xFF, 0x00, 0x00), (0x00, 0xFF, 0x00), (0xFF, 0xFF, 0x00),
    (0x00, 0x00, 0xFF), (0xFF, 0x00, 0xFF), (0x00, 0xFF, 0xFF), (0xFF, 0xFF, 0xFF),
)

# Channel levels of the 6x6x6 color cube (indices 16-231)
CUBE_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def _build() -> tuple[RGB, ...]:
    colors = list(_SYSTEM)
    for r in CUBE_LEVELS:
        for g in CUBE_LEVELS:
            for b in CUBE_LEVELS:
                colors.append((r, g, b))
    # Grayscale ramp (indices 232-255)
    for i in range(24):
        level = 8 + 10 * i
        colors.append((level, level, level))
    return tuple(colors)


PALETTE: tuple[RGB, ...] = _build()


def distance(c1: RGB, c2: RGB) -> int:
    """Squared Euclidean distance between two RGB colors."""
    return (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2


@lru_cache(maxsize=4096)
def nearest_index(rgb: RGB) -> int:
    """
    Return the palette index closest to an RGB value.

    Ties go to the lowest index, so pure primaries resolve to the
    system colors (e.g. ``(255, 0, 0)`` is 9, not its cube twin 196).
    """
    best_index = 0
    best_distance = distance(rgb, PALETTE[0])
    for index in range(1, len(PALETTE)):
        d = distance(rgb, PALETTE[index])
        if d < best_distance:
            best_index, best_distance = index, d
            if d == 0:
                break
    return best_index


def to_rgb(index: int) -> RGB:
    """RGB value of a palette index."""
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    return PALETTE[index]
