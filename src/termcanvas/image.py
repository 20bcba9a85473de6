"""Paint images onto a canvas with half-block characters.

Each cell shows two vertically stacked pixels: an upper half block (▀)
whose foreground is the top pixel and whose background is the bottom
pixel. Pixels are quantized to the 256-color palette.

Example:
    from termcanvas import Canvas
    from termcanvas.image import draw_image

    canvas = Canvas(60, 20)
    draw_image(canvas, "logo.png")
    canvas.flush()
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

try:
    from PIL import Image, ImageEnhance, ImageFilter
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.core.constants import UPPER_HALF
from termcanvas.core.style import Style
from termcanvas.errors import OutOfBoundsError


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image drawing. "
            "Install with: pip install termcanvas[image]"
        )


def load_pixels(
    source: Union[str, Path, "Image.Image"],
    width: int,
    height: int,
    *,
    sharpen: bool = True,
    color_boost: float = 1.0,
    contrast_boost: float = 1.0,
) -> list[list[tuple[int, int, int]]]:
    """
    Load an image scaled to ``width`` x ``2 * height`` pixels.

    Aspect ratio is preserved; the result may be shorter than the
    target. Rows of RGB tuples are returned top to bottom.
    """
    _check_pil()

    img = source if isinstance(source, Image.Image) else Image.open(source)
    img = img.convert("RGB")

    max_rows = height * 2
    new_height = max(1, int(width * img.height / img.width))
    new_width = width
    if new_height > max_rows:
        new_width = max(1, int(max_rows * img.width / img.height))
        new_height = max_rows

    # Downscale with Lanczos, then restore crispness lost in the process
    img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)
    if sharpen:
        img = img.filter(ImageFilter.UnsharpMask(radius=1.0, percent=200, threshold=5))
    if color_boost != 1.0:
        img = ImageEnhance.Color(img).enhance(color_boost)
    if contrast_boost != 1.0:
        img = ImageEnhance.Contrast(img).enhance(contrast_boost)

    pixels = img.load()
    return [[pixels[x, y] for x in range(img.width)] for y in range(img.height)]


def draw_image(
    canvas: Canvas,
    source: Union[str, Path, "Image.Image"],
    x: int = 0,
    y: int = 0,
    **kwargs,
) -> None:
    """
    Paint an image onto the canvas starting at cell (x, y).

    Uses the unguarded drawing calls; wrap in ``canvas.locked()`` when
    other threads draw on the same canvas.

    Args:
        canvas: Target canvas
        source: Image path or an already opened Pillow image
        x: Left column
        y: Top row
        **kwargs: Passed to :func:`load_pixels`

    Raises:
        ImportError: If Pillow is not installed
        OutOfBoundsError: If (x, y) is outside the canvas
    """
    if not (0 <= x < canvas.width and 0 <= y < canvas.height):
        raise OutOfBoundsError(x, y, canvas.width, canvas.height)
    rows = load_pixels(source, canvas.width - x, canvas.height - y, **kwargs)

    for cell_row, pixel_row in enumerate(range(0, len(rows), 2)):
        top = rows[pixel_row]
        # An odd last pixel row is drawn over the terminal default
        bottom = rows[pixel_row + 1] if pixel_row + 1 < len(rows) else None
        for col, rgb in enumerate(top):
            fg = Color.from_rgb(*rgb)
            bg = Color.from_rgb(*bottom[col]) if bottom is not None else Color.DEFAULT
            canvas.write_at(x + col, y + cell_row, fg, bg, Style.NORMAL, UPPER_HALF)
