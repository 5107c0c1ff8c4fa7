"""
iNES CHR - Color Palettes

Shared 4-color palettes for mapping decoded 2-bit tile pixels to colors,
plus palette validation and parsing used by the dump tool.
"""

from typing import Any, Sequence

from .errors import PaletteSizeError
from .rom_utils import PALETTE_SIZE

# Type alias for RGB color
RGBColor = tuple[int, int, int]

# A palette is any 4-entry sequence; entry 0 is the background by convention
Palette = Sequence[Any]

GRAYSCALE_PALETTE: list[RGBColor] = [
    (0x00, 0x00, 0x00),
    (0x55, 0x55, 0x55),
    (0xAA, 0xAA, 0xAA),
    (0xFF, 0xFF, 0xFF),
]

# Super Mario Bros. sprite colors: black background, red, skin, green
CLASSIC_MARIO_PALETTE: list[RGBColor] = [
    (0, 0, 0),
    (189, 8, 8),
    (217, 167, 57),
    (126, 153, 83),
]

PALETTES: dict[str, list[RGBColor]] = {
    "grayscale": GRAYSCALE_PALETTE,
    "classic_mario": CLASSIC_MARIO_PALETTE,
}

DEFAULT_PALETTE = "grayscale"


def validate_palette(palette: Palette) -> None:
    """
    Check that a palette has exactly one color per 2-bit pixel value.

    Raises:
        PaletteSizeError: If the palette does not have exactly 4 entries
    """
    if len(palette) != PALETTE_SIZE:
        raise PaletteSizeError(len(palette))


def parse_color(hex_color: str) -> RGBColor:
    """
    Parse "#RRGGBB" (or "RRGGBB") into an RGB tuple.

    Raises:
        ValueError: If the string is not 6 hex digits
    """
    hex_color = hex_color.strip().lstrip("#")
    if len(hex_color) != 6:
        raise ValueError(f"Invalid color '{hex_color}', expected #RRGGBB")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return (r, g, b)


def parse_palette(text: str) -> list[RGBColor]:
    """
    Parse a palette name or a comma-separated list of 4 hex colors.

    Example:
        >>> parse_palette("#000000,#555555,#AAAAAA,#FFFFFF")[3]
        (255, 255, 255)

    Raises:
        PaletteSizeError: If the list does not hold exactly 4 colors
        ValueError: If a color is malformed
    """
    if text in PALETTES:
        return list(PALETTES[text])
    colors = [parse_color(part) for part in text.split(",") if part.strip()]
    validate_palette(colors)
    return colors


def format_color(color: RGBColor) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)
