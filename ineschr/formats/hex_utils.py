"""
iNES CHR - Hex and Text Utilities

Parsing and formatting helpers for hex tile strings and text previews of
decoded tiles, used by the dump tool and tests.
"""

from typing import Sequence

from ..core.chr_tile import Tile

# Glyphs for text previews, indexed by pixel value
PREVIEW_GLYPHS = " .+#"


def parse_hex_row(row_str: str) -> list[int]:
    """
    Parse space-separated hex string to list of integers.

    Example:
        >>> parse_hex_row("01 02 A3 FF")
        [1, 2, 163, 255]
    """
    return [int(x, 16) for x in row_str.split()]


def format_hex_row(row: Sequence[int]) -> str:
    """
    Format integers (or bytes) as a space-separated hex string.

    Example:
        >>> format_hex_row([1, 2, 163, 255])
        '01 02 A3 FF'
    """
    return " ".join(f"{b:02X}" for b in row)


def parse_hex_tile(tile_str: str) -> bytes:
    """
    Parse a hex tile string such as "FF 00 00 ..." into raw bytes.

    Whitespace is ignored. The length is not checked here; decode_tile
    rejects anything but 16 bytes.
    """
    return bytes.fromhex("".join(tile_str.split()))


def format_tile_rows(tile: Tile, glyphs: str | None = None) -> list[str]:
    """
    Render a tile as 8 lines of text.

    Args:
        tile: Decoded tile
        glyphs: 4 characters to use for pixel values 0-3. When omitted,
            the digits 0-3 are used.

    Returns:
        One string of 8 characters per pixel row

    Example:
        >>> from ineschr.core.chr_tile import decode_tile
        >>> format_tile_rows(decode_tile(bytes([0xF0] + [0] * 15)))[0]
        '11110000'
    """
    if glyphs is None:
        return ["".join(str(value) for value in row) for row in tile.pixels]
    if len(glyphs) != 4:
        raise ValueError(f"Need exactly 4 preview glyphs, got {len(glyphs)}")
    return ["".join(glyphs[value] for value in row) for row in tile.pixels]


def format_tile_grid(tiles: Sequence[Tile], columns: int = 8, glyphs: str | None = PREVIEW_GLYPHS) -> list[str]:
    """
    Lay out several tiles side by side as text, `columns` tiles per band.

    Tiles in a band are separated by a single space.
    """
    lines = []
    for start in range(0, len(tiles), columns):
        band = [format_tile_rows(tile, glyphs) for tile in tiles[start : start + columns]]
        for row in range(8):
            lines.append(" ".join(rows[row] for rows in band))
    return lines
