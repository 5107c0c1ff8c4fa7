"""
iNES CHR - Sprite Sheet Assembly

Slices CHR data into consecutive 16-byte tiles and decodes them into an
ordered, immutable SpriteSheet. Tile i always comes from bytes
[i*16, i*16+16), matching PPU pattern table numbering.

Palette mapping is kept separate from decoding so a sheet can be
re-colored without decoding it again.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from .chr_tile import Tile, decode_tile, decode_tiles
from .errors import MisalignedGraphicsError
from .palettes import Palette, validate_palette
from .rom_utils import BYTES_PER_TILE, TILE_SIZE, TILES_PER_PATTERN_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpriteSheet:
    """Ordered, immutable collection of decoded CHR tiles."""

    tiles: tuple[Tile, ...] = ()

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    @property
    def num_tiles(self) -> int:
        return len(self.tiles)

    @property
    def num_pattern_tables(self) -> int:
        """Number of 4KB pattern tables (256 tiles each), rounded up."""
        return -(-len(self.tiles) // TILES_PER_PATTERN_TABLE)

    def pattern_table(self, table: int) -> tuple[Tile, ...]:
        """
        Get the 256 tiles of one 4KB pattern table.

        Args:
            table: Pattern table number (0 = first 4KB of CHR, 1 = second, ...)

        Raises:
            IndexError: If the sheet has no such pattern table
        """
        if table < 0 or table >= self.num_pattern_tables:
            raise IndexError(f"Pattern table {table} out of range (0-{self.num_pattern_tables - 1})")
        start = table * TILES_PER_PATTERN_TABLE
        return self.tiles[start : start + TILES_PER_PATTERN_TABLE]

    def to_array(self) -> np.ndarray:
        """Pixel indices of every tile as a (num_tiles, 8, 8) uint8 array."""
        if not self.tiles:
            return np.zeros((0, TILE_SIZE, TILE_SIZE), dtype=np.uint8)
        return np.array([tile.pixels for tile in self.tiles], dtype=np.uint8)


def iter_tiles(chr_data: bytes) -> Iterator[Tile]:
    """
    Lazily decode tiles from CHR data in ascending offset order.

    Raises:
        MisalignedGraphicsError: If the length is not a multiple of 16
            (raised before any tile is produced)
    """
    if len(chr_data) % BYTES_PER_TILE:
        raise MisalignedGraphicsError(len(chr_data))
    for offset in range(0, len(chr_data), BYTES_PER_TILE):
        yield decode_tile(chr_data[offset : offset + BYTES_PER_TILE])


def assemble_sprite_sheet(chr_data: bytes) -> SpriteSheet:
    """
    Decode a CHR region into a SpriteSheet.

    Args:
        chr_data: CHR ROM bytes (may be empty for CHR RAM cartridges)

    Returns:
        SpriteSheet with len(chr_data) // 16 tiles; empty for empty input

    Raises:
        MisalignedGraphicsError: If the length is not a multiple of 16
    """
    chr_data = bytes(chr_data)
    pixels = decode_tiles(chr_data)

    tiles = []
    for index, tile_pixels in enumerate(pixels):
        offset = index * BYTES_PER_TILE
        rows = tuple(tuple(int(v) for v in row) for row in tile_pixels)
        tiles.append(Tile(data=chr_data[offset : offset + BYTES_PER_TILE], pixels=rows))

    logger.debug("Assembled sprite sheet: %d tiles from %d bytes", len(tiles), len(chr_data))
    return SpriteSheet(tiles=tuple(tiles))


def apply_palette(sheet: SpriteSheet, palette: Palette) -> list[list[list[Any]]]:
    """
    Map every tile's pixel indices through a 4-color palette.

    Args:
        sheet: Decoded sprite sheet
        palette: Exactly 4 colors; entry n is used for pixel value n

    Returns:
        One 8x8 color buffer per tile, in sheet order

    Raises:
        PaletteSizeError: If the palette does not have exactly 4 entries
    """
    validate_palette(palette)
    colors = list(palette)
    return [[[colors[value] for value in row] for row in tile.pixels] for tile in sheet.tiles]


def apply_palette_array(sheet: SpriteSheet, palette: Palette) -> np.ndarray:
    """
    Vectorised palette mapping.

    Args:
        sheet: Decoded sprite sheet
        palette: Exactly 4 colors, each a scalar or an equal-length tuple

    Returns:
        Array of shape (num_tiles, 8, 8) plus the color's own shape,
        e.g. (num_tiles, 8, 8, 3) for RGB tuples

    Raises:
        PaletteSizeError: If the palette does not have exactly 4 entries
    """
    validate_palette(palette)
    lookup = np.asarray(palette)
    return lookup[sheet.to_array()]
