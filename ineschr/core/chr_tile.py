"""
iNES CHR Tile Decoding

NES CHR tile decoding shared by the sprite sheet assembler, RomReader and
the dump tool.

Each tile is 16 bytes: 8 bytes for plane 0 (low bit), then 8 bytes for
plane 1 (high bit). Byte r of each plane holds pixel row r, most
significant bit first (leftmost pixel).
"""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidTileLengthError, MisalignedGraphicsError
from .rom_utils import BYTES_PER_TILE, TILE_SIZE

PixelRows = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Tile:
    """A decoded 8x8 tile of 2-bit palette indices."""

    data: bytes
    pixels: PixelRows

    def pixel(self, x: int, y: int) -> int:
        """Palette index of the pixel at column x, row y."""
        return self.pixels[y][x]

    def to_list(self) -> list[list[int]]:
        """Pixel rows as nested lists."""
        return [list(row) for row in self.pixels]

    def to_array(self) -> np.ndarray:
        """Pixel rows as an 8x8 uint8 array."""
        return np.array(self.pixels, dtype=np.uint8)

    def histogram(self) -> tuple[int, int, int, int]:
        """Number of pixels using each palette index 0-3."""
        counts = [0, 0, 0, 0]
        for row in self.pixels:
            for value in row:
                counts[value] += 1
        return (counts[0], counts[1], counts[2], counts[3])

    @property
    def is_blank(self) -> bool:
        """True if every pixel is index 0."""
        return not any(self.data)


def decode_tile(tile_data: bytes) -> Tile:
    """
    Decode a single 8x8 NES CHR tile into 2-bit pixel values.

    NES tiles use two bitplanes to encode 4-color (2-bit) pixel data.

    Args:
        tile_data: Exactly 16 bytes of CHR data

    Returns:
        Tile whose pixels are 8 rows of 8 values (0-3)

    Raises:
        InvalidTileLengthError: If tile_data is not exactly 16 bytes
    """
    if len(tile_data) != BYTES_PER_TILE:
        raise InvalidTileLengthError(len(tile_data))

    # Extract the two bitplanes
    plane0 = tile_data[0:8]  # Low bit plane
    plane1 = tile_data[8:16]  # High bit plane

    # Decode pixel by pixel
    pixels = []
    for row in range(TILE_SIZE):
        row_pixels = []
        for col in range(TILE_SIZE):
            # Extract bit from each plane (MSB first, left to right)
            shift = 7 - col
            low_bit = (plane0[row] >> shift) & 1
            high_bit = (plane1[row] >> shift) & 1

            # Combine into 2-bit value (0-3)
            row_pixels.append((high_bit << 1) | low_bit)
        pixels.append(tuple(row_pixels))

    return Tile(data=bytes(tile_data), pixels=tuple(pixels))


def decode_tiles(chr_data: bytes) -> np.ndarray:
    """
    Decode every tile in a block of CHR data at once.

    Produces the same pixel values as decode_tile, tile by tile, in source
    order.

    Args:
        chr_data: CHR data whose length is a multiple of 16

    Returns:
        uint8 array of shape (num_tiles, 8, 8)

    Raises:
        MisalignedGraphicsError: If the length is not a multiple of 16
    """
    if len(chr_data) % BYTES_PER_TILE:
        raise MisalignedGraphicsError(len(chr_data))

    raw = np.frombuffer(bytes(chr_data), dtype=np.uint8)
    # (tile, plane, row) -> bits expand the last axis into 8 columns, MSB first
    planes = np.unpackbits(raw.reshape(-1, 2, TILE_SIZE, 1), axis=3)
    return (planes[:, 1] << 1) | planes[:, 0]
