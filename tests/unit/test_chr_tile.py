"""Unit tests for CHR tile decoding."""

import numpy as np
import pytest

from ineschr.core.chr_tile import Tile, decode_tile, decode_tiles
from ineschr.core.errors import InvalidTileLengthError, MisalignedGraphicsError


class TestDecodeTile:
    """Test the bitplane combination rule."""

    def test_all_zero(self):
        tile = decode_tile(bytes(16))
        assert tile.pixels == tuple((0,) * 8 for _ in range(8))
        assert tile.is_blank

    def test_plane0_row0(self):
        tile = decode_tile(bytes([0xFF] + [0] * 15))
        assert tile.pixels[0] == (1,) * 8
        for row in tile.pixels[1:]:
            assert row == (0,) * 8

    def test_plane1_row0(self):
        tile = decode_tile(bytes([0] * 8 + [0xFF] + [0] * 7))
        assert tile.pixels[0] == (2,) * 8

    def test_both_planes(self):
        tile = decode_tile(bytes([0xFF] * 16))
        assert all(row == (3,) * 8 for row in tile.pixels)

    def test_msb_is_column_zero(self):
        tile = decode_tile(bytes([0x80] + [0] * 15))
        assert tile.pixels[0] == (1, 0, 0, 0, 0, 0, 0, 0)

    def test_lsb_is_column_seven(self):
        tile = decode_tile(bytes([0] * 8 + [0x01] + [0] * 7))
        assert tile.pixels[0] == (0, 0, 0, 0, 0, 0, 0, 2)

    def test_row_mapping(self):
        # Plane 0 byte 5 and plane 1 byte 5 both affect row 5 only
        data = bytearray(16)
        data[5] = 0xF0
        data[13] = 0x3C
        tile = decode_tile(bytes(data))
        assert tile.pixels[5] == (1, 1, 3, 3, 2, 2, 0, 0)
        assert sum(map(sum, tile.pixels)) == sum(tile.pixels[5])

    def test_smiley(self, smiley_tile):
        tile = decode_tile(smiley_tile)
        assert tile.pixels[0] == (3,) * 8
        assert tile.pixels[2] == (0, 0, 1, 0, 0, 1, 0, 0)
        assert tile.pixels[7] == (2,) * 8
        assert tile.histogram() == (46, 2, 8, 8)

    def test_keeps_source_bytes(self, smiley_tile):
        assert decode_tile(smiley_tile).data == smiley_tile

    def test_accepts_memoryview(self, smiley_tile):
        assert decode_tile(memoryview(smiley_tile)) == decode_tile(smiley_tile)

    def test_deterministic(self, smiley_tile):
        assert decode_tile(smiley_tile) == decode_tile(smiley_tile)

    @pytest.mark.parametrize("length", [0, 8, 15, 17, 32])
    def test_invalid_length(self, length):
        with pytest.raises(InvalidTileLengthError) as excinfo:
            decode_tile(bytes(length))
        assert excinfo.value.length == length


class TestTile:
    """Test Tile accessors."""

    def test_pixel_is_x_then_y(self):
        tile = decode_tile(bytes([0, 0x80] + [0] * 14))
        assert tile.pixel(0, 1) == 1
        assert tile.pixel(1, 0) == 0

    def test_to_list(self):
        tile = decode_tile(bytes([0xFF] + [0] * 15))
        rows = tile.to_list()
        assert rows[0] == [1] * 8
        assert isinstance(rows[0], list)

    def test_to_array(self, smiley_tile):
        arr = decode_tile(smiley_tile).to_array()
        assert arr.shape == (8, 8)
        assert arr.dtype == np.uint8
        assert arr[0, 0] == 3

    def test_immutable(self):
        tile = decode_tile(bytes(16))
        with pytest.raises(AttributeError):
            tile.pixels = ()
        assert isinstance(tile, Tile)


class TestDecodeTiles:
    """Test the vectorised bulk decoder against decode_tile."""

    def test_matches_decode_tile(self, smiley_tile):
        chr_data = bytes(range(256)) + smiley_tile + bytes([0xA5, 0x5A] * 8)
        bulk = decode_tiles(chr_data)

        assert bulk.shape == (18, 8, 8)
        for i in range(18):
            expected = decode_tile(chr_data[i * 16 : i * 16 + 16]).pixels
            assert tuple(tuple(int(v) for v in row) for row in bulk[i]) == expected

    def test_empty(self):
        assert decode_tiles(b"").shape == (0, 8, 8)

    def test_values_in_range(self):
        bulk = decode_tiles(bytes(range(256)) * 4)
        assert bulk.max() <= 3
        assert bulk.min() >= 0

    def test_misaligned(self):
        with pytest.raises(MisalignedGraphicsError):
            decode_tiles(bytes(17))
