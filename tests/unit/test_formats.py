"""Unit tests for hex/text formatting and the compact JSON writer."""

import io
import json

import pytest

from ineschr.core.chr_tile import decode_tile
from ineschr.formats import compact_json
from ineschr.formats.hex_utils import (
    format_hex_row,
    format_tile_grid,
    format_tile_rows,
    parse_hex_row,
    parse_hex_tile,
)


class TestHexRows:
    def test_parse(self):
        assert parse_hex_row("01 02 A3 FF") == [1, 2, 163, 255]

    def test_format(self):
        assert format_hex_row([1, 2, 163, 255]) == "01 02 A3 FF"

    def test_format_bytes(self):
        assert format_hex_row(b"\x00\x7e") == "00 7E"


class TestParseHexTile:
    def test_spaced(self):
        data = parse_hex_tile("FF 00 00 00 00 00 00 00  00 00 00 00 00 00 00 00")
        assert data == bytes([0xFF] + [0] * 15)

    def test_decodes(self):
        tile = decode_tile(parse_hex_tile("80" + "00" * 15))
        assert tile.pixel(0, 0) == 1


class TestTileText:
    def test_digits(self, smiley_tile):
        rows = format_tile_rows(decode_tile(smiley_tile))
        assert rows[0] == "33333333"
        assert rows[2] == "00100100"
        assert rows[7] == "22222222"

    def test_glyphs(self, smiley_tile):
        rows = format_tile_rows(decode_tile(smiley_tile), " .+#")
        assert rows[0] == "########"
        assert rows[2] == "  .  .  "

    def test_bad_glyphs(self, smiley_tile):
        with pytest.raises(ValueError):
            format_tile_rows(decode_tile(smiley_tile), "ab")

    def test_grid(self, smiley_tile):
        tiles = [decode_tile(smiley_tile)] * 3
        lines = format_tile_grid(tiles, columns=2, glyphs=None)
        assert len(lines) == 16
        assert lines[0] == "33333333 33333333"
        assert lines[8] == "33333333"


class TestCompactJson:
    def test_numeric_rows_inline(self):
        text = compact_json.dumps({"pixels": [[0, 1, 2, 3], [3, 2, 1, 0]]})
        assert "[0, 1, 2, 3]" in text
        assert "[3, 2, 1, 0]" in text

    def test_parses_back(self):
        doc = {"name": "tile", "tiles": [{"index": 0, "pixels": [[1, 2], [3, 0]]}], "empty": [], "flag": True}
        assert json.loads(compact_json.dumps(doc)) == doc

    def test_tuples_written_as_lists(self):
        assert json.loads(compact_json.dumps({"color": (1, 2, 3)})) == {"color": [1, 2, 3]}

    def test_dump_to_stream(self):
        buf = io.StringIO()
        compact_json.dump({"a": [1, 2]}, buf)
        assert json.loads(buf.getvalue()) == {"a": [1, 2]}
