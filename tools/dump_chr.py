#!/usr/bin/env python3
"""
iNES CHR Dumper

Prints the iNES header of a ROM, previews its CHR tiles as text, and
optionally exports the decoded sprite sheet as JSON.
"""

import argparse
import sys
from pathlib import Path

from ineschr.core import (
    EmptyGraphicsError,
    RomReader,
    SpriteSheet,
    apply_palette,
    parse_palette,
    require_chr_rom,
)
from ineschr.core.palettes import format_color
from ineschr.formats import compact_json as json
from ineschr.formats.hex_utils import format_hex_row, format_tile_grid


def parse_tile_range(text: str, num_tiles: int) -> range:
    """
    Parse "START" or "START:END" (hex with $/0x prefix, or decimal).

    END is exclusive and clamped to the number of tiles.
    """

    def parse_index(value: str) -> int:
        value = value.strip()
        if value.startswith("$"):
            return int(value[1:], 16)
        return int(value, 0)

    if ":" in text:
        start_str, end_str = text.split(":", 1)
        start = parse_index(start_str) if start_str else 0
        end = parse_index(end_str) if end_str else num_tiles
    else:
        start = parse_index(text)
        end = start + 1

    return range(max(start, 0), min(end, num_tiles))


def sheet_to_json(rom: RomReader, sheet: SpriteSheet, palette=None) -> dict:
    """Build the JSON document for a sprite sheet."""
    colored = apply_palette(sheet, palette) if palette is not None else None

    tiles = []
    for index, tile in enumerate(sheet):
        entry = {
            "index": index,
            "hex": format_hex_row(tile.data),
            "pixels": tile.to_list(),
            "histogram": list(tile.histogram()),
        }
        if colored is not None:
            entry["colors"] = [[format_color(c) for c in row] for row in colored[index]]
        tiles.append(entry)

    document = {
        "rom": rom.path.name if rom.path else None,
        "header": {
            "format": rom.header.format.value,
            "prg_banks": rom.header.prg_banks,
            "chr_banks": rom.header.chr_banks,
            "mapper": rom.header.mapper,
            "mirroring": rom.header.mirroring.value,
            "battery": rom.header.has_battery,
            "trainer": rom.header.has_trainer,
        },
        "num_tiles": sheet.num_tiles,
        "tiles": tiles,
    }
    if palette is not None:
        document["palette"] = [format_color(c) for c in palette]
    return document


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Dump iNES header and CHR tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s game.nes
  %(prog)s game.nes --preview 0:32
  %(prog)s game.nes --json tiles.json --palette classic_mario
  %(prog)s game.nes --json tiles.json --palette "#000000,#FF0000,#00FF00,#0000FF"
""",
    )
    parser.add_argument("rom", help="Path to iNES ROM file")
    parser.add_argument("--preview", metavar="RANGE", help="Print tiles START[:END] as text")
    parser.add_argument("--columns", type=int, default=8, help="Tiles per preview row (default: 8)")
    parser.add_argument("--json", metavar="PATH", help="Write decoded tiles to a JSON file")
    parser.add_argument(
        "--palette",
        help="Palette name or 4 comma-separated #RRGGBB colors for JSON export",
    )
    args = parser.parse_args(argv)

    try:
        print(f"Loading ROM: {args.rom}")
        rom = RomReader(args.rom)
        for line in rom.summary():
            print(f"  {line}")

        try:
            require_chr_rom(rom.header)
        except EmptyGraphicsError as e:
            print(f"\n{e}")
            return 0

        sheet = rom.sprite_sheet()
        print(f"\nTiles: {sheet.num_tiles} ({sheet.num_pattern_tables} pattern tables)")

        if args.preview:
            tile_range = parse_tile_range(args.preview, sheet.num_tiles)
            print(f"\nTiles ${tile_range.start:03X}-${max(tile_range.stop - 1, tile_range.start):03X}:")
            for line in format_tile_grid([sheet[i] for i in tile_range], columns=args.columns):
                print(line)

        if args.json:
            palette = parse_palette(args.palette) if args.palette else None
            output_path = Path(args.json)
            with open(output_path, "w") as f:
                json.dump(sheet_to_json(rom, sheet, palette), f)
            print(f"\nSaved: {output_path} ({sheet.num_tiles} tiles)")
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
