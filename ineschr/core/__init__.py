"""
Core iNES functionality.

This package contains iNES header parsing, PRG/CHR bank splitting, CHR tile
decoding, sprite sheet assembly and palette definitions.
"""

from .banks import RomRegion, require_chr_rom, split_rom, trainer_region
from .chr_tile import Tile, decode_tile, decode_tiles
from .errors import (
    BadMagicError,
    EmptyGraphicsError,
    INesError,
    InvalidTileLengthError,
    MisalignedGraphicsError,
    PaletteSizeError,
    TruncatedError,
)
from .header import INesHeader, Mirroring, RomFormat, parse_header
from .palettes import PALETTES, parse_palette, validate_palette
from .rom_reader import RomReader
from .sprite_sheet import (
    SpriteSheet,
    apply_palette,
    apply_palette_array,
    assemble_sprite_sheet,
    iter_tiles,
)

__all__ = [
    "RomReader",
    "INesHeader",
    "Mirroring",
    "RomFormat",
    "parse_header",
    "RomRegion",
    "split_rom",
    "trainer_region",
    "require_chr_rom",
    "Tile",
    "decode_tile",
    "decode_tiles",
    "SpriteSheet",
    "assemble_sprite_sheet",
    "iter_tiles",
    "apply_palette",
    "apply_palette_array",
    "PALETTES",
    "parse_palette",
    "validate_palette",
    "INesError",
    "BadMagicError",
    "TruncatedError",
    "InvalidTileLengthError",
    "MisalignedGraphicsError",
    "PaletteSizeError",
    "EmptyGraphicsError",
]
