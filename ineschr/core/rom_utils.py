"""
iNES ROM layout constants and nibble helpers.

This module provides:
- iNES container constants (magic signature, header and trainer sizes)
- Bank size constants for PRG ROM and CHR ROM
- CHR tile geometry constants
- Nibble helpers used by the header parser

Used by the header parser, bank splitter, tile decoder and RomReader.
"""

# ============================================================================
# iNES Container Layout
# ============================================================================
INES_MAGIC = b"NES\x1a"  # "NES" followed by MS-DOS EOF
INES_HEADER_SIZE = 0x10
TRAINER_SIZE = 0x200  # 512 bytes, loaded at $7000
PRG_BANK_SIZE = 0x4000  # 16KB banks
CHR_BANK_SIZE = 0x2000  # 8KB banks

# Header byte offsets
HEADER_PRG_BANKS = 4
HEADER_CHR_BANKS = 5
HEADER_FLAGS_6 = 6
HEADER_FLAGS_7 = 7
HEADER_NES2_MAPPER_EXT = 8  # NES 2.0: mapper bits 8-11, submapper
HEADER_NES2_ROM_SIZE_MSB = 9  # NES 2.0: PRG/CHR bank count MSBs

# Flags 6
FLAG6_VERTICAL_MIRRORING = 0x01
FLAG6_BATTERY = 0x02
FLAG6_TRAINER = 0x04
FLAG6_FOUR_SCREEN = 0x08

# Flags 7
FLAG7_FORMAT_MASK = 0x0C
FLAG7_NES2 = 0x08

# Exponent-multiplier notation marker in NES 2.0 byte 9
NES2_EXPONENT_NIBBLE = 0x0F

# ============================================================================
# CHR Tile Geometry
# ============================================================================
TILE_SIZE = 8  # 8x8 pixels per tile
BYTES_PER_TILE = 16  # 16 bytes per tile (8 bytes per bitplane)
TILES_PER_PATTERN_TABLE = 256  # 4KB pattern table
PALETTE_SIZE = 4  # 2-bit pixels index a 4-entry palette


def low_nibble(value: int) -> int:
    return value & 0x0F


def high_nibble(value: int) -> int:
    return (value >> 4) & 0x0F
