"""
iNES Header Parsing

Decodes the fixed 16-byte iNES header into an immutable INesHeader.
NES 2.0 headers are recognised; their extended mapper and bank count
fields are applied when they use plain bank-count notation.

Header layout:
    0-3   "NES" + $1A
    4     PRG ROM size in 16KB units
    5     CHR ROM size in 8KB units (0 = CHR RAM)
    6     Flags 6: mirroring, battery, trainer, four-screen, mapper D0-D3
    7     Flags 7: NES 2.0 identifier (bits 2-3), mapper D4-D7
    8-15  Reserved (iNES) / extended fields (NES 2.0)
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import BadMagicError, TruncatedError
from .rom_utils import (
    CHR_BANK_SIZE,
    FLAG6_BATTERY,
    FLAG6_FOUR_SCREEN,
    FLAG6_TRAINER,
    FLAG6_VERTICAL_MIRRORING,
    FLAG7_FORMAT_MASK,
    FLAG7_NES2,
    HEADER_CHR_BANKS,
    HEADER_FLAGS_6,
    HEADER_FLAGS_7,
    HEADER_NES2_MAPPER_EXT,
    HEADER_NES2_ROM_SIZE_MSB,
    HEADER_PRG_BANKS,
    INES_HEADER_SIZE,
    INES_MAGIC,
    NES2_EXPONENT_NIBBLE,
    PRG_BANK_SIZE,
    TRAINER_SIZE,
    high_nibble,
    low_nibble,
)

logger = logging.getLogger(__name__)


class Mirroring(Enum):
    """Nametable arrangement wired by the cartridge."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FOUR_SCREEN = "four-screen"


class RomFormat(Enum):
    """Header format revision."""

    INES1 = "iNES"
    NES2 = "NES 2.0"
    # NES 2.0 header whose sizes use exponent-multiplier notation; bank
    # counts fall back to the iNES-1 bytes
    NES2_PARTIAL = "NES 2.0 (partial)"


@dataclass(frozen=True)
class INesHeader:
    """Decoded iNES header."""

    prg_banks: int
    chr_banks: int
    mirroring: Mirroring
    has_battery: bool
    has_trainer: bool
    mapper: int
    format: RomFormat = RomFormat.INES1
    submapper: int = 0
    magic_valid: bool = True

    @property
    def prg_rom_size(self) -> int:
        """PRG ROM size in bytes."""
        return self.prg_banks * PRG_BANK_SIZE

    @property
    def chr_rom_size(self) -> int:
        """CHR ROM size in bytes (0 for CHR RAM cartridges)."""
        return self.chr_banks * CHR_BANK_SIZE

    @property
    def trainer_size(self) -> int:
        return TRAINER_SIZE if self.has_trainer else 0

    @property
    def data_offset(self) -> int:
        """File offset of the first PRG byte (header plus optional trainer)."""
        return INES_HEADER_SIZE + self.trainer_size

    @property
    def total_size(self) -> int:
        """Minimum file size needed to hold every region the header declares."""
        return self.data_offset + self.prg_rom_size + self.chr_rom_size

    @property
    def has_chr_rom(self) -> bool:
        return self.chr_banks > 0

    @property
    def uses_chr_ram(self) -> bool:
        return self.chr_banks == 0

    @property
    def is_nes2(self) -> bool:
        return self.format is not RomFormat.INES1

    def summary(self) -> list[str]:
        """Human-readable description, one field per line."""
        chr_desc = (
            f"{self.chr_banks} CHR banks ({self.chr_rom_size // 1024}KB)"
            if self.has_chr_rom
            else "CHR RAM (no CHR ROM)"
        )
        lines = [
            f"Format:    {self.format.value}",
            f"PRG ROM:   {self.prg_banks} PRG banks ({self.prg_rom_size // 1024}KB)",
            f"CHR ROM:   {chr_desc}",
            f"Mapper:    {self.mapper}",
            f"Mirroring: {self.mirroring.value}",
            f"Battery:   {'yes' if self.has_battery else 'no'}",
            f"Trainer:   {'yes' if self.has_trainer else 'no'}",
        ]
        if self.is_nes2:
            lines.insert(4, f"Submapper: {self.submapper}")
        return lines


def _decode_mirroring(flags6: int) -> Mirroring:
    # Four-screen VRAM overrides the H/V bit
    if flags6 & FLAG6_FOUR_SCREEN:
        return Mirroring.FOUR_SCREEN
    if flags6 & FLAG6_VERTICAL_MIRRORING:
        return Mirroring.VERTICAL
    return Mirroring.HORIZONTAL


def parse_header(data: bytes) -> INesHeader:
    """
    Parse the 16-byte iNES header at the start of a ROM image.

    Only the first 16 bytes are examined, so the whole file can be passed.

    Args:
        data: ROM image (or at least its first 16 bytes)

    Returns:
        Decoded INesHeader

    Raises:
        BadMagicError: If bytes 0-3 are not "NES\\x1a"
        TruncatedError: If fewer than 16 bytes are supplied
    """
    # Anything not starting with the full signature is bad magic, even
    # when shorter than 4 bytes
    magic = bytes(data[:4])
    if magic != INES_MAGIC:
        raise BadMagicError(magic)
    if len(data) < INES_HEADER_SIZE:
        raise TruncatedError("iNES header", INES_HEADER_SIZE, len(data))

    flags6 = data[HEADER_FLAGS_6]
    flags7 = data[HEADER_FLAGS_7]

    prg_banks = data[HEADER_PRG_BANKS]
    chr_banks = data[HEADER_CHR_BANKS]

    # Mapper D0-D3 in flags 6, D4-D7 in flags 7
    mapper = (flags7 & 0xF0) | high_nibble(flags6)

    rom_format = RomFormat.INES1
    submapper = 0
    if flags7 & FLAG7_FORMAT_MASK == FLAG7_NES2:
        mapper_ext = data[HEADER_NES2_MAPPER_EXT]
        size_msb = data[HEADER_NES2_ROM_SIZE_MSB]
        mapper |= low_nibble(mapper_ext) << 8
        submapper = high_nibble(mapper_ext)

        prg_msb = low_nibble(size_msb)
        chr_msb = high_nibble(size_msb)
        if prg_msb == NES2_EXPONENT_NIBBLE or chr_msb == NES2_EXPONENT_NIBBLE:
            rom_format = RomFormat.NES2_PARTIAL
        else:
            rom_format = RomFormat.NES2
            prg_banks |= prg_msb << 8
            chr_banks |= chr_msb << 8

    header = INesHeader(
        prg_banks=prg_banks,
        chr_banks=chr_banks,
        mirroring=_decode_mirroring(flags6),
        has_battery=bool(flags6 & FLAG6_BATTERY),
        has_trainer=bool(flags6 & FLAG6_TRAINER),
        mapper=mapper,
        format=rom_format,
        submapper=submapper,
    )
    logger.debug(
        "Parsed %s header: mapper %d, %d PRG banks, %d CHR banks, %s mirroring",
        rom_format.value,
        mapper,
        header.prg_banks,
        header.chr_banks,
        header.mirroring.value,
    )
    return header
