"""Shared pytest fixtures for iNES parsing and CHR decoding tests."""

import pytest

from ineschr.core.rom_utils import CHR_BANK_SIZE, PRG_BANK_SIZE, TRAINER_SIZE


def build_ines_header(
    prg_banks: int = 1,
    chr_banks: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    extra: bytes = b"",
) -> bytearray:
    """Build a 16-byte iNES header. `extra` fills bytes 8-15."""
    header = bytearray(16)
    header[0:4] = b"NES\x1a"
    header[4] = prg_banks
    header[5] = chr_banks
    header[6] = flags6
    header[7] = flags7
    header[8 : 8 + len(extra)] = extra
    return header


def build_ines_rom(
    prg_banks: int = 1,
    chr_banks: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    chr_data: bytes | None = None,
) -> bytes:
    """
    Build a minimal iNES ROM.

    - PRG ROM is filled with 0xEA (NOP) so it is distinguishable from CHR
    - CHR ROM is chr_data, zero-padded to the declared size
    - A trainer of 0x7E bytes is inserted when flags6 bit 2 is set
    """
    rom = build_ines_header(prg_banks, chr_banks, flags6, flags7)
    if flags6 & 0x04:
        rom += bytes([0x7E]) * TRAINER_SIZE
    rom += bytes([0xEA]) * (prg_banks * PRG_BANK_SIZE)

    chr_size = chr_banks * CHR_BANK_SIZE
    chr_rom = bytearray(chr_size)
    if chr_data:
        chr_rom[: len(chr_data)] = chr_data
    rom += chr_rom
    return bytes(rom)


@pytest.fixture
def make_header():
    """Factory for raw 16-byte iNES headers."""
    return build_ines_header


@pytest.fixture
def make_rom():
    """Factory for complete synthetic iNES ROM images."""
    return build_ines_rom


@pytest.fixture
def smiley_tile():
    """
    A 16-byte tile using all four colors.

    Row 0 is all color 3, row 7 is all color 2, the eyes in row 2 are
    color 1.
    """
    plane0 = [0xFF, 0x00, 0x24, 0x00, 0x00, 0x00, 0x00, 0x00]
    plane1 = [0xFF, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF]
    return bytes(plane0 + plane1)


@pytest.fixture
def nrom_rom(make_rom, smiley_tile):
    """32KB PRG + 8KB CHR ROM with a recognisable tile at index 1."""
    chr_data = bytes(16) + smiley_tile
    return make_rom(prg_banks=2, chr_banks=1, flags6=0x01, chr_data=chr_data)


@pytest.fixture
def nrom_rom_path(tmp_path, nrom_rom):
    """nrom_rom written to a temporary .nes file."""
    path = tmp_path / "test.nes"
    path.write_bytes(nrom_rom)
    return path
