"""
iNES CHR - ROM Reader

ROM file reading for iNES images. Wires the header parser, bank splitter
and sprite sheet assembler together and provides PRG/CHR read helpers.
"""

from pathlib import Path
from typing import BinaryIO

from .banks import RomRegion, split_rom, trainer_region
from .errors import TruncatedError
from .header import INesHeader, parse_header
from .rom_utils import INES_HEADER_SIZE
from .sprite_sheet import SpriteSheet, assemble_sprite_sheet


def _read_exact(stream: BinaryIO, length: int, what: str, consumed: int) -> bytes:
    """Read exactly `length` bytes or raise TruncatedError."""
    chunk = stream.read(length)
    if len(chunk) < length:
        raise TruncatedError(what, consumed + length, consumed + len(chunk))
    return chunk


class RomReader:
    """
    Reads and splits an iNES ROM image.

    Usage:
        rom = RomReader("game.nes")
        sheet = rom.sprite_sheet()
        tile = sheet[0x24]

        rom = RomReader.from_bytes(data)
        with open("game.nes", "rb") as f:
            rom = RomReader.from_stream(f)
    """

    def __init__(self, rom_path: str | Path | None = None, data: bytes | None = None, verbose: bool = True):
        """
        Load an iNES ROM from a file or an in-memory image.

        Args:
            rom_path: Path to iNES ROM file
            data: Complete ROM image (used instead of rom_path)
            verbose: Print a one-line summary after loading

        Raises:
            BadMagicError: If the data is not an iNES image
            TruncatedError: If the data is shorter than its header declares
        """
        if data is None:
            if rom_path is None:
                raise ValueError("RomReader needs a rom_path or data")
            with open(rom_path, "rb") as f:
                data = f.read()

        self.path = Path(rom_path) if rom_path is not None else None
        self.data = bytes(data)
        self.header: INesHeader = parse_header(self.data)
        self.trainer_region: RomRegion | None = trainer_region(self.data, self.header)
        self.prg_region, self.chr_region = split_rom(self.data, self.header)
        self._sprite_sheet: SpriteSheet | None = None

        if verbose:
            print(
                f"ROM loaded: {self.header.prg_banks} PRG banks ({self.header.prg_rom_size // 1024}KB), "
                f"{self.header.chr_banks} CHR banks ({self.header.chr_rom_size // 1024}KB), "
                f"mapper {self.header.mapper}"
            )

    @classmethod
    def from_bytes(cls, data: bytes, verbose: bool = False) -> "RomReader":
        """Create a reader over an in-memory ROM image."""
        return cls(data=data, verbose=verbose)

    @classmethod
    def from_stream(cls, stream: BinaryIO, verbose: bool = False) -> "RomReader":
        """
        Read an iNES ROM from a binary stream.

        Reads the header first, then exactly as many trainer, PRG and CHR
        bytes as it declares. Anything after CHR ROM is left unread.

        Raises:
            BadMagicError: If the stream is not an iNES image
            TruncatedError: If the stream ends early
        """
        header_bytes = stream.read(INES_HEADER_SIZE)
        header = parse_header(header_bytes)

        body_length = header.total_size - INES_HEADER_SIZE
        body = _read_exact(stream, body_length, "trainer, PRG and CHR ROM", INES_HEADER_SIZE)
        return cls(data=header_bytes + body, verbose=verbose)

    @property
    def trainer(self) -> bytes | None:
        """The 512-byte trainer, or None if the ROM has none."""
        if self.trainer_region is None:
            return None
        return self.trainer_region.read(self.data)

    @property
    def prg_rom(self) -> bytes:
        return self.prg_region.read(self.data)

    @property
    def chr_rom(self) -> bytes:
        """CHR ROM bytes (empty for CHR RAM cartridges)."""
        return self.chr_region.read(self.data)

    def read_prg(self, prg_offset: int, length: int = 1) -> bytes:
        """
        Read bytes from PRG ROM at absolute PRG offset.

        Args:
            prg_offset: Offset into PRG ROM (relative to start of PRG data)
            length: Number of bytes to read

        Raises:
            IndexError: If the range falls outside PRG ROM
        """
        return self._read_region(self.prg_region, prg_offset, length)

    def read_prg_byte(self, prg_offset: int) -> int:
        """Read a single byte from PRG ROM."""
        return self.read_prg(prg_offset, 1)[0]

    def read_prg_word(self, prg_offset: int) -> int:
        """Read 16-bit little-endian word from PRG ROM."""
        data = self.read_prg(prg_offset, 2)
        return data[0] | (data[1] << 8)

    def read_chr(self, chr_offset: int, length: int = 1) -> bytes:
        """
        Read bytes from CHR ROM at a CHR offset.

        Raises:
            IndexError: If the range falls outside CHR ROM
        """
        return self._read_region(self.chr_region, chr_offset, length)

    def _read_region(self, region: RomRegion, offset: int, length: int) -> bytes:
        if offset < 0 or length < 0 or offset + length > region.length:
            raise IndexError(
                f"{region.name} read ${offset:05X}+{length} outside region of {region.length} bytes"
            )
        start = region.offset + offset
        return self.data[start : start + length]

    def sprite_sheet(self) -> SpriteSheet:
        """
        Decode CHR ROM into a SpriteSheet.

        CHR RAM cartridges (CHR bank count 0) produce an empty sheet. The
        result is cached.
        """
        if self._sprite_sheet is None:
            self._sprite_sheet = assemble_sprite_sheet(self.chr_region.view(self.data))
        return self._sprite_sheet

    def summary(self) -> list[str]:
        """Header description plus region layout."""
        lines = list(self.header.summary())
        if self.trainer_region is not None:
            lines.append(f"Region:    {self.trainer_region}")
        lines.append(f"Region:    {self.prg_region}")
        if self.chr_region.length:
            lines.append(f"Region:    {self.chr_region}")
        extra = len(self.data) - self.header.total_size
        if extra:
            lines.append(f"Trailing:  {extra} bytes after CHR ROM")
        return lines
