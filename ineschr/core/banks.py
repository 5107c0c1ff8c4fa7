"""
iNES ROM Bank Splitting

Slices a ROM image into its trainer, PRG ROM and CHR ROM regions using the
sizes declared in the header. Regions are (offset, length) descriptors into
the caller's buffer; nothing is copied until a region is read.
"""

from dataclasses import dataclass

from .errors import EmptyGraphicsError, TruncatedError
from .header import INesHeader
from .rom_utils import INES_HEADER_SIZE


@dataclass(frozen=True)
class RomRegion:
    """A contiguous byte range within a ROM image."""

    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Offset one past the last byte of the region."""
        return self.offset + self.length

    def view(self, rom: bytes) -> memoryview:
        """Zero-copy view of this region within `rom`."""
        return memoryview(rom)[self.offset : self.end]

    def read(self, rom: bytes) -> bytes:
        """Copy of this region's bytes."""
        return bytes(rom[self.offset : self.end])

    def __str__(self) -> str:
        return f"{self.name} ${self.offset:05X}-${self.end:05X} ({self.length} bytes)"


def trainer_region(data: bytes, header: INesHeader) -> RomRegion | None:
    """
    Locate the 512-byte trainer, if the header declares one.

    Raises:
        TruncatedError: If the image ends inside the trainer
    """
    if not header.has_trainer:
        return None
    if len(data) < header.data_offset:
        raise TruncatedError("trainer", header.data_offset, len(data))
    return RomRegion("trainer", INES_HEADER_SIZE, header.trainer_size)


def split_rom(data: bytes, header: INesHeader) -> tuple[RomRegion, RomRegion]:
    """
    Split a ROM image into PRG ROM and CHR ROM regions.

    The trainer, if present, is skipped. Bytes past the end of CHR ROM are
    ignored.

    Args:
        data: Complete ROM image including the 16-byte header
        header: Header parsed from the same image

    Returns:
        Tuple of (prg_region, chr_region). The CHR region has length 0 for
        CHR RAM cartridges.

    Raises:
        TruncatedError: If the image is shorter than header + trainer + PRG + CHR
    """
    if len(data) < header.total_size:
        raise TruncatedError("PRG and CHR ROM", header.total_size, len(data))

    prg = RomRegion("PRG ROM", header.data_offset, header.prg_rom_size)
    chr_ = RomRegion("CHR ROM", prg.end, header.chr_rom_size)
    return prg, chr_


def require_chr_rom(header: INesHeader) -> None:
    """
    Check that the cartridge has CHR ROM to extract tiles from.

    Raises:
        EmptyGraphicsError: If the CHR bank count is zero
    """
    if not header.has_chr_rom:
        raise EmptyGraphicsError()
