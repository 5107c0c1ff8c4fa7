"""
iNES decoding exceptions.

Every error raised by the core derives from INesError, which is itself a
ValueError so callers that only catch ValueError keep working. Each error
carries the byte range it concerns (start/end, end exclusive) where one
applies.
"""


class INesError(ValueError):
    """Base class for iNES parsing and CHR decoding errors."""

    def __init__(self, message: str, start: int | None = None, end: int | None = None):
        super().__init__(message)
        self.start = start
        self.end = end


class BadMagicError(INesError):
    """Raised when the first four bytes are not the iNES signature."""

    def __init__(self, found: bytes):
        super().__init__(
            f"Not a valid iNES ROM file: expected magic 4E 45 53 1A at bytes 0-3, "
            f"got {found.hex(' ').upper()}",
            start=0,
            end=4,
        )
        self.found = bytes(found)


class TruncatedError(INesError):
    """Raised when the buffer ends before the header or a computed region does."""

    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(
            f"Truncated ROM: {what} needs {expected} bytes, only {actual} available",
            start=actual,
            end=expected,
        )
        self.what = what
        self.expected = expected
        self.actual = actual


class InvalidTileLengthError(INesError):
    """Raised when a tile decode is given anything but exactly 16 bytes."""

    def __init__(self, length: int):
        super().__init__(f"CHR tile must be exactly 16 bytes, got {length}", start=0, end=length)
        self.length = length


class MisalignedGraphicsError(INesError):
    """Raised when a CHR region length is not a multiple of 16."""

    def __init__(self, length: int):
        remainder = length % 16
        super().__init__(
            f"CHR data length {length} is not a multiple of 16 "
            f"({remainder} trailing bytes at offset {length - remainder})",
            start=length - remainder,
            end=length,
        )
        self.length = length


class PaletteSizeError(INesError):
    """Raised when a palette does not have exactly 4 entries."""

    def __init__(self, size: int):
        super().__init__(f"Palette must have exactly 4 colors, got {size}")
        self.size = size


class EmptyGraphicsError(INesError):
    """
    Raised when CHR ROM is requested from a cartridge that has none.

    A CHR bank count of zero is legal (the cartridge uses CHR RAM), so this
    is only raised by callers that explicitly require CHR ROM.
    """

    def __init__(self):
        super().__init__("ROM has no CHR ROM (CHR bank count is 0, cartridge uses CHR RAM)")
