"""Exceptions raised while reading map and texture files."""


class PzMapError(Exception):
    """Base class for all errors raised by this package."""


class ReaderError(PzMapError, ValueError):
    """Raised when binary data is too short or malformed."""


class FileEndNotReached(PzMapError):
    """Raised when parsing stops before the end of the data."""

    def __init__(self, offset, size):
        super().__init__(f"File end not reached: {offset} / {size}")
        self.offset = offset
        self.size = size