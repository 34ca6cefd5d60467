"""Sequential little-endian reader over an in-memory byte buffer."""

import struct

from pzmap.constants import LINE_END
from pzmap.errors import ReaderError

_INT32 = struct.Struct("<i")

# Strings are decoded one byte per character so no byte is ever lost.
_ENCODING = "latin-1"


class BinaryReader:
    """Reads values from a byte buffer, advancing ``offset`` as it goes."""

    def __init__(self, data, offset=0):
        self.data = bytes(data)
        self.offset = offset

    def remaining(self):
        """Number of bytes left after the current offset."""
        return len(self.data) - self.offset

    def at_end(self):
        """True when the offset sits exactly at the end of the buffer."""
        return self.offset == len(self.data)

    def _take(self, size, message):
        if size < 0 or self.offset + size > len(self.data):
            raise ReaderError(message)
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def read_chars(self, size):
        """Read ``size`` bytes as a string."""
        return self._take(size, "buffer is too small").decode(_ENCODING)

    def read_int32(self):
        """Read a signed 32-bit little-endian integer."""
        if self.offset + 4 > len(self.data):
            raise ReaderError("buffer is too small")
        (value,) = _INT32.unpack_from(self.data, self.offset)
        self.offset += 4
        return value

    def read_line(self):
        """Read up to the next newline and return the text without it."""
        end = self.data.find(LINE_END, self.offset)
        if end < 0:
            raise ReaderError("line terminator not found")
        line = self.data[self.offset:end].decode(_ENCODING)
        self.offset = end + len(LINE_END)
        return line

    def read_string_with_length(self):
        """Read a string prefixed by its int32 length."""
        size = self.read_int32()
        return self._take(size, "buffer too small").decode(_ENCODING)

    def read_bytes_with_length(self):
        """Read a byte string prefixed by its int32 length."""
        size = self.read_int32()
        return self._take(size, "buffer too small")

    def read_exact(self, size):
        """Read exactly ``size`` bytes."""
        return self._take(size, "buffer is too small")

    def read_until(self, pattern):
        """Read bytes up to ``pattern``; the pattern is consumed but not returned."""
        pattern = bytes(pattern)
        position = self.data.find(pattern, self.offset)
        if position < 0:
            raise ReaderError("Pattern not found.")
        chunk = self.data[self.offset:position]
        self.offset = position + len(pattern)
        return chunk