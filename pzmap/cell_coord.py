"""Position of a square inside a cell, packed into one 32-bit integer."""

_CHUNK_MASK = 0x3FFFF
_XY_MASK = 0x0F
_Z_MASK = 0x3F
_Z_BIAS = 32


class CellCoord:
    """Chunk index, x, y and layer of a square, stored as a packed integer.

    Layout from high to low bits: chunk index (18), x (4), y (4), z + 32 (6).
    """

    __slots__ = ("_packed",)

    def __init__(self, chunk_idx, x, y, z):
        chunk = (chunk_idx & 0xFFFF) & _CHUNK_MASK
        self._packed = (
            (chunk << 14)
            | ((x & _XY_MASK) << 10)
            | ((y & _XY_MASK) << 6)
            | ((z + _Z_BIAS) & _Z_MASK)
        )

    @classmethod
    def from_packed(cls, packed):
        """Build a coordinate from an already packed value."""
        coord = cls.__new__(cls)
        coord._packed = packed & 0xFFFFFFFF
        return coord

    @property
    def packed(self):
        return self._packed

    @property
    def chunk_idx(self):
        return ((self._packed >> 14) & _CHUNK_MASK) & 0xFFFF

    @property
    def x(self):
        return (self._packed >> 10) & _XY_MASK

    @property
    def y(self):
        return (self._packed >> 6) & _XY_MASK

    @property
    def z(self):
        return (self._packed & _Z_MASK) - _Z_BIAS

    def __eq__(self, other):
        if not isinstance(other, CellCoord):
            return NotImplemented
        return self._packed == other._packed

    def __hash__(self):
        return hash(self._packed)

    def __repr__(self):
        return (
            f"CellCoord(chunk_idx={self.chunk_idx}, x={self.x}, "
            f"y={self.y}, z={self.z})"
        )