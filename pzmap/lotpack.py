"""Reader for ``.lotpack`` files: the tiles of every square of a cell."""

from dataclasses import dataclass, field

from pzmap.binary_reader import BinaryReader
from pzmap.cell_coord import CellCoord
from pzmap.constants import BLOCK_SIZE_IN_SQUARE, SQUARE_PER_BLOCK
from pzmap.errors import FileEndNotReached, ReaderError
from pzmap.file_io import read_file

_TABLE_ENTRY_SIZE = 8


@dataclass
class SquareData:
    """Tiles placed on one square, with the room it belongs to."""

    coord: CellCoord
    room_id: int
    tiles: list = field(default_factory=list)


@dataclass
class Lotpack:
    """Square contents of one map cell, read against its header."""

    header: object = None
    magic: str = ""
    version: int = 0
    square_map: list = field(default_factory=list)

    @classmethod
    def read(cls, path, header):
        """Read a lotpack file using the layer range of ``header``."""
        return cls.parse(read_file(path), header)

    @classmethod
    def parse(cls, data, header):
        """Parse lotpack bytes using the layer range of ``header``."""
        reader = BinaryReader(data)
        lotpack = cls(header=header)
        lotpack.magic = reader.read_chars(4)
        lotpack.version = reader.read_int32()
        lotpack.square_map = _read_square_map(reader, header)

        if not reader.at_end():
            raise FileEndNotReached(reader.offset, len(reader.data))
        return lotpack


def _read_square_map(reader, header):
    blocks_count = reader.read_int32()
    if blocks_count < 0:
        raise ReaderError(f"negative count: {blocks_count}")
    table_offset = reader.offset
    squares = []
    for block_index in range(blocks_count):
        reader.offset = table_offset + block_index * _TABLE_ENTRY_SIZE
        reader.offset = reader.read_int32()
        squares.extend(_read_block_squares(reader, header, block_index))
    return squares


def _read_block_squares(reader, header, block_index):
    skip = 0
    for z in range(header.max_layer - header.min_layer):
        if skip >= SQUARE_PER_BLOCK:
            skip -= SQUARE_PER_BLOCK
            continue
        for x in range(BLOCK_SIZE_IN_SQUARE):
            if skip >= BLOCK_SIZE_IN_SQUARE:
                skip -= BLOCK_SIZE_IN_SQUARE
                continue
            for y in range(BLOCK_SIZE_IN_SQUARE):
                if skip > 0:
                    skip -= 1
                    continue

                count = reader.read_int32()
                if count == -1:
                    skip = reader.read_int32()
                    if skip > 0:
                        skip -= 1
                elif count > 1:
                    room_id = reader.read_int32()
                    tiles = [reader.read_int32() for _ in range(count - 1)]
                    yield SquareData(CellCoord(block_index, x, y, z), room_id, tiles)