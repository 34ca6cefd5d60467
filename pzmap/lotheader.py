"""Reader for ``.lotheader`` files: tile names, rooms and buildings of a cell."""

import os
import re
from dataclasses import dataclass, field

from pzmap.binary_reader import BinaryReader
from pzmap.constants import BLOCKS_PER_CELL
from pzmap.errors import FileEndNotReached, ReaderError
from pzmap.file_io import read_file
from pzmap.mathutils import Vector2i

_FILENAME_PATTERN = re.compile(r"(?:.*[/\\])?(\d+)_(\d+)\.lotheader")


def _read_count(reader):
    count = reader.read_int32()
    if count < 0:
        raise ReaderError(f"negative count: {count}")
    return count


@dataclass
class Rectangle:
    """An axis-aligned area of a room, in squares."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class RoomObject:
    """An object placed in a room."""

    room_type: int
    x: int
    y: int


@dataclass
class Building:
    """A building and the ids of the rooms it is made of."""

    id: int
    room_ids: list = field(default_factory=list)


@dataclass
class Room:
    """A named room made of one or more rectangles."""

    id: int
    name: str
    layer: int
    area: int
    rectangles: list = field(default_factory=list)
    room_objects: list = field(default_factory=list)


@dataclass
class LotHeader:
    """Header of one map cell."""

    magic: str = ""
    version: int = 0
    width: int = 0
    height: int = 0
    max_layer: int = 0
    min_layer: int = 0
    position: Vector2i = field(default_factory=Vector2i)
    tile_names: list = field(default_factory=list)
    rooms: list = field(default_factory=list)
    buildings: list = field(default_factory=list)
    spawns: bytes = b""

    @classmethod
    def read(cls, path):
        """Read a header file; the cell position comes from its name."""
        position = cls.position_from_filename(path)
        return cls.parse(read_file(path), position)

    @classmethod
    def parse(cls, data, position):
        """Parse header bytes for the cell at ``position``."""
        reader = BinaryReader(data)
        header = cls(position=position)
        header.magic = reader.read_chars(4)
        header.version = reader.read_int32()
        header.tile_names = [reader.read_line() for _ in range(_read_count(reader))]
        header.width = reader.read_int32()
        header.height = reader.read_int32()
        header.min_layer = reader.read_int32()
        header.max_layer = reader.read_int32() + 1
        header.rooms = [_read_room(reader, i) for i in range(_read_count(reader))]
        header.buildings = [
            _read_building(reader, i) for i in range(_read_count(reader))
        ]
        header.spawns = reader.read_exact(BLOCKS_PER_CELL)

        if not reader.at_end():
            raise FileEndNotReached(reader.offset, len(reader.data))
        return header

    @staticmethod
    def position_from_filename(filename):
        """Extract the cell position from a name such as ``27_38.lotheader``."""
        match = _FILENAME_PATTERN.fullmatch(os.fspath(filename))
        if match is None:
            raise ValueError(f"invalid file name: {filename}")
        return Vector2i(int(match.group(1)), int(match.group(2)))


def _read_rectangle(reader):
    return Rectangle(
        x=reader.read_int32(),
        y=reader.read_int32(),
        width=reader.read_int32(),
        height=reader.read_int32(),
    )


def _read_room_object(reader):
    return RoomObject(
        room_type=reader.read_int32(),
        x=reader.read_int32(),
        y=reader.read_int32(),
    )


def _read_room(reader, room_id):
    name = reader.read_line()
    layer = reader.read_int32()
    rectangles = [_read_rectangle(reader) for _ in range(_read_count(reader))]
    room_objects = [_read_room_object(reader) for _ in range(_read_count(reader))]
    area = sum(rect.width * rect.height for rect in rectangles)
    return Room(
        id=room_id,
        name=name,
        layer=layer,
        area=area,
        rectangles=rectangles,
        room_objects=room_objects,
    )


def _read_building(reader, building_id):
    room_ids = [reader.read_int32() for _ in range(_read_count(reader))]
    return Building(id=building_id, room_ids=room_ids)