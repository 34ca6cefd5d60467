"""Reader for ``.tiles`` definition files: tile sheets and tile properties."""

from dataclasses import dataclass, field
from pathlib import Path

from pzmap.binary_reader import BinaryReader
from pzmap.errors import FileEndNotReached, ReaderError
from pzmap.file_io import read_file


def _read_count(reader):
    count = reader.read_int32()
    if count < 0:
        raise ReaderError(f"negative count: {count}")
    return count


def generate_sprite_id():
    """Return the sprite id given to newly read tiles."""
    return -1


@dataclass
class TileData:
    """One tile of a sheet and its properties."""

    name: str
    sprite_id: int
    properties: dict = field(default_factory=dict)


@dataclass
class TileSheet:
    """A sheet image split into equal tiles."""

    name: str
    image_name: str
    tile_width: int
    tile_height: int
    number: int
    tiles_count: int
    tile_datas: list = field(default_factory=list)


@dataclass
class TileDefinition:
    """A tile definition file and its sheets."""

    name: str = ""
    magic: str = ""
    version: int = 0
    tile_sheets: list = field(default_factory=list)

    @classmethod
    def read(cls, path):
        """Read a definition file; it is named after its file name."""
        return cls.parse(Path(path).name, read_file(path))

    @classmethod
    def parse(cls, name, data):
        """Parse definition bytes under the given name."""
        reader = BinaryReader(data)
        definition = cls(name=name)
        definition.magic = reader.read_chars(4)
        definition.version = reader.read_int32()
        definition.tile_sheets = [
            _read_tile_sheet(reader) for _ in range(_read_count(reader))
        ]

        if not reader.at_end():
            raise FileEndNotReached(reader.offset, len(reader.data))
        return definition


def _read_tile_sheet(reader):
    name = reader.read_line()
    image_name = reader.read_line()
    tile_width = reader.read_int32()
    tile_height = reader.read_int32()
    number = reader.read_int32()
    tiles_count = reader.read_int32()
    if tiles_count < 0:
        raise ReaderError(f"negative count: {tiles_count}")
    tile_datas = [
        TileData(
            name=f"{name}_{index}",
            sprite_id=generate_sprite_id(),
            properties=_read_properties(reader),
        )
        for index in range(tiles_count)
    ]
    return TileSheet(
        name=name,
        image_name=image_name,
        tile_width=tile_width,
        tile_height=tile_height,
        number=number,
        tiles_count=tiles_count,
        tile_datas=tile_datas,
    )


def _read_properties(reader):
    properties = {}
    for _ in range(_read_count(reader)):
        key = reader.read_line()
        properties[key] = reader.read_line()
    return properties