"""Reader for ``.pack`` texture packs: PNG pages and the sprites cut from them."""

from dataclasses import dataclass, field
from pathlib import Path

from pzmap.binary_reader import BinaryReader
from pzmap.constants import MAGIC_PACK
from pzmap.errors import FileEndNotReached, ReaderError
from pzmap.file_io import read_file

_PNG_END_MARKER = b"\xEF\xBE\xAD\xDE"


def _read_count(reader):
    count = reader.read_int32()
    if count < 0:
        raise ReaderError(f"negative count: {count}")
    return count


@dataclass
class Texture:
    """A sprite's area on a page and its trim offsets."""

    name: str
    x: int
    y: int
    width: int
    height: int
    ox: int
    oy: int
    ow: int
    oh: int


@dataclass
class Page:
    """A PNG image holding many sprites."""

    version: int
    name: str
    has_alpha: bool = False
    png: bytes = b""
    textures: list = field(default_factory=list)


@dataclass
class TexturePack:
    """A texture pack file and its pages."""

    name: str = ""
    magic: str = ""
    version: int = 0
    pages: list = field(default_factory=list)

    @classmethod
    def read(cls, path):
        """Read a pack file; it is named after its file name."""
        return cls.parse(Path(path).name, read_file(path))

    @classmethod
    def parse(cls, name, data):
        """Parse pack bytes under the given name."""
        reader = BinaryReader(data)
        pack = cls(name=name)
        pack.magic = reader.read_chars(4)
        if pack.magic == MAGIC_PACK:
            pack.version = reader.read_int32()
        else:
            # Old packs have no header: the data starts with the page count.
            reader.offset = 0
            pack.version = 0
        pack.pages = [
            _read_page(reader, pack.version) for _ in range(_read_count(reader))
        ]

        if not reader.at_end():
            raise FileEndNotReached(reader.offset, len(reader.data))
        return pack


def _read_page(reader, version):
    name = reader.read_string_with_length()
    count = _read_count(reader)
    has_alpha = bool(reader.read_int32())
    textures = [_read_texture(reader) for _ in range(count)]
    png = _read_png(reader, version)
    return Page(
        version=version, name=name, has_alpha=has_alpha, png=png, textures=textures
    )


def _read_texture(reader):
    name = reader.read_string_with_length()
    x, y, width, height, ox, oy, ow, oh = (reader.read_int32() for _ in range(8))
    return Texture(name, x, y, width, height, ox, oy, ow, oh)


def _read_png(reader, version):
    if version == 0:
        return reader.read_until(_PNG_END_MARKER)
    if version == 1:
        return reader.read_bytes_with_length()
    raise ReaderError(f"Unsupported texturepack version: {version}")