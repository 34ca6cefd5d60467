import struct

import pytest

from pzmap.errors import FileEndNotReached, ReaderError
from pzmap.tiledefinition import TileDefinition, generate_sprite_id


def i32(value):
    return struct.pack("<i", value)


def line(text):
    return text.encode("latin-1") + b"\n"


def build_definition():
    data = b"tdef" + i32(1) + i32(1)
    data += line("sheet") + line("sheet.png")
    data += i32(64) + i32(128) + i32(3) + i32(2)
    data += i32(2) + line("Door") + line("true") + line("Name") + line("oak")
    data += i32(0)
    return data


def test_parse_sheet():
    definition = TileDefinition.parse("defs", build_definition())
    assert definition.name == "defs"
    assert definition.magic == "tdef"
    assert definition.version == 1
    assert len(definition.tile_sheets) == 1
    sheet = definition.tile_sheets[0]
    assert sheet.name == "sheet"
    assert sheet.image_name == "sheet.png"
    assert (sheet.tile_width, sheet.tile_height, sheet.number) == (64, 128, 3)
    assert sheet.tiles_count == len(sheet.tile_datas) == 2


def test_tile_names_and_properties():
    sheet = TileDefinition.parse("defs", build_definition()).tile_sheets[0]
    assert [tile.name for tile in sheet.tile_datas] == ["sheet_0", "sheet_1"]
    assert sheet.tile_datas[0].properties == {"Door": "true", "Name": "oak"}
    assert sheet.tile_datas[1].properties == {}
    assert all(tile.sprite_id == generate_sprite_id() for tile in sheet.tile_datas)


def test_generate_sprite_id():
    assert generate_sprite_id() == -1


def test_trailing_bytes_raise():
    with pytest.raises(FileEndNotReached):
        TileDefinition.parse("defs", build_definition() + b"\x00")


def test_missing_line_end_raises():
    data = b"tdef" + i32(1) + i32(1) + b"sheet"
    with pytest.raises(ReaderError):
        TileDefinition.parse("defs", data)


def test_read_file_uses_file_name(tmp_path):
    path = tmp_path / "newtiledefinitions.tiles"
    path.write_bytes(build_definition())
    definition = TileDefinition.read(path)
    assert definition.name == "newtiledefinitions.tiles"
    assert definition.tile_sheets == TileDefinition.parse("x", build_definition()).tile_sheets