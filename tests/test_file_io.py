import pytest

from pzmap.file_io import read_file, save_file


def test_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256))
    save_file(payload, target)
    assert read_file(target) == payload


def test_accepts_string_path_and_bytearray(tmp_path):
    target = str(tmp_path / "data.bin")
    save_file(bytearray(b"LOTH"), target)
    assert read_file(target) == b"LOTH"


def test_save_truncates_existing_file(tmp_path):
    target = tmp_path / "data.bin"
    save_file(b"a long original payload", target)
    save_file(b"short", target)
    assert read_file(target) == b"short"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.bin")


def test_save_into_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_file(b"x", tmp_path / "nope" / "data.bin")