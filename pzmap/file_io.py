"""Whole-file binary reading and writing."""

from pathlib import Path


def read_file(path):
    """Return the full contents of the file at ``path`` as bytes."""
    return Path(path).read_bytes()


def save_file(data, path):
    """Write ``data`` to ``path``, replacing any existing contents."""
    Path(path).write_bytes(bytes(data))