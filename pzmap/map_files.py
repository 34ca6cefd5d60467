"""Loads the header and lotpack files of a map's cells."""

import logging
from pathlib import Path

from pzmap.constants import LOTHEADER_EXT, LOTPACK_EXT, MAX_CELLS_SIZE
from pzmap.lotheader import LotHeader
from pzmap.lotpack import Lotpack
from pzmap.timer import Timer

logger = logging.getLogger(__name__)


def _cell_key(x, y):
    return x + y * MAX_CELLS_SIZE


class MapFilesService:
    """Finds, reads and keeps the cell files of one map of a game install."""

    def __init__(self, game_path, map_name):
        self.game_path = str(game_path)
        self.map_name = map_name
        self._lotheaders = {}
        self._lotpacks = {}

    @property
    def map_directory(self):
        return Path(f"{self.game_path}/media/maps/{self.map_name}")

    def load_map_files(self):
        """Read every cell of the map and return how many were read."""
        logger.info("Loading map '%s'", self.map_name)
        timer = Timer.start()
        files_count = 0

        for path in sorted(self.map_directory.iterdir()):
            if path.suffix != LOTHEADER_EXT:
                continue

            lotpack_path = path.with_name(f"world_{path.stem}{LOTPACK_EXT}")
            logger.debug("lotheader: '%s'", path)

            header = LotHeader.read(path)
            lotpack = Lotpack.read(lotpack_path, header)

            key = _cell_key(header.position.x, header.position.y)
            self._lotheaders[key] = header
            self._lotpacks[key] = lotpack
            files_count += 1

        logger.info(
            "%d files parsed in %.0f ms", files_count, timer.elapsed_milliseconds()
        )
        return files_count

    def get_lotheader(self, x, y):
        """Return the loaded header of cell (x, y), or None."""
        return self._lotheaders.get(_cell_key(x, y))

    def get_lotpack(self, x, y):
        """Return the loaded lotpack of cell (x, y), or None."""
        return self._lotpacks.get(_cell_key(x, y))

    def load_lotheader(self, x, y):
        """Read the header file of cell (x, y) from disk."""
        return LotHeader.read(f"{self.map_directory}/{x}_{y}{LOTHEADER_EXT}")

    def load_lotpack(self, x, y, header):
        """Read the lotpack file of cell (x, y) from disk using ``header``."""
        return Lotpack.read(
            f"{self.map_directory}/world_{x}_{y}{LOTPACK_EXT}", header
        )