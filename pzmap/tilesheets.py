"""Indexes tile definitions and texture pack sprites of a game install."""

import logging
from pathlib import Path

from pzmap.constants import TILE_DEF_EXT
from pzmap.texturepack import TexturePack
from pzmap.tiledefinition import TileDefinition

logger = logging.getLogger(__name__)

TEXTURE_PACK_FILES = (
    "Erosion.pack",
    "ApCom.pack",
    "RadioIcons.pack",
    "ApComUI.pack",
    "JumboTrees2x.pack",
    "Tiles2x.floor.pack",
    "Tiles2x.pack",
)


class TilesheetService:
    """Reads tile definitions and texture packs and looks sprites up by name."""

    def __init__(self, game_path):
        self.game_path = str(game_path)
        self.tile_definitions = []
        self.texture_packs = []
        self.pages_by_name = {}
        self.textures_by_name = {}
        self.tile_sheets_by_name = {}
        self.tiles_def_by_name = {}
        self.texture_to_page_name = {}

        self._read_tile_definitions()
        self._read_texture_packs()

    def get_texture_by_name(self, texture_name):
        """Return the texture with this name, or None."""
        return self.textures_by_name.get(texture_name)

    def get_page_by_name(self, name):
        """Return the page with this name, or None."""
        return self.pages_by_name.get(name)

    def get_page_by_texture_name(self, texture_name):
        """Return the page holding the named texture, or None."""
        page_name = self.texture_to_page_name.get(texture_name)
        if page_name is None:
            return None
        return self.pages_by_name.get(page_name)

    def _read_tile_definitions(self):
        directory = Path(f"{self.game_path}/media")
        logger.info("Loading tileDefinitions...")

        for path in sorted(directory.iterdir()):
            if ".patch" in str(path) or path.suffix != TILE_DEF_EXT:
                continue

            definition = TileDefinition.read(path)
            self.tile_definitions.append(definition)

            for sheet in definition.tile_sheets:
                self.tile_sheets_by_name[sheet.name] = sheet
                for tile_data in sheet.tile_datas:
                    self.tiles_def_by_name[tile_data.name] = tile_data

    def _read_texture_packs(self):
        directory = Path(f"{self.game_path}/media/texturepacks")
        logger.info("Loading texturePacks...")

        for filename in TEXTURE_PACK_FILES:
            pack = TexturePack.read(directory / filename)
            self.texture_packs.append(pack)

            for page in pack.pages:
                if page.name in self.pages_by_name:
                    continue
                self.pages_by_name[page.name] = page

                for texture in page.textures:
                    if texture.name in self.textures_by_name:
                        continue
                    self.textures_by_name[texture.name] = texture
                    self.texture_to_page_name[texture.name] = page.name