"""Fixed sizes, file extensions, magic strings and well-known paths of the map format."""

MIN_LAYER = -32
MAX_LAYER = 32
MAX_CELLS_SIZE = 1024

BLOCK_SIZE_IN_SQUARE = 8
SQUARE_PER_BLOCK = BLOCK_SIZE_IN_SQUARE * BLOCK_SIZE_IN_SQUARE

CELL_SIZE_IN_BLOCKS = 32
BLOCKS_PER_CELL = CELL_SIZE_IN_BLOCKS * CELL_SIZE_IN_BLOCKS

LINE_END = b"\n"

GAME_PATH_B42 = "C:/SteamLibrary/steamapps/common/ProjectZomboidB42"

LOTHEADER_EXT = ".lotheader"
LOTPACK_EXT = ".lotpack"
TEXT_PACK_EXT = ".pack"
TILE_DEF_EXT = ".tiles"

MAGIC_LOTHEADER = "LOTH"
MAGIC_LOTPACK = "LOTP"
MAGIC_PACK = "PZPK"
MAGIC_TILEDEF = "tdef"

GAME_PATH = GAME_PATH_B42
LOTHEADER_PATH = "data/B42/27_38.lotheader"
LOTHPACK_PATH = "data/B42/world_27_38.lotpack"
TILESDEF_PATH = "data/B42/newtiledefinitions.tiles"
TEXTUREPACK_PATH = GAME_PATH + "/media/texturepacks/Tiles2x.pack"

MAP_MULDRAUGH = "Muldraugh, KY"
MAP_ECHO_CREEK = "Echo Creek, KY"
MAP_RIVERSIDE = "Riverside, KY"
MAP_ROSEWOOD = "Rosewood, KY"
MAP_WEST_POINT = "West Point, KY"
MAP_CHALLENGE1 = "challengemaps/Challenge1"
MAP_CHALLENGE2 = "challengemaps/Challenge2"
MAP_KINGSMOUTH = "challengemaps/Kingsmouth"
MAP_KNOX_COUNTY = "challengemaps/KnoxCounty"
MAP_STUDIO = "challengemaps/Studio"
MAP_THE_FOREST = "challengemaps/The Forest"
MAP_TUTORIAL = "challengemaps/Tutorial"

MAP_NAMES = (
    MAP_MULDRAUGH,
    MAP_ECHO_CREEK,
    MAP_RIVERSIDE,
    MAP_ROSEWOOD,
    MAP_WEST_POINT,
    MAP_CHALLENGE1,
    MAP_CHALLENGE2,
    MAP_KINGSMOUTH,
    MAP_KNOX_COUNTY,
    MAP_STUDIO,
    MAP_THE_FOREST,
    MAP_TUTORIAL,
)