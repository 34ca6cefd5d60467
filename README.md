# pzmap

Readers for the binary files that make up Project Zomboid maps and tile
graphics, plus a rectangle packer for laying sprites out in an atlas.
It uses only the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What it reads

| File                 | Class                                 | Magic  |
|----------------------|---------------------------------------|--------|
| `X_Y.lotheader`      | `pzmap.lotheader.LotHeader`           | `LOTH` |
| `world_X_Y.lotpack`  | `pzmap.lotpack.Lotpack`               | `LOTP` |
| `*.pack`             | `pzmap.texturepack.TexturePack`       | `PZPK` |
| `*.tiles`            | `pzmap.tiledefinition.TileDefinition` | `tdef` |

Every reader has a `read(path)` class method that loads a file from disk and
a `parse(...)` class method that works on bytes already in memory:

- `LotHeader.parse(data, position)`
- `Lotpack.parse(data, header)`
- `TexturePack.parse(name, data)`
- `TileDefinition.parse(name, data)`

Errors:

- data that is not consumed to its last byte raises
  `pzmap.errors.FileEndNotReached` (its `offset` and `size` say where parsing
  stopped);
- truncated data, a missing line terminator, a negative count or an
  unsupported texture pack version raises `pzmap.errors.ReaderError`, which
  is also a `ValueError`;
- both derive from `pzmap.errors.PzMapError`.

Texture packs without the `PZPK` magic are read as version 0 packs, whose
page images end at the marker bytes `EF BE AD DE`; version 1 packs store each
image with its length.

## Reading a cell

```python
from pzmap.lotheader import LotHeader
from pzmap.lotpack import Lotpack

header = LotHeader.read("maps/Muldraugh, KY/27_38.lotheader")
print(header.position, header.width, header.height, len(header.rooms))

lotpack = Lotpack.read("maps/Muldraugh, KY/world_27_38.lotpack", header)
for square in lotpack.square_map[:5]:
    coord = square.coord
    print(coord.chunk_idx, coord.x, coord.y, coord.z, square.room_id, square.tiles)
```

`LotHeader.read` takes the cell position from the file name, and
`LotHeader.position_from_filename("10_20.lotheader")` gives
`Vector2i(x=10, y=20)`; a name not of the form `<x>_<y>.lotheader` raises
`ValueError`. A lotpack needs its header, whose `min_layer` and `max_layer`
give the number of layers stored per block.

## Services over a game install

`pzmap.map_files.MapFilesService` reads the lotheader/lotpack pairs of a map
directory (`<game>/media/maps/<map name>`) and looks them up by cell
position:

```python
from pzmap.constants import MAP_MULDRAUGH
from pzmap.map_files import MapFilesService

service = MapFilesService("/path/to/ProjectZomboid", MAP_MULDRAUGH)
count = service.load_map_files()          # number of cells read
header = service.get_lotheader(27, 38)    # None if that cell was not loaded
lotpack = service.get_lotpack(27, 38)

# Or read a single cell straight from disk:
header = service.load_lotheader(27, 38)
lotpack = service.load_lotpack(27, 38, header)
```

`pzmap.tilesheets.TilesheetService` reads, when it is created, every `.tiles`
file in `<game>/media` (skipping `.patch` files) and the texture packs listed
in `pzmap.tilesheets.TEXTURE_PACK_FILES` from `<game>/media/texturepacks`.
All of those packs must be present. Pages and textures are indexed by name;
where a name occurs more than once the first one read is kept.

```python
from pzmap.tilesheets import TilesheetService

tiles = TilesheetService("/path/to/ProjectZomboid")
texture = tiles.get_texture_by_name("floors_exterior_natural_01_0")
page = tiles.get_page_by_texture_name("floors_exterior_natural_01_0")
same_page = tiles.get_page_by_name(page.name)
```

Each lookup returns `None` for an unknown name. The service also exposes
`tile_definitions`, `texture_packs`, `tile_sheets_by_name` and
`tiles_def_by_name`.

## Packing rectangles

`pzmap.rectpack.finder.pack_rectangles` places a list of
`pzmap.rectpack.structs.RectXYWH` into the smallest bin it finds (at most
`max_side` on a side, 8192 by default), writes the chosen positions back
into the rectangles and returns the bin size as a `RectWH`:

```python
from pzmap.rectpack.finder import pack_rectangles
from pzmap.rectpack.structs import RectXYWH

rects = [RectXYWH(0, 0, 64, 128), RectXYWH(0, 0, 128, 64), RectXYWH(0, 0, 32, 32)]
bin_size = pack_rectangles(rects)
print(bin_size.w, bin_size.h, [(r.x, r.y) for r in rects])
```

Rectangles of zero area are left where they are. For more control,
`find_best_packing(subjects, finder_input, *keys, allow_flip=False)` takes a
`FinderInput` (maximum side, discard step, per-rectangle callbacks that return
a `CallbackResult`, and a `FlippingOption`) and any number of key functions,
each of which gives one largest-first ordering to try;
`find_best_packing_dont_sort` packs in the given order only. The lower-level
pieces are `EmptySpaces` and the space collections in `pzmap.rectpack.spaces`
and `insert_and_split` in `pzmap.rectpack.splits`.

## Other helpers

- `pzmap.binary_reader.BinaryReader` — a cursor over little-endian binary data
  (int32 values, fixed-size and length-prefixed strings and bytes,
  newline-terminated lines, reading up to a byte pattern).
- `pzmap.file_io.read_file` / `save_file` — whole-file binary reading and
  writing.
- `pzmap.md5.to_hash(data)` — lowercase hex MD5 digest of a byte string.
- `pzmap.cell_coord.CellCoord` — a square's chunk index, x, y and layer packed
  into one 32-bit integer; `CellCoord.from_packed` rebuilds one from the value.
- `pzmap.mathutils` — `Vector2i`, `fast_min`, `fast_max`, `fast_clamp`.
- `pzmap.timer.Timer` — a millisecond stopwatch.
- `pzmap.theme` — the RGB colour palette (`Color` and named colours).
- `pzmap.constants` — format sizes, file extensions, magic strings and the
  names of the built-in maps (`MAP_NAMES`).

## What it does not do

The package reads and indexes files and computes atlas layouts; it has no
window, viewer or command-line program. It does not decode the PNG page
images (a page's `png` attribute holds the raw bytes), does not compose atlas
images, and does not draw or render cells. It reads files only and never
writes map or texture files back.