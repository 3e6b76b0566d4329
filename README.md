# voxelkit

`voxelkit` holds the world-side building blocks of a chunked voxel game:
the data types and algorithms that a renderer and a game loop sit on top of.

## What is inside

- `voxelkit.constants`: chunk dimensions (16 × 256 × 16), `BLOCK_AIR`, the
  `BLOCK_VOID` marker for voxels of missing chunks, the binding names
  (`BIND_MOVE_FORWARD` and the rest), and `vox_index`, which maps a local
  `(x, y, z)` position to a flat index (`y` is the outermost axis).
- `voxelkit.settings`: dataclasses with the engine's defaults:
  `DisplaySettings`, `ChunksSettings`, `CameraSettings`, `GraphicsSettings`,
  `DebugSettings`, `UiSettings`, all gathered in `EngineSettings`.
- `voxelkit.dataio`: big-endian signed 16, 32 and 64 bit integer reading and
  writing on byte buffers; reads and writes outside the buffer raise
  `IndexError`.
- `voxelkit.stringutil`: `lfill`, `rfill`, `ltrim`, `rtrim`, `trim`,
  UTF-8 encoding and decoding of single code points (`encode_utf8`,
  `decode_utf8`) and whole strings (`wstr2str_utf8`, `str2wstr_utf8`),
  and the checks `is_integer` and `is_valid_filename`. Malformed UTF-8
  raises `ValueError`.
- `voxelkit.timeutil`: a microsecond `Timer`, a `ScopeLogTimer` context
  manager that prints how long its block took, and conversion between
  clock time and the 0..1 day-cycle value (`time_value`, `from_value`).
- `voxelkit.voxel`: the `Voxel` cell with its `rotation()` and `variant()`
  bits, and the `BLOCK_DIR_*` directions.
- `voxelkit.block`: `AABB`, `CoordSystem`, the `BlockRotProfile` rotation
  sets (`BlockRotProfile.PIPE` and `BlockRotProfile.PANE`), `BlockModel`
  and the `Block` definition.
- `voxelkit.chunk`: a `Chunk` of voxels held in numpy arrays (`ids`,
  `states`, `lights`) with its `ChunkFlag` flags exposed as properties
  (`modified`, `unsaved`, `lighted`, …), height bounds (`update_heights`),
  `clone`, and a byte encoding of all ids followed by all states
  (`encode`, `decode`).
- `voxelkit.volume`: `VoxelsVolume`, a box of voxels and lights placed in
  world coordinates, with `pick_block_id` and `pick_light`.
- `voxelkit.levelevents`: `LevelEvents`, callbacks keyed by
  `LevelEventType`.
- `voxelkit.chunks`: `Chunks`, the player-centred matrix of loaded chunks,
  with voxel `get`/`set`, `is_obstacle`, `set_center`, `translate`,
  `resize`, `set_offset` and `save_and_clear`. Chunks that leave the matrix
  fire `LevelEventType.CHUNK_HIDDEN` and are handed to the optional sink's
  `put()` method.
- `voxelkit.storage`: `ChunksStorage`, every chunk in memory keyed by its
  chunk coordinates, and `get_voxels`, which copies a region into a
  `VoxelsVolume`.
- `voxelkit.input`: key and mouse button codes (`KEY_*`, `MOUSE_BUTTON_*`),
  `InputType`, `Binding`, and readable names (`key_name`, `mouse_name`).
- `voxelkit.camera`: a `Camera` with `rotate`, `projection`, `view` and
  `proj_view` matrices (numpy, column-vector convention).
- `voxelkit.events`: `Events`, the per-frame key, mouse, cursor, scroll and
  text input state. Raw input is recorded with `on_key`, `on_mouse_button`,
  `on_cursor`, `on_scroll` and `on_char`, and applied by `poll`, which also
  updates the named bindings.
- `voxelkit.cli`: `ArgsReader` and `parse_cmdline`, which read `--res` and
  `--dir` into `EnginePaths`.
- `voxelkit.platform_info`: where settings and controls are kept
  (`settings_file`, `controls_file`) and `detect_locale`.

## A short example

```python
from voxelkit.block import Block
from voxelkit.chunk import Chunk
from voxelkit.chunks import Chunks
from voxelkit.dataio import read_int32_big, write_int32_big
from voxelkit.events import Events
from voxelkit.input import KEY_SPACE, InputType
from voxelkit.levelevents import LevelEvents
from voxelkit.timeutil import from_value, time_value

# Big-endian integers in a byte buffer
buffer = bytearray(4)
write_int32_big(123456, buffer, 0)
assert read_int32_big(buffer, 0) == 123456

# A 4 x 4 chunk matrix with one chunk in it
blocks = [Block(f"block{i}") for i in range(256)]
chunks = Chunks(4, 4, 0, 0, None, LevelEvents(), blocks)
chunks.put_chunk(Chunk(1, 2))
chunks.set(20, 10, 35, 5, 0)
print(chunks.get(20, 10, 35))      # Voxel(id=5, states=0)

# Input bindings
events = Events()
events.bind("movement.jump", InputType.keyboard, KEY_SPACE)
events.on_key(KEY_SPACE, 1)        # press
events.poll()
print(events.jactive("movement.jump"))  # True

# Day cycle: 10:00 as a fraction of a day, and back again
print(from_value(time_value(10, 0, 0)))
```

## What it does not do

`voxelkit` has no window, renderer or game loop, and installs no command.
It does not generate terrain, compute lighting, or read and write worlds,
settings or controls on disk: `Chunks` only hands chunks leaving the
matrix to whatever object with a `put()` method it is given, and
`settings_file`/`controls_file` only name where those files would live.

## Running the tests

The tests use pytest and live in `tests/`; install the `test` extra and run
`pytest`.