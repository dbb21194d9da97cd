# gamebreaker

Building blocks for small 2D games: the parts of a game framework that keep state
and do arithmetic, without a graphics or sound device behind them.

## Modules

- `gamebreaker.mathutil`: degree-based trigonometry (`degtorad`, `dsin`, `dcos`,
  `lendir_x`, `lendir_y`), `clamp`, `modwrap`, `point_in_rect`, `pdirection`,
  `pdistance`, `sign`, `power`, `sqr`, `frac`, integer rounding (`iround`, `ifloor`,
  `iceil`), statistics (`minimum`, `maximum`, `mean`, `median`) and seeded random
  helpers (`random`, `irandom`, `random_range`, `irandom_range`, `choose`,
  `random_set_seed`, `random_get_seed`, `randomize`).
- `gamebreaker.gstr`: string helpers: `count` (overlapping matches), `replace`,
  `replace_all`, `cat`, `shorten` (8.3-style file names), `lowercase`, `uppercase`,
  `char_at`, `ord_at`, `length`, `find`, `copy`, `delete`, `insert`, `duplicate`.
- `gamebreaker.mouse`: `MouseState` keeps the current and previous frame's buttons
  (fed through `update`) and the wheel (`set_wheel`), and answers `pressed`,
  `released`, `holding`, `nothing`, `which`, `wheel_up` and `wheel_down` for each
  `MouseButton`.
- `gamebreaker.objects`: `GameObject` with motion fields, alarms and event handlers
  keyed by `Event`, and an `ObjectRegistry` that hands out consecutive ids and
  forgets destroyed objects.
- `gamebreaker.rooms`: `Room` with placed instances (`RoomInstance`, ids from
  100000) and cameras (`CameraSetup`), and a `RoomManager` that tracks the current
  room and finds objects by instance id.
- `gamebreaker.window`: `Window` holds title, icon path, position, size and a
  thread-priority level (0 to 3).
- `gamebreaker.surface`: `Surface` sizes, a `RenderTarget` that records which
  surface is drawn to, and `surface_dest_rect` for scaled destination rectangles.
- `gamebreaker.messages`: `MessageBox` passes messages to a presenter callable; by
  default they are printed to standard error. `error(text, abort=True)` also prints
  the error and raises `SystemExit` with code `0xC01001`.
- `gamebreaker.ini`: `IniManager` reads an INI file (creating it if missing), keeps
  the line of every key, and rewrites the file with `modify` and `modify_comment`.
  `Section`, `IniData` and `IniValue` give access to the parsed data.
- `gamebreaker.audiofile`: `ErrorCode`, `AudioError`, and byte readers `DiskFile`
  and `MemoryFile` with `read8`, `read16` and `read32` (little-endian).
- `gamebreaker.audio`: `AudioPlayer` loads sounds (`AudioKind.SOUND` into memory,
  `AudioKind.MUSIC` checked on disk) and controls playback state through a
  `MemoryBackend`, which tracks voices, pause, looping and position.
- `gamebreaker.api`: flat functions over default instances, such as `object_add`,
  `mouse_pressed`, `window_set_size`, `audio_play` and `show_message`.

## Installing

```
pip install .
```

## Examples

```python
from gamebreaker import mathutil, gstr

mathutil.clamp(15, 0, 10)            # 10
mathutil.pdirection(0, 0, 0, -5)     # 90.0, straight up on screen
gstr.count("abcabc", "abc")          # 2
gstr.duplicate("ab", 3)              # "ababab"
```

Reading and changing a configuration file:

```python
from gamebreaker.ini import IniManager

config = IniManager("settings.ini")
config.modify("video", "width", "640", "window width")
print(config.sections())                 # ['video']
print(config["video"].to_int("width"))   # 640
```

Rooms and objects:

```python
from gamebreaker.objects import ObjectRegistry
from gamebreaker.rooms import RoomManager

objects = ObjectRegistry()
rooms = RoomManager()

player = objects.add(None, None)
level = rooms.add(640, 480)
inst = level.add_instance(player, 32, 48, None)
rooms.set_current(level)
assert rooms.find_object(inst) is player
```

## What it does not do

The package draws nothing and plays nothing. There is no window on screen, no
sprites, fonts or keyboard and joystick input, and no game loop. `MemoryBackend`
only keeps playback bookkeeping; no sound is produced, and sound lengths stay at
`-1`. Mouse state has to be fed in by the caller through `MouseState.update`.

## Running the tests

```
pip install ".[test]"
pytest
```