# animstudio

Building blocks for a small desktop application, using only the standard
library:

- `animstudio.common`: `Vec2` and `Vec4`, mutable dataclass vectors with
  `+`, `-`, `+=`, `-=`, `set`, `lerp` and `intersects` (point-in-box test).
- `animstudio.ecs`: `Registry` and `Entity`, a minimal entity–component
  registry. Components are plain objects looked up by type with `get`,
  `has`, `collect`, `get_all` and `collect_all`; `free` and `free_all`
  remove them.
- `animstudio.fps`: `FPS`, which decides whether a frame is due for a target
  rate (`at`) and reports the seconds between frames (`delta_time`). A custom
  millisecond clock can be passed in.
- `animstudio.mouse`: `Mouse` and `MouseState`. A `Mouse` holds a position,
  a state and one exclusive grab with an optional payload (`grab`,
  `release`, `is_grabbing`, `grab_id`, `payload`).
- `animstudio.binaryio`: `read_string` / `write_string` for strings stored
  as a little-endian unsigned 64-bit length followed by UTF-8 bytes, and
  `read_file` / `write_file` helpers that hand an open binary stream to a
  callback.
- `animstudio.state_serializer`: `StateSerializer`, which keeps named string
  maps (`map`) and string lists (`vector`) and writes them to, or reads them
  from, the file described by a `SaveFile` (`directory / (name + extension)`).
- `animstudio.project_manager`: `ProjectManager`, `ProjectData` and
  `RecentProject`. It saves and loads a project file, generates ids
  (`generate_uid`), and keeps a "recent" file with the most recently used
  projects (five by default), newest first.
- `animstudio.assets`: `Assets.import_assets`, which prints each path it is
  given.
- `animstudio.textedit_layout`, `animstudio.textedit_undo`,
  `animstudio.textedit`: a multi-line text editing engine. `TextEditState`
  handles clicks, drags, cut, paste, typing (with insert mode) and the keys
  in `Key`: arrows, word jumps, line/text start and end, page up/down,
  delete, backspace, undo and redo; hold `Key.SHIFT` to extend the
  selection. Text lives in a `TextBuffer`; `MonospaceBuffer` is a ready-made
  fixed-width one. `UndoState` keeps bounded undo/redo history
  (99 records and 999 characters by default).

## Installation

```
pip install animstudio
```

With the test dependencies:

```
pip install "animstudio[test]"
```

## Examples

### Entities and components

```python
from dataclasses import dataclass
from animstudio.ecs import Registry

@dataclass
class Position:
    x: float
    y: float

registry = Registry()
player = registry.create_entity("player")
player.add(Position(1.0, 2.0))

assert player.has(Position)
assert player.get(Position).x == 1.0
assert player.is_named("player")
```

### Vectors

```python
from animstudio.common import Vec2

a = Vec2(0, 0)
b = Vec2(10, 20)
mid = Vec2.lerp(a, b, 0.5)                       # Vec2(x=5.0, y=10.0)
inside = mid.intersects(Vec2(0, 0), Vec2(10, 10))  # True
```

### Mouse grabs

```python
from animstudio.mouse import Mouse

mouse = Mouse()
mouse.grab(7, payload={"offset": (3, 4)})
assert not mouse.grab(8)          # someone else already holds the grab
assert mouse.payload(dict) == {"offset": (3, 4)}
mouse.release(7)
```

### Editing text

```python
from animstudio.textedit import Key, TextEditState
from animstudio.textedit_layout import MonospaceBuffer

buffer = MonospaceBuffer("hello")
state = TextEditState()
state.key(buffer, Key.TEXTEND)
state.text(buffer, " world")       # buffer.text == "hello world"
state.key(buffer, Key.UNDO)        # buffer.text == "hello"
state.key(buffer, Key.LEFT | Key.SHIFT)  # selects the "o"
```

### Saving state

```python
from animstudio.state_serializer import SaveFile, StateSerializer

serializer = StateSerializer(SaveFile("layout", ".bin", "."))
serializer.map("window")["theme"] = "dark"
serializer.vector("recent").append("scene.anim")
path = serializer.write()          # ./layout.bin

loaded = StateSerializer(SaveFile("layout", ".bin", "."))
loaded.read()
assert loaded.map("window") == {"theme": "dark"}
```

### Projects

```python
from animstudio.project_manager import ProjectManager

manager = ProjectManager(".anim", directory=".")
manager.data.name = "Demo"
manager.data.filepath = "demo.anim"
if manager.is_ready():
    manager.serialize(generate_uid=True)
    manager.update_recent_projects()   # writes ./recent
```

## What this package does not do

There is no window, renderer, main loop, theme or font handling, and no
event source: nothing here opens a screen or reads the keyboard or mouse
from the operating system. `Mouse` and `TextEditState` are updated only by
the calls you make on them, and text layout is whatever your `TextBuffer`
reports. There is no command-line program.

## Running the tests

```
pytest
```