# obview

Building blocks for a viewer of printed-circuit-board layouts. The package
holds the parts of such a viewer that do not draw anything:

- `obview.confparse`: read and write the viewer's `key = value`
  configuration file with `Confparse`. `Confparse.load` creates a missing
  file. With `save_default=True` it writes the commented default
  configuration (`DEFAULT_CONF`); otherwise it writes an empty file. Values
  are read with `parse`, `parse_str`, `parse_int`, `parse_hex`,
  `parse_double` and `parse_bool`, and written back in place with
  `write_str`, `write_bool`, `write_int`, `write_hex` and `write_float`.
  Before it rewrites the file, the previous version is kept as `<file>~`.
- `obview.history`: keep up to 20 recently opened board files, newest first,
  with `FileHistory`. `trim_filename` keeps only the last few path
  components of a path for display.
- `obview.annotations`: `Annotations` stores board notes in an SQLite
  database next to the board file. For `board.brd` the database is
  `board_brd.sqlite3`. Per-part, per-pin and per-net details (`PartInfo`,
  `PinInfo`, `NetInfo`) are saved to and reloaded from `board.brd.yaml`
  with `save_pin_infos` and `refresh_pin_infos`.
- `obview.vectorhulls`: 2D geometry on `Vec2` points. It covers
  `convex_hull`, `tighten_hull`, the minimum-area bounding box
  `mbb_calculate`, `rotate`, `angle_to_x`, `convex_hull_orientation` and
  `get_intersection`.
- `obview.utils`: file and string helpers: `file_as_buffer`,
  `check_fileext`, `find_str_in_buf`, `compare_string_insensitive`,
  `lookup_file_insensitive` and `split_string`.
- `obview.platform`: per-user configuration and data directories through
  `get_user_dir` and `UserDir`, plus `create_dir`, `create_dirs`,
  `strcasestr`, `utf16_to_utf8` and `utf8_to_utf16`.
- `obview.cli`: the viewer's command-line options. `parse_parameters`
  returns an `Options` and raises `UsageError` for unknown options or
  missing values. `usage` gives the help text. `font_scale_factor` gives
  the scale of the enlarged font.

## Installing

```
pip install .
```

## Examples

Read settings, falling back to defaults:

```python
from obview.confparse import Confparse

conf = Confparse()
conf.load("obv.conf", save_default=True)
width = conf.parse_int("windowX", 1100)
background = conf.parse_hex("backgroundColor", 0xFFFFFFFF)
conf.write_bool("showFPS", True)
```

Compute the outline of a part from its pins:

```python
from obview.vectorhulls import Vec2, convex_hull, mbb_calculate

pins = [Vec2(0, 0), Vec2(4, 0), Vec2(4, 2), Vec2(0, 2), Vec2(2, 1)]
hull = convex_hull(pins)
corners = mbb_calculate(hull, 0.5)   # four Vec2 corners
```

Remember recently opened boards:

```python
from obview.history import FileHistory

history = FileHistory("obv.history")
history.load()
history.prepend_save("/boards/mainboard.brd")
print(history.entries[0])
```

Keep notes on a board:

```python
from obview.annotations import Annotations

with Annotations("board.brd") as notes:
    notes.load()
    notes.add(0, 120.0, 45.0, "GND", "U1", "3", "check solder joint")
    for annotation in notes.generate_list():
        print(annotation.id, annotation.part, annotation.note)

    notes.new_pin_info("U1", "3").voltage = "3.3"
    notes.save_pin_infos()
```

Read command-line options:

```python
from obview.cli import UsageError, parse_parameters, usage

try:
    options = parse_parameters(["-i", "board.brd", "-x", "1280", "-y", "800"])
except UsageError as exc:
    print(exc)
    print(usage("viewer"))
```

## What this package does not do

It does not open a window, draw boards or read board file formats. It
installs no command: `obview.cli` only parses and describes the options that
a viewer program would take.