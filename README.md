# cubscene

`cubscene` reads `.cub` scene description files, the kind used by small
raycasting games. It also decodes XPM images, the format those scenes use
for their wall textures. It has no dependencies outside the standard
library.

## The scene format

A scene file starts with configuration lines. Each line is an identifier,
a space, one value, a space, and then the newline:

```
NO ./textures/north.xpm 
SO ./textures/south.xpm 
WE ./textures/west.xpm 
EA ./textures/east.xpm 
F 220,100,0 
C 225,30,0 
```

Note the space before each line's end. The line is split on spaces, and
the third field must be the newline itself. A line such as
`NO ./north.xpm` with nothing between the path and the newline is
rejected. Blank lines and unknown identifiers are also rejected in the
configuration part.

- `NO`, `SO`, `WE`, `EA` set the four texture paths.
- `F` and `C` set the floor and ceiling colours as `R,G,B`. There must be
  exactly three components. Each is a whole number from 0 to 255 with an
  optional leading `+` (`-0` is also accepted). The colour is stored as
  one packed `0xRRGGBB` integer.

The six lines may come in any order. If an identifier appears again, the
later value replaces the earlier one. Once all six are set, every
following line belongs to the map. The map rows are the map text split on
newlines, with empty rows dropped:

```
111111
100001
1000N1
111111
```

If the file ends before all six settings are present, parsing still
succeeds. The missing paths stay unset, the missing colours stay `-1`, and
there is no map.

## Installation

```
pip install .
```

## Command line

```
cubscene path/to/scene.cub
```

The command prints a report like this one:

```
no_path:    ./textures/north.xpm
so_path:    ./textures/south.xpm
we_path:    ./textures/west.xpm
ea_path:    ./textures/east.xpm
f_rgb:      14443520
c_rgb:      14753280
map:
  111111
  100001
  1000N1
  111111
```

An unset path is shown as `(null)`. A missing map is shown as
`map:        (null)`.

The command exits with status 1 in these cases:

- It is not given exactly one argument. It then prints `Error` and a usage
  line to standard output.
- The file name does not end in `.cub`.
- The file cannot be opened.
- A configuration line is malformed.

In the last three cases the message goes to standard error.

## Library use

```python
from cubscene.cli import parse_file, format_game_data

data = parse_file("maps/level1.cub")   # raises cubscene.config.ConfigError
print(data.no_path, hex(data.f_rgb))
for row in data.map or []:
    print(row)
print(format_game_data(data), end="")
```

`cubscene.cli.check_extension(filename)` raises `ConfigError` unless the
name ends in `.cub`.

You can also feed lines to the loader yourself. Each line must include its
newline:

```python
from cubscene.config import SceneLoader, ConfigError

loader = SceneLoader()
with open("maps/level1.cub") as handle:
    for line in handle:
        loader.load_line(line)
data = loader.finish()          # a cubscene.config.GameData
print(data.params_loaded())     # True once all textures and colours are set
```

`GameData` holds these fields:

- `no_path`, `so_path`, `we_path`, `ea_path`
- `f_rgb`, `c_rgb`
- `map_text`, the raw map lines joined together
- `map`, the list of rows
- `map_path`

The module also provides `cubscene.config.parse_rgb("R,G,B")` and
`cubscene.config.is_numeric(text)`.

### Line reading

`cubscene.reader.LineReader(stream, buffer_size=32)` reads a text stream in
fixed-size chunks. It returns one line at a time, each with its newline,
from `read_line()`, or by iteration. `read_line()` returns `None` at the
end of the stream. `reset()` drops any buffered text.

### Textures

```python
from cubscene.xpm import parse_xpm_file, XpmError

image = parse_xpm_file("textures/north.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
raw = image.to_bytes(4, big_endian=False)
```

`parse_xpm_file` removes comments that are outside quoted strings. It then
decodes the quoted strings of the file. `parse_xpm(lines)` decodes a
sequence of strings directly, starting with the header, then the palette,
then the pixel rows.

Pixel values are `0xRRGGBB`, with these exceptions:

- A pixel whose key is missing from the palette is 0.
- A pixel of the transparent colour `None` is `0xFF000000`.

Malformed data raises `XpmError`.

Palette colours are given either as `#` followed by hexadecimal digits or
as an X11 colour name, matched without regard to case. To look a name up
yourself, use `cubscene.colors.lookup_color(name)`. It returns `None` for
an unknown name and `-1` for `none`. You can also use
`cubscene.colors.text_to_rgb(name, suffix=None)`, which returns 0 for an
unknown name.

To fit a packed `0xRRGGBB` colour to a visual with fewer colour bits, use
`cubscene.visual.mask_shifts(red_mask, green_mask, blue_mask)` together
with `cubscene.visual.reduce_color(color, depth, shifts)`.

`cubscene.strutil` contains the small string helpers the parser is built
on: `atoi`, `split`, `strrstr` and others.

## What it does not do

`cubscene` only reads and reports scene data. It does not:

- open a window, render the scene or run a game;
- check that the map is closed by walls or holds only valid characters;
- check that the texture paths exist.