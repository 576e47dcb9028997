# raycub

raycub is a small grid-based raycaster in pure Python. It has no
dependencies outside the standard library.

It does four things:

- It reads maps built from walls, open floor, sprites and a single player
  start.
- It checks that a map is closed.
- It renders frames with floor and ceiling colours, textured walls and
  billboard sprites.
- It encodes a frame as a 24-bit BMP image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Map format

A map is a block of lines. Each line is made from these characters:

| Character | Meaning |
|-----------|---------|
| `1` | wall |
| `0` | open floor |
| `2` | sprite |
| space | void |
| `N`, `S`, `E`, `W` | the player's start cell and facing |

`raycub.mapfile.parse_map(lines)` builds the map from these lines:

- It skips the leading lines that contain neither `0` nor `1`.
- Every line from the first map row onwards belongs to the map.
- It finds the player with `find_player`. The player mark becomes `0`.
- It checks the map with `check_closed`.
- It converts the rows to integers with `build_grid`. A space becomes `0`.

`check_closed` flood-fills from every `0` in all eight directions. It
raises `MapError` in three cases:

- an open cell reaches a space;
- an open cell reaches the area outside the rows;
- the map is more than 254 cells high or wide.

`find_player` raises `MapError` when there is no player start or more than
one. `MapError` is a subclass of `ValueError`.

```python
from raycub.lines import read_lines
from raycub.mapfile import parse_map, MapError

try:
    game_map = parse_map(read_lines("level.cub"))
except MapError as err:
    print("bad map:", err)
```

A `GameMap` has these members:

- `grid` holds the integer cells.
- `player` is a `Player` with `x`, `y` and `direction`. The position is the
  centre of the start cell.
- `is_wall(x, y)` returns whether a cell is a wall. Cells outside the grid
  count as walls.
- `sprite_positions()` returns the `(x, y)` centres of the sprite cells, in
  row-major order.

## Reading lines

`raycub.lines.iter_lines(stream)` yields the lines of a text stream without
their `"\n"`. Only `"\n"` ends a line, so a `"\r"` stays part of the line.
Text after the last newline becomes a final line if it is not empty.

`read_lines(path)` opens a UTF-8 file and returns all of its lines as a
list.

## Scenes and rendering

A `raycub.scene.Scene` holds the following:

- `width` and `height`
- `floor` and `ceiling` colours as `0xRRGGBB`. `-1` means unset.
- `texture_paths`, a free-form dict
- `textures`, five pixel lists of size `TEX_WIDTH` × `TEX_HEIGHT` (64 × 64)
- `game_map`
- `camera`, a `Camera` with `pos_x`, `pos_y`, `dir_x`, `dir_y`, `plane_x`
  and `plane_y`

Walls use textures 0 to 3. A wall hit on an x-side uses texture 3 when the
ray points towards negative x and texture 2 otherwise. A wall hit on a
y-side uses texture 1 when the ray points towards positive y and texture 0
otherwise. Sprites use texture 4. A sprite pixel whose colour is `0x000000`
is transparent.

`Scene.clamp_to_screen(max_width, max_height)` shrinks a resolution that is
larger than the screen to one pixel below the screen size.

```python
from raycub.lines import read_lines
from raycub.mapfile import parse_map
from raycub.scene import Scene, Camera, TEX_WIDTH, TEX_HEIGHT
from raycub.render import render
from raycub.bmp import save_bmp

game_map = parse_map(read_lines("level.cub"))
start = game_map.player
camera = Camera(pos_x=start.x, pos_y=start.y,
                dir_x=0.0, dir_y=-1.0, plane_x=0.66, plane_y=0.0)
wall = [0x808080] * (TEX_WIDTH * TEX_HEIGHT)
sprite = [0xFF0000] * (TEX_WIDTH * TEX_HEIGHT)
scene = Scene(width=320, height=200, floor=0x303030, ceiling=0x87CEEB,
              textures=[wall, wall, wall, wall, sprite],
              game_map=game_map, camera=camera)

frame = render(scene)
save_bmp(frame, "screenshot.bmp")
```

`raycub.render.render(scene)` returns a `Frame`. A frame is a width × height
grid of `0xRRGGBB` colours. `Frame.get(x, y)` reads a pixel and
`Frame.set(x, y, color)` writes one. Coordinates outside the frame raise
`IndexError`.

You can also run the stages yourself, in this order:

1. `fill_floor_ceiling(scene, frame)` paints the `ceiling` colour into the
   rows below the middle and the `floor` colour into the mirrored rows
   above it. It starts at column 1.
2. `cast_walls(scene, frame)` draws the textured walls. It returns the
   perpendicular wall distance for each column.
3. `draw_sprites(scene, frame, zbuffer)` draws the sprites from back to
   front. A wall that is nearer in the depth buffer hides the sprite.

`cast_ray(scene, x)` returns the `RayHit` for one screen column.
`sort_sprites(camera, sprites)` orders sprite positions from farthest to
nearest. It compares squared distances after truncating them to whole
numbers. A scene without a map raises `ValueError`.

## BMP output

`raycub.bmp.encode_bmp(frame)` returns an uncompressed, bottom-up, 24-bit
BMP as bytes. Each row is padded with `width % 4` zero bytes.

`save_bmp(frame, path="screenshot.bmp")` writes the same bytes to a file and
replaces any file already at that path.

## Text helpers

`raycub.textutil` holds small string routines. Nothing else in the package
uses them.

- `atoi` parses a leading integer. It returns `-1` above the 32-bit range
  and `0` below it.
- `itoa` converts an integer to a string.
- `split` splits on one character and drops empty pieces.
- `strtrim` strips characters from both ends.
- `substr` cuts out part of a string.
- `strnstr` finds a substring within a length limit. It returns the index,
  or `-1` when there is no match.
- `strcmp` and `strncmp` return the code-point difference at the first
  mismatch.
- `flip` swaps characters pairwise from the outside in. That is a full
  reversal only for strings of odd length.

## What is not included

raycub has no command-line program. It also does not do the following:

- It does not open a window or handle keyboard input or movement.
- It does not load texture images from files.
- It does not parse the header lines of a scene file, such as the
  resolution, texture paths and colours. You fill in those `Scene` fields
  yourself.
- It does not turn the player's start `direction` into a camera direction
  and plane. You set up the `Camera` yourself.