# glyphgrid

Building blocks for character-grid displays that use the CP437 glyph set,
the kind of screen that a roguelike game draws.

- `glyphgrid.textblock.TextBlock` is a fixed-size rectangle of tiles. You fill
  it with styled text described by a `TextBuilder` and then copy it onto a
  console.
- `glyphgrid.sparse_console.SparseConsole` keeps only the cells that have been
  drawn to. This suits overlays and layers that are mostly empty.

## Installation

```
pip install glyphgrid
```

To run the test suite:

```
pip install "glyphgrid[test]"
pytest
```

## Colours

Colours are stored exactly as you pass them. The package does not inspect
them. The defaults are the tuples `WHITE = (1.0, 1.0, 1.0)` for foreground and
`BLACK = (0.0, 0.0, 0.0)` for background, both defined in `glyphgrid.textblock`.

## Text blocks

```python
from glyphgrid.textblock import TextBlock, TextBuilder

block = TextBlock(1, 1, 20, 5)

text = TextBuilder()
text.fg((1.0, 1.0, 0.0)).centered("Inventory").ln()
text.fg((1.0, 1.0, 1.0)).append("Gold: 12").ln()
text.line_wrap("A long description that wraps on word boundaries")

block.print(text)
tile = block.tile_at(0, 1)   # Tile(glyph=71, ...), the "G" of "Gold"
```

Every builder method records one command and returns the builder, so calls
can be chained. `len(builder)` gives the number of recorded commands.
`TextBlock.print(builder)` carries out the commands in order, starting from
the block's current cursor:

| Builder method    | Effect when printed                                                        |
|-------------------|----------------------------------------------------------------------------|
| `append(text)`    | Writes the text at the cursor.                                             |
| `centered(text)`  | Moves the cursor to `width // 2 - len(text) // 2` on the current row, then writes the text. |
| `ln()`            | Moves the cursor to column 0 of the next row.                              |
| `fg(col)`         | Sets the foreground colour for later writes.                               |
| `bg(col)`         | Sets the background colour for later writes.                               |
| `reset()`         | Moves the cursor to (0, 0) and restores white on black.                    |
| `line_wrap(text)` | Splits the text on spaces and writes each word followed by a space. If the word and its space would reach the right edge, it moves to the next row first. |

When a write reaches the right edge, the cursor moves to the start of the next
row. A write outside the block raises `IndexError`.

The block also has its own methods. `fg(col)` and `bg(col)` set the current
colours. `move_to(x, y)` places the cursor, and `cursor` holds the current
position as an `(x, y)` tuple. `tile_at(x, y)` returns the `Tile` (with
`glyph`, `fg` and `bg`) at block-local coordinates, and raises `IndexError`
when the position is outside the block.

`TextBlock.render(console)` calls `console.set(x, y, fg, bg, glyph)` once for
every cell. Each cell is placed at the block's own `x`/`y` plus its offset
within the block. Any object with such a `set` method will do, and
`SparseConsole` is one.

`to_cp437(text)` encodes a string as CP437 glyph bytes. Characters that
CP437 cannot represent become `?`.

## Sparse consoles

```python
from glyphgrid.sparse_console import SparseConsole

console = SparseConsole(80, 50)
console.print(2, 3, "Hello")
console.print_color_centered(10, (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), "Game over")
console.set(5, 5, (0.0, 1.0, 0.0), (0.0, 0.0, 0.0), ord("@"))

for tile in console.tiles:
    print(tile.idx, tile.glyph)
```

- `at(x, y)` returns the cell index `(height - 1 - y) * width + x`, which
  means row 0 is the bottom row. It raises `IndexError` when `x` is negative
  or `y` is outside the console.
- `print`, `print_color` and `set` add `SparseTile(idx, glyph, fg, bg)`
  entries to `tiles`, one per glyph, at consecutive indices. `print` writes
  white on black. Earlier tiles are never replaced: every call adds new
  entries.
- `print_centered` and `print_color_centered` start at
  `width // 2 - n // 2`, where `n` is the length of the text in UTF-8 bytes.
- `set_bg(x, y, bg)` changes the background of the entry whose position in
  the `tiles` list equals the cell index `at(x, y)`. That entry is not
  necessarily the tile drawn at that cell.
- `cls()` and `cls_bg(background)` remove every tile. The background is
  ignored.
- `get_char_size()` returns `(width, height)`.
- `set_offset(x, y)` stores a rendering offset given as a fraction of a
  character. It is scaled to `x * 2 / width` and `y * 2 / height`, and the
  `offset` property returns the scaled pair.
- `is_dirty` starts as `True`. The printing methods, `cls`, `cls_bg` and
  `resize_pixels(width, height)` set it to `True`, but `set` and `set_bg` do
  not. `mark_clean()` sets it back to `False`.

## What the package does not do

glyphgrid keeps tiles, colours, offsets and a dirty flag. It does not draw
anything to a window or terminal, so turning `SparseConsole.tiles` or a
rendered `TextBlock` into pixels or screen output is up to your own code. It
has no box, frame or progress-bar drawing and no file import or export.