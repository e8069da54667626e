"""A console that stores only the cells that have been drawn to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from glyphgrid.textblock import BLACK, WHITE, to_cp437


@dataclass
class SparseTile:
    """A drawn cell: its index in the console plus glyph and colours."""

    idx: int
    glyph: int
    fg: Any
    bg: Any


@dataclass
class SparseConsole:
    """Console keeping a list of drawn tiles rather than a full grid."""

    width: int
    height: int
    tiles: list[SparseTile] = field(default_factory=list, init=False)
    is_dirty: bool = field(default=True, init=False)
    _offset_x: float = field(default=0.0, init=False, repr=False)
    _offset_y: float = field(default=0.0, init=False, repr=False)

    @property
    def offset(self) -> tuple[float, float]:
        return (self._offset_x, self._offset_y)

    def mark_clean(self) -> None:
        """Record that the current tiles have been drawn."""
        self.is_dirty = False

    def get_char_size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def resize_pixels(self, width: int, height: int) -> None:
        self.is_dirty = True

    def at(self, x: int, y: int) -> int:
        """Translate x/y to a tile index, counting rows from the bottom."""
        if x < 0 or not 0 <= y < self.height:
            raise IndexError(f"position ({x}, {y}) is outside the console")
        return (self.height - 1 - y) * self.width + x

    def cls(self) -> None:
        self.is_dirty = True
        self.tiles.clear()

    def cls_bg(self, background: Any) -> None:
        """Clear the screen; a sparse console has no background to fill."""
        self.cls()

    def print_color(self, x: int, y: int, fg: Any, bg: Any, output: str) -> None:
        self.is_dirty = True
        start = self.at(x, y)
        self.tiles.extend(
            SparseTile(start + offset, glyph, fg, bg)
            for offset, glyph in enumerate(to_cp437(output))
        )

    def print(self, x: int, y: int, output: str) -> None:
        self.print_color(x, y, WHITE, BLACK, output)

    def set(self, x: int, y: int, fg: Any, bg: Any, glyph: int) -> None:
        self.tiles.append(SparseTile(self.at(x, y), glyph, fg, bg))

    def set_bg(self, x: int, y: int, bg: Any) -> None:
        """Set the background of the stored tile whose list position is the cell index."""
        self.tiles[self.at(x, y)].bg = bg

    def _centre_x(self, text: str) -> int:
        return self.width // 2 - len(text.encode("utf-8")) // 2

    def print_centered(self, y: int, text: str) -> None:
        self.is_dirty = True
        self.print(self._centre_x(text), y, text)

    def print_color_centered(self, y: int, fg: Any, bg: Any, text: str) -> None:
        self.is_dirty = True
        self.print_color(self._centre_x(text), y, fg, bg, text)

    def set_offset(self, x: float, y: float) -> None:
        """Offset rendering by a fraction of a character cell."""
        self._offset_x = x * (2.0 / self.width)
        self._offset_y = y * (2.0 / self.height)