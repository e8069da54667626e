"""Fixed-size blocks of styled text built from a chain of drawing commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

WHITE = (1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0)


def to_cp437(text: str) -> bytes:
    """Encode text as code page 437 glyphs; unmappable characters become '?'."""
    return text.encode("cp437", errors="replace")


class _Console(Protocol):
    def set(self, x: int, y: int, fg: Any, bg: Any, glyph: int) -> None: ...


@dataclass
class Tile:
    """One cell of a text block."""

    glyph: int = 0
    fg: Any = WHITE
    bg: Any = BLACK


@dataclass(frozen=True)
class _Text:
    block: bytes


@dataclass(frozen=True)
class _Centered:
    block: bytes


@dataclass(frozen=True)
class _NewLine:
    pass


@dataclass(frozen=True)
class _Foreground:
    col: Any


@dataclass(frozen=True)
class _Background:
    col: Any


@dataclass(frozen=True)
class _TextWrapper:
    text: str


@dataclass(frozen=True)
class _Reset:
    pass


class TextBuilder:
    """Collects text and styling commands; every method returns the builder."""

    def __init__(self) -> None:
        self._commands: list[object] = []

    @property
    def commands(self) -> tuple[object, ...]:
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def _push(self, command: object) -> TextBuilder:
        self._commands.append(command)
        return self

    def append(self, text: str) -> TextBuilder:
        return self._push(_Text(to_cp437(text)))

    def centered(self, text: str) -> TextBuilder:
        return self._push(_Centered(to_cp437(text)))

    def reset(self) -> TextBuilder:
        return self._push(_Reset())

    def ln(self) -> TextBuilder:
        return self._push(_NewLine())

    def fg(self, col: Any) -> TextBuilder:
        return self._push(_Foreground(col))

    def bg(self, col: Any) -> TextBuilder:
        return self._push(_Background(col))

    def line_wrap(self, text: str) -> TextBuilder:
        return self._push(_TextWrapper(text))


@dataclass
class TextBlock:
    """A rectangle of tiles placed at (x, y) that text can be printed into."""

    x: int
    y: int
    width: int
    height: int
    _fg: Any = field(default=WHITE, init=False, repr=False)
    _bg: Any = field(default=BLACK, init=False, repr=False)
    _buffer: list[Tile] = field(default_factory=list, init=False, repr=False)
    cursor: tuple[int, int] = field(default=(0, 0), init=False)

    def __post_init__(self) -> None:
        self._buffer = [Tile() for _ in range(self.width * self.height)]

    def fg(self, fg: Any) -> None:
        self._fg = fg

    def bg(self, bg: Any) -> None:
        self._bg = bg

    def move_to(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def _index(self, x: int, y: int) -> int:
        idx = y * self.width + x
        if not 0 <= idx < len(self._buffer):
            raise IndexError(f"position ({x}, {y}) is outside the text block")
        return idx

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at block-local coordinates."""
        return self._buffer[self._index(x, y)]

    def render(self, console: _Console) -> None:
        """Copy every tile onto the console, offset by the block's position."""
        for y in range(self.height):
            for x in range(self.width):
                tile = self._buffer[self._index(x, y)]
                console.set(x + self.x, y + self.y, tile.fg, tile.bg, tile.glyph)

    def _newline(self) -> None:
        self.cursor = (0, self.cursor[1] + 1)

    def _put(self, glyph: int) -> None:
        cx, cy = self.cursor
        tile = self._buffer[self._index(cx, cy)]
        tile.glyph = glyph
        tile.fg = self._fg
        tile.bg = self._bg
        cx += 1
        self.cursor = (cx, cy)
        if cx >= self.width:
            self._newline()

    def print(self, text: TextBuilder) -> None:
        """Apply the builder's commands to the block in order."""
        for command in text.commands:
            match command:
                case _Text(block=block):
                    for glyph in block:
                        self._put(glyph)
                case _Centered(block=block):
                    self.cursor = (self.width // 2 - len(block) // 2, self.cursor[1])
                    for glyph in block:
                        self._put(glyph)
                case _NewLine():
                    self._newline()
                case _Foreground(col=col):
                    self._fg = col
                case _Background(col=col):
                    self._bg = col
                case _Reset():
                    self.cursor = (0, 0)
                    self._fg = WHITE
                    self._bg = BLACK
                case _TextWrapper(text=wrapped):
                    for word in wrapped.split(" "):
                        glyphs = to_cp437(word) + b" "
                        if self.cursor[0] + len(glyphs) >= self.width:
                            self._newline()
                        for glyph in glyphs:
                            self._put(glyph)