import pytest

from glyphgrid.textblock import BLACK, WHITE, TextBlock, TextBuilder, Tile, to_cp437


class RecordingConsole:
    def __init__(self):
        self.calls = []

    def set(self, x, y, fg, bg, glyph):
        self.calls.append((x, y, fg, bg, glyph))


def test_to_cp437_ascii_round_trip():
    assert to_cp437("Hello") == b"Hello"
    assert to_cp437("Hello").decode("cp437") == "Hello"


def test_to_cp437_unmappable_becomes_question_mark():
    assert to_cp437("\u4e2d") == b"?"


def test_new_block_is_blank():
    block = TextBlock(0, 0, 4, 3)
    assert all(block.tile_at(x, y) == Tile(0, WHITE, BLACK) for x in range(4) for y in range(3))
    assert block.cursor == (0, 0)


def test_builder_chains_and_counts_commands():
    builder = TextBuilder()
    result = builder.append("a").ln().fg("red").bg("blue").centered("b").line_wrap("c d").reset()
    assert result is builder
    assert len(builder) == 7


def test_append_writes_and_wraps_at_width():
    block = TextBlock(0, 0, 3, 2)
    block.print(TextBuilder().append("abcd"))
    assert [block.tile_at(x, 0).glyph for x in range(3)] == [ord("a"), ord("b"), ord("c")]
    assert block.tile_at(0, 1).glyph == ord("d")
    assert block.cursor == (1, 1)


def test_colours_apply_to_following_text():
    block = TextBlock(0, 0, 5, 1)
    block.print(TextBuilder().fg("red").bg("blue").append("x"))
    tile = block.tile_at(0, 0)
    assert (tile.fg, tile.bg) == ("red", "blue")


def test_block_fg_and_bg_setters():
    block = TextBlock(0, 0, 5, 1)
    block.fg("green")
    block.bg("yellow")
    block.print(TextBuilder().append("q"))
    assert block.tile_at(0, 0) == Tile(ord("q"), "green", "yellow")


def test_newline_moves_to_next_row_start():
    block = TextBlock(0, 0, 5, 3)
    block.print(TextBuilder().append("ab").ln().append("c"))
    assert block.tile_at(0, 1).glyph == ord("c")
    assert block.tile_at(2, 0).glyph == 0


def test_centered_text():
    block = TextBlock(0, 0, 10, 1)
    block.print(TextBuilder().centered("ab"))
    assert block.tile_at(4, 0).glyph == ord("a")
    assert block.tile_at(5, 0).glyph == ord("b")


def test_reset_restores_cursor_and_colours():
    block = TextBlock(0, 0, 5, 2)
    block.print(TextBuilder().fg("red").append("ab").reset().append("z"))
    assert block.tile_at(0, 0) == Tile(ord("z"), WHITE, BLACK)
    assert block.tile_at(1, 0).fg == "red"


def test_line_wrap_moves_words_to_next_line():
    block = TextBlock(0, 0, 8, 3)
    block.print(TextBuilder().line_wrap("hello world"))
    assert bytes(block.tile_at(x, 0).glyph for x in range(6)) == b"hello "
    assert bytes(block.tile_at(x, 1).glyph for x in range(6)) == b"world "


def test_move_to_sets_print_position():
    block = TextBlock(0, 0, 5, 5)
    block.move_to(2, 3)
    block.print(TextBuilder().append("k"))
    assert block.tile_at(2, 3).glyph == ord("k")


def test_writing_past_the_end_raises():
    block = TextBlock(0, 0, 2, 1)
    with pytest.raises(IndexError):
        block.print(TextBuilder().append("abc"))


def test_tile_at_outside_raises():
    block = TextBlock(0, 0, 2, 2)
    with pytest.raises(IndexError):
        block.tile_at(0, 2)
    with pytest.raises(IndexError):
        block.tile_at(-1, 0)


def test_render_offsets_every_cell():
    block = TextBlock(3, 7, 2, 2)
    block.print(TextBuilder().append("ab"))
    console = RecordingConsole()
    block.render(console)
    assert len(console.calls) == 4
    assert console.calls[0] == (3, 7, WHITE, BLACK, ord("a"))
    assert console.calls[1] == (4, 7, WHITE, BLACK, ord("b"))
    assert {(x, y) for x, y, *_ in console.calls} == {(3, 7), (4, 7), (3, 8), (4, 8)}