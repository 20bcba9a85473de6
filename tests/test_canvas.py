"""Tests for the canvas state machine and escape-sequence output."""

import logging

import pytest

from termcanvas.core.canvas import Canvas
from termcanvas.core.color import Color
from termcanvas.core.style import Style
from termcanvas.errors import OutOfBoundsError


class TestConstruction:
    """Tests for the initial pre-fill."""

    def test_prefill_with_background(self, stream) -> None:
        canvas = Canvas(3, 2, Color.GREEN, stream=stream)
        assert stream.getvalue() == (
            "\x1b[0m\x1b[48;5;2m"
            "   \x1b[49m\n\x1b[48;5;2m"
            "   "
            "\x1b[3D\x1b[1A"
        )
        assert canvas.cursor == (0, 0)
        assert canvas.pending == ""

    def test_prefill_default_background(self, stream) -> None:
        Canvas(10, 5, stream=stream)
        rows = ["          "] * 5
        assert stream.getvalue() == "\x1b[0m" + "\n".join(rows) + "\x1b[10D\x1b[4A"

    def test_prefill_is_one_write(self, stream) -> None:
        Canvas(4, 3, Color.BLUE, stream=stream)
        assert len(stream.writes) == 1

    def test_single_row_canvas(self, stream) -> None:
        canvas = Canvas(4, 1, stream=stream)
        assert stream.getvalue() == "\x1b[0m    \x1b[4D"
        assert canvas.cursor == (0, 0)

    def test_dimensions_are_fixed(self, make_canvas) -> None:
        canvas = make_canvas(7, 3)
        assert (canvas.width, canvas.height) == (7, 3)
        with pytest.raises(AttributeError):
            canvas.width = 8

    @pytest.mark.parametrize(
        "width, height", [(0, 5), (5, 0), (-1, 3), (2.5, 2), (4, 2.0), ("5", 3), (True, 3)]
    )
    def test_rejects_bad_dimensions(self, stream, width, height) -> None:
        with pytest.raises(ValueError):
            Canvas(width, height, stream=stream)

    def test_cache_after_construction(self, make_canvas) -> None:
        canvas = make_canvas(background=Color.RED)
        assert canvas.current_style == Style.NORMAL
        assert canvas.current_background == Color.RED
        assert canvas.current_foreground == Color.DEFAULT


class TestMove:
    """Tests for relative cursor motion."""

    @pytest.mark.parametrize(
        "start, target, expected",
        [
            ((0, 0), (3, 0), "\x1b[3C"),
            ((0, 0), (0, 4), "\x1b[4B"),
            ((0, 0), (9, 4), "\x1b[9C\x1b[4B"),
            ((9, 4), (2, 1), "\x1b[7D\x1b[3A"),
            ((5, 1), (5, 3), "\x1b[2B"),
            ((5, 3), (1, 3), "\x1b[4D"),
        ],
    )
    def test_emits_one_fragment_per_axis(self, make_canvas, start, target, expected) -> None:
        canvas = make_canvas(10, 5)
        canvas.move(*start)
        canvas.flush()
        canvas.move(*target)
        assert canvas.pending == expected
        assert canvas.cursor == target

    def test_move_to_current_position_is_noop(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.move(4, 2)
        canvas.flush()
        canvas.move(4, 2)
        assert canvas.pending == ""

    @pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, -1), (0, 5), (10, 5)])
    def test_out_of_bounds(self, make_canvas, x, y) -> None:
        canvas = make_canvas(10, 5)
        canvas.move(2, 2)
        canvas.flush()
        with pytest.raises(OutOfBoundsError) as exc_info:
            canvas.move(x, y)
        assert (exc_info.value.x, exc_info.value.y) == (x, y)
        assert canvas.cursor == (2, 2)
        assert canvas.pending == ""

    def test_out_of_bounds_is_index_error(self, make_canvas) -> None:
        canvas = make_canvas()
        with pytest.raises(IndexError):
            canvas.move(100, 0)

    def test_out_of_bounds_is_logged(self, make_canvas, diagnostics, caplog) -> None:
        canvas = make_canvas(logger=diagnostics)
        with caplog.at_level(logging.ERROR, logger="termcanvas.test"):
            with pytest.raises(OutOfBoundsError):
                canvas.move(-1, 0)
        assert "out of bounds: (-1,0)" in caplog.text


class TestWrite:
    """Tests for text output and truncation."""

    def test_write_advances_cursor(self, make_canvas) -> None:
        canvas = make_canvas()
        assert canvas.write("abc") == 3
        assert canvas.pending == "abc"
        assert canvas.cursor == (3, 0)

    def test_truncates_to_remaining_columns(self, make_canvas, diagnostics, caplog) -> None:
        canvas = make_canvas(10, 5, logger=diagnostics)
        canvas.move(7, 0)
        with caplog.at_level(logging.ERROR, logger="termcanvas.test"):
            written = canvas.write("hello")
        assert written == 3
        assert canvas.pending == "\x1b[7Chel\x1b[1D"
        assert canvas.cursor == (9, 0)
        assert "truncated" in caplog.text

    def test_exact_fill_leaves_cursor_on_last_column(self, make_canvas) -> None:
        canvas = make_canvas(10, 5)
        canvas.move(7, 3)
        assert canvas.write("abc") == 3
        assert canvas.cursor == (9, 3)

    def test_truncates_on_character_boundaries(self, make_canvas) -> None:
        canvas = make_canvas(10, 5)
        canvas.move(8, 0)
        canvas.flush()
        assert canvas.write("日本語") == 2
        assert canvas.pending.startswith("日本")

    def test_truncation_without_logger_is_silent(self, make_canvas) -> None:
        canvas = make_canvas(4, 1)
        assert canvas.write("toolong") == 4

    def test_empty_write(self, make_canvas) -> None:
        canvas = make_canvas()
        assert canvas.write("") == 0
        assert canvas.pending == ""


class TestSet:
    """Tests for single-character drawing."""

    def test_set_scenario(self, make_canvas, stream) -> None:
        canvas = make_canvas(10, 5)
        canvas.set(3, 2, "X")
        canvas.flush()
        assert stream.getvalue() == "\x1b[3C\x1b[2BX"
        assert canvas.cursor == (4, 2)

    def test_out_of_bounds_is_dropped(self, make_canvas) -> None:
        canvas = make_canvas(10, 5)
        canvas.set(10, 2, "X")
        canvas.set(-1, 0, "Y")
        assert canvas.pending == ""
        assert canvas.cursor == (0, 0)

    def test_set_last_column(self, make_canvas) -> None:
        canvas = make_canvas(10, 5)
        canvas.set(9, 0, "Z")
        assert canvas.pending == "\x1b[9CZ\x1b[1D"
        assert canvas.cursor == (9, 0)

    @pytest.mark.parametrize("char", ["", "abc"])
    def test_requires_exactly_one_character(self, make_canvas, char) -> None:
        canvas = make_canvas(10, 5)
        with pytest.raises(ValueError):
            canvas.set(0, 0, char)
        assert canvas.cursor == (0, 0)
        assert canvas.pending == ""


class TestColorsAndStyle:
    """Tests for cached color and style changes."""

    def test_foreground(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_foreground(Color.RED)
        assert canvas.pending == "\x1b[38;5;1m"
        assert canvas.current_foreground == Color.RED

    def test_background_rgb_is_quantized(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_background(Color.from_rgb(255, 0, 0))
        assert canvas.pending == "\x1b[48;5;9m"

    def test_default_colors_reset_channel(self, make_canvas) -> None:
        canvas = make_canvas(background=Color.BLUE)
        canvas.set_foreground(Color.RED)
        canvas.flush()
        canvas.set_foreground(Color.DEFAULT)
        canvas.set_background(Color.DEFAULT)
        assert canvas.pending == "\x1b[39m\x1b[49m"

    def test_equivalent_colors_hit_the_cache(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_foreground(Color(index=0, rgb=(255, 0, 0)))
        assert canvas.pending == "\x1b[38;5;9m"
        canvas.flush()
        canvas.set_foreground(Color(index=3, rgb=(255, 0, 0)))
        canvas.set_background(Color(index=2, is_default=True))
        assert canvas.pending == ""

    def test_repeated_colors_emit_nothing(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_foreground(Color.CYAN)
        canvas.set_background(Color.MAGENTA)
        canvas.flush()
        canvas.set_foreground(Color.CYAN)
        canvas.set_background(Color.MAGENTA)
        assert canvas.pending == ""

    def test_bold_twice(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_style(Style.BOLD)
        assert canvas.pending == "\x1b[1m"
        canvas.flush()
        canvas.set_style(Style.BOLD)
        assert canvas.pending == ""

    def test_normal_resets_first(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_style(Style.BOLD)
        canvas.flush()
        canvas.set_style(Style.NORMAL | Style.HIDDEN | Style.UNDERLINED)
        assert canvas.pending == "\x1b[0m\x1b[4m\x1b[8m"

    def test_contradictory_bits_are_emitted(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_style(Style.BOLD | Style.DIM)
        assert canvas.pending == "\x1b[1m\x1b[2m"

    def test_all_attributes_in_order(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_style(
            Style.HIDDEN | Style.INVERTED | Style.BLINK | Style.UNDERLINED | Style.DIM | Style.BOLD
        )
        assert canvas.pending == "\x1b[1m\x1b[2m\x1b[4m\x1b[5m\x1b[7m\x1b[8m"

    def test_reset_invalidates_color_cache(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.set_foreground(Color.RED)
        canvas.set_style(Style.BOLD)
        canvas.set_style(Style.NORMAL)
        canvas.flush()
        canvas.set_foreground(Color.RED)
        assert canvas.pending == "\x1b[38;5;1m"


class TestWriteAt:
    """Tests for the composite write_at operation."""

    def test_order_of_steps(self, make_canvas) -> None:
        canvas = make_canvas()
        written = canvas.write_at(1, 1, Color.RED, Color.BLUE, Style.BOLD, "hi")
        assert written == 2
        assert canvas.pending == (
            "\x1b[1C\x1b[1B" "\x1b[1m" "\x1b[38;5;1m" "\x1b[48;5;4m" "hi"
        )
        assert canvas.cursor == (3, 1)

    def test_out_of_bounds_aborts_everything(self, make_canvas) -> None:
        canvas = make_canvas()
        assert canvas.write_at(0, 9, Color.RED, Color.BLUE, Style.BOLD, "hi") == 0
        assert canvas.pending == ""
        assert canvas.current_style == Style.NORMAL
        assert canvas.current_foreground == Color.DEFAULT

    def test_cached_values_are_skipped(self, make_canvas) -> None:
        canvas = make_canvas()
        canvas.write_at(0, 0, Color.RED, Color.DEFAULT, Style.NORMAL, "a")
        canvas.flush()
        canvas.write_at(0, 1, Color.RED, Color.DEFAULT, Style.NORMAL, "b")
        assert canvas.pending == "\x1b[1D\x1b[1Bb"


class TestClear:
    """Tests for clearing the canvas."""

    def test_clear_rewrites_every_row(self, make_canvas) -> None:
        canvas = make_canvas(3, 2)
        canvas.clear()
        assert canvas.pending == (
            "   \x1b[1D"
            "\x1b[2D\x1b[1B"
            "   \x1b[1D"
            "\x1b[2D\x1b[1A"
        )
        assert canvas.cursor == (0, 0)

    def test_clear_uses_current_background(self, make_canvas) -> None:
        canvas = make_canvas(2, 1)
        canvas.set_background(Color.WHITE)
        canvas.clear()
        assert canvas.pending == "\x1b[48;5;15m  \x1b[1D\x1b[1D"


class TestFlush:
    """Tests for draining the buffer."""

    def test_flush_is_a_single_write(self, make_canvas, stream) -> None:
        canvas = make_canvas()
        canvas.set_foreground(Color.RED)
        canvas.set(1, 1, "a")
        canvas.set(5, 3, "b")
        canvas.flush()
        assert len(stream.writes) == 1
        assert canvas.pending == ""

    def test_empty_flush_writes_nothing(self, make_canvas, stream) -> None:
        canvas = make_canvas()
        canvas.flush()
        assert stream.writes == []

    def test_cursor_on_end(self, make_canvas, stream) -> None:
        canvas = make_canvas(10, 5, cursor_on_end=True)
        stream.reset()
        canvas.set(1, 1, "a")
        canvas.flush()
        # Construction already parked the cursor at (9, 4)
        assert stream.getvalue() == "\x1b[8D\x1b[3Aa\x1b[7C\x1b[3B"
        assert canvas.cursor == (9, 4)

    def test_buffer_cycles(self, make_canvas, stream) -> None:
        canvas = make_canvas()
        canvas.write("ab")
        canvas.flush()
        canvas.write("cd")
        canvas.flush()
        assert stream.writes == ["ab", "cd"]
