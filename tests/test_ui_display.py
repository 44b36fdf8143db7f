"""Tests for console rendering and text wrapping."""

import io

import pytest
from rich.console import Console

from treemenu.ui.display import ConsoleDisplay
from treemenu.ui.text import indent, wrap_text


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=40, color_system=None, highlight=False)


def output_lines(console):
    return console.file.getvalue().splitlines()


class TestIndent:
    def test_levels(self):
        assert indent(0) == ""
        assert indent(2) == " " * 8
        assert indent(1, indent_width=2) == "  "

    def test_negative_level_is_flat(self):
        assert indent(-1) == ""


class TestWrapText:
    """Test wrapping at word boundaries."""

    def test_short_text_is_untouched(self):
        assert wrap_text("Short line", 0, 40) == ["Short line"]

    def test_wraps_at_last_space(self):
        lines = wrap_text("alpha beta gamma delta", 0, 12)

        assert lines[0] == "alpha beta"
        assert all(line.startswith("    ") for line in lines[1:])
        assert " ".join(line.strip() for line in lines) == "alpha beta gamma delta"

    def test_continuation_indented_one_level_deeper(self):
        text = indent(1) + "one two three four five six"
        lines = wrap_text(text, 1, 20)

        assert lines[0].startswith("    one")
        for line in lines[1:]:
            assert line.startswith(" " * 8)
            assert not line[8:].startswith(" ")
        assert all(len(line) < 20 for line in lines)

    def test_long_word_is_split(self):
        lines = wrap_text("x" * 25, 0, 10)

        assert lines[0] == "x" * 10
        assert "".join(line.strip() for line in lines) == "x" * 25
        assert all(len(line) <= 10 for line in lines)

    def test_piece_filling_last_line_leaves_no_blank_line(self):
        assert wrap_text("abc defgh", 0, 9) == ["abc", "    defgh"]

    def test_empty_text(self):
        assert wrap_text("", 0, 9) == [""]

    def test_width_too_small_returns_text(self):
        assert wrap_text("anything at all", 1, 5) == ["anything at all"]


class TestConsoleDisplay:
    """Test the rich backed display."""

    def test_write_line(self, console):
        display = ConsoleDisplay(console)
        display.write_line("Main Menu")
        display.write_line()

        assert output_lines(console) == ["Main Menu", ""]

    def test_markup_is_not_interpreted(self, console):
        display = ConsoleDisplay(console)
        display.write_line("[ESC]: Exit application")

        assert output_lines(console) == ["[ESC]: Exit application"]

    def test_line_width_defaults_to_console_width(self, console):
        assert ConsoleDisplay(console).line_width == 39
        assert ConsoleDisplay(console, line_width=20).line_width == 20

    def test_write_indented_wraps(self, console):
        display = ConsoleDisplay(console, line_width=20)
        display.write_indented(1, "one two three four five six")

        lines = output_lines(console)
        assert len(lines) > 1
        assert lines[0].startswith("    one")
        assert lines[1].startswith("        ")

    def test_write_indented_without_wrap(self, console):
        display = ConsoleDisplay(console, line_width=20)
        display.write_indented(1, "one two three four five six", wrap=False)

        assert output_lines(console) == ["    one two three four five six"]

    def test_wrapping_disabled_by_setting(self, console):
        display = ConsoleDisplay(console, line_width=20, wrap_text=False)
        display.write_indented(0, "one two three four five six")

        assert output_lines(console) == ["one two three four five six"]

    def test_write_headed(self, console):
        display = ConsoleDisplay(console)
        display.write_headed("B", 1, "Reports")

        assert output_lines(console) == ["    B: Reports"]

    def test_write_headed_wraps_after_key(self, console):
        display = ConsoleDisplay(console, line_width=20)
        display.write_headed("12", 1, "a rather long menu item")

        lines = output_lines(console)
        assert lines[0].startswith("    12: a")
        assert lines[1].startswith("        ")

    def test_write_title(self, console):
        display = ConsoleDisplay(console)
        display.write_title("RESPONSE STRING:")

        assert output_lines(console) == [
            "RESPONSE STRING:",
            "================",
        ]

    def test_write_exception_walks_causes(self, console):
        display = ConsoleDisplay(console)
        try:
            try:
                raise LookupError("inner")
            except LookupError as error:
                raise RuntimeError("outer") from error
        except RuntimeError as error:
            display.write_exception(1, error)

        assert output_lines(console) == [
            "    RuntimeError: outer",
            "        LookupError: inner",
        ]

    def test_write_exception_stops_on_cycle(self, console):
        first = ValueError("first")
        second = ValueError("second")
        first.__cause__ = second
        second.__cause__ = first

        ConsoleDisplay(console).write_exception(0, first)

        assert len(output_lines(console)) == 2
