"""Console rendering for menus and action output.

The navigation engine only talks to the ``DisplaySink`` protocol. ``ConsoleDisplay``
is the rich-backed implementation used when running in a terminal.
"""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.text import Text

from treemenu.config.settings import DEFAULT_INDENT_WIDTH
from treemenu.ui.text import indent, wrap_text

MENU_RULE = "=" * 52


class DisplaySink(Protocol):
    def write_line(self, text: str = "") -> None: ...

    def write_indented(self, level: int, text: str, wrap: bool = True) -> None: ...

    def write_headed(self, key: str, level: int, text: str, wrap: bool = True) -> None: ...

    def write_title(self, text: str, underline: str = "=") -> None: ...

    def write_exception(self, level: int, error: BaseException) -> None: ...

    def clear(self) -> None: ...


class ConsoleDisplay:
    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        indent_width: int = DEFAULT_INDENT_WIDTH,
        line_width: Optional[int] = None,
        wrap_text: bool = True,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.indent_width = indent_width
        self.wrap_text = wrap_text
        self._line_width = line_width

    @property
    def line_width(self) -> int:
        # One column short of the terminal so a full line never auto-wraps.
        if self._line_width is not None:
            return self._line_width
        return max(self.console.width - 1, 1)

    def write_line(self, text: str = "") -> None:
        self.console.print(Text(text), soft_wrap=True)

    def write_indented(self, level: int, text: str, wrap: bool = True) -> None:
        for line in self._layout(level, text, wrap):
            self.write_line(line)

    def write_headed(self, key: str, level: int, text: str, wrap: bool = True) -> None:
        """Write ``key: text`` with the key highlighted."""
        header = f"{key}: "
        lines = self._layout(level, header + text, wrap)
        first = lines[0]
        prefix = indent(level, self.indent_width)
        styled = Text(prefix)
        styled.append(header.rstrip(), style="bold cyan")
        styled.append(first[len(prefix) + len(header.rstrip()):])
        self.console.print(styled, soft_wrap=True)
        for line in lines[1:]:
            self.write_line(line)

    def write_title(self, text: str, underline: str = "=") -> None:
        self.write_line(text)
        self.write_line(underline * len(text))

    def write_exception(self, level: int, error: BaseException) -> None:
        """Write an exception and each exception that caused it, one level deeper each."""
        current: Optional[BaseException] = error
        seen: set[int] = set()
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            self.write_indented(level, f"{type(current).__name__}: {current}")
            current = current.__cause__ or current.__context__
            level += 1

    def clear(self) -> None:
        self.console.clear()

    def _layout(self, level: int, text: str, wrap: bool) -> list[str]:
        indented = indent(level, self.indent_width) + text
        if not (wrap and self.wrap_text):
            return [indented]
        return wrap_text(indented, level, self.line_width, self.indent_width)
