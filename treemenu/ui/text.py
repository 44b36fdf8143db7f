from __future__ import annotations

from typing import List

from treemenu.config.settings import DEFAULT_INDENT_WIDTH


def indent(level: int, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    return " " * (indent_width * max(level, 0))


def wrap_text(
    text: str,
    level: int,
    line_width: int,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> List[str]:
    """Wrap already indented ``text`` at the last space before ``line_width``.

    Lines after the first are indented one level deeper than ``level``. A word
    longer than the line is split at the line width.
    """
    continuation = indent(level + 1, indent_width)
    if line_width <= len(continuation) + 1:
        return [text]

    lines: List[str] = []
    remaining = text
    while len(remaining) >= line_width:
        head = remaining[:line_width]
        cut = head.rfind(" ", len(continuation) if lines else 0) + 1
        if cut <= 0 or not head[:cut].strip():
            cut = line_width
        lines.append(remaining[:cut].rstrip())
        remaining = continuation + remaining[cut:].lstrip()
    if remaining.strip() or not lines:
        lines.append(remaining)
    return lines
