"""
Pytest configuration and shared fixtures for treemenu tests.

Provides an in-memory display and a scripted input source so navigation can
be driven without a terminal.
"""

from typing import Iterable, List, Optional

import pytest

from treemenu.app.context import AppContext
from treemenu.menu.model import ActionDeclaration, GroupDeclaration


class FakeDisplay:
    """Display sink that records every line written."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self.clear_count = 0

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)

    def write_indented(self, level: int, text: str, wrap: bool = True) -> None:
        self.lines.append("    " * level + text)

    def write_headed(self, key: str, level: int, text: str, wrap: bool = True) -> None:
        self.lines.append("    " * level + f"{key}: {text}")

    def write_title(self, text: str, underline: str = "=") -> None:
        self.lines.append(text)
        self.lines.append(underline * len(text))

    def write_exception(self, level: int, error: BaseException) -> None:
        current: Optional[BaseException] = error
        while current is not None:
            self.lines.append("    " * level + f"{type(current).__name__}: {current}")
            current = current.__cause__
            level += 1

    def clear(self) -> None:
        self.clear_count += 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedInput:
    """Input source returning pre-recorded tokens and lines."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens: List[str] = list(tokens)
        self.lines_read = 0

    def read_token(self) -> str:
        if not self.tokens:
            raise AssertionError("Navigation asked for more input than scripted")
        return self.tokens.pop(0)

    def read_line(self) -> str:
        self.lines_read += 1
        return ""


def noop() -> None:
    return None


@pytest.fixture
def fake_display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture
def make_context(fake_display):
    """Factory building an AppContext wired to the fake display and scripted tokens."""

    def factory(tokens: Iterable[str]) -> AppContext:
        return AppContext(display=fake_display, input=ScriptedInput(tokens))

    return factory


@pytest.fixture
def sample_declarations() -> List[GroupDeclaration]:
    """
    Main Menu
        Reports (display order 1)
            Monthly
        Admin (display order 0)
    """
    return [
        GroupDeclaration(
            name="Main Menu",
            actions=[
                ActionDeclaration("Say hello", noop, display_order=0),
                ActionDeclaration("About", noop),
            ],
        ),
        GroupDeclaration(name="Reports", parent_name="Main Menu", display_order=1),
        GroupDeclaration(name="Admin", parent_name="Main Menu", display_order=0),
        GroupDeclaration(
            name="Monthly",
            parent_name="Reports",
            actions=[ActionDeclaration("Run monthly report", noop)],
        ),
    ]
