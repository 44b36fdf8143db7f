"""Read menu selections from the keyboard.

Keys are read one at a time so control keys can be told apart from text:
escape, delete and page up become command tokens, Ctrl/Alt combinations and
punctuation reject the whole selection, and Enter ends it. Backspace is not
special: it rejects the selection like any other non alphanumeric key.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Protocol

import readchar
from readchar import key

from treemenu.logging import LoggerFactory
from treemenu.menu.keys import (
    CLEAR_SCREEN,
    EXIT_APP,
    GO_UP_TO_PARENT,
    INVALID_CHAR,
    INVALID_MODIFIER,
)

log = LoggerFactory.for_input()

CONFIRM_KEYS = frozenset({key.ENTER, key.CR, key.LF})
NON_MODIFIED_CONTROL_KEYS = frozenset({key.BACKSPACE, "\x08", "\t"})
CONTROL_KEY_TOKENS = {
    key.ESC: EXIT_APP,
    key.DELETE: CLEAR_SCREEN,
    key.PAGE_UP: GO_UP_TO_PARENT,
}


class InputSource(Protocol):
    def read_token(self) -> str: ...

    def read_line(self) -> str: ...


def _echo_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class KeyboardInput:
    def __init__(
        self,
        *,
        read_key: Callable[[], str] = readchar.readkey,
        read_line: Callable[[], str] = input,
        echo: Optional[Callable[[str], None]] = _echo_stdout,
    ) -> None:
        self._read_key = read_key
        self._read_line = read_line
        self._echo = echo or (lambda _text: None)

    def read_token(self) -> str:
        """Read keystrokes up to Enter and return the selection token."""
        token = ""
        while True:
            pressed = self._read_key()
            log.trace(f"Key pressed: {pressed!r}")

            if pressed == key.CTRL_C:
                raise KeyboardInterrupt
            if pressed in CONFIRM_KEYS:
                self._echo("\n")
                return token
            if pressed in CONTROL_KEY_TOKENS:
                code = CONTROL_KEY_TOKENS[pressed]
                token += code
                self._echo(code)
                continue
            if pressed[:1] == key.ESC and pressed[1:] in CONFIRM_KEYS:
                # Escape followed by Enter arrives as one sequence on POSIX.
                self._echo(EXIT_APP + "\n")
                return token + EXIT_APP
            if _is_modified(pressed):
                self._echo("\n")
                return INVALID_MODIFIER
            if len(pressed) != 1 or not (pressed.isascii() and pressed.isalnum()):
                self._echo(pressed if pressed.isprintable() else "")
                self._echo("\n")
                return INVALID_CHAR

            token += pressed
            self._echo(pressed)

    def read_line(self) -> str:
        return self._read_line()


def _is_modified(pressed: str) -> bool:
    """True for Ctrl+<key> and Alt+<key> combinations."""
    if len(pressed) == 1:
        code = ord(pressed)
        return code < 0x20 and pressed not in NON_MODIFIED_CONTROL_KEYS
    # Alt+<key> is sent as escape followed by the plain key.
    return len(pressed) == 2 and pressed[0] == key.ESC and pressed[1] not in "[O"
