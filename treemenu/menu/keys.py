"""Navigation keys for menu entries.

Sub-menus are keyed with letters (A, B, ... Z, AA, AB, ...) and actions with
decimal numbers, so the two kinds of entry never look alike on screen.
"""

from __future__ import annotations

from treemenu.exceptions import KeyRangeError

# Keys for the commands that appear in every menu. These are also the tokens
# produced by the input source for the matching control keys.
EXIT_APP = "[ESC]"
CLEAR_SCREEN = "[DEL]"
GO_UP_TO_PARENT = "[PG UP]"

# Tokens for keystrokes that can never select a menu entry.
INVALID_MODIFIER = "[INVALID MODIFIER]"
INVALID_CHAR = "[INVALID CHAR]"

COMMAND_TOKENS = frozenset({EXIT_APP, CLEAR_SCREEN, GO_UP_TO_PARENT})

ALPHABET_SIZE = 26
MAX_LETTER_ORDINAL = (ALPHABET_SIZE + 1) * ALPHABET_SIZE


def ordinal_to_letters(ordinal: int) -> str:
    """Convert a 1-based position into a letter key.

    1 -> "A", 26 -> "Z", 27 -> "AA", 28 -> "AB", 701 -> "ZY", 702 -> "ZZ".
    There is no zero digit, so this is bijective base 26 rather than a plain
    positional conversion.
    """
    if ordinal < 1 or ordinal > MAX_LETTER_ORDINAL:
        raise KeyRangeError(ordinal, MAX_LETTER_ORDINAL)
    lead, trail = divmod(ordinal - 1, ALPHABET_SIZE)
    prefix = ordinal_to_letters(lead) if lead > 0 else ""
    return prefix + chr(ord("A") + trail)

