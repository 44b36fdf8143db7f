"""Turn an input token into something the current menu can act on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from treemenu.exceptions import InputValidationError
from treemenu.menu.keys import (
    CLEAR_SCREEN,
    EXIT_APP,
    GO_UP_TO_PARENT,
    INVALID_CHAR,
    INVALID_MODIFIER,
)
from treemenu.menu.model import ActionItem, MenuNode


@dataclass(frozen=True)
class CommandSelection:
    command: str


@dataclass(frozen=True)
class SubMenuSelection:
    node: MenuNode


@dataclass(frozen=True)
class ActionSelection:
    item: ActionItem


Selection = Union[CommandSelection, SubMenuSelection, ActionSelection]


def resolve_selection(node: MenuNode, token: Optional[str]) -> Selection:
    """Match ``token`` against the commands and entries of ``node``.

    Raises InputValidationError with a message for the user when the token
    selects nothing.
    """
    if token == INVALID_MODIFIER:
        raise InputValidationError(
            "Invalid control character.  [CTRL] or [ALT] may not be used.", token
        )
    if token == INVALID_CHAR:
        sub_menu_command = "" if node.is_root else f"{GO_UP_TO_PARENT}, "
        raise InputValidationError(
            "Invalid character.  Only valid characters are "
            f"{EXIT_APP}, {CLEAR_SCREEN}, {sub_menu_command}"
            "and ASCII alphanumeric characters.",
            token,
        )
    if token == GO_UP_TO_PARENT and node.is_root:
        raise InputValidationError(
            "Invalid menu item.  The main menu has no parent menu.", token
        )
    if token in (EXIT_APP, CLEAR_SCREEN, GO_UP_TO_PARENT):
        return CommandSelection(token)

    if token:
        child = node.find_child(token)
        if child is not None:
            return SubMenuSelection(child)
        item = node.find_action(token)
        if item is not None:
            return ActionSelection(item)

    raise InputValidationError(_unknown_entry_message(node), token)


def _unknown_entry_message(node: MenuNode) -> str:
    has_sub_menus = bool(node.children)
    has_actions = bool(node.actions)

    if node.is_root:
        command_keys = f"{EXIT_APP} or {CLEAR_SCREEN}"
    else:
        command_keys = f"{EXIT_APP}, {CLEAR_SCREEN} or {GO_UP_TO_PARENT}"

    choices = []
    if has_sub_menus:
        choices.append("a valid sub-menu")
    if has_actions:
        choices.append("a valid menu item")

    if not choices:
        return f"Please enter a valid command key ({command_keys})."
    if len(choices) == 1:
        return f"Please enter either a valid command key ({command_keys}) or {choices[0]}."
    return (
        f"Please enter either a valid command key ({command_keys}), "
        f"{choices[0]} or {choices[1]}."
    )
