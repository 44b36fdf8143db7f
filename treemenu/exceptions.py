"""Custom exceptions for menu building, navigation and action dispatch.

Exception Hierarchy:
    MenuError (base)
        ├── StructuralError
        │   ├── MissingRootError
        │   ├── DuplicateRootError
        │   ├── MissingParentError
        │   ├── UnreachableMenuError
        │   └── KeyRangeError
        ├── InputValidationError
        └── ActionError

Structural errors are fatal to a build. Input validation errors never leave
the navigation loop. Action errors are raised by the dispatcher and reported
by the navigation loop.

Usage:
    from treemenu.exceptions import MissingParentError

    if parent is None:
        raise MissingParentError(node.name, node.parent_name)
"""

from __future__ import annotations

from typing import Iterable


class MenuError(Exception):
    """Base exception for all menu operations."""



class StructuralError(MenuError):
    """The menu declarations cannot form a single-rooted tree."""



class MissingRootError(StructuralError):
    """No declared group is missing a parent, so there is no main menu."""

    def __init__(self) -> None:
        super().__init__(
            "No top level menu found.  Exactly one menu must be declared "
            "without a parent menu name."
        )


class DuplicateRootError(StructuralError):
    """More than one declared group has no parent."""

    def __init__(self, menu_names: Iterable[str]):
        self.menu_names = list(menu_names)
        names = ", ".join(f"'{name}'" for name in self.menu_names)
        super().__init__(
            "Cannot have more than one top level menu.  "
            f"Menus without parent menu names: {names}"
        )


class MissingParentError(StructuralError):
    """A group names a parent that was never declared."""

    def __init__(self, menu_name: str, parent_name: str):
        self.menu_name = menu_name
        self.parent_name = parent_name
        super().__init__(
            f"Parent menu '{parent_name}' does not exist.  "
            f"Check the parent menu name for menu '{menu_name}'."
        )


class UnreachableMenuError(StructuralError):
    """Groups whose parent links never reach the top level menu."""

    def __init__(self, menu_names: Iterable[str]):
        self.menu_names = list(menu_names)
        names = ", ".join(f"'{name}'" for name in self.menu_names)
        super().__init__(
            f"Menus cannot be reached from the top level menu: {names}.  "
            "Check their parent menu names for a cycle."
        )


class KeyRangeError(StructuralError, ValueError):
    """Ordinal outside the range that can be converted to a menu key."""

    def __init__(self, ordinal: int, maximum: int):
        self.ordinal = ordinal
        self.maximum = maximum
        super().__init__(
            f"Integer to convert must be between 1 and {maximum}, got {ordinal}."
        )


class InputValidationError(MenuError):
    """User input does not select anything in the current menu."""

    def __init__(self, message: str, token: str | None = None):
        self.token = token
        super().__init__(message)


class ActionError(MenuError):
    """A menu action failed while it was being invoked."""

    def __init__(self, description: str, error: BaseException):
        self.description = description
        self.error = error
        super().__init__(f"Menu item '{description}' failed: {error}")
