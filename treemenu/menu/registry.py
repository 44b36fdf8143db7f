"""Explicit registration of menu groups and their actions.

Usage:
    registry = MenuRegistry()
    main = registry.group("Main Menu")

    @main.action("Show the report", display_order=0)
    def show_report() -> None:
        ...

    reports = registry.group("Reports", parent="Main Menu", display_order=1)

Registering the same group name twice adds a second declaration; the two are
merged into one menu when the tree is built.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from treemenu.menu.builder import build_menu_tree
from treemenu.menu.model import DEFAULT_DISPLAY_ORDER, GroupDeclaration, MenuNode


class MenuRegistry:
    def __init__(self) -> None:
        self._declarations: List[GroupDeclaration] = []

    def group(
        self,
        name: str,
        parent: Optional[str] = None,
        *,
        display_order: int = DEFAULT_DISPLAY_ORDER,
    ) -> GroupDeclaration:
        if not name or not name.strip():
            raise ValueError("Menu groups must have a name.")
        declaration = GroupDeclaration(
            name=name, parent_name=parent, display_order=display_order
        )
        self._declarations.append(declaration)
        return declaration

    def declarations(self) -> List[GroupDeclaration]:
        return list(self._declarations)

    def build(self) -> MenuNode:
        return build_menu_tree(self)

    def __iter__(self) -> Iterator[GroupDeclaration]:
        return iter(self.declarations())
