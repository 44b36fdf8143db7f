from treemenu.menu.builder import build_menu_tree
from treemenu.menu.dispatcher import ActionDispatcher, DispatchOutcome
from treemenu.menu.keys import ordinal_to_letters
from treemenu.menu.model import (
    DEFAULT_DISPLAY_ORDER,
    ActionDeclaration,
    ActionItem,
    GroupDeclaration,
    MenuNode,
)
from treemenu.menu.navigator import NavigationEngine
from treemenu.menu.registry import MenuRegistry

__all__ = [
    "DEFAULT_DISPLAY_ORDER",
    "ActionDeclaration",
    "ActionDispatcher",
    "ActionItem",
    "DispatchOutcome",
    "GroupDeclaration",
    "MenuNode",
    "MenuRegistry",
    "NavigationEngine",
    "build_menu_tree",
    "ordinal_to_letters",
]
