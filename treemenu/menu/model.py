from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

# Display order for groups and actions that did not ask for a position.
# Entries carrying it sort after every explicitly ordered entry.
DEFAULT_DISPLAY_ORDER = -99

MenuCallback = Callable[[], None]


def display_sort_key(display_order: int, label: str) -> Tuple[bool, int, str]:
    return (display_order == DEFAULT_DISPLAY_ORDER, display_order, label.casefold())


def is_root_name(parent_name: Optional[str]) -> bool:
    return parent_name is None or not parent_name.strip()


@dataclass(frozen=True)
class ActionDeclaration:
    description: str
    invoke: MenuCallback
    display_order: int = DEFAULT_DISPLAY_ORDER
    is_async: bool = False


@dataclass
class GroupDeclaration:
    name: str
    parent_name: Optional[str] = None
    display_order: int = DEFAULT_DISPLAY_ORDER
    actions: List[ActionDeclaration] = field(default_factory=list)

    def action(
        self,
        description: str,
        *,
        display_order: int = DEFAULT_DISPLAY_ORDER,
        is_async: bool = False,
    ) -> Callable[[MenuCallback], MenuCallback]:
        """Decorator that adds the decorated function to this group."""

        def register(func: MenuCallback) -> MenuCallback:
            self.actions.append(
                ActionDeclaration(
                    description=description,
                    invoke=func,
                    display_order=display_order,
                    is_async=is_async,
                )
            )
            return func

        return register


@dataclass(frozen=True)
class ActionItem:
    key: str
    action: ActionDeclaration

    @property
    def description(self) -> str:
        return self.action.description

    @property
    def is_async(self) -> bool:
        return self.action.is_async


@dataclass(eq=False)
class MenuNode:
    name: str
    parent_name: Optional[str] = None
    display_order: int = DEFAULT_DISPLAY_ORDER
    key: str = ""
    children: List[MenuNode] = field(default_factory=list)
    actions: Tuple[ActionItem, ...] = ()
    parent: Optional[MenuNode] = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return is_root_name(self.parent_name)

    @property
    def sort_key(self) -> Tuple[bool, int, str]:
        return display_sort_key(self.display_order, self.name)

    def find_child(self, key: str) -> Optional[MenuNode]:
        wanted = key.upper()
        for child in self.children:
            if child.key.upper() == wanted:
                return child
        return None

    def find_action(self, key: str) -> Optional[ActionItem]:
        for item in self.actions:
            if item.key == key:
                return item
        return None

    def path(self) -> List[str]:
        names: List[str] = []
        node: Optional[MenuNode] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return list(reversed(names))

    def walk(self) -> Iterator[MenuNode]:
        yield self
        for child in self.children:
            yield from child.walk()
