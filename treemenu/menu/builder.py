"""Assemble the menu tree from flat group declarations.

Declarations that share a group name are merged into one menu. The merged
menus are linked to their parents, checked for a single top level menu, then
keyed: sub-menus get letters, actions get numbers, both in display order.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from treemenu.exceptions import (
    DuplicateRootError,
    MissingParentError,
    MissingRootError,
    UnreachableMenuError,
)
from treemenu.logging import LoggerFactory
from treemenu.menu.keys import ordinal_to_letters
from treemenu.menu.model import (
    DEFAULT_DISPLAY_ORDER,
    ActionDeclaration,
    ActionItem,
    GroupDeclaration,
    MenuNode,
    display_sort_key,
    is_root_name,
)

log = LoggerFactory.for_menu()


def build_menu_tree(declarations: Iterable[GroupDeclaration]) -> MenuNode:
    """Build the menu hierarchy and return its top level menu.

    Raises a StructuralError subclass if the declarations do not form a single
    tree. Nothing is returned in that case, so callers never see a partially
    linked tree.
    """
    nodes, actions = _merge_declarations(declarations)
    root = _find_root(nodes)
    _link_children(nodes, root)
    _check_reachable(nodes, root)
    _assign_keys(root, actions)
    log.debug(f"Built menu tree with {len(nodes)} menus, root '{root.name}'")
    return root


def _merge_declarations(
    declarations: Iterable[GroupDeclaration],
) -> tuple[Dict[str, MenuNode], Dict[str, List[ActionDeclaration]]]:
    nodes: Dict[str, MenuNode] = {}
    actions: Dict[str, List[ActionDeclaration]] = {}
    for declaration in declarations:
        node = nodes.get(declaration.name)
        if node is None:
            nodes[declaration.name] = MenuNode(
                name=declaration.name,
                parent_name=declaration.parent_name,
                display_order=declaration.display_order,
            )
            actions[declaration.name] = list(declaration.actions)
            continue

        actions[declaration.name].extend(declaration.actions)
        if (
            node.display_order == DEFAULT_DISPLAY_ORDER
            and declaration.display_order != DEFAULT_DISPLAY_ORDER
        ):
            node.display_order = declaration.display_order
        if _normalise_parent(declaration.parent_name) != _normalise_parent(
            node.parent_name
        ):
            log.warning(
                f"Menu '{declaration.name}' declared with parent "
                f"'{declaration.parent_name}' but already has parent "
                f"'{node.parent_name}'; keeping the first"
            )
    return nodes, actions


def _normalise_parent(parent_name: str | None) -> str | None:
    return None if is_root_name(parent_name) else parent_name


def _find_root(nodes: Dict[str, MenuNode]) -> MenuNode:
    roots = [node for node in nodes.values() if node.is_root]
    if not roots:
        raise MissingRootError()
    if len(roots) > 1:
        raise DuplicateRootError(node.name for node in roots)
    return roots[0]


def _link_children(nodes: Dict[str, MenuNode], root: MenuNode) -> None:
    for node in nodes.values():
        if node is root:
            continue
        parent = nodes.get(node.parent_name)
        if parent is None:
            raise MissingParentError(node.name, node.parent_name)
        node.parent = parent
        parent.children.append(node)


def _check_reachable(nodes: Dict[str, MenuNode], root: MenuNode) -> None:
    reached = {id(node) for node in root.walk()}
    stranded = [node.name for node in nodes.values() if id(node) not in reached]
    if stranded:
        raise UnreachableMenuError(stranded)


def _assign_keys(
    node: MenuNode, actions: Dict[str, List[ActionDeclaration]]
) -> None:
    ordered_actions = sorted(
        actions.get(node.name, []),
        key=lambda action: display_sort_key(action.display_order, action.description),
    )
    node.actions = tuple(
        ActionItem(key=str(position), action=action)
        for position, action in enumerate(ordered_actions, start=1)
    )

    node.children.sort(key=lambda child: child.sort_key)
    for position, child in enumerate(node.children, start=1):
        child.key = ordinal_to_letters(position)
        _assign_keys(child, actions)
