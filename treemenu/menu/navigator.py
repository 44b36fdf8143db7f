from __future__ import annotations

import time
from typing import Callable, Optional

from treemenu.app.context import AppContext
from treemenu.config import settings
from treemenu.config.settings import DEFAULT_POST_ACTION_PAUSE
from treemenu.exceptions import ActionError, InputValidationError
from treemenu.logging import LoggerFactory
from treemenu.menu.dispatcher import (
    ActionDispatcher,
    DispatchOutcome,
    dispatcher_from_settings,
)
from treemenu.menu.keys import CLEAR_SCREEN, EXIT_APP, GO_UP_TO_PARENT
from treemenu.menu.model import ActionItem, MenuNode
from treemenu.menu.selection import (
    ActionSelection,
    CommandSelection,
    SubMenuSelection,
    resolve_selection,
)
from treemenu.ui.display import MENU_RULE

log = LoggerFactory.for_menu()

CONTINUE_PROMPT = "Press [ENTER] key to continue..."


class NavigationEngine:
    """Interactive loop that shows a menu, reads a selection and acts on it.

    Each menu runs its own loop; entering a sub-menu recurses and returning
    from the recursion redisplays the parent. The loops end when the user
    exits the top level menu.
    """

    def __init__(
        self,
        context: AppContext,
        dispatcher: Optional[ActionDispatcher] = None,
        *,
        post_action_pause: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if context.display is None or context.input is None:
            raise ValueError("Navigation needs both a display and an input source")
        self._context = context
        self._display = context.display
        self._input = context.input
        self._dispatcher = dispatcher or dispatcher_from_settings(
            context.awaiting_result
        )
        if post_action_pause is None:
            post_action_pause = settings.get_float(
                "post_action_pause_seconds", DEFAULT_POST_ACTION_PAUSE
            )
        self._post_action_pause = post_action_pause
        self._sleep = sleep
        self._stack: list[MenuNode] = []
        self._last_navigation_action: str | None = None

    def current_node(self) -> Optional[MenuNode]:
        return self._stack[-1] if self._stack else None

    def last_navigation_action(self) -> str | None:
        return self._last_navigation_action

    def run(self, root: MenuNode) -> None:
        log.info(f"Starting menu '{root.name}'")
        self._display_and_execute(root)
        log.info("Exiting application")

    def _display_and_execute(self, node: MenuNode) -> bool:
        """Run the loop for ``node``. Returns True when the whole application exits."""
        self._stack.append(node)
        log.debug(f"Entered menu: {' › '.join(node.path())}")
        try:
            while True:
                self.render(node)
                token = self._input.read_token()
                try:
                    selection = resolve_selection(node, token)
                except InputValidationError as error:
                    log.debug(f"Rejected input {token!r} in '{node.name}': {error}")
                    self._display.write_line()
                    self._display.write_line(str(error))
                    continue

                if isinstance(selection, CommandSelection):
                    if selection.command == CLEAR_SCREEN:
                        self._display.clear()
                        continue
                    if selection.command == EXIT_APP and node.is_root:
                        self._confirm_exit()
                        return True
                    self._last_navigation_action = "back"
                    return False

                if isinstance(selection, SubMenuSelection):
                    self._last_navigation_action = "forward"
                    if self._display_and_execute(selection.node):
                        return True
                    continue

                if isinstance(selection, ActionSelection):
                    self._run_action(node, selection.item)
        finally:
            self._stack.pop()

    def render(self, node: MenuNode) -> None:
        """Show the commands, sub-menus and actions of ``node``, in that order."""
        display = self._display
        display.write_line()
        # A lone main menu needs no heading.
        if not (node.is_root and not node.children):
            display.write_line(node.name)
        display.write_line(MENU_RULE)
        display.write_line("Enter the menu item followed by [ENTER]:")
        display.write_line()

        exit_text = "Exit application" if node.is_root else "Exit this menu"
        display.write_indented(1, f"{EXIT_APP}: {exit_text}")
        display.write_indented(1, f"{CLEAR_SCREEN}: Clear screen")
        if not node.is_root:
            display.write_indented(1, f"{GO_UP_TO_PARENT}: Go up to parent menu")

        if node.children:
            display.write_line()
        for child in node.children:
            display.write_headed(child.key, 1, child.name)

        if node.actions:
            display.write_line()
        for item in node.actions:
            display.write_headed(item.key, 1, item.description)

    def _run_action(self, node: MenuNode, item: ActionItem) -> None:
        log.info(f"Running '{item.description}' from menu '{node.name}'")
        if item.is_async:
            self._show_wait_banner()
        try:
            outcome = self._dispatcher.run(item.action)
        except ActionError as error:
            log.error(f"Menu item '{item.description}' raised: {error.error!r}")
            self._display.write_line()
            self._display.write_exception(1, error)
        else:
            if outcome is DispatchOutcome.ABORTED:
                self._display.write_line()
                self._display.write_line(
                    "No response received after "
                    f"{self._dispatcher.abort_after:g} seconds.  Returning to the menu."
                )

        # Lets output from background threads finish before the prompt.
        self._sleep(self._post_action_pause)
        self._display.write_line()
        self._display.write_line(CONTINUE_PROMPT)
        self._input.read_line()

    def _show_wait_banner(self) -> None:
        text = (
            "This method returns its results asynchronously.  "
            "Please wait for the results..."
        )
        border = "*" * len(text)
        self._display.write_line(border)
        self._display.write_line(text)
        self._display.write_line(border)
        self._display.write_line()

    def _confirm_exit(self) -> None:
        self._display.write_line()
        self._display.write_line(f"Exiting application.  {CONTINUE_PROMPT}")
        self._input.read_line()
