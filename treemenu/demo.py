"""Demonstration menus showing merged groups, ordering and asynchronous actions."""

from __future__ import annotations

import threading
from dataclasses import asdict, dataclass

from treemenu.app.context import AppContext
from treemenu.menu.registry import MenuRegistry

MAIN_MENU = "Main Menu"
LEVEL_2_MENU = "Level 2 Menu"
LEVEL_2_SECOND_MENU = "Another Level 2 Menu"
LEVEL_3_MENU = "Level 3 Menu"
LEVEL_4_MENU = "Level 4 Menu"

ASYNC_RESPONSE_DELAY = 2.0


@dataclass
class SampleRecord:
    record_id: int
    label: str


def build_demo_registry(context: AppContext) -> MenuRegistry:
    registry = MenuRegistry()

    def say(text: str) -> None:
        if context.display is not None:
            context.display.write_line(text)

    main = registry.group(MAIN_MENU)

    @main.action("This is the first menu item", display_order=0)
    def method_1() -> None:
        say("Inside Method1")

    @main.action("This is menu item 2", display_order=1)
    def method_2() -> None:
        say("Inside Method2")

    @main.action("Display details of an exception", display_order=2)
    def display_exception() -> None:
        try:
            try:
                try:
                    raise LookupError("Third level exception.")
                except LookupError as error:
                    raise PermissionError("Second level exception.") from error
            except PermissionError as error:
                raise RuntimeError("Top level exception.") from error
        except RuntimeError as error:
            if context.display is not None:
                context.display.write_exception(1, error)

    @main.action("Display the properties of an object", display_order=3)
    def display_object() -> None:
        record = SampleRecord(1, "String property")
        say(f"{type(record).__name__} to display:")
        for name, value in asdict(record).items():
            if context.display is not None:
                context.display.write_indented(1, f"{name}: {value}")

    @main.action("Run a menu item that fails", display_order=4)
    def failing_method() -> None:
        raise ValueError("This menu item always fails.")

    # Two declarations of the same group are merged into one menu.
    level_2 = registry.group(LEVEL_2_MENU, parent=MAIN_MENU, display_order=2)

    @level_2.action("This is the first level 2 menu item", display_order=1)
    def level_2_method_1() -> None:
        say("Inside Level 2 Method 1")

    @level_2.action("This is the second level 2 menu item", display_order=4)
    def level_2_method_2() -> None:
        say("Inside Level 2 Method 2")

    level_2_more = registry.group(LEVEL_2_MENU, parent=MAIN_MENU)

    @level_2_more.action("This is the third level 2 menu item", display_order=5)
    def level_2_method_3() -> None:
        say("Inside Level 2 Method 3")

    @level_2_more.action("An unordered level 2 menu item")
    def level_2_unordered() -> None:
        say("Inside the unordered Level 2 method")

    second = registry.group(LEVEL_2_SECOND_MENU, parent=MAIN_MENU, display_order=1)

    @second.action("This is the only item in this menu")
    def second_menu_method() -> None:
        say("Inside Another Level 2 Method")

    level_3 = registry.group(LEVEL_3_MENU, parent=LEVEL_2_MENU)

    @level_3.action("Request a response asynchronously", display_order=0, is_async=True)
    def request_response() -> None:
        timer = threading.Timer(
            ASYNC_RESPONSE_DELAY,
            context.report_result,
            args=("<Response><Status>OK</Status></Response>",),
        )
        timer.daemon = True
        timer.start()

    @level_3.action(
        "Request a response that never arrives", display_order=1, is_async=True
    )
    def request_lost_response() -> None:
        say("Request sent; no response will be returned.")

    level_4 = registry.group(LEVEL_4_MENU, parent=LEVEL_3_MENU)

    @level_4.action("This is the first level 4 menu item")
    def level_4_method_1() -> None:
        say("Inside Level 4 Method 1")

    return registry
