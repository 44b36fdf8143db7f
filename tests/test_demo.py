"""Tests for the demonstration menus."""

from treemenu.demo import (
    LEVEL_2_MENU,
    LEVEL_2_SECOND_MENU,
    LEVEL_3_MENU,
    LEVEL_4_MENU,
    MAIN_MENU,
    build_demo_registry,
)


class TestDemoMenus:
    """Test the shape of the demonstration hierarchy."""

    def test_builds(self, make_context):
        root = build_demo_registry(make_context([])).build()

        assert root.name == MAIN_MENU
        assert [(child.key, child.name) for child in root.children] == [
            ("A", LEVEL_2_SECOND_MENU),
            ("B", LEVEL_2_MENU),
        ]
        assert len(root.actions) == 5

    def test_level_2_is_merged(self, make_context):
        root = build_demo_registry(make_context([])).build()
        level_2 = root.find_child("B")

        assert [item.key for item in level_2.actions] == ["1", "2", "3", "4"]
        assert level_2.actions[-1].description == "An unordered level 2 menu item"
        assert [child.name for child in level_2.children] == [LEVEL_3_MENU]

    def test_level_3_actions_are_async(self, make_context):
        root = build_demo_registry(make_context([])).build()
        level_3 = root.find_child("B").find_child("A")

        assert all(item.is_async for item in level_3.actions)
        assert level_3.children[0].name == LEVEL_4_MENU

    def test_sync_actions_write_to_display(self, make_context, fake_display):
        context = make_context([])
        root = build_demo_registry(context).build()

        root.find_action("1").action.invoke()
        root.find_action("3").action.invoke()

        assert "Inside Method1" in fake_display.lines
        assert "    RuntimeError: Top level exception." in fake_display.lines
        assert "        PermissionError: Second level exception." in fake_display.lines

    def test_failing_action_raises(self, make_context):
        root = build_demo_registry(make_context([])).build()
        failing = root.find_action("5")

        try:
            failing.action.invoke()
        except ValueError as error:
            assert "always fails" in str(error)
        else:
            raise AssertionError("expected the demo action to fail")
