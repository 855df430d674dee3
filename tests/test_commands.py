"""Tests for the menu command table."""

from textpad.commands import EDIT_MENU, FILE_MENU, CommandRegistry, MenuCommand


def test_menus_in_order():
    registry = CommandRegistry()
    assert [menu.title for menu in registry.menus] == ["File", "Edit"]


def test_file_menu_items():
    assert [command.label for command in FILE_MENU.commands] == ["New", "Open", "Save", "Exit"]


def test_edit_menu_items():
    assert [command.label for command in EDIT_MENU.commands] == ["Cut", "Copy", "Paste"]


def test_get_command():
    registry = CommandRegistry()
    command = registry.get_command("save")
    assert command == MenuCommand("save", "Save", "ctrl+s", "save_file")
    assert registry.get_command("print") is None


def test_get_menu():
    registry = CommandRegistry()
    assert registry.get_menu("Edit") is EDIT_MENU
    assert registry.get_menu("View") is None


def test_bindings_cover_every_command():
    bindings = CommandRegistry().bindings()
    keys = {binding.key: binding.action for binding in bindings}
    assert keys == {
        "ctrl+n": "new_file",
        "ctrl+o": "open_file",
        "ctrl+s": "save_file",
        "ctrl+q": "quit",
        "ctrl+x": "cut",
        "ctrl+c": "copy",
        "ctrl+v": "paste",
    }
    assert all(binding.priority for binding in bindings)
