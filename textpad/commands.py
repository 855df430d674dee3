"""Menu commands and their key bindings."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from textual.binding import Binding


@dataclass(frozen=True)
class MenuCommand:
    """A menu entry.

    Attributes:
        name: Identifier, also used as the option id in menu popups
        label: Text shown in the menu
        key: Textual key binding
        action: Name of the app action run by this command
    """
    name: str
    label: str
    key: str
    action: str


@dataclass(frozen=True)
class Menu:
    """A top-level menu of the menu bar."""
    title: str
    commands: Tuple[MenuCommand, ...]


FILE_MENU = Menu("File", (
    MenuCommand("new", "New", "ctrl+n", "new_file"),
    MenuCommand("open", "Open", "ctrl+o", "open_file"),
    MenuCommand("save", "Save", "ctrl+s", "save_file"),
    MenuCommand("exit", "Exit", "ctrl+q", "quit"),
))

EDIT_MENU = Menu("Edit", (
    MenuCommand("cut", "Cut", "ctrl+x", "cut"),
    MenuCommand("copy", "Copy", "ctrl+c", "copy"),
    MenuCommand("paste", "Paste", "ctrl+v", "paste"),
))


class CommandRegistry:
    """Registry of menu commands."""

    def __init__(self, menus: Tuple[Menu, ...] = (FILE_MENU, EDIT_MENU)):
        self.menus = menus
        self._commands: Dict[str, MenuCommand] = {}
        for menu in menus:
            for command in menu.commands:
                self._commands[command.name] = command

    def get_command(self, name: str) -> Optional[MenuCommand]:
        return self._commands.get(name)

    def get_menu(self, title: str) -> Optional[Menu]:
        for menu in self.menus:
            if menu.title == title:
                return menu
        return None

    def bindings(self) -> List[Binding]:
        """Key bindings for every command.

        Bindings have priority so that the focused text area does not
        consume them first.
        """
        return [
            Binding(command.key, command.action, command.label, priority=True)
            for command in self._commands.values()
        ]
