"""Modal screens used by the editor: menu popups, file chooser, messages."""

from enum import Enum
from pathlib import Path
from typing import Optional

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Label, OptionList
from textual.widgets.option_list import Option

from .commands import Menu


class MenuScreen(ModalScreen[Optional[str]]):
    """Popup listing the commands of one menu.

    Dismisses with the chosen command name, or None when closed.
    """

    DEFAULT_CSS = """
    MenuScreen {
        align: left top;
        background: $background 0%;
    }
    MenuScreen > OptionList {
        width: 20;
        height: auto;
        margin: 2 0 0 1;
        border: solid $primary;
    }
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, menu: Menu, offset: int = 0):
        super().__init__()
        self.menu = menu
        self.menu_offset = offset

    def compose(self) -> ComposeResult:
        options = [Option(command.label, id=command.name) for command in self.menu.commands]
        yield OptionList(*options, id="menu-options")

    def on_mount(self) -> None:
        option_list = self.query_one(OptionList)
        option_list.styles.margin = (2, 0, 0, 1 + self.menu_offset)
        option_list.focus()

    @on(OptionList.OptionSelected)
    def _choose(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_close(self) -> None:
        self.dismiss(None)


class FileDialogMode(Enum):
    OPEN = "open"
    SAVE = "save"


class FileDialog(ModalScreen[Optional[Path]]):
    """File chooser.

    Shows a directory tree and a path field. Choosing a file in the tree
    fills in the field; confirming dismisses with the path, resolved
    against the start directory when relative. Cancelling dismisses with
    None.
    """

    DEFAULT_CSS = """
    FileDialog {
        align: center middle;
    }
    FileDialog > Vertical {
        width: 80%;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    FileDialog DirectoryTree {
        height: 1fr;
    }
    FileDialog Horizontal {
        height: auto;
        align: right middle;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, mode: FileDialogMode, start_directory: Optional[Path] = None,
                 initial_name: str = ""):
        super().__init__()
        self.mode = mode
        self.start_directory = Path(start_directory) if start_directory else Path.cwd()
        self.initial_name = initial_name

    def compose(self) -> ComposeResult:
        confirm = "Open" if self.mode is FileDialogMode.OPEN else "Save"
        with Vertical():
            yield Label(f"{confirm} file", id="dialog-title")
            yield DirectoryTree(str(self.start_directory), id="file-tree")
            yield Input(value=self.initial_name, placeholder="File name", id="file-name")
            with Horizontal():
                yield Button(confirm, variant="primary", id="confirm")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#file-name", Input).focus()

    def resolve(self, value: str) -> Optional[Path]:
        """Turn the text of the path field into a path."""
        value = value.strip()
        if not value:
            return None
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.start_directory / path
        return path

    def _confirm(self) -> None:
        path = self.resolve(self.query_one("#file-name", Input).value)
        if path is None:
            self.notify("Enter a file name", severity="warning")
            return
        self.dismiss(path)

    @on(DirectoryTree.FileSelected)
    def _file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#file-name", Input).value = str(event.path)

    @on(Input.Submitted, "#file-name")
    def _submitted(self, event: Input.Submitted) -> None:
        self._confirm()

    @on(Button.Pressed, "#confirm")
    def _confirm_pressed(self, event: Button.Pressed) -> None:
        self._confirm()

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class MessageDialog(ModalScreen[None]):
    """Modal message with an OK button."""

    DEFAULT_CSS = """
    MessageDialog {
        align: center middle;
    }
    MessageDialog > Vertical {
        width: 60;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }
    MessageDialog #message-title {
        text-style: bold;
    }
    MessageDialog Button {
        margin-top: 1;
    }
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, title: str, message: str):
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text, id="message-title", markup=False)
            yield Label(self.message, id="message-body", markup=False)
            yield Button("OK", variant="error", id="ok")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    @on(Button.Pressed, "#ok")
    def _ok(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
