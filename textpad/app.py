"""Textual front-end: the editor window."""

import inspect
import logging
from pathlib import Path
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Static, TextArea

from .clipboard import ClipboardManager
from .commands import CommandRegistry, Menu
from .constants import EditorConstants
from .dialogs import FileDialog, FileDialogMode, MenuScreen, MessageDialog
from .document import Document
from .exceptions import FileOperationError
from .settings_persistence import SettingsPersistence, get_persistence
from .status import DocumentStats, compute_stats, format_status

logger = logging.getLogger(__name__)


class MenuBar(Horizontal):
    """Row of menu buttons."""

    DEFAULT_CSS = """
    MenuBar {
        height: 1;
        background: $panel;
    }
    MenuBar > Button {
        height: 1;
        min-width: 8;
        border: none;
        background: $panel;
    }
    """

    def __init__(self, menus, **kwargs):
        super().__init__(**kwargs)
        self.menus = menus

    def compose(self) -> ComposeResult:
        for menu in self.menus:
            yield Button(menu.title, name=menu.title, id=f"menu-{menu.title.lower()}",
                         classes="menu-button")


class StatusBar(Static):
    """Live word and character counts."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
    }
    """

    def __init__(self, **kwargs):
        stats = compute_stats("")
        status_text = format_status(stats)
        super().__init__(status_text, markup=False, **kwargs)
        self.stats: DocumentStats = stats
        self.status_text = status_text

    def update_counts(self, text: str) -> None:
        """Recompute the counts from the full buffer and redisplay them."""
        self.stats = compute_stats(text)
        self.status_text = format_status(self.stats)
        self.update(self.status_text)


class TextpadApp(App):
    """Single-window text editor."""

    TITLE = EditorConstants.DEFAULT_TITLE

    CSS = """
    #editor {
        height: 1fr;
        border: none;
    }
    """

    BINDINGS = CommandRegistry().bindings()

    # Commands that act on the buffer and stay disabled while a dialog is open
    DOCUMENT_ACTIONS = frozenset({"new_file", "open_file", "save_file", "cut", "copy", "paste"})

    def __init__(self, filename: Optional[str] = None,
                 settings: Optional[SettingsPersistence] = None):
        super().__init__()
        self.initial_filename = filename
        self.document = Document()
        self.registry = CommandRegistry()
        self.settings = settings if settings is not None else get_persistence()
        self.text_area: Optional[TextArea] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield MenuBar(self.registry.menus, id="menu-bar")
        self.text_area = TextArea(id="editor", soft_wrap=False, show_line_numbers=False)
        self.status_bar = StatusBar(id="status")
        yield self.text_area
        yield self.status_bar
        yield Footer()

    def on_mount(self) -> None:
        if self.initial_filename:
            path = Path(self.initial_filename)
            if path.exists():
                self.open_path(path)
            else:
                # New file: saved under this name unless the user picks another
                self.document.filename = path
        self._refresh_window()
        self.text_area.focus()

    def check_action(self, action: str, parameters: tuple) -> Optional[bool]:
        if action in self.DOCUMENT_ACTIONS and isinstance(self.screen, ModalScreen):
            return False
        return True

    def update_status(self) -> None:
        self.status_bar.update_counts(self.text_area.text)

    def _refresh_window(self) -> None:
        self.title = self.document.title
        self.update_status()

    @on(TextArea.Changed, "#editor")
    def _buffer_changed(self, event: TextArea.Changed) -> None:
        self.update_status()

    # Menus

    @on(Button.Pressed, ".menu-button")
    def _menu_pressed(self, event: Button.Pressed) -> None:
        menu = self.registry.get_menu(event.button.name)
        if menu is not None:
            self.open_menu(menu, offset=event.button.region.x)

    def open_menu(self, menu: Menu, offset: int = 0) -> None:
        self.push_screen(MenuScreen(menu, offset), callback=self._menu_chosen)

    async def _menu_chosen(self, name: Optional[str]) -> None:
        if name is None:
            return
        command = self.registry.get_command(name)
        if command is None:
            logger.warning(f"Unknown menu command: {name}")
            return
        self.text_area.focus()
        result = getattr(self, f"action_{command.action}")()
        if inspect.isawaitable(result):
            await result

    # File menu

    def action_new_file(self) -> None:
        """Start an empty, unsaved document."""
        self.document.new()
        self.text_area.load_text("")
        self._refresh_window()

    def action_open_file(self) -> None:
        dialog = FileDialog(FileDialogMode.OPEN, self._dialog_directory())
        self.push_screen(dialog, callback=self._open_chosen)

    def _open_chosen(self, path: Optional[Path]) -> None:
        if path is not None:
            self.open_path(path)

    def open_path(self, path: Path) -> bool:
        """Load a file into the buffer.

        On failure an error dialog is shown and the buffer, file name and
        title are left as they were.

        Returns:
            True if the file was opened
        """
        try:
            text = self.document.load(path)
        except FileOperationError as e:
            logger.warning(f"Could not open {path}: {e.reason}")
            self.show_error(str(e))
            return False
        self.text_area.load_text(text)
        self.settings.remember_directory(path)
        self._refresh_window()
        return True

    def action_save_file(self) -> None:
        filename = self.document.filename
        initial_name = filename.name if filename else ""
        dialog = FileDialog(FileDialogMode.SAVE, self._dialog_directory(), initial_name)
        self.push_screen(dialog, callback=self._save_chosen)

    def _save_chosen(self, path: Optional[Path]) -> None:
        if path is not None:
            self.save_path(path)

    def save_path(self, path: Path) -> Optional[Path]:
        """Write the buffer to path, adding ".txt" when the name lacks it.

        On failure an error dialog is shown and the window is left as it was.

        Returns:
            The path written, or None if saving failed
        """
        try:
            target = self.document.save(path, self.text_area.text)
        except FileOperationError as e:
            logger.warning(f"Could not save {e.path}: {e.reason}")
            self.show_error(str(e))
            return None
        self.settings.remember_directory(target)
        self._refresh_window()
        self.notify(f"Saved {target.name}")
        return target

    def _dialog_directory(self) -> Path:
        if self.document.filename is not None:
            directory = self.document.filename.parent
            if directory.is_dir():
                return directory
        return self.settings.get_last_directory() or Path.cwd()

    def show_error(self, message: str) -> None:
        self.push_screen(MessageDialog(EditorConstants.ERROR_TITLE, message))

    # Edit menu

    def action_cut(self) -> None:
        text_area = self.text_area
        selected = text_area.selected_text
        if not selected:
            return
        ClipboardManager.copy_text(selected)
        text_area.delete(*text_area.selection)

    def action_copy(self) -> None:
        selected = self.text_area.selected_text
        if selected:
            ClipboardManager.copy_text(selected)

    def action_paste(self) -> None:
        text = ClipboardManager.paste_text()
        if not text:
            return
        text_area = self.text_area
        result = text_area.replace(text, *text_area.selection)
        text_area.move_cursor(result.end_location)
