"""System clipboard integration."""

import logging
from typing import Optional

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardManager:
    """Manages system clipboard operations.

    Uses pyperclip for the system clipboard. When no clipboard mechanism is
    available (for example a headless Linux session without xclip or
    wl-clipboard) text is kept in a buffer local to the process, so cut,
    copy and paste keep working inside the editor.
    """

    _local_text: Optional[str] = None

    @classmethod
    def copy_text(cls, text: str) -> None:
        """Copy text to the clipboard.

        Args:
            text: Plain text to copy
        """
        cls._local_text = text
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning(f"System clipboard unavailable, keeping text locally: {e}")

    @classmethod
    def paste_text(cls) -> str:
        """Return the clipboard contents.

        Returns:
            Clipboard text, or an empty string if there is none
        """
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.warning(f"System clipboard unavailable, using local text: {e}")
            return cls._local_text or ""
        return content or ""

    @classmethod
    def clear_local(cls) -> None:
        """Drop the process-local clipboard text."""
        cls._local_text = None
