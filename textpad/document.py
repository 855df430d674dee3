"""Document state and plain-text file handling."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .constants import EditorConstants
from .exceptions import FileOperationError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def ensure_txt_suffix(path: PathLike) -> Path:
    """Append ".txt" to a file name that does not already end with it.

    The comparison is case-insensitive, so "NOTES.TXT" is kept as is.

    Args:
        path: File chosen by the user

    Returns:
        Path in the same directory whose name ends with ".txt"
    """
    path = Path(path)
    if path.name.lower().endswith(EditorConstants.TEXT_SUFFIX):
        return path
    return path.with_name(path.name + EditorConstants.TEXT_SUFFIX)


def read_text_file(path: PathLike) -> str:
    """Read a file verbatim.

    Raises:
        FileOperationError: The file is missing, unreadable or not valid text
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError.from_exception("opening", path, e) from e


def write_text_file(path: PathLike, text: str) -> None:
    """Write text to a file atomically.

    The content goes to a temporary file in the target directory which is
    then renamed over the target, so a failed save never leaves a
    partially written file behind.

    Raises:
        FileOperationError: The file could not be written
    """
    path = Path(path)
    dir_name = str(path.parent)
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w',
                                         encoding=EditorConstants.FILE_ENCODING,
                                         newline='',
                                         dir=dir_name,
                                         prefix=EditorConstants.ATOMIC_SAVE_PREFIX + path.name,
                                         suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        # Keep the permissions of a file we are replacing
        if path.exists():
            os.chmod(temp_filename, path.stat().st_mode & 0o7777)

        os.replace(temp_filename, path)
    except (OSError, UnicodeEncodeError) as e:
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning(f"Could not remove temporary file {temp_filename}")
        raise FileOperationError.from_exception("saving", path, e) from e


class Document:
    """The file backing the buffer shown in the editor.

    The buffer itself belongs to the text widget; the document only tracks
    which file it came from or was last saved to.
    """

    def __init__(self, filename: Optional[PathLike] = None):
        self.filename: Optional[Path] = Path(filename) if filename else None

    @property
    def title(self) -> str:
        """Window title for the active file."""
        if self.filename is None:
            return EditorConstants.DEFAULT_TITLE
        return EditorConstants.TITLE_WITH_FILE.format(self.filename.name)

    def new(self) -> None:
        """Forget the current file."""
        self.filename = None

    def load(self, path: PathLike) -> str:
        """Read a file and make it the active document.

        Args:
            path: File to open

        Returns:
            The file contents

        Raises:
            FileOperationError: The document is left unchanged
        """
        path = Path(path)
        text = read_text_file(path)
        self.filename = path
        logger.info(f"Opened {path} ({len(text)} characters)")
        return text

    def save(self, path: PathLike, text: str) -> Path:
        """Write text to a file and make it the active document.

        Args:
            path: File chosen by the user; ".txt" is appended when missing
            text: Buffer contents

        Returns:
            The path actually written

        Raises:
            FileOperationError: The document is left unchanged
        """
        target = ensure_txt_suffix(path)
        write_text_file(target, text)
        self.filename = target
        logger.info(f"Saved {target} ({len(text)} characters)")
        return target
