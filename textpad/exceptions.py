"""Exception types raised by textpad."""

from pathlib import Path
from typing import Optional

from .constants import EditorConstants


class TextpadError(Exception):
    """Base class for textpad errors."""


class FileOperationError(TextpadError):
    """Reading or writing a document failed.

    Attributes:
        operation: "opening" or "saving"
        path: The file involved
        reason: Human-readable cause
    """

    def __init__(self, operation: str, path: Path, reason: str):
        self.operation = operation
        self.path = path
        self.reason = reason
        super().__init__(EditorConstants.FILE_ERROR_MESSAGE.format(operation, reason))

    @classmethod
    def from_exception(cls, operation: str, path: Path,
                       exc: Exception) -> 'FileOperationError':
        reason: Optional[str] = None
        if isinstance(exc, OSError):
            reason = exc.strerror
            if reason and exc.filename:
                reason = f"{exc.filename} ({reason})"
        return cls(operation, path, reason or str(exc))
