"""Textpad - A simple text editor."""

from .document import Document, ensure_txt_suffix
from .exceptions import FileOperationError, TextpadError
from .status import DocumentStats, compute_stats, count_characters, count_words, format_status

__all__ = [
    'Document',
    'DocumentStats',
    'FileOperationError',
    'TextpadError',
    'compute_stats',
    'count_characters',
    'count_words',
    'ensure_txt_suffix',
    'format_status',
]
