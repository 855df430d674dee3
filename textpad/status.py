"""Word and character counting for the status bar."""

import re
from typing import NamedTuple

from .constants import EditorConstants

# Word separators are ASCII whitespace only; trimming drops every control
# character up to and including the space
_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)
_TRIMMED_CHARS = "".join(chr(code) for code in range(0x21))


class DocumentStats(NamedTuple):
    """Counts derived from the buffer."""
    words: int
    characters: int


def count_characters(text: str) -> int:
    """Return the length of the full buffer text."""
    return len(text)


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters.

    Args:
        text: Buffer contents

    Returns:
        0 for an empty or all-whitespace buffer, otherwise the number of
        words separated by one or more ASCII whitespace characters.
        Non-breaking and other Unicode spaces do not separate words.
    """
    trimmed = text.strip(_TRIMMED_CHARS)
    if not trimmed:
        return 0
    return len(_WHITESPACE_RUN.split(trimmed))


def compute_stats(text: str) -> DocumentStats:
    return DocumentStats(words=count_words(text), characters=count_characters(text))


def format_status(stats: DocumentStats) -> str:
    """Render the status bar text for the given counts."""
    return EditorConstants.STATUS_FORMAT.format(stats.words, stats.characters)
