"""Logging setup for the editor.

A full-screen Textual app owns the terminal, so log records go to Textual's
devtools console (``textual console``) and optionally to a file instead of
stderr.
"""

import logging
from typing import Optional

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING,
                      log_file: Optional[str] = None) -> None:
    """Route log records to the Textual console and, if given, a file.

    Args:
        level: Minimum level for the root logger
        log_file: Optional path of a file to append records to
    """
    handlers: list = [TextualHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
