"""Textpad CLI entry point.

Allows running via `python -m textpad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .version import get_version_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textpad", description="A simple text editor.")
    parser.add_argument("filename", nargs="?", help="file to open")
    parser.add_argument("-V", "--version", action="store_true",
                        help="print version information and exit")
    parser.add_argument("--log-file", help="append log records to this file")
    parser.add_argument("--debug", action="store_true", help="log debug messages")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.version:
        print(f"textpad {get_version_string()}")
        return

    # Lazy imports to avoid importing UI deps for --version
    from .logging_config import configure_logging
    from .app import TextpadApp

    configure_logging(logging.DEBUG if args.debug else logging.WARNING, args.log_file)

    app = TextpadApp(filename=args.filename)
    app.run()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
