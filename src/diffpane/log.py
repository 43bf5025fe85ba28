"""Logging setup for the command line front-end."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Route ``diffpane`` loggers to stderr via Rich, and optionally a file."""
    if debug or os.environ.get("DIFFPANE_DEBUG") == "1":
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root = logging.getLogger("diffpane")
    root.setLevel(level)
    root.handlers.clear()
    root.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        markup=False,
        rich_tracebacks=debug,
    )
    handler.setLevel(level)
    root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        root.setLevel(logging.DEBUG)
        root.addHandler(file_handler)
