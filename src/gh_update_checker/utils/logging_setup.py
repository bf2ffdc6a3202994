"""Logging configuration for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from gh_update_checker.config.settings import settings


def setup_logging(verbose: bool = False) -> None:
    """Send package log records to stderr through rich.

    Library code only creates loggers; handlers are installed here, once,
    by the CLI.
    """
    level = logging.DEBUG if verbose else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("gh_update_checker")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
