"""Logging configuration."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure root logging with a rich stderr handler and optional file output."""
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        root.addHandler(file_handler)

    # Frame-level chatter from the websocket library
    if not verbose:
        logging.getLogger("websockets").setLevel(logging.WARNING)


def setup_logging_from_env() -> None:
    """Configure logging from WEBMUD_LOG_LEVEL / WEBMUD_LOG_FILE."""
    level = os.environ.get("WEBMUD_LOG_LEVEL", "INFO").upper()
    setup_logging(
        verbose=level == "DEBUG",
        log_file=os.environ.get("WEBMUD_LOG_FILE") or None,
    )
