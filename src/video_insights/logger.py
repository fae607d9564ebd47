"""Logging setup shared by the CLI and the API server."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Route package logs to stderr through rich (handler attached once)."""
    global _configured

    logger = logging.getLogger("video_insights")
    logger.setLevel((level or settings.log_level).upper())

    if _configured:
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    _configured = True
