"""Console logging via Rich.

Created: 2026-10-06
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Libraries that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "multipart", "python_multipart")


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger through a Rich console handler on stderr."""
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="[%X]",
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
