"""
Logging setup for the customer service.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger and routes uvicorn's own loggers through
them, so request logs and ``customer_api.*`` logs come out in one
format.  Modules obtain their logger with ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed here carry this name so a repeated call can spot them.
HANDLER_NAME = "customer_api"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure application logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  If omitted or empty,
        only the console handler is installed.

    Calling it again is a no-op once its handlers are present; handlers
    attached by other tools (pytest, for one) are left alone.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)
