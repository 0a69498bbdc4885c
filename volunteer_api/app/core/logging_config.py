"""
Logging configuration for the application.

``setup_logging`` configures the root logger once per process with a
console handler and, when ``LOG_FILE`` is set, a file handler.  Uvicorn's
per‑request access log is lowered to WARNING unless ``debug`` is on, so
the service's own INFO records (registrations, event changes,
broadcasts, matches) are not drowned out.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    debug : bool
        Keep uvicorn's access log at the root level instead of WARNING.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated create_app call.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if not debug:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
