"""
Logging configuration for the work tracker.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  The uvicorn loggers are kept
at the same level as the application so ``LOG_LEVEL=WARNING`` also
silences the per-request access lines.
"""

import logging
from pathlib import Path
from typing import Optional


UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(logfile: str, formatter: logging.Formatter) -> logging.FileHandler:
    log_path = Path(logfile).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
        If omitted or empty, no file handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # uvicorn sets these up before importing the app, so they are
    # aligned even when the root logger is already configured.
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = _file_handler(logfile, formatter)
        root.addHandler(file_handler)
        access = logging.getLogger("uvicorn.access")
        if not access.propagate:
            # uvicorn's default config stops access records at its own handler
            access.addHandler(file_handler)
