"""Debug log sink for the ``statpane`` logger tree.

Records go to an append-only file. When the file cannot be opened the sink
falls back to stderr. Logging never changes browser behavior.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "debug.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_ERRORS = "backslashreplace"

_installed_handler: logging.Handler | None = None


def _open_handler(log_path: Path) -> logging.Handler:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, mode="a", encoding="utf-8", errors=LOG_ERRORS)
    except OSError as exc:
        sys.stderr.write(f"Failed to open {log_path}: {exc}\n")
    # Undecodable file names arrive as lone surrogates.
    reconfigure = getattr(sys.stderr, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors=LOG_ERRORS)
    return logging.StreamHandler(sys.stderr)


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> logging.Handler:
    """Attach the debug sink to the ``statpane`` logger, replacing a previous one."""
    global _installed_handler

    logger = logging.getLogger(APP_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
        _installed_handler.close()

    handler = _open_handler(log_path if log_path is not None else DEFAULT_LOG_PATH)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    _installed_handler = handler
    return handler


def shutdown_logging() -> None:
    """Detach and close the installed sink, if any."""
    global _installed_handler

    if _installed_handler is None:
        return
    logger = logging.getLogger(APP_NAME)
    logger.info("Debug log closing")
    logger.removeHandler(_installed_handler)
    _installed_handler.close()
    _installed_handler = None
