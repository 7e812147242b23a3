from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    The console handler shows ``level`` and above. When ``log_path`` is given,
    a file handler additionally records everything at DEBUG, including the
    command lines that are not echoed on the console.

    Returns the log file path in use (or None when logging to console only).
    """

    logger = logging.getLogger()

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_luna_configured", False):
        return getattr(logger, "_luna_log_path", log_path)

    logger.setLevel(logging.DEBUG if log_path else level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handlers: list[logging.Handler] = []

    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(fmt)
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        console.setLevel(level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_luna_configured", True)
    setattr(logger, "_luna_log_path", log_path)

    if log_path:
        logging.getLogger(__name__).info("Logging initialized (file=%s)", log_path)
    return log_path
