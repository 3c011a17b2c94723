from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def map_log_level(level_name: str) -> int:
    """
    Maps a level name to a `logging` level.

    Accepted: ERROR|WARN|WARNING|INFO|DEBUG (any case).
    """
    value = (level_name or "").strip().upper()
    if value == "ERROR":
        return logging.ERROR
    if value in ("WARN", "WARNING"):
        return logging.WARNING
    if value == "INFO":
        return logging.INFO
    if value == "DEBUG":
        return logging.DEBUG
    raise ValueError(f"Unsupported log level: {level_name}")


def configure_logging(level_name: str) -> logging.Logger:
    """
    Sends `cid10_csv` logs to stderr at the given level, so stdout stays clean for rows.
    Calling it again replaces the previous handler.
    """
    level = map_log_level(level_name)

    logger = logging.getLogger("cid10_csv")
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    logger.addHandler(handler)
    return logger
