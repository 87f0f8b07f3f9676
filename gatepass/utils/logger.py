# gatepass/utils/logger.py
"""
Centralised logging configuration for the entire application.
Always logs to console; also to a rotating file in LOG_DIR when LOG_TO_FILE is set.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from gatepass.config import settings

LOG_FORMAT = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_configured = False


def build_handlers(level: str, to_file: bool, log_dir: str) -> list[logging.Handler]:
    """Console handler, plus a 10 × 5MB rotating gatepass.log when to_file is set."""
    console = logging.StreamHandler()
    handlers = [console]

    if to_file:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=os.path.join(log_dir, "gatepass.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        ))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(LOG_FORMAT)
    return handlers


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    root = logging.getLogger()
    root.setLevel(level)
    for handler in build_handlers(level, settings.LOG_TO_FILE, settings.LOG_DIR):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
