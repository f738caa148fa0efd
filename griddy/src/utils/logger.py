"""Logger factory honouring the configured ``log_level``."""

from __future__ import annotations

import logging
from pathlib import Path

from griddy.src.utils import config_loader

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(
    name: str, file_path: str | None = None, level: str | None = None
) -> logging.Logger:
    """Return a logger for ``name``.

    Handlers are attached only on first use, so repeated calls do not
    duplicate output. ``level`` overrides ``config_loader.LOG_LEVEL``.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        formatter = logging.Formatter(_FORMAT)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    level_name = (level or config_loader.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    return logger
