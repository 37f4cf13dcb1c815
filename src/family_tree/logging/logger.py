"""
Centralized logging for the Family Tree project.

Every module asks ``get_logger(__name__)`` for a logger under the shared
``family_tree`` base logger, which owns two handlers:

* a master log file (``logs/family_tree.log`` by default, rotating when
  ``logging.rotate`` is set in ``config/family_tree.yml``);
* a stderr handler at ``logging.console_level`` (WARNING by default) so the
  interactive menu is not buried in INFO chatter.

Module loggers additionally write ``logs/<module>.log``. A relative
``paths.logs_dir`` is taken from the working directory, like
``paths.data_file``. When that directory cannot be created the file handlers
are skipped and logging continues on the console only.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from family_tree.config import FTConfig, get_config

BASE_LOGGER_NAME = "family_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


class _Settings:
    """Resolved once, when the base logger is first configured."""

    level: int = logging.INFO
    log_dir: Optional[Path] = None
    rotate: bool = False
    configured: bool = False


def _level(name: object, default: int) -> int:
    return getattr(logging, str(name).upper(), default)


def resolve_log_dir(cfg: FTConfig) -> Optional[Path]:
    """
    Return the directory for log files, creating it if needed.

    ``None`` means file logging is unavailable (e.g. a read-only location).
    """
    configured = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(configured)
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return log_dir


def _file_handler(filename: str) -> Optional[logging.Handler]:
    if _Settings.log_dir is None:
        return None

    path = _Settings.log_dir / filename
    try:
        if _Settings.rotate:
            handler: logging.Handler = RotatingFileHandler(
                path,
                maxBytes=ROTATE_MAX_BYTES,
                backupCount=ROTATE_BACKUPS,
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None

    handler.setLevel(_Settings.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger() -> Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _Settings.configured:
        return base

    cfg = get_config()
    debug = bool(cfg.debug)
    _Settings.level = logging.DEBUG if debug else _level(cfg.logging.get("level"), logging.INFO)
    _Settings.rotate = bool(cfg.logging.get("rotate", False))
    _Settings.log_dir = resolve_log_dir(cfg)

    base.setLevel(_Settings.level)
    base.propagate = False

    master = _file_handler(cfg.logging.get("file", "family_tree.log"))
    if master is not None:
        base.addHandler(master)

    console = StreamHandler()
    console.setLevel(
        logging.DEBUG if debug else _level(cfg.logging.get("console_level"), logging.WARNING)
    )
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    _Settings.configured = True
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Names outside the ``family_tree`` namespace do not reach the base
    handlers; pass ``__name__`` from inside the package.
    """
    base = _base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name == base.name:
        return base

    logger = logging.getLogger(logger_name)
    logger.setLevel(_Settings.level)
    logger.propagate = True

    if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        handler = _file_handler(f"{logger_name.replace('.', '_')}.log")
        if handler is not None:
            handler.is_module_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    return logger
