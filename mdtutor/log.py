"""Logging setup for applications embedding mdtutor.

Library modules only call ``logging.getLogger(__name__)``. Entry points
that want to see filter decisions call configure_logging() once.
"""

import logging
import sys
from dataclasses import dataclass

_HANDLER_TAG_ATTR = "_mdtutor_handler"
_CONFIGURED_FLAG_ATTR = "_mdtutor_configured"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """Root logger settings.

    - level: "DEBUG" | "INFO" | "WARNING" | "ERROR" | "CRITICAL"
    - console: attach a stderr handler
    - fmt: format string for that handler
    """
    level: str = "WARNING"
    console: bool = True
    fmt: str = "%(levelname)s | %(name)s | %(message)s"


def _parse_level(level: str) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """Configure the root logger idempotently.

    A second call is a no-op unless ``force`` is set. Handlers installed
    by someone else are left alone.

    Args:
        cfg: Logging settings
        force: Re-apply even if already configured

    Returns:
        The root logger
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    _remove_our_handlers(root)

    if cfg.console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level_int)
        handler.setFormatter(logging.Formatter(cfg.fmt))
        setattr(handler, _HANDLER_TAG_ATTR, True)
        root.addHandler(handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger."""
    return logging.getLogger(name)
