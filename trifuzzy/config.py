"""
Configuration helpers for trifuzzy.

Holds the logging configuration shared by :class:`trifuzzy.fuzzy_set.TriFuzzyNumSet`
and the demo entry point. Logging is disabled unless explicitly enabled.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: Union[int, str]) -> int:
    """Map an int or a level name such as ``"debug"`` to a logging level."""
    if isinstance(log_level, int):
        return log_level
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if isinstance(level, int):
            return level
    return logging.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for a single logger.

    Attributes
    ----------
    enabled : bool
        When False the logger gets a ``NullHandler`` and emits nothing.
    level : int or str
        Level as an int or a standard level name.
    file : str, optional
        Extra UTF-8 log file next to the stream handler.
    """
    enabled: bool = False
    level: Union[int, str] = "INFO"
    file: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.level, str) and not isinstance(
            logging.getLevelName(self.level.upper()), int
        ):
            raise ValueError(f"Unknown log level '{self.level}'.")

    @property
    def resolved_level(self) -> int:
        return resolve_log_level(self.level)


def configure_logger(name: str, config: LoggingConfig) -> logging.Logger:
    """
    Create (or reset) the logger ``name`` according to ``config``.

    Handlers from a previous call are dropped, so calling this twice
    reconfigures the logger instead of duplicating output.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if not config.enabled:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        return logger

    level = config.resolved_level
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def format_event(message: str, **fields) -> str:
    """Render ``message | key=value ...`` the way all trifuzzy log lines look."""
    if fields:
        kv = " ".join(f"{key}={value}" for key, value in fields.items())
        message = f"{message} | {kv}"
    return message
