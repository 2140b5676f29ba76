"""
Logging setup for the weightgraph packages.

Library modules only ever call logging.getLogger(__name__); handlers and
levels are attached here, by the application, once.
"""
from typing import Optional
import logging

from infrastructure.config import LoggingConfig

LOGGER_NAMES = ("core", "infrastructure")

_HANDLER_ATTR = "_weightgraph_handler"


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Attach a stream handler to the package loggers.

    Idempotent: calling it again replaces the level and format instead of
    stacking handlers.
    """
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    formatter = logging.Formatter(config.format)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        handler = next(
            (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)),
            None,
        )
        if handler is None:
            handler = logging.StreamHandler()
            setattr(handler, _HANDLER_ATTR, True)
            logger.addHandler(handler)
        handler.setFormatter(formatter)
