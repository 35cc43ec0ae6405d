"""
Logging configuration for xbee_io.

The decoder modules only create loggers under the ``xbee_io`` namespace and
never emit anything on their own. configure_logger() gives that namespace a
coloured console handler for debugging sessions and small scripts; host
applications with their own logging setup simply don't call it. Handlers on
the root logger are left alone.
"""

import logging
import os
from typing import Optional, Union

import coloredlogs

module_logger = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "xbee_io"
LOG_FORMAT = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"
HANDLER_NAME = "xbee_io-console"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    """Turn an explicit level, or LOG_LEVEL from the environment, into a logging level."""
    if isinstance(level, int):
        return level

    level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_int = logging.getLevelName(level_str)
    if not isinstance(level_int, int):
        module_logger.warning(f"Invalid log level '{level_str}'. Defaulting to INFO.")
        return logging.INFO
    return level_int


def configure_logger(
    level: Optional[Union[int, str]] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """
    Attach a console handler with coloredlogs formatting to the package logger.

    Args:
        level: Log level name or number. Defaults to the LOG_LEVEL environment
            variable, then INFO.
        logger: Logger to configure. Defaults to the ``xbee_io`` logger.

    Returns:
        logging.Logger: The configured logger.
    """
    target = logger if logger is not None else logging.getLogger(PACKAGE_LOGGER_NAME)
    level_int = _resolve_level(level)

    # A handler from an earlier call is replaced, not stacked
    for handler in list(target.handlers):
        if handler.get_name() == HANDLER_NAME:
            target.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setLevel(level_int)
    handler.setFormatter(coloredlogs.ColoredFormatter(fmt=LOG_FORMAT))
    target.addHandler(handler)
    target.setLevel(level_int)

    module_logger.debug(f"Logging for '{target.name}' set to {logging.getLevelName(level_int)}")
    return target
