"""Console logging setup for command line runs."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER_NAME = "tfschema_bindgen"
LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s] %(message)s"
_HANDLER_NAME = "tfbindgen-console"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package log records to stderr; DEBUG when verbose, WARNING otherwise.

    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if verbose else LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
