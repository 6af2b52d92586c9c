"""
Library logging helpers.

The client only emits records; handlers and levels belong to the application.
"""

import logging

LOGGER_NAME = "builtwith_api"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


def install_null_handler() -> logging.Logger:
    """Silence "no handler" output unless the application configures logging."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
