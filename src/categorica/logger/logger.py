"""Global logger configuration for the Categorica project.

Every library module gets a child logger ("categorica.functor",
"categorica.monoid", ...). Unless a level is passed explicitly, it comes from
:data:`categorica.config.settings`, so ``LOG_LEVEL`` may be set either in the
environment or in the JSON file named by ``CATEGORICA_CONFIG``.
"""

import logging
import sys

from categorica.config import settings

__all__ = ["logger", "setup_logger", "HANDLER_NAME"]

HANDLER_NAME = "categorica.stdout"


def _has_stdout_handler(logger: logging.Logger) -> bool:
    return any(handler.get_name() == HANDLER_NAME for handler in logger.handlers)


def setup_logger(
    name: str = "categorica",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, "categorica" or a child such as "categorica.monoid"
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            ``settings.LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Handlers added by other tools (e.g. test capture) do not count
    if not _has_stdout_handler(logger):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


logger = setup_logger()
