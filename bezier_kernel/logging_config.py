"""
Logging configuration for applications using the kernel.

The package itself only emits records through module loggers under the
'bezier_kernel' namespace; nothing is printed until setup_logging() attaches
handlers.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "bezier_kernel"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _release_handlers(logger: logging.Logger):
    """Detach and close every handler attached directly to logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the kernel's records to stdout and optionally to a file.

    Calling it again replaces the previous configuration; handlers from the
    earlier call are closed, so no log file stays open.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a log file, truncated on open

    Returns:
        The 'bezier_kernel' logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    _release_handlers(logger)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized (level %s%s).", logging.getLevelName(level),
                f", file {log_file}" if log_file else "")
    return logger
