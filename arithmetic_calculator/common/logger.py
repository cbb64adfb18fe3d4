"""Package logger."""
import logging
import sys

LOGGER_NAME = "arithmetic_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
# Silent unless the application configures logging
logger.addHandler(logging.NullHandler())


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level, no duplicate handler is added.

    :param int level: Logging level for the package logger

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
