import logging
import sys


def setup_logging(level: int = logging.INFO):
    """Configures logging for the command-line tool.

    Messages go to stderr so the report on stdout can be piped cleanly.
    """
    logger = logging.getLogger()  # Root logger
    logger.setLevel(level)

    # Clear existing handlers before adding a new one
    while logger.hasHandlers():
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname).1s | %(message)s'))
    logger.addHandler(handler)

    return logger
