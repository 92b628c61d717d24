"""Console logging for the 'calculator' namespace."""
import logging
import sys

from backend.config import LOGGER_NAMESPACE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Send 'calculator.*' records to stdout; safe to call more than once."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, nested under the application namespace."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
