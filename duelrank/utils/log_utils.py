"""logging setup shared across the package"""
import sys
import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def get_logger(name, level=None):
    """returns a logger writing to stdout, the handler is only attached the first time

    the level is left unset unless given so the logger follows its parents
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)
    if level is not None:
        logger.setLevel(level)
    return logger
