"""Logging for the users app: one package logger writing to stderr."""

import logging
import sys

LOGGER_NAME = "users_app"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"


def setup_logger(level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the package logger once; later calls only return it.

    Fetch and state updates run on the users-io / users-main pools, so the
    thread name is part of every line. urllib3 connection chatter is kept at
    WARNING unless the app itself logs at DEBUG.
    """
    log = logging.getLogger(LOGGER_NAME)
    if log.handlers:
        return log

    log.setLevel(level)
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(h)

    if log.getEffectiveLevel() > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log


def get_logger() -> logging.Logger:
    """Return the package logger. Modules call this at import time."""
    return logging.getLogger(LOGGER_NAME)
