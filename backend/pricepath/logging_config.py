# backend/pricepath/logging_config.py
import logging
import sys
from typing import Optional

from pricepath import config

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'pricepath' logger and return it.

    level and log_file default to PRICEPATH_LOG_LEVEL / PRICEPATH_LOG_FILE.
    Records go to stderr next to uvicorn's own output, and are appended to
    the log file when one is set. Calling this again replaces the handlers.
    """
    level = config.LOG_LEVEL if level is None else level
    log_file = config.LOG_FILE if log_file is None else log_file

    logger = logging.getLogger("pricepath")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    formatter = logging.Formatter(FORMAT)
    for h in handlers:
        h.setFormatter(formatter)
        logger.addHandler(h)
    # uvicorn configures the root logger; keep records from showing up twice
    logger.propagate = False

    logger.debug("logging at %s%s", logging.getLevelName(level),
                 f" to {log_file}" if log_file else "")
    return logger
