"""Coloured stdout logging for the ea_datagrabber package."""

import logging
import sys

# ANSI escape codes, same palette as the console output
_COLOR_MAP = {
    logging.DEBUG: "\033[38;5;150m",   # light grey-green
    logging.INFO: "\033[38;5;214m",    # orange
    logging.WARNING: "\033[33m",       # yellow
    logging.ERROR: "\033[31m",         # red
    logging.CRITICAL: "\033[41m",      # red background
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Inject ANSI colors into log records."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _COLOR_MAP.get(record.levelno, "")
        if color:
            return f"{color}{message}{_RESET}"
        return message


def setup_logger(name: str = "ea_datagrabber", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return the package logger with colored stdout output.
    Calling it again only updates the level, no duplicate handlers are added.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] [%(name)s] %(levelname)s: %(message)s"
    datefmt = "%H:%M:%S"
    handler.setFormatter(_ColorFormatter(fmt=fmt, datefmt=datefmt))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
