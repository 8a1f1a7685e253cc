# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:20:44 2026

@author: mokuneva

Logger setup for scripts and notebooks: colored console output and an
optional rotating log file. The package itself never configures logging.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler

from ..config.settings import LOGGING

FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DATEFORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colors console lines by level"""

    COLOR_MAP = {
        logging.WARNING: "33",  # yellow
        logging.ERROR: "31",  # red
        logging.CRITICAL: "35",  # magenta
    }
    CSI = "\033["
    RESET = "\033[0m"

    def format(self, record):
        msg = super().format(record)
        color = self.COLOR_MAP.get(record.levelno)
        return f"{self.CSI}{color}m{msg}{self.RESET}" if color else msg


def setup_logger(level=None, log_dir=None, stream=None):
    """
    Send the novel_sentiment loggers to the console and, when log_dir is
    given (or set as NS_LOG_DIR), to log_dir/novel_sentiment.log.
    Calling it again replaces the previous handlers.
    """
    level = LOGGING["level"] if level is None else level
    log_dir = LOGGING["log_dir"] if log_dir is None else log_dir

    logger = logging.getLogger("novel_sentiment")
    logger.setLevel(level)
    while logger.handlers:
        logger.handlers.pop().close()

    console = logging.StreamHandler(stream or sys.stdout)
    console.setFormatter(ColoredFormatter(fmt=FORMAT, datefmt=DATEFORMAT))
    logger.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(os.path.join(log_dir, "novel_sentiment.log"),
                                           maxBytes=LOGGING["max_bytes"],
                                           backupCount=LOGGING["backup_count"],
                                           encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATEFORMAT))
        logger.addHandler(file_handler)

    return logger
