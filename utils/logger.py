import logging
import sys

import config


def get_logger(name: str):
    """
    Creates and configures a logger instance.
    The logger's level is taken from config.LOG_LEVEL.
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers when the module is imported twice (reload, tests)
    if logger.hasHandlers():
        logger.handlers.clear()

    log_level_str = str(getattr(config, "LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, log_level_str, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(numeric_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    logger.propagate = False

    return logger
