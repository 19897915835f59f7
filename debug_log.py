"""Opt-in debug logging.

Set ``REVEALGRID_DEBUG=1`` to write navigation, reveal and focus events to
``debug.log`` in the config directory. Without it the ``revealgrid`` logger
gets a NullHandler, so nothing is written and curses output stays clean.
"""

import logging
import os

import config_paths

LOGGER_NAME = "revealgrid"
DEBUG_ENV = "REVEALGRID_DEBUG"


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() not in ("", "0", "false", "no")


def setup_logging(path=None):
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not debug_enabled():
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        config_paths.ensure_config_dirs()
        handler = logging.FileHandler(path or config_paths.DEBUG_LOG_PATH, encoding="utf-8")
    except OSError:
        # never let debug logging break the UI
        logger.addHandler(logging.NullHandler())
        return logger

    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
