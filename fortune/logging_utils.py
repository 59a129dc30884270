from __future__ import annotations

import logging

LOGGER_NAMES = ("fortune", "ui_app")


def _has_console_handler(logger: logging.Logger) -> bool:
    # FileHandler subclasses StreamHandler but does not write to the console
    return any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure console logging for the "fortune" and "ui_app" logger trees.

    Safe to call more than once; the handler is only added the first time.
    Returns the top-level "fortune" logger.
    """
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not _has_console_handler(logger):
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            logger.addHandler(ch)
        for h in logger.handlers:
            h.setLevel(level)

    logger = logging.getLogger(LOGGER_NAMES[0])
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
