"""
Logging setup for the checklist service.

All modules log through children of the ``checklist`` logger
(``logging.getLogger(__name__)``), so one handler here covers the API,
the services and the client.

Format:
    {timestamp} {level} [{logger}]: {message}
    Example: 2025-05-02 21:14:03 INFO [checklist.app.api.v1.endpoints.artists]: Created artist 12
"""

import sys
import logging

LOGGER_NAME = "checklist"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(getattr(h, "_checklist_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._checklist_handler = True
        logger.addHandler(handler)

    return logger
