"""Process-wide logging setup for the API server and CLI."""

import logging
import sys
import threading
from typing import Union

_LOGGER_NAME = "issuetracker"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
_setup_lock = threading.Lock()


def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``issuetracker`` logger.

    Safe to call repeatedly (app factory, CLI, tests): the handler is only
    installed once, later calls just adjust the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    with _setup_lock:
        if not any(getattr(h, "_issuetracker", False) for h in logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
            handler._issuetracker = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
        logger.setLevel(level)
        # Alembic configures the root logger when migrations run in-process
        logger.propagate = False
    return logger
