"""Logger construction for the command line and benchmarks.

Library modules only call :func:`logging.getLogger`; handlers are attached
here so that importing :mod:`vecmathpy` never alters the caller's logging
configuration.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "vecmathpy"


def vecmath_logger(name: str = "vecmathpy", level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a single stream handler.

    Args:
        name (str): Logger name, usually ``__name__``.
        level (int): Logging level for the logger and its handler.

    Returns:
        (logging.Logger): The configured logger. Repeated calls with the same
            name reuse the existing handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
