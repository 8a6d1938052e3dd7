"""
Small helpers shared across profilereport.

Methods
-------
temp_log_level(logger, level)
    Run a block with a logger switched to another level.
log_context(logger, verbose, debug)
    Pick the logging context used by the public entry points.
"""

import logging
from contextlib import contextmanager, nullcontext


@contextmanager
def temp_log_level(logger: logging.Logger, level: int | str):
    """
    Run the ``with`` block with `logger` set to `level`.

    Parameters
    ----------
    logger : logging.Logger
        Logger whose level is switched for the duration of the block.
    level : int or str
        Numeric level or level name (``"DEBUG"``, ``"info"``, ...).

    Yields
    ------
    logging.Logger
        The same `logger`, for ``with ... as log`` usage.

    Raises
    ------
    ValueError
        If `level` is an unknown level name.

    Examples
    --------
    >>> import logging
    >>> log = logging.getLogger("profilereport")
    >>> with temp_log_level(log, "debug"):
    ...     log.debug("rendering page 1")
    >>> log.level == logging.WARNING
    True
    """
    if isinstance(level, str):
        # Logger.setLevel validates the name
        level = level.upper()
    previous = logger.level
    logger.setLevel(level)
    try:
        yield logger
    finally:
        logger.setLevel(previous)


def log_context(logger, verbose: bool = False, debug: bool = False):
    """
    Return the context manager matching the ``verbose``/``debug`` flags.

    ``debug`` takes precedence over ``verbose``. Without either flag a
    ``nullcontext`` is returned and the logger keeps its configured level.
    """
    for enabled, level in ((debug, logging.DEBUG), (verbose, logging.INFO)):
        if enabled:
            return temp_log_level(logger, level)
    return nullcontext(logger)
