"""Package logging for netalgo.

Every module logs through a child of the ``netalgo`` logger returned by
`get_logger`. The package logger is configured once, on import, with a single
stdout handler at INFO. Algorithms only emit DEBUG run summaries, so the
default setup stays silent until `enable_debug_logging` is called.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional, Union

PACKAGE_LOGGER = "netalgo"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def _as_level(level: Union[int, str]) -> int:
    """Accept a numeric level or a level name such as ``"debug"``."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level '{level}'.")
        return value
    return level


def setup_root_logger(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``netalgo`` logger.

    Later calls are no-ops until `reset_logging` runs.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination; defaults to a stdout ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    logger = _package_logger()
    logger.handlers.clear()
    logger.setLevel(_as_level(level))
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)
    # pytest's caplog listens on the process root logger
    logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``netalgo`` hierarchy.

    Names outside the package, such as ``__main__`` in a script, are nested
    under ``netalgo`` so they share its handler and level.
    """
    setup_root_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger and of its handlers."""
    setup_root_logger()
    value = _as_level(level)
    logger = _package_logger()
    logger.setLevel(value)
    for handler in logger.handlers:
        handler.setLevel(value)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


@contextmanager
def log_elapsed(logger: logging.Logger, what: str) -> Iterator[None]:
    """Log the wall time of the block at DEBUG as ``"<what> took <ms> ms"``."""
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s took %.3f ms", what, (time.perf_counter() - start) * 1000)


def reset_logging() -> None:
    """Drop the package handler and level; the next setup starts fresh."""
    global _configured
    _configured = False
    logger = _package_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


setup_root_logger()
