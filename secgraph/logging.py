"""Centralized logging configuration for secgraph.

All package loggers hang under the ``secgraph`` logger, which owns a single
stdout handler. INFO reports one line per connectivity result. DEBUG adds the
value of every cyclic max-flow P(a,b), the solver calls and the thread-pool
timings; ``enable_flow_trace`` turns on only the P(a,b) lines.
"""

import logging
import sys
from typing import List, Optional

# Set once the "secgraph" logger has its handler
_ROOT_LOGGER_CONFIGURED = False

_ROOT_LOGGER_NAME = "secgraph"

# Logger that writes the P(a,b)=value lines
_FLOW_TRACE_LOGGER_NAME = "secgraph.connectivity"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``secgraph`` logger.

    Repeated calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a secgraph module; its effective level comes from ``secgraph``."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def _package_handlers() -> List[logging.Handler]:
    setup_root_logger()
    return logging.getLogger(_ROOT_LOGGER_NAME).handlers


def set_global_log_level(level: int) -> None:
    """Set the level of every secgraph logger and of the package handler.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(level)
    for handler in _package_handlers():
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log everything, solver calls and thread-pool timings included."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Back to INFO: one line per connectivity result."""
    set_global_log_level(logging.INFO)


def enable_flow_trace() -> None:
    """Log each cyclic max-flow value ``P(a,b)=value`` as ``sec`` computes it.

    Only the connectivity logger is lowered to DEBUG; the solver modules keep
    the package level.
    """
    logging.getLogger(_FLOW_TRACE_LOGGER_NAME).setLevel(logging.DEBUG)
    for handler in _package_handlers():
        if handler.level > logging.DEBUG:
            handler.setLevel(logging.DEBUG)


def disable_flow_trace() -> None:
    """Return the connectivity logger to the package level."""
    logging.getLogger(_FLOW_TRACE_LOGGER_NAME).setLevel(logging.NOTSET)
    level = logging.getLogger(_ROOT_LOGGER_NAME).getEffectiveLevel()
    for handler in _package_handlers():
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler and any level overrides (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    logging.getLogger(_FLOW_TRACE_LOGGER_NAME).setLevel(logging.NOTSET)


setup_root_logger()
