"""Centralized logging configuration for the Railway MCP server.

All output goes to stderr. When the server runs over the stdio transport,
stdout carries the MCP protocol stream and must never receive log lines.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that are chatty at INFO level
_THIRD_PARTY_LOGGERS = ("mcp", "httpx", "httpcore", "anyio", "uvicorn")

_ROOT_LOGGER_NAME = "railway_mcp"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the application.

    Args:
        verbose: Enable DEBUG level output, including third-party loggers.
        quiet: Only emit WARNING and above. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    app_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(level)

    third_party_level = logging.DEBUG if verbose else logging.WARNING
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance under the ``railway_mcp`` hierarchy.
    """
    return logging.getLogger(name)
