"""Logging for the stdio server. Everything goes to stderr; stdout carries MCP frames."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

# httpx logs every request at INFO, which floods stderr during list scans.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logger(name: str = "clickup_mcp", level: str = "INFO") -> logging.Logger:
    """Configure the package logger on stderr at ``level`` (CLICKUP_LOG_LEVEL)."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for chatty in _CHATTY_LOGGERS:
        logging.getLogger(chatty).setLevel(logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING)
    return logger
