"""Server lifespan: creates ClickUpClient on startup, closes on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from clickup_mcp.clickup.client import ClickUpClient
from clickup_mcp.logging.logger import setup_logger
from clickup_mcp.settings import ClickUpSettings, load_settings

_client: ClickUpClient | None = None
_settings: ClickUpSettings | None = None


def get_clickup_client() -> ClickUpClient:
    """Return the active ClickUpClient. Only valid during server lifespan."""
    if _client is None:
        raise RuntimeError("ClickUpClient not initialized. Is the server running?")
    return _client


def get_settings() -> ClickUpSettings:
    """Return the loaded settings. Only valid during server lifespan."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the ClickUpClient lifecycle."""
    global _client, _settings

    _settings = load_settings()
    logger = setup_logger(level=_settings.log_level)
    logger.info(
        "Starting clickup-mcp server (base_url=%s, read_only=%s)",
        _settings.base_url,
        _settings.read_only_mode,
    )

    _client = ClickUpClient(
        api_token=_settings.api_token,
        base_url=_settings.base_url,
        timeout=_settings.timeout,
    )

    try:
        yield
    finally:
        logger.info("Shutting down clickup-mcp server")
        await _client.close()
        _client = None
        _settings = None
