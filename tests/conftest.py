"""Shared pytest configuration."""

from __future__ import annotations

import pytest

from clickup_mcp import lifespan
from clickup_mcp.clickup.client import ClickUpClient
from clickup_mcp.guards.rate_limit import reset_limiter
from clickup_mcp.settings import ClickUpSettings

BASE_URL = "https://api.clickup.test/api/v2"


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def make_task(task_id, status="to do", custom_fields=None, **extra):
    """Minimal task payload as returned by the list task endpoint."""
    task = {
        "id": str(task_id),
        "name": f"Task {task_id}",
        "status": {"status": status, "type": "open"},
        "url": f"https://app.clickup.com/t/{task_id}",
        "assignees": [],
        "tags": [],
        "custom_fields": custom_fields or [],
    }
    task.update(extra)
    return task


@pytest.fixture
def settings():
    return ClickUpSettings(api_token="pk_test_token", base_url=BASE_URL, _env_file=None)


@pytest.fixture
async def client():
    c = ClickUpClient(api_token="pk_test_token", base_url=BASE_URL)
    yield c
    await c.close()


@pytest.fixture
def server_state(monkeypatch, settings, client):
    """Install a client and settings as if the server lifespan were running."""
    monkeypatch.setattr(lifespan, "_settings", settings)
    monkeypatch.setattr(lifespan, "_client", client)
    reset_limiter()
    yield settings
    reset_limiter()


@pytest.fixture
def task_factory():
    return make_task
