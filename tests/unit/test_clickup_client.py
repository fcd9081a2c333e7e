"""Tests for ClickUpClient using respx to mock httpx."""

import json

import httpx
import pytest
import respx
from httpx import Response

from clickup_mcp.clickup.errors import (
    ClickUpAPIError,
    ClickUpAuthenticationError,
    ClickUpBadRequestError,
    ClickUpConnectionError,
    ClickUpNotFoundError,
    ClickUpRateLimitError,
    ClickUpServerError,
    ClickUpTimeoutError,
)

BASE_URL = "https://api.clickup.test/api/v2"


@respx.mock
async def test_request_sends_token(client):
    route = respx.get(f"{BASE_URL}/team").mock(return_value=Response(200, json={"teams": []}))
    result = await client.get_teams()
    assert result == {"teams": []}
    assert route.calls.last.request.headers["Authorization"] == "pk_test_token"


@respx.mock
async def test_get_list_tasks_params(client):
    route = respx.get(f"{BASE_URL}/list/L1/task").mock(
        return_value=Response(200, json={"tasks": [{"id": "1"}]})
    )
    result = await client.get_list_tasks(
        "L1", page=2, include_closed=True, statuses=["to do", "done"], assignees=[7]
    )
    params = route.calls.last.request.url.params
    assert result["tasks"][0]["id"] == "1"
    assert params["page"] == "2"
    assert params["archived"] == "false"
    assert params["include_closed"] == "true"
    assert params.get_list("statuses[]") == ["to do", "done"]
    assert params.get_list("assignees[]") == ["7"]


@respx.mock
async def test_search_omits_unset_filters(client):
    route = respx.get(f"{BASE_URL}/team/T1/task").mock(return_value=Response(200, json={"tasks": []}))
    await client.search_team_tasks("T1", query="invoice")
    params = route.calls.last.request.url.params
    assert dict(params) == {"page": "0", "query": "invoice"}


@respx.mock
async def test_create_task(client):
    route = respx.post(f"{BASE_URL}/list/L1/task").mock(
        return_value=Response(200, json={"id": "new", "name": "Call back"})
    )
    result = await client.create_task("L1", {"name": "Call back"})
    assert result["id"] == "new"
    assert json.loads(route.calls.last.request.content) == {"name": "Call back"}


@respx.mock
async def test_delete_returns_none(client):
    respx.delete(f"{BASE_URL}/task/t1").mock(return_value=Response(204))
    assert await client.delete_task("t1") is None


@respx.mock
async def test_set_custom_field(client):
    route = respx.post(f"{BASE_URL}/task/t1/field/f1").mock(return_value=Response(200, json={}))
    await client.set_custom_field("t1", "f1", "+14124812210")
    assert route.called


@pytest.mark.parametrize(
    "status, error_cls",
    [
        (400, ClickUpBadRequestError),
        (401, ClickUpAuthenticationError),
        (404, ClickUpNotFoundError),
        (429, ClickUpRateLimitError),
        (500, ClickUpServerError),
        (503, ClickUpServerError),
        (418, ClickUpAPIError),
    ],
)
@respx.mock
async def test_status_mapping(client, status, error_cls):
    respx.get(f"{BASE_URL}/task/t1").mock(
        return_value=Response(status, json={"err": "Something off", "ECODE": "X_001"})
    )
    with pytest.raises(error_cls) as exc:
        await client.get_task("t1")
    assert exc.value.status_code == status
    assert exc.value.detail == "Something off"


@respx.mock
async def test_non_json_error_body(client):
    respx.get(f"{BASE_URL}/task/t1").mock(return_value=Response(404, text="Not Found"))
    with pytest.raises(ClickUpNotFoundError) as exc:
        await client.get_task("t1")
    assert exc.value.detail == "Not Found"


@respx.mock
async def test_timeout(client):
    respx.get(f"{BASE_URL}/task/t1").mock(side_effect=httpx.ReadTimeout("slow"))
    with pytest.raises(ClickUpTimeoutError):
        await client.get_task("t1")


@respx.mock
async def test_connection_error(client):
    respx.get(f"{BASE_URL}/task/t1").mock(side_effect=httpx.ConnectError("no route"))
    with pytest.raises(ClickUpConnectionError):
        await client.get_task("t1")
