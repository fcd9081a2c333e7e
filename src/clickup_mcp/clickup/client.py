"""Async ClickUp REST API v2 client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from clickup_mcp.clickup.errors import (
    ClickUpAPIError,
    ClickUpAuthenticationError,
    ClickUpBadRequestError,
    ClickUpConnectionError,
    ClickUpNotFoundError,
    ClickUpPermissionError,
    ClickUpRateLimitError,
    ClickUpServerError,
    ClickUpTimeoutError,
)
from clickup_mcp.constants import API_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger("clickup_mcp")

_ERROR_MAP: dict[int, type[ClickUpAPIError]] = {
    400: ClickUpBadRequestError,
    401: ClickUpAuthenticationError,
    403: ClickUpPermissionError,
    404: ClickUpNotFoundError,
    429: ClickUpRateLimitError,
}


def _error_detail(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("err") or body.get("error")
    return None


def _list_params(**filters: Any) -> dict[str, Any]:
    """Drop unset filters and send list filters as repeated ``name[]`` keys."""
    params: dict[str, Any] = {}
    for name, value in filters.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if value:
                params[f"{name}[]"] = list(value)
        else:
            params[name] = value
    return params


class ClickUpClient:
    """Async wrapper around ClickUp REST API v2."""

    def __init__(
        self,
        api_token: str,
        base_url: str = API_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": api_token,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request primitive
    # ------------------------------------------------------------------

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one authenticated request and return the decoded JSON body."""
        path = f"/{endpoint.lstrip('/')}"
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.TimeoutException as e:
            raise ClickUpTimeoutError(f"ClickUp API {method} {path} timed out: {e}") from e
        except httpx.TransportError as e:
            raise ClickUpConnectionError(f"ClickUp API {method} {path} unreachable: {e}") from e

        if response.status_code >= 400:
            detail = _error_detail(response)
            message = f"ClickUp API {method} {path} failed ({response.status_code}): {detail}"
            error_cls = _ERROR_MAP.get(response.status_code)
            if error_cls is not None:
                raise error_cls(message, detail=detail)
            if response.status_code >= 500:
                raise ClickUpServerError(message, status_code=response.status_code, detail=detail)
            raise ClickUpAPIError(message, status_code=response.status_code, detail=detail)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    async def get_teams(self) -> dict[str, Any]:
        return await self.request("team")

    async def get_spaces(self, team_id: str, archived: bool = False) -> dict[str, Any]:
        return await self.request(f"team/{team_id}/space", params={"archived": archived})

    async def get_folders(self, space_id: str, archived: bool = False) -> dict[str, Any]:
        return await self.request(f"space/{space_id}/folder", params={"archived": archived})

    async def get_folder_lists(self, folder_id: str, archived: bool = False) -> dict[str, Any]:
        return await self.request(f"folder/{folder_id}/list", params={"archived": archived})

    async def get_folderless_lists(self, space_id: str, archived: bool = False) -> dict[str, Any]:
        return await self.request(f"space/{space_id}/list", params={"archived": archived})

    async def get_list(self, list_id: str) -> dict[str, Any]:
        return await self.request(f"list/{list_id}")

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def get_list_tasks(
        self,
        list_id: str,
        page: int = 0,
        archived: bool = False,
        include_closed: bool = False,
        statuses: list[str] | None = None,
        assignees: list[int] | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of a list's tasks, addressed by page index."""
        params = _list_params(
            archived=archived,
            include_closed=include_closed,
            page=page,
            statuses=statuses,
            assignees=assignees,
        )
        logger.debug("Fetching list %s tasks page %d", list_id, page)
        return await self.request(f"list/{list_id}/task", params=params)

    async def search_team_tasks(
        self,
        team_id: str,
        page: int = 0,
        query: str | None = None,
        statuses: list[str] | None = None,
        assignees: list[int] | None = None,
        tags: list[str] | None = None,
        date_created_gt: int | None = None,
        date_updated_gt: int | None = None,
    ) -> dict[str, Any]:
        params = _list_params(
            page=page,
            query=query,
            statuses=statuses,
            assignees=assignees,
            tags=tags,
            date_created_gt=date_created_gt,
            date_updated_gt=date_updated_gt,
        )
        logger.debug("Searching team %s tasks page %d", team_id, page)
        return await self.request(f"team/{team_id}/task", params=params)

    async def get_task(self, task_id: str) -> dict[str, Any]:
        return await self.request(f"task/{task_id}")

    async def create_task(self, list_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self.request(f"list/{list_id}/task", "POST", json=payload)

    async def update_task(self, task_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self.request(f"task/{task_id}", "PUT", json=payload)

    async def delete_task(self, task_id: str) -> None:
        await self.request(f"task/{task_id}", "DELETE")

    # ------------------------------------------------------------------
    # Comments and custom fields
    # ------------------------------------------------------------------

    async def get_comments(self, task_id: str) -> dict[str, Any]:
        return await self.request(f"task/{task_id}/comment")

    async def add_comment(self, task_id: str, text: str, notify_all: bool = False) -> dict[str, Any]:
        return await self.request(
            f"task/{task_id}/comment",
            "POST",
            json={"comment_text": text, "notify_all": notify_all},
        )

    async def set_custom_field(self, task_id: str, field_id: str, value: Any) -> None:
        await self.request(f"task/{task_id}/field/{field_id}", "POST", json={"value": value})

    # ------------------------------------------------------------------
    # Time tracking
    # ------------------------------------------------------------------

    async def get_time_entries(
        self,
        team_id: str,
        start_date: int | None = None,
        end_date: int | None = None,
        assignee: int | None = None,
        task_id: str | None = None,
    ) -> dict[str, Any]:
        params = _list_params(
            start_date=start_date,
            end_date=end_date,
            assignee=assignee,
            task_id=task_id,
        )
        return await self.request(f"team/{team_id}/time_entries", params=params)

    async def start_time_entry(
        self, team_id: str, task_id: str, description: str | None = None, billable: bool = False
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"tid": task_id, "billable": billable}
        if description:
            payload["description"] = description
        return await self.request(f"team/{team_id}/time_entries/start", "POST", json=payload)

    async def stop_time_entry(self, team_id: str) -> dict[str, Any]:
        return await self.request(f"team/{team_id}/time_entries/stop", "POST")
