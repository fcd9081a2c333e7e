"""Exhaustive list scans: fetch every page of a list, then filter and aggregate.

Pages are requested sequentially by page index until one comes back short
(an empty page also ends the scan). Any failed page aborts the whole scan;
``retry_attempts`` above 1 retries transient failures per page first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Awaitable, Callable, Protocol

from clickup_mcp.clickup.models import StatusCounts
from clickup_mcp.constants import MAX_LIMIT
from clickup_mcp.utils.retry import retry
from clickup_mcp.utils.timing import timed

logger = logging.getLogger("clickup_mcp")

UNKNOWN_STATUS = "Unknown"


class TaskPageSource(Protocol):
    async def get_list_tasks(
        self,
        list_id: str,
        page: int = 0,
        archived: bool = False,
        include_closed: bool = False,
        statuses: list[str] | None = None,
        assignees: list[int] | None = None,
    ) -> dict[str, Any]: ...


def task_status(task: dict[str, Any]) -> str | None:
    status = task.get("status")
    if isinstance(status, dict):
        return status.get("status")
    return None


def filter_tasks_by_status(
    tasks: list[dict[str, Any]], statuses: Iterable[str] | None
) -> list[dict[str, Any]]:
    """Keep tasks whose status name matches one of ``statuses``, ignoring case."""
    wanted = {s.casefold() for s in statuses or ()}
    if not wanted:
        return tasks
    return [t for t in tasks if (task_status(t) or "").casefold() in wanted]


async def collect_pages(
    fetch_page: Callable[[int], Awaitable[dict[str, Any]]],
    page_size: int = MAX_LIMIT,
    retry_attempts: int = 1,
) -> list[dict[str, Any]]:
    """Call ``fetch_page(0)``, ``fetch_page(1)``, ... and concatenate their tasks."""
    if retry_attempts > 1:
        fetch_page = retry(max_attempts=retry_attempts)(fetch_page)

    tasks: list[dict[str, Any]] = []
    page = 0
    while True:
        data = await fetch_page(page)
        batch = (data or {}).get("tasks") or []
        tasks.extend(batch)
        logger.debug("Scan page %d returned %d tasks", page, len(batch))
        if len(batch) < page_size:
            break
        page += 1
    logger.info("Scan finished: %d tasks over %d page(s)", len(tasks), page + 1)
    return tasks


@timed
async def scan_list_tasks(
    client: TaskPageSource,
    list_id: str,
    archived: bool = False,
    include_closed: bool = False,
    statuses: list[str] | None = None,
    assignees: list[int] | None = None,
    page_size: int = MAX_LIMIT,
    retry_attempts: int = 1,
) -> list[dict[str, Any]]:
    """Every task in a list, optionally filtered by status name after the scan."""

    async def fetch_page(page: int) -> dict[str, Any]:
        return await client.get_list_tasks(
            list_id,
            page=page,
            archived=archived,
            include_closed=include_closed,
            assignees=assignees,
        )

    tasks = await collect_pages(fetch_page, page_size=page_size, retry_attempts=retry_attempts)
    return filter_tasks_by_status(tasks, statuses)


def count_by_status(tasks: Iterable[dict[str, Any]]) -> StatusCounts:
    by_status: dict[str, int] = {}
    total = 0
    for task in tasks:
        name = task_status(task) or UNKNOWN_STATUS
        by_status[name] = by_status.get(name, 0) + 1
        total += 1
    return StatusCounts(total=total, by_status=by_status)


async def count_tasks_by_status(
    client: TaskPageSource,
    list_id: str,
    archived: bool = False,
    include_closed: bool = False,
    statuses: list[str] | None = None,
    page_size: int = MAX_LIMIT,
    retry_attempts: int = 1,
) -> StatusCounts:
    tasks = await scan_list_tasks(
        client,
        list_id,
        archived=archived,
        include_closed=include_closed,
        statuses=statuses,
        page_size=page_size,
        retry_attempts=retry_attempts,
    )
    return count_by_status(tasks)
