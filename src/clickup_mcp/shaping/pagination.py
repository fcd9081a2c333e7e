"""Offset/limit pagination on top of ClickUp's page-indexed endpoints."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from clickup_mcp.clickup.errors import InvalidParameterError
from clickup_mcp.clickup.models import PaginationInfo
from clickup_mcp.constants import MAX_LIMIT


def page_index(offset: int, limit: int, max_limit: int = MAX_LIMIT) -> int:
    """Validate an (offset, limit) pair and return ``offset // limit``.

    Offsets must be whole pages of ``limit`` so that every ``next_offset``
    handed back to a caller is itself a valid offset.
    """
    if limit < 1 or limit > max_limit:
        raise InvalidParameterError(f"limit ({limit}) must be between 1 and {max_limit}.")
    if offset < 0:
        raise InvalidParameterError(f"offset ({offset}) must not be negative.")
    if offset % limit != 0:
        raise InvalidParameterError(
            f"offset ({offset}) must be a multiple of limit ({limit}) for proper pagination. "
            f"Try offset={offset - offset % limit} or offset={offset - offset % limit + limit}."
        )
    return offset // limit


def get_pagination(
    total: int | None,
    count: int,
    offset: int,
    limit: int,
    has_more: bool | None = None,
) -> PaginationInfo:
    """Compute has_more/next_offset for one returned page.

    Without a known total, a full page means more data may exist, unless the
    caller already knows from the upstream pages and passes ``has_more``.
    """
    if has_more is None:
        has_more = offset + count < total if total is not None else count == limit
    return PaginationInfo(
        total=total,
        count=count,
        offset=offset,
        has_more=has_more,
        next_offset=offset + count if has_more else None,
    )


async def fetch_window(
    fetch_page: Callable[[int], Awaitable[dict[str, Any]]],
    offset: int,
    limit: int,
    page_size: int = MAX_LIMIT,
) -> tuple[list[dict[str, Any]], bool]:
    """Return tasks ``[offset, offset + limit)`` and whether more exist after them.

    ClickUp serves fixed pages of ``page_size`` tasks whatever the caller's
    limit, so the window starts at ``offset % page_size`` of page
    ``offset // page_size`` and may run into the following page.
    """
    page, start = divmod(offset, page_size)
    collected: list[dict[str, Any]] = []
    while True:
        batch = (await fetch_page(page) or {}).get("tasks") or []
        collected.extend(batch[start:])
        exhausted = len(batch) < page_size
        if exhausted or len(collected) >= limit:
            break
        page += 1
        start = 0
    # A full last page means the list may continue past it.
    return collected[:limit], len(collected) > limit or not exhausted
