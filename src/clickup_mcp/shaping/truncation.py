"""Bound rendered tool payloads to a character budget.

Markdown is cut at the latest heading, horizontal rule or paragraph break
inside the last 1000 characters of the budget. JSON documents shed trailing
items from their first top-level array instead, so the result stays parseable.
The kept item count is best-effort: it counts ``# Name (id)`` headings and
otherwise estimates proportionally from the kept length.
"""

from __future__ import annotations

import json
import re
from typing import Any

from clickup_mcp.clickup.models import TruncationInfo
from clickup_mcp.constants import CHARACTER_LIMIT

BREAK_SEARCH_WINDOW = 1000
MAX_FIELD_CHARS = 10_000

_BREAK_MARKERS = ("\n# ", "\n## ", "\n---\n", "\n\n")
_ITEM_HEADING_RE = re.compile(r"^# .+ \(", re.MULTILINE)


def _truncation_message(original: int, kept: int, label: str, limit: int) -> str:
    return (
        f"Response truncated from {original} to {kept} {label} due to size limits "
        f"({limit:,} chars). Use pagination (offset/limit), add filters, or use "
        "response_mode='compact' to see more results."
    )


def _find_cut(content: str, limit: int) -> int:
    search_start = max(0, limit - BREAK_SEARCH_WINDOW)
    # A marker counts when it starts at or before the budget.
    breaks = [
        content.rfind(marker, search_start, limit + len(marker)) for marker in _BREAK_MARKERS
    ]
    breaks = [pos for pos in breaks if 0 <= pos <= limit]
    if breaks:
        return max(breaks)
    last_newline = content.rfind("\n", 0, limit + 1)
    if last_newline > search_start:
        return last_newline
    return limit


def truncate_markdown(
    content: str, item_count: int, item_label: str = "items", limit: int = CHARACTER_LIMIT
) -> tuple[str, TruncationInfo | None]:
    if len(content) <= limit:
        return content, None

    cut = _find_cut(content, limit)
    kept = content[:cut]

    kept_items = len(_ITEM_HEADING_RE.findall(kept))
    if kept_items == 0:
        kept_items = max(1, int(item_count * cut / len(content)))
    kept_items = min(kept_items, item_count)

    return kept, TruncationInfo(
        original_count=item_count,
        returned_count=kept_items,
        truncation_message=_truncation_message(item_count, kept_items, item_label, limit),
    )


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def truncate_json(
    content: str, item_count: int, item_label: str = "items", limit: int = CHARACTER_LIMIT
) -> tuple[str, TruncationInfo | None]:
    try:
        data = json.loads(content)
    except ValueError:
        return truncate_markdown(content, item_count, item_label, limit)

    array_key = None
    if isinstance(data, dict):
        array_key = next((k for k, v in data.items() if isinstance(v, list)), None)
    if array_key is None:
        return truncate_markdown(content, item_count, item_label, limit)

    items = data[array_key]
    original = len(items)
    rendered = _dumps(data)
    while len(rendered) > limit and len(items) > 1:
        items.pop()
        rendered = _dumps(data)

    if len(rendered) > limit:
        if len(items) == 1 and isinstance(items[0], dict):
            item = items[0]
            for key, value in item.items():
                if isinstance(value, str) and len(value) > MAX_FIELD_CHARS:
                    item[key] = value[:MAX_FIELD_CHARS] + "... [truncated]"
            rendered = _dumps(data)
            if len(rendered) <= limit:
                return rendered, TruncationInfo(
                    original_count=original,
                    returned_count=1,
                    truncation_message=(
                        f"Large {item_label} fields were truncated to fit size limits "
                        f"({limit:,} chars)."
                    ),
                )
        return truncate_markdown(content, item_count, item_label, limit)

    if len(items) < original:
        return rendered, TruncationInfo(
            original_count=original,
            returned_count=len(items),
            truncation_message=_truncation_message(original, len(items), item_label, limit),
        )
    return rendered, None


def truncate_response(
    content: str, item_count: int, item_label: str = "items", limit: int = CHARACTER_LIMIT
) -> tuple[str, TruncationInfo | None]:
    """Return ``(content, truncation)``; truncation is None when nothing was cut."""
    if len(content) <= limit:
        return content, None
    if content.lstrip().startswith(("{", "[")):
        return truncate_json(content, item_count, item_label, limit)
    return truncate_markdown(content, item_count, item_label, limit)


def format_truncation_info(truncation: TruncationInfo | None) -> str:
    if truncation is None:
        return ""
    return f"\n\n---\n⚠️ {truncation.truncation_message}"
