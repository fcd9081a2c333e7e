"""Tests for markdown renderers and the pagination line."""

from clickup_mcp.clickup.models import PaginationInfo, StatusCounts
from clickup_mcp.shaping.formatting import (
    format_date,
    format_duration,
    format_status_counts,
    format_time_entry_markdown,
)
from clickup_mcp.tools._common import pagination_line


def test_format_date():
    assert format_date("1704067200000") == "2024-01-01 00:00:00 UTC"
    assert format_date(None) == "Not set"
    assert format_date("soon") == "soon"


def test_format_duration_running_timer():
    assert format_duration("5400000") == "1h 30m"
    assert format_duration(-60000) == "0h 1m"


def test_running_time_entry():
    entry = {"user": {"username": "ana"}, "duration": "-1", "start": "1704067200000"}
    text = format_time_entry_markdown(entry)
    assert "*(Still running)*" in text
    assert "- Billable: No" in text


def test_pagination_line_without_total():
    line = pagination_line(PaginationInfo(count=20, offset=0, has_more=True, next_offset=20))
    assert line == "**Pagination**: count=20, offset=0, has_more=true, next_offset=20"


def test_pagination_line_with_total():
    line = pagination_line(PaginationInfo(total=25, count=5, offset=20, has_more=False))
    assert line == "**Pagination**: total=25, count=5, offset=20, has_more=false"


def test_status_counts_sorted_by_count():
    counts = StatusCounts(total=4, by_status={"done": 1, "to do": 3})
    text = format_status_counts("L1", counts, None)
    assert text.index("- to do: 3") < text.index("- done: 1")


def test_status_counts_empty():
    text = format_status_counts("L1", StatusCounts(), ["won"])
    assert "No tasks found matching the criteria." in text
