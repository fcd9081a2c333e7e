"""Tests for response truncation."""

import json

from clickup_mcp.shaping.truncation import (
    format_truncation_info,
    truncate_markdown,
    truncate_response,
)


def task_blocks(count, body_len=300):
    blocks = [f"# Task {i} (id{i})\n\n**Status**: open\n\n" + "b" * body_len for i in range(count)]
    return "# Tasks in List 1\n\n" + "\n\n---\n\n".join(blocks)


def test_under_budget_is_unchanged():
    content = task_blocks(3)
    result, truncation = truncate_response(content, 3, "tasks", limit=len(content))
    assert result == content
    assert truncation is None


def test_markdown_cut_at_heading():
    content = task_blocks(40)
    limit = 5000
    result, truncation = truncate_response(content, 40, "tasks", limit=limit)

    assert len(result) <= limit
    assert content.startswith(result)
    assert truncation.truncated is True
    assert truncation.original_count == 40
    assert 0 < truncation.returned_count < 40
    assert truncation.returned_count == result.count("\n# Task ")
    assert "Response truncated from 40 to" in truncation.truncation_message
    assert "5,000 chars" in truncation.truncation_message
    assert "pagination" in truncation.truncation_message


def test_no_break_points_hard_cut_and_estimate():
    content = "a" * 5000
    result, truncation = truncate_markdown(content, 10, "items", limit=2000)
    assert result == "a" * 2000
    assert truncation.returned_count == 4


def test_falls_back_to_last_newline():
    line = "x" * 79 + "\n"
    content = line * 100
    result, truncation = truncate_markdown(content, 100, "rows", limit=4000)
    assert len(result) <= 4000
    assert result == content[: content.rfind("\n", 0, 4001)]
    assert truncation.returned_count <= 100


def test_returned_count_never_exceeds_original():
    # Headings inside bodies inflate the raw heading count.
    content = "\n\n".join(f"# Heading {i} (x)" for i in range(500))
    _, truncation = truncate_markdown(content, 3, "tasks", limit=1500)
    assert truncation.returned_count <= truncation.original_count


def test_json_drops_trailing_items():
    data = {"tasks": [{"id": str(i), "description": "d" * 400} for i in range(50)], "pagination": {"count": 50}}
    content = json.dumps(data, indent=2)
    result, truncation = truncate_response(content, 50, "tasks", limit=6000)

    parsed = json.loads(result)
    assert len(result) <= 6000
    assert 0 < len(parsed["tasks"]) < 50
    assert parsed["tasks"][0]["id"] == "0"
    assert parsed["pagination"] == {"count": 50}
    assert truncation.returned_count == len(parsed["tasks"])
    assert truncation.original_count == 50


def test_json_single_large_item_fields_clipped():
    data = {"tasks": [{"id": "1", "description": "y" * 20000}]}
    result, truncation = truncate_response(json.dumps(data), 1, "tasks", limit=15000)

    parsed = json.loads(result)
    assert parsed["tasks"][0]["description"].endswith("... [truncated]")
    assert truncation.returned_count == 1
    assert "fields were truncated" in truncation.truncation_message


def test_format_truncation_info():
    assert format_truncation_info(None) == ""
    _, truncation = truncate_markdown("a" * 3000, 5, limit=1000)
    assert format_truncation_info(truncation).startswith("\n\n---\n⚠️ Response truncated")
