"""Markdown renderers for ClickUp entities."""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from typing import Any

from clickup_mcp.clickup.models import StatusCounts


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_date(timestamp: str | int | None) -> str:
    if not timestamp:
        return "Not set"
    try:
        moment = datetime.fromtimestamp(int(timestamp) / 1000, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return str(timestamp)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_priority(priority: dict[str, Any] | None) -> str:
    if not priority:
        return "None"
    return priority.get("priority") or "None"


def _status(task: dict[str, Any]) -> str:
    return (task.get("status") or {}).get("status") or "Unknown"


def format_task_markdown(task: dict[str, Any]) -> str:
    lines = [
        f"# {task.get('name', '')} ({task.get('id', '')})",
        "",
        f"**Status**: {_status(task)}",
        f"**Priority**: {format_priority(task.get('priority'))}",
        f"**Created**: {format_date(task.get('date_created'))}",
        f"**Updated**: {format_date(task.get('date_updated'))}",
    ]
    if task.get("due_date"):
        lines.append(f"**Due Date**: {format_date(task['due_date'])}")
    if task.get("assignees"):
        names = ", ".join(f"@{a.get('username')} ({a.get('id')})" for a in task["assignees"])
        lines.append(f"**Assignees**: {names}")
    if task.get("tags"):
        lines.append(f"**Tags**: {', '.join(t.get('name', '') for t in task['tags'])}")
    if task.get("description"):
        lines.extend(["", "## Description", task["description"]])
    lines.extend(["", f"**URL**: {task.get('url', '')}"])
    return "\n".join(lines)


def format_task_compact(task: dict[str, Any]) -> str:
    assignees = ", ".join(a.get("username") or "" for a in task.get("assignees") or [])
    return (
        f"- **{task.get('name', '')}** ({task.get('id', '')}) | Status: {_status(task)} | "
        f"Assignees: {assignees or 'Unassigned'} | URL: {task.get('url', '')}"
    )


def _breakdown(title: str, counts: Counter) -> list[str]:
    lines = [f"## {title}"]
    lines.extend(f"- {name}: {count}" for name, count in counts.most_common())
    return lines


def generate_task_summary(tasks: list[dict[str, Any]]) -> str:
    statuses: Counter = Counter()
    assignees: Counter = Counter()
    priorities: Counter = Counter()
    for task in tasks:
        statuses[_status(task)] += 1
        names = [a.get("username") or "" for a in task.get("assignees") or []]
        assignees.update(names or ["Unassigned"])
        priorities[format_priority(task.get("priority"))] += 1

    lines = ["# Task Summary", "", f"**Total Tasks**: {len(tasks)}", ""]
    lines.extend(_breakdown("By Status", statuses))
    lines.append("")
    lines.extend(_breakdown("By Assignee", assignees))
    lines.append("")
    lines.extend(_breakdown("By Priority", priorities))
    return "\n".join(lines)


def format_status_counts(list_id: str, counts: StatusCounts, statuses: list[str] | None) -> str:
    lines = [f"# Task Counts for List {list_id}", ""]
    if statuses:
        lines.extend([f"**Filtering by status**: {', '.join(statuses)}", ""])
    lines.extend([f"**Total tasks**: {counts.total}", ""])
    if counts.by_status:
        lines.append("## Counts by Status")
        for name, count in sorted(counts.by_status.items(), key=lambda kv: kv[1], reverse=True):
            lines.append(f"- {name}: {count}")
    else:
        lines.append("No tasks found matching the criteria.")
    return "\n".join(lines)


def format_list_markdown(lst: dict[str, Any]) -> str:
    lines = [f"# {lst.get('name', '')} ({lst.get('id', '')})", ""]
    lines.append(f"**Tasks**: {lst.get('task_count', 'unknown')}")
    if lst.get("folder"):
        lines.append(f"**Folder**: {lst['folder'].get('name', '')}")
    if lst.get("space"):
        lines.append(f"**Space**: {lst['space'].get('name', '')}")
    if lst.get("statuses"):
        lines.extend(["", "## Statuses"])
        lines.extend(f"- {s.get('status')} ({s.get('type')})" for s in lst["statuses"])
    return "\n".join(lines)


def format_space_markdown(space: dict[str, Any]) -> str:
    lines = [
        f"# {space.get('name', '')} ({space.get('id', '')})",
        "",
        f"**Private**: {'Yes' if space.get('private') else 'No'}",
        f"**Multiple Assignees**: {'Yes' if space.get('multiple_assignees') else 'No'}",
    ]
    features = space.get("features") or {}
    if features:
        lines.extend(["", "## Features"])
        for key, label in (
            ("due_dates", "Due Dates"),
            ("time_tracking", "Time Tracking"),
            ("tags", "Tags"),
            ("custom_fields", "Custom Fields"),
        ):
            enabled = (features.get(key) or {}).get("enabled")
            lines.append(f"- {label}: {'Enabled' if enabled else 'Disabled'}")
    return "\n".join(lines)


def format_folder_markdown(folder: dict[str, Any]) -> str:
    lines = [
        f"# {folder.get('name', '')} ({folder.get('id', '')})",
        "",
        f"**Tasks**: {folder.get('task_count', 'unknown')}",
        f"**Hidden**: {'Yes' if folder.get('hidden') else 'No'}",
    ]
    if folder.get("lists"):
        lines.extend(["", "## Lists"])
        lines.extend(
            f"- {lst.get('name')} ({lst.get('id')}) - {lst.get('task_count')} tasks"
            for lst in folder["lists"]
        )
    return "\n".join(lines)


def format_comment_markdown(comment: dict[str, Any]) -> str:
    user = comment.get("user") or {}
    lines = [
        f"**@{user.get('username', 'unknown')}** ({format_date(comment.get('date'))})",
        comment.get("comment_text", ""),
    ]
    if comment.get("resolved"):
        lines.append("*(Resolved)*")
    return "\n".join(lines)


def format_duration(milliseconds: str | int | None) -> str:
    try:
        total = int(milliseconds or 0)
    except ValueError:
        return "0h 0m"
    # Running timers report a negative duration.
    total = abs(total)
    return f"{total // 3_600_000}h {(total % 3_600_000) // 60_000}m"


def format_time_entry_markdown(entry: dict[str, Any]) -> str:
    user = entry.get("user") or {}
    lines = [
        f"**@{user.get('username', 'unknown')}** - {format_duration(entry.get('duration'))}",
        f"- Start: {format_date(entry.get('start'))}",
    ]
    if entry.get("end"):
        lines.append(f"- End: {format_date(entry['end'])}")
    else:
        lines.append("- End: *(Still running)*")
    task = entry.get("task")
    if isinstance(task, dict):
        lines.append(f"- Task: {task.get('name')} ({task.get('id')})")
    if entry.get("description"):
        lines.append(f"- Description: {entry['description']}")
    lines.append(f"- Billable: {'Yes' if entry.get('billable') else 'No'}")
    return "\n".join(lines)
