"""CSV rendering of scanned list tasks."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from clickup_mcp.clickup.models import ClickUpTask
from clickup_mcp.shaping.custom_fields import (
    extract_custom_field_value,
    get_custom_field,
    stringify,
)

PHONE_NUMBER_COLUMN = "phone_number"
# Sources for the synthetic phone_number column, in order of preference.
PHONE_SOURCE_FIELDS = ("Personal Phone", "Biz Phone number")


def escape_csv(value: Any) -> str:
    """Quote a cell when it holds a comma, double quote or newline."""
    if value is None:
        return ""
    text = stringify(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def format_timestamp(value: str | None) -> str:
    """Millisecond epoch string to ``2024-01-01T00:00:00.000Z``."""
    if not value:
        return ""
    try:
        moment = datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return str(value)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _assignees(task: ClickUpTask) -> str:
    return "; ".join(a.username or a.email or "" for a in task.assignees)


def _creator(task: ClickUpTask) -> str:
    if task.creator is None:
        return ""
    return task.creator.username or task.creator.email or ""


STANDARD_COLUMNS: dict[str, Callable[[ClickUpTask], str]] = {
    "Task ID": lambda t: t.id,
    "Name": lambda t: t.name,
    "Status": lambda t: t.status_name or "",
    "Date Created": lambda t: format_timestamp(t.date_created),
    "Date Updated": lambda t: format_timestamp(t.date_updated),
    "URL": lambda t: t.url or "",
    "Assignees": _assignees,
    "Creator": _creator,
    "Due Date": lambda t: format_timestamp(t.due_date),
    "Priority": lambda t: t.priority.priority if t.priority else "",
    "Description": lambda t: t.description or t.text_content or "",
    "Tags": lambda t: "; ".join(tag.name for tag in t.tags),
}


def phone_number_value(task: ClickUpTask) -> str:
    """Best phone number for the task, normalized to E.164."""
    real = next(
        (f for f in task.custom_fields if f.name == PHONE_NUMBER_COLUMN and f.has_value), None
    )
    if real is not None:
        return extract_custom_field_value(real)
    for name in PHONE_SOURCE_FIELDS:
        value = get_custom_field(task, name)
        if value:
            return value
    phone_field = next((f for f in task.custom_fields if f.is_phone_field), None)
    if phone_field is not None:
        return extract_custom_field_value(phone_field)
    return ""


def build_columns(
    tasks: Iterable[ClickUpTask],
    custom_fields: list[str] | None = None,
    include_standard_fields: bool = True,
    add_phone_number_column: bool = False,
) -> list[str]:
    """Standard columns, then custom field columns in first-seen (or requested) order."""
    seen: dict[str, None] = {}
    for task in tasks:
        for field in task.custom_fields:
            seen.setdefault(field.name, None)

    if custom_fields:
        selected = [name for name in custom_fields if name in seen]
    else:
        selected = list(seen)

    columns = list(STANDARD_COLUMNS) if include_standard_fields else []
    columns.extend(selected)

    if add_phone_number_column and PHONE_NUMBER_COLUMN not in columns:
        if "Email" in columns:
            columns.insert(columns.index("Email") + 1, PHONE_NUMBER_COLUMN)
        else:
            columns.append(PHONE_NUMBER_COLUMN)
    return columns


def task_to_row(task: ClickUpTask, columns: list[str]) -> list[str]:
    row = []
    for column in columns:
        if column in STANDARD_COLUMNS:
            value = STANDARD_COLUMNS[column](task)
        elif column == PHONE_NUMBER_COLUMN:
            value = phone_number_value(task)
        else:
            value = get_custom_field(task, column)
        row.append(escape_csv(value))
    return row


def export_tasks_csv(
    tasks: list[dict[str, Any]],
    custom_fields: list[str] | None = None,
    include_standard_fields: bool = True,
    add_phone_number_column: bool = False,
) -> str:
    """Render tasks as CSV text. An empty task list yields an empty string."""
    if not tasks:
        return ""
    models = [ClickUpTask.model_validate(t) for t in tasks]
    columns = build_columns(
        models,
        custom_fields=custom_fields,
        include_standard_fields=include_standard_fields,
        add_phone_number_column=add_phone_number_column,
    )
    lines = [",".join(escape_csv(c) for c in columns)]
    lines.extend(",".join(task_to_row(task, columns)) for task in models)
    return "\n".join(lines)
