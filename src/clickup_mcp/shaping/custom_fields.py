"""Display values for task custom fields."""

from __future__ import annotations

import json
from typing import Any

from clickup_mcp.clickup.models import ClickUpCustomField, ClickUpTask
from clickup_mcp.shaping.phone import normalize_phone


def stringify(value: Any) -> str:
    """Natural string form of a JSON scalar or container."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def extract_custom_field_value(field: ClickUpCustomField) -> str:
    """Phone fields come back as E.164 (or ""); everything else unchanged."""
    if field.is_phone_field:
        if not field.has_value:
            return ""
        return normalize_phone(field.value)
    return stringify(field.value)


def get_custom_field(task: ClickUpTask, field_name: str) -> str:
    """Value of the named field, preferring a populated one when names repeat."""
    matching = [f for f in task.custom_fields if f.name == field_name]
    if not matching:
        return ""
    field = next((f for f in matching if f.has_value), matching[0])
    return extract_custom_field_value(field)
