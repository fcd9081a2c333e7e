"""Pydantic models for ClickUp API responses and shaped tool output."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class CustomFieldType(str, Enum):
    """Known ClickUp custom field types. Anything else maps to OTHER."""

    PHONE = "phone"
    PHONE_NUMBER = "phone_number"
    TEXT = "text"
    SHORT_TEXT = "short_text"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    CURRENCY = "currency"
    DATE = "date"
    DROPDOWN = "drop_down"
    LABELS = "labels"
    CHECKBOX = "checkbox"
    OTHER = "other"


PHONE_TYPES = frozenset({CustomFieldType.PHONE, CustomFieldType.PHONE_NUMBER})
TEXT_TYPES = frozenset({CustomFieldType.TEXT, CustomFieldType.SHORT_TEXT})


class ClickUpUser(BaseModel):
    id: int | None = None
    username: str | None = None
    email: str | None = None

    model_config = {"populate_by_name": True}


class ClickUpStatus(BaseModel):
    status: str = ""
    type: str | None = None
    color: str | None = None


class ClickUpPriority(BaseModel):
    priority: str = ""
    color: str | None = None


class ClickUpTag(BaseModel):
    name: str = ""


class ClickUpCustomField(BaseModel):
    id: str = ""
    name: str = ""
    type: CustomFieldType = CustomFieldType.OTHER
    raw_type: str | None = None
    value: Any | None = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _classify_type(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        raw = data.get("type")
        data.setdefault("raw_type", raw)
        try:
            data["type"] = CustomFieldType(raw)
        except ValueError:
            data["type"] = CustomFieldType.OTHER
        if data.get("name") is None:
            data["name"] = ""
        return data

    @property
    def is_phone_field(self) -> bool:
        """Phone-typed, or a text field whose name mentions "phone"."""
        if self.type in PHONE_TYPES:
            return True
        return self.type in TEXT_TYPES and "phone" in self.name.lower()

    @property
    def has_value(self) -> bool:
        return self.value is not None and self.value != ""


class ClickUpTask(BaseModel):
    id: str = ""
    name: str = ""
    status: ClickUpStatus | None = None
    date_created: str | None = None
    date_updated: str | None = None
    due_date: str | None = None
    url: str | None = None
    description: str | None = None
    text_content: str | None = None
    assignees: list[ClickUpUser] = Field(default_factory=list)
    creator: ClickUpUser | None = None
    priority: ClickUpPriority | None = None
    tags: list[ClickUpTag] = Field(default_factory=list)
    custom_fields: list[ClickUpCustomField] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    @property
    def status_name(self) -> str | None:
        return self.status.status if self.status else None


class PaginationInfo(BaseModel):
    total: int | None = None
    count: int
    offset: int
    has_more: bool
    next_offset: int | None = None


class TruncationInfo(BaseModel):
    truncated: bool = True
    original_count: int
    returned_count: int
    truncation_message: str


class StatusCounts(BaseModel):
    total: int = 0
    by_status: dict[str, int] = Field(default_factory=dict)
