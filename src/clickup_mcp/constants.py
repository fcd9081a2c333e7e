"""Fixed values shared across the server."""

from __future__ import annotations

from enum import Enum

API_BASE_URL = "https://api.clickup.com/api/v2"

# Rendered tool payloads longer than this are truncated.
CHARACTER_LIMIT = 100_000

DEFAULT_TIMEOUT = 30

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class ResponseFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"


class ResponseMode(str, Enum):
    FULL = "full"
    COMPACT = "compact"
    SUMMARY = "summary"


class Priority(int, Enum):
    URGENT = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4
