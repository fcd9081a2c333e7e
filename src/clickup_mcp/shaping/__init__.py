from clickup_mcp.shaping.csv_export import escape_csv, export_tasks_csv
from clickup_mcp.shaping.custom_fields import extract_custom_field_value, get_custom_field
from clickup_mcp.shaping.pagination import get_pagination, page_index
from clickup_mcp.shaping.phone import normalize_phone
from clickup_mcp.shaping.scan import count_tasks_by_status, scan_list_tasks
from clickup_mcp.shaping.truncation import format_truncation_info, truncate_response

__all__ = [
    "count_tasks_by_status",
    "escape_csv",
    "export_tasks_csv",
    "extract_custom_field_value",
    "format_truncation_info",
    "get_custom_field",
    "get_pagination",
    "normalize_phone",
    "page_index",
    "scan_list_tasks",
    "truncate_response",
]
