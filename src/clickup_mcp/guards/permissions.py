"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "clickup_get_teams",
    "clickup_get_spaces",
    "clickup_get_folders",
    "clickup_get_lists",
    "clickup_get_list_details",
    "clickup_get_tasks",
    "clickup_get_task",
    "clickup_search_tasks",
    "clickup_count_tasks_by_status",
    "clickup_export_tasks_to_csv",
    "clickup_get_comments",
    "clickup_get_time_entries",
})

WRITE_TOOLS = frozenset({
    "clickup_create_task",
    "clickup_update_task",
    "clickup_delete_task",
    "clickup_add_comment",
    "clickup_set_custom_field",
    "clickup_start_time_entry",
    "clickup_stop_time_entry",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
