"""Tests for CSV cell escaping and task export."""

import pytest

from clickup_mcp.shaping.csv_export import (
    STANDARD_COLUMNS,
    escape_csv,
    export_tasks_csv,
    format_timestamp,
)

STANDARD_HEADER = (
    "Task ID,Name,Status,Date Created,Date Updated,URL,Assignees,Creator,Due Date,Priority,Description,Tags"
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Hello", "Hello"),
        ("Hello, World", '"Hello, World"'),
        ('Say "Hello"', '"Say ""Hello"""'),
        ("Line1\nLine2", '"Line1\nLine2"'),
        (None, ""),
        (42, "42"),
        (True, "true"),
        (False, "false"),
        ("", ""),
    ],
)
def test_escape_csv(value, expected):
    assert escape_csv(value) == expected


def test_format_timestamp():
    assert format_timestamp("1704067200000") == "2024-01-01T00:00:00.000Z"
    assert format_timestamp(None) == ""


def test_empty_rows_export_nothing():
    assert export_tasks_csv([]) == ""


def test_standard_columns_order():
    assert ",".join(STANDARD_COLUMNS) == STANDARD_HEADER


def test_full_export(task_factory):
    tasks = [
        task_factory(
            "a1",
            status="lead",
            date_created="1704067200000",
            description="Met at expo, follow up",
            assignees=[{"id": 1, "username": "ana"}, {"id": 2, "email": "bo@example.com"}],
            creator={"id": 3, "username": "cy"},
            priority={"priority": "high"},
            tags=[{"name": "vip"}, {"name": "east"}],
            custom_fields=[
                {"id": "f1", "name": "Email", "type": "email", "value": "a@example.com"},
                {"id": "f2", "name": "Phone", "type": "short_text", "value": "(623) 258-3673"},
            ],
        ),
        task_factory(
            "a2",
            custom_fields=[{"id": "f3", "name": "Company", "type": "text", "value": 'The "Best" Co'}],
        ),
    ]

    lines = export_tasks_csv(tasks).split("\n")

    assert lines[0] == STANDARD_HEADER + ",Email,Phone,Company"
    assert lines[1] == (
        "a1,Task a1,lead,2024-01-01T00:00:00.000Z,,https://app.clickup.com/t/a1,"
        'ana; bo@example.com,cy,,high,"Met at expo, follow up",vip; east,'
        "a@example.com,+16232583673,"
    )
    assert lines[2].endswith(',,"The ""Best"" Co"')
    assert len(lines) == 3


def test_selected_custom_fields_keep_requested_order(task_factory):
    tasks = [
        task_factory(
            "b1",
            custom_fields=[
                {"id": "1", "name": "Email", "type": "email", "value": "b@example.com"},
                {"id": "2", "name": "Company", "type": "text", "value": "Acme"},
            ],
        )
    ]
    csv_text = export_tasks_csv(
        tasks, custom_fields=["Company", "Missing", "Email"], include_standard_fields=False
    )
    assert csv_text == "Company,Email\nAcme,b@example.com"


def test_custom_columns_in_first_seen_order(task_factory):
    tasks = [
        task_factory("c1", custom_fields=[{"id": "1", "name": "Zeta", "type": "text", "value": "z"}]),
        task_factory(
            "c2",
            custom_fields=[
                {"id": "2", "name": "Alpha", "type": "text", "value": "a"},
                {"id": "1", "name": "Zeta", "type": "text", "value": "z2"},
            ],
        ),
    ]
    lines = export_tasks_csv(tasks, include_standard_fields=False).split("\n")
    assert lines == ["Zeta,Alpha", "z,", "z2,a"]


class TestPhoneNumberColumn:
    def test_inserted_after_email(self, task_factory):
        tasks = [
            task_factory(
                "p1",
                custom_fields=[
                    {"id": "1", "name": "Email", "type": "email", "value": "p@example.com"},
                    {"id": "2", "name": "Biz Phone number", "type": "phone", "value": "817.527.9708"},
                ],
            )
        ]
        csv_text = export_tasks_csv(tasks, include_standard_fields=False, add_phone_number_column=True)
        assert csv_text.split("\n") == [
            "Email,phone_number,Biz Phone number",
            "p@example.com,+18175279708,+18175279708",
        ]

    def test_prefers_personal_phone(self, task_factory):
        tasks = [
            task_factory(
                "p2",
                custom_fields=[
                    {"id": "1", "name": "Biz Phone number", "type": "phone", "value": "817.527.9708"},
                    {"id": "2", "name": "Personal Phone", "type": "phone", "value": "4124812210"},
                ],
            )
        ]
        csv_text = export_tasks_csv(
            tasks, custom_fields=["Email"], include_standard_fields=False, add_phone_number_column=True
        )
        assert csv_text == "phone_number\n+14124812210"

    def test_real_phone_number_field_not_duplicated(self, task_factory):
        tasks = [
            task_factory(
                "p3",
                custom_fields=[
                    {"id": "1", "name": "phone_number", "type": "phone", "value": "+44.1922.722723"},
                ],
            )
        ]
        csv_text = export_tasks_csv(tasks, include_standard_fields=False, add_phone_number_column=True)
        assert csv_text == "phone_number\n+441922722723"

    def test_falls_back_to_any_phone_field(self, task_factory):
        tasks = [
            task_factory(
                "p4",
                custom_fields=[{"id": "1", "name": "Cell phone", "type": "text", "value": "518-434-8128 x206"}],
            )
        ]
        csv_text = export_tasks_csv(
            tasks, custom_fields=["Nope"], include_standard_fields=False, add_phone_number_column=True
        )
        assert csv_text == "phone_number\n+15184348128"
