"""Tests for parent grouping and timestamp formatting."""

from collections import namedtuple
from datetime import datetime, timedelta, timezone

from courses_service.modules.common.batch import group_by_parent
from courses_service.modules.common.utils.formatting import format_timestamp, text_or_empty

Row = namedtuple("Row", ["id", "parent"])


def test_group_by_parent_groups_children():
    rows = [Row(1, 10), Row(2, 20), Row(3, 10)]

    grouped = group_by_parent(rows, key=lambda row: row.parent, build=lambda row: row.id)

    assert grouped == {10: [1, 3], 20: [2]}


def test_group_by_parent_preserves_arrival_order():
    rows = [Row(5, 1), Row(2, 1), Row(9, 1)]

    grouped = group_by_parent(rows, key=lambda row: row.parent, build=lambda row: row.id)

    assert grouped[1] == [5, 2, 9]


def test_group_by_parent_empty_input():
    assert group_by_parent([], key=lambda row: row.parent, build=lambda row: row) == {}


def test_group_by_parent_partitions_every_row_once():
    rows = [Row(i, i % 3) for i in range(10)]

    grouped = group_by_parent(rows, key=lambda row: row.parent, build=lambda row: row)

    assert sum(len(children) for children in grouped.values()) == len(rows)
    assert all(row.parent == parent for parent, children in grouped.items() for row in children)


def test_format_timestamp_renders_utc():
    value = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)

    assert format_timestamp(value) == "2024-03-01T12:30:00+00:00"


def test_format_timestamp_converts_offsets_to_utc():
    value = datetime(2024, 3, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(value) == "2024-03-01T12:30:00+00:00"


def test_format_timestamp_treats_naive_values_as_utc():
    assert format_timestamp(datetime(2024, 3, 1, 12, 30)) == "2024-03-01T12:30:00+00:00"


def test_text_or_empty():
    assert text_or_empty(None) == ""
    assert text_or_empty("Intro") == "Intro"
