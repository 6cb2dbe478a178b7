# tests/test_task_views.py

from __future__ import annotations

import pytest

from taskctl.tasks.task_models import Priority, Task
from taskctl.tasks.task_store import TaskStore
from taskctl.tasks.task_views import (
    SortMode,
    by_due_date,
    by_insertion_order,
    by_priority,
    by_status,
    sort_indexed,
    sort_tasks,
)


def _t(name: str, priority: str = "low", done: bool = False, due: str = "") -> Task:
    return Task(name=name, priority=Priority(priority), done=done, due_date=due)


def _names(tasks) -> list[str]:
    return [t.name for t in tasks]


def test_priority_is_stable_high_first() -> None:
    tasks = [_t("a", "medium"), _t("b", "medium"), _t("c", "high")]
    assert _names(by_priority(tasks)) == ["c", "a", "b"]


def test_priority_full_ordering() -> None:
    tasks = [_t("l1", "low"), _t("h1", "high"), _t("m1", "medium"), _t("l2", "low"), _t("h2", "high")]
    assert _names(by_priority(tasks)) == ["h1", "h2", "m1", "l1", "l2"]


def test_status_puts_open_tasks_first_and_is_stable() -> None:
    tasks = [_t("a", done=True), _t("b"), _t("c", done=True), _t("d")]
    assert _names(by_status(tasks)) == ["b", "d", "a", "c"]


def test_due_date_ascending_with_missing_dates_last() -> None:
    tasks = [_t("x", due="2025-01-10"), _t("y", due=""), _t("z", due="2024-12-01")]
    assert _names(by_due_date(tasks)) == ["z", "x", "y"]


def test_due_date_invalid_entries_trail_in_original_order() -> None:
    tasks = [
        _t("none1"),
        _t("bad", due="2025-02-30"),
        _t("late", due="2026-03-01"),
        _t("none2"),
        _t("early", due="2025-03-01"),
        _t("same", due="2025-03-01"),
    ]
    assert _names(by_due_date(tasks)) == ["early", "same", "late", "none1", "bad", "none2"]


def test_views_do_not_mutate_input() -> None:
    tasks = [_t("a", "low", due="2025-05-01"), _t("b", "high", done=True)]
    original = list(tasks)
    for view in (by_insertion_order, by_priority, by_status, by_due_date):
        result = view(tasks)
        assert result is not tasks
        assert tasks == original


def test_insertion_order_is_identity() -> None:
    tasks = [_t("b", "high"), _t("a", "low")]
    assert by_insertion_order(tasks) == tasks


@pytest.mark.parametrize(
    ("raw", "mode"),
    [
        ("", SortMode.ALL),
        ("all", SortMode.ALL),
        ("Priority", SortMode.PRIORITY),
        ("status", SortMode.STATUS),
        ("due", SortMode.DUE),
        ("date", SortMode.DUE),
    ],
)
def test_sort_mode_parse(raw: str, mode: SortMode) -> None:
    assert SortMode.parse(raw) is mode


def test_sort_mode_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        SortMode.parse("alphabetical")


def test_sort_tasks_dispatches_by_mode() -> None:
    tasks = [_t("a", "low"), _t("b", "high")]
    assert _names(sort_tasks(tasks, "priority")) == ["b", "a"]
    assert _names(sort_tasks(tasks, SortMode.ALL)) == ["a", "b"]


def test_sort_indexed_maps_back_to_store_positions(store: TaskStore) -> None:
    store.create("a", "medium")
    store.create("b", "low")
    store.create("c", "high")

    rows = sort_indexed(store.tasks, SortMode.PRIORITY)
    assert [(i, t.name) for i, t in rows] == [(2, "c"), (0, "a"), (1, "b")]

    # The position shown for "c" in the sorted view addresses "c" in the store.
    position, task = rows[0]
    store.toggle_done(position)
    assert store.get(position).name == "c"
    assert store.get(position).done is True
    assert task.done is True
