from types import SimpleNamespace

import pytest

from taskboard.models import TaskStatus
from taskboard.services.board import (
    BOARD_COLUMNS,
    BoardColumns,
    ColumnTarget,
    StatusChangeRequest,
    TaskTarget,
    on_drop,
    project_tasks,
    resolve_drop_target,
)


def _task(task_id, status, priority="medium"):
    return SimpleNamespace(id=task_id, status=status, priority=priority, project_id=1)


@pytest.fixture
def tasks():
    return [_task(1, "todo"), _task(2, "done")]


def _drop(tasks, active_id, over_id):
    return on_drop(tasks, active_id, resolve_drop_target(tasks, over_id))


def test_project_partitions_in_input_order():
    tasks = [
        _task(1, "done"),
        _task(2, "todo"),
        _task(3, "in_progress"),
        _task(4, "todo"),
        _task(5, "done"),
    ]

    board = project_tasks(tasks)

    assert [t.id for t in board.todo] == [2, 4]
    assert [t.id for t in board.in_progress] == [3]
    assert [t.id for t in board.done] == [1, 5]
    assert board.unplaced == []


def test_project_is_total_and_disjoint_over_known_statuses():
    tasks = [_task(i, status) for i, status in enumerate(["todo", "done", "blocked", None, "in_progress", "todo"])]

    board = project_tasks(tasks)
    placed = [t.id for status in BOARD_COLUMNS for t in board.column(status)]

    assert sorted(placed) == [0, 1, 4, 5]
    assert len(placed) == len(set(placed))
    assert board.unplaced == [2, 3]


def test_project_accepts_enum_statuses():
    board = project_tasks([_task(1, TaskStatus.IN_PROGRESS)])
    assert [t.id for t in board.in_progress] == [1]


def test_project_logs_unknown_statuses(caplog):
    with caplog.at_level("WARNING", logger="taskboard.services.board"):
        project_tasks([_task(7, "archived")])
    assert "unknown status" in caplog.text
    assert "7" in caplog.text


def test_project_empty_collection():
    board = project_tasks([])
    assert board.as_dict() == {"todo": [], "in_progress": [], "done": []}


def test_column_rejects_unknown_id():
    with pytest.raises(KeyError):
        BoardColumns().column("blocked")


def test_drop_on_column(tasks):
    assert _drop(tasks, 1, "done") == StatusChangeRequest(id=1, status="done")


def test_drop_on_task_uses_that_tasks_status(tasks):
    assert _drop(tasks, 1, 2) == StatusChangeRequest(id=1, status="done")


def test_drop_on_own_column_is_a_noop(tasks):
    assert _drop(tasks, 1, "todo") is None


def test_drop_on_task_in_same_column_is_a_noop():
    tasks = [_task(1, "todo"), _task(2, "todo")]
    assert _drop(tasks, 1, 2) is None


def test_drop_outside_any_zone(tasks):
    assert resolve_drop_target(tasks, None) is None
    assert on_drop(tasks, 1, None) is None


def test_drop_on_unknown_column(tasks):
    assert _drop(tasks, 1, "archived") is None


def test_drop_on_task_with_unknown_status():
    tasks = [_task(1, "todo"), _task(2, "archived")]
    assert _drop(tasks, 1, 2) is None


def test_unknown_active_task(tasks):
    assert _drop(tasks, 99, "done") is None


def test_any_transition_is_allowed():
    tasks = [_task(1, "done")]
    assert _drop(tasks, 1, "todo") == StatusChangeRequest(id=1, status="todo")
    assert _drop(tasks, 1, "in_progress") == StatusChangeRequest(id=1, status="in_progress")


def test_task_ids_are_checked_before_column_ids(tasks):
    assert resolve_drop_target(tasks, 2) == TaskTarget(task_id=2)
    assert resolve_drop_target(tasks, "done") == ColumnTarget(status="done")
    # A string that looks like a task id is still a column id
    assert resolve_drop_target(tasks, "2") == ColumnTarget(status="2")


def test_drop_target_for_missing_task_is_ignored(tasks):
    assert on_drop(tasks, 1, TaskTarget(task_id=42)) is None


def test_drop_does_not_mutate_tasks(tasks):
    _drop(tasks, 1, "done")
    assert tasks[0].status == "todo"
