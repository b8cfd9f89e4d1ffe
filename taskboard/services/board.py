"""Kanban board projection and drag-and-drop resolution.

The board has three columns whose ids are the task status values themselves
(``todo``, ``in_progress``, ``done``). A drag can end on a column or on another
task card; either way the only possible outcome is a request to change the
dragged task's ``status``. Nothing here touches the database, the caller is
responsible for sending the request.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from taskboard.models.task import TaskStatus

logger = logging.getLogger(__name__)

BOARD_COLUMNS = tuple(status.value for status in TaskStatus)


@dataclass(frozen=True)
class ColumnTarget:
    """Drop onto a column. ``status`` is the raw column id and may be invalid."""

    status: Any


@dataclass(frozen=True)
class TaskTarget:
    """Drop onto another task's card."""

    task_id: int


DropTarget = Union[ColumnTarget, TaskTarget]


@dataclass(frozen=True)
class StatusChangeRequest:
    id: int
    status: str


@dataclass
class BoardColumns:
    todo: List[Any] = field(default_factory=list)
    in_progress: List[Any] = field(default_factory=list)
    done: List[Any] = field(default_factory=list)
    # Ids of tasks whose status matches no column
    unplaced: List[Any] = field(default_factory=list)

    def column(self, status: str) -> List[Any]:
        if status not in BOARD_COLUMNS:
            raise KeyError(status)
        return getattr(self, status)

    def as_dict(self) -> Dict[str, List[Any]]:
        return {status: list(self.column(status)) for status in BOARD_COLUMNS}


def _status_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


def _find_task(tasks: Sequence[Any], task_id: Any) -> Optional[Any]:
    # Exact match only: a drop-zone id of "2" is a column id, not task 2
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        return None
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def project_tasks(tasks: Sequence[Any]) -> BoardColumns:
    """Split ``tasks`` into the three board columns, keeping input order.

    Tasks with a status outside the column set are left out of every column
    and reported in ``unplaced``.
    """
    board = BoardColumns()
    for task in tasks:
        status = _status_value(getattr(task, "status", None))
        if status in BOARD_COLUMNS:
            board.column(status).append(task)
        else:
            board.unplaced.append(task.id)

    if board.unplaced:
        logger.warning(
            "Excluded %d task(s) with unknown status from the board: %s",
            len(board.unplaced),
            board.unplaced,
        )
    return board


def resolve_drop_target(tasks: Sequence[Any], over_id: Any) -> Optional[DropTarget]:
    """Turn a raw drop-zone id into a DropTarget.

    The task collection is checked first, so an id naming an existing task is
    a task drop even if it also looks like a column id.
    """
    if over_id is None:
        return None
    if _find_task(tasks, over_id) is not None:
        return TaskTarget(task_id=over_id)
    return ColumnTarget(status=_status_value(over_id))


def on_drop(
    tasks: Sequence[Any], active_task_id: Any, over: Optional[DropTarget]
) -> Optional[StatusChangeRequest]:
    """Return the status change a finished drag asks for, or None."""
    if over is None:
        return None

    active = _find_task(tasks, active_task_id)
    if active is None:
        return None

    if isinstance(over, TaskTarget):
        over_task = _find_task(tasks, over.task_id)
        if over_task is None:
            return None
        target_status = _status_value(over_task.status)
    else:
        target_status = _status_value(over.status)

    if target_status == _status_value(active.status):
        return None
    if target_status not in BOARD_COLUMNS:
        return None

    return StatusChangeRequest(id=active.id, status=target_status)
