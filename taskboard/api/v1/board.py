"""Kanban board endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from taskboard.api.v1.tasks import apply_task_update, get_task_or_404
from taskboard.database import fits_id_column, get_db
from taskboard.models import Task
from taskboard.schemas import (
    BoardResponse,
    DropRequest,
    DropResponse,
    StatusChangeRequestResponse,
    TaskResponse,
    TaskUpdate,
)
from taskboard.services.board import on_drop, project_tasks, resolve_drop_target

router = APIRouter()


def _load_tasks(db: Session, project_id: Optional[int] = None):
    if project_id is not None and not fits_id_column(project_id):
        return []
    query = db.query(Task)
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)
    return query.order_by(Task.id.asc()).all()


@router.get("", response_model=BoardResponse)
def get_board(
    project_id: Optional[int] = Query(None, alias="projectId", description="Limit the board to one project"),
    db: Session = Depends(get_db),
):
    """Return the tasks split into the todo / in_progress / done columns."""
    board = project_tasks(_load_tasks(db, project_id))
    return BoardResponse(
        todo=[TaskResponse.model_validate(task) for task in board.todo],
        in_progress=[TaskResponse.model_validate(task) for task in board.in_progress],
        done=[TaskResponse.model_validate(task) for task in board.done],
        unplaced=board.unplaced,
    )


@router.post("/drop", response_model=DropResponse)
def drop_task(drop: DropRequest, db: Session = Depends(get_db)):
    """Apply a finished drag: move the task to the column it was dropped on.

    Returns the resulting status change request, or null when the drop does
    not change anything.
    """
    tasks = _load_tasks(db)
    target = resolve_drop_target(tasks, drop.over_id)
    change = on_drop(tasks, drop.active_id, target)
    if change is None:
        return DropResponse()

    task = get_task_or_404(change.id, db)
    task = apply_task_update(task, TaskUpdate(status=change.status), db)
    return DropResponse(
        request=StatusChangeRequestResponse(id=change.id, status=change.status),
        task=TaskResponse.model_validate(task),
    )
