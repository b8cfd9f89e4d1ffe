"""Task endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.v1.projects import get_project_or_404
from taskboard.database import fits_id_column, get_db
from taskboard.models import Task
from taskboard.schemas import TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()
project_tasks_router = APIRouter()

# Columns that may be cleared by sending null
NULLABLE_FIELDS = {"description", "due_date"}


def find_task(task_id: int, db: Session) -> Optional[Task]:
    if not fits_id_column(task_id):
        return None
    return db.query(Task).filter(Task.id == task_id).first()


def get_task_or_404(task_id: int, db: Session) -> Task:
    task = find_task(task_id, db)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def apply_task_update(task: Task, task_update: TaskUpdate, db: Session) -> Task:
    """Write the fields present in ``task_update`` onto ``task`` and commit.

    Writing a status the task already has changes nothing, so repeating an
    update is harmless.
    """
    update_data = task_update.model_dump(exclude_unset=True)

    if update_data.get("project_id") is not None and update_data["project_id"] != task.project_id:
        get_project_or_404(update_data["project_id"], db)

    previous_status = task.status
    for field, value in update_data.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(task, field, value)

    db.commit()
    db.refresh(task)

    if task.status != previous_status:
        logger.info("Task %s moved from %s to %s", task.id, previous_status, task.status)
    return task


@router.get("", response_model=List[TaskResponse])
def list_all_tasks(db: Session = Depends(get_db)):
    return db.query(Task).order_by(Task.id.asc()).all()


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return get_task_or_404(task_id, db)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_update: TaskUpdate, db: Session = Depends(get_db)):
    task = get_task_or_404(task_id, db)
    return apply_task_update(task, task_update, db)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    task = find_task(task_id, db)
    if task is not None:
        db.delete(task)
        db.commit()


@project_tasks_router.get("/{project_id}/tasks", response_model=List[TaskResponse])
def list_project_tasks(project_id: int, db: Session = Depends(get_db)):
    if not fits_id_column(project_id):
        return []
    return db.query(Task).filter(Task.project_id == project_id).order_by(Task.id.asc()).all()


@project_tasks_router.post(
    "/{project_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED
)
def create_task(project_id: int, task_data: TaskCreate, db: Session = Depends(get_db)):
    """Create a task in a project. The project id always comes from the path."""
    project = get_project_or_404(project_id, db)
    task = Task(project_id=project.id, **task_data.model_dump())
    db.add(task)
    db.commit()
    db.refresh(task)
    return task
