"""Schemas for tasks"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskboard.models.task import TaskPriority, TaskStatus


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    class Config:
        populate_by_name = True
        use_enum_values = True
        validate_default = True


class TaskUpdate(BaseModel):
    project_id: Optional[int] = Field(None, alias="projectId")
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    class Config:
        populate_by_name = True
        use_enum_values = True


class TaskResponse(BaseModel):
    id: int
    project_id: int = Field(..., alias="projectId")
    title: str
    description: Optional[str] = None
    # Not narrowed to TaskStatus: stored rows may hold unknown statuses
    status: str
    priority: str
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
