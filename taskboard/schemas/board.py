"""Schemas for the kanban board view"""
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from taskboard.schemas.task import TaskResponse


class BoardResponse(BaseModel):
    # Keys are the column ids used by the UI drop zones, not aliased
    todo: List[TaskResponse] = Field(default_factory=list)
    in_progress: List[TaskResponse] = Field(default_factory=list)
    done: List[TaskResponse] = Field(default_factory=list)
    unplaced: List[int] = Field(default_factory=list)


class DropRequest(BaseModel):
    active_id: int = Field(..., alias="activeId")
    # A task id (drop onto a card), a column id, or null when released outside
    over_id: Optional[Union[int, str]] = Field(None, alias="overId")

    class Config:
        populate_by_name = True


class StatusChangeRequestResponse(BaseModel):
    id: int
    status: str

    class Config:
        from_attributes = True


class DropResponse(BaseModel):
    request: Optional[StatusChangeRequestResponse] = None
    task: Optional[TaskResponse] = None
