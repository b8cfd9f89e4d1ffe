"""Schemas for projects"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskboard.models.project import ProjectStatus


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    status: ProjectStatus = ProjectStatus.ACTIVE

    class Config:
        use_enum_values = True
        validate_default = True


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None

    class Config:
        use_enum_values = True


class ProjectResponse(BaseModel):
    id: int
    name: str
    description: str
    status: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
