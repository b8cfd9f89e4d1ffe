"""Schemas for the reports page and dashboard stats"""
from typing import List

from pydantic import BaseModel, Field


class ChartPoint(BaseModel):
    name: str
    value: int


class ProjectProgress(BaseModel):
    name: str
    progress: int


class ReportResponse(BaseModel):
    status_counts: List[ChartPoint] = Field(default_factory=list, alias="statusCounts")
    priority_counts: List[ChartPoint] = Field(default_factory=list, alias="priorityCounts")
    project_progress: List[ProjectProgress] = Field(default_factory=list, alias="projectProgress")

    class Config:
        populate_by_name = True


class DashboardSummary(BaseModel):
    active_projects: int = Field(..., alias="activeProjects")
    total_tasks: int = Field(..., alias="totalTasks")
    completed_tasks: int = Field(..., alias="completedTasks")

    class Config:
        populate_by_name = True
