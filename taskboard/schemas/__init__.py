"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.member import MemberCreate, MemberResponse, MemberUpdate
from taskboard.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.schemas.board import BoardResponse, DropRequest, DropResponse, StatusChangeRequestResponse
from taskboard.schemas.report import ChartPoint, DashboardSummary, ProjectProgress, ReportResponse

__all__ = [
    "MemberCreate",
    "MemberResponse",
    "MemberUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "BoardResponse",
    "DropRequest",
    "DropResponse",
    "StatusChangeRequestResponse",
    "ChartPoint",
    "DashboardSummary",
    "ProjectProgress",
    "ReportResponse",
]
