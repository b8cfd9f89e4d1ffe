"""Version 1 of the REST API, mounted under ``/api``."""
from fastapi import APIRouter

from taskboard.api.v1 import board, members, projects, reports, tasks

api_router = APIRouter()
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(tasks.project_tasks_router, prefix="/projects", tags=["tasks"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(members.router, prefix="/members", tags=["members"])
api_router.include_router(board.router, prefix="/board", tags=["board"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
