"""Report endpoints"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.models import Project, Task
from taskboard.schemas import DashboardSummary, ReportResponse
from taskboard.services.reports import build_report, build_summary

router = APIRouter()


def _projects_and_tasks(db: Session):
    projects = db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()
    tasks = db.query(Task).order_by(Task.id.asc()).all()
    return projects, tasks


@router.get("", response_model=ReportResponse)
def get_report(db: Session = Depends(get_db)):
    """Chart data for the reports page."""
    projects, tasks = _projects_and_tasks(db)
    return build_report(projects, tasks)


@router.get("/summary", response_model=DashboardSummary)
def get_summary(db: Session = Depends(get_db)):
    projects, tasks = _projects_and_tasks(db)
    return build_summary(projects, tasks)
