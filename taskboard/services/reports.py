"""Aggregations behind the reports charts and the dashboard stats row."""
import math
from typing import Any, List, Sequence

from taskboard.models.project import ProjectStatus
from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.schemas.report import ChartPoint, DashboardSummary, ProjectProgress, ReportResponse

STATUS_LABELS = (
    (TaskStatus.TODO.value, "Todo"),
    (TaskStatus.IN_PROGRESS.value, "In Progress"),
    (TaskStatus.DONE.value, "Done"),
)

PRIORITY_LABELS = (
    (TaskPriority.LOW.value, "Low"),
    (TaskPriority.MEDIUM.value, "Medium"),
    (TaskPriority.HIGH.value, "High"),
)


def _count_by(tasks: Sequence[Any], attribute: str, labels) -> List[ChartPoint]:
    counts = {key: 0 for key, _ in labels}
    for task in tasks:
        value = getattr(task, attribute, None)
        # Unknown values are ignored rather than getting their own slice
        if value in counts:
            counts[value] += 1
    return [ChartPoint(name=label, value=counts[key]) for key, label in labels]


def status_counts(tasks: Sequence[Any]) -> List[ChartPoint]:
    """Pie chart data; empty slices are dropped."""
    return [point for point in _count_by(tasks, "status", STATUS_LABELS) if point.value > 0]


def priority_counts(tasks: Sequence[Any]) -> List[ChartPoint]:
    """Bar chart data; every priority keeps its bar, even at zero."""
    return _count_by(tasks, "priority", PRIORITY_LABELS)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def project_progress(projects: Sequence[Any], tasks: Sequence[Any]) -> List[ProjectProgress]:
    progress = []
    for project in projects:
        project_tasks = [task for task in tasks if task.project_id == project.id]
        done = sum(1 for task in project_tasks if task.status == TaskStatus.DONE.value)
        percent = _round_half_up(done / len(project_tasks) * 100) if project_tasks else 0
        progress.append(ProjectProgress(name=project.name, progress=percent))
    return progress


def build_report(projects: Sequence[Any], tasks: Sequence[Any]) -> ReportResponse:
    return ReportResponse(
        status_counts=status_counts(tasks),
        priority_counts=priority_counts(tasks),
        project_progress=project_progress(projects, tasks),
    )


def build_summary(projects: Sequence[Any], tasks: Sequence[Any]) -> DashboardSummary:
    return DashboardSummary(
        active_projects=sum(1 for project in projects if project.status == ProjectStatus.ACTIVE.value),
        total_tasks=len(tasks),
        completed_tasks=sum(1 for task in tasks if task.status == TaskStatus.DONE.value),
    )
