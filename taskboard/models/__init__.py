"""Taskboard Database Models"""
from taskboard.models.member import Member, MemberRole
from taskboard.models.project import Project, ProjectStatus
from taskboard.models.task import Task, TaskPriority, TaskStatus

__all__ = [
    "Member",
    "MemberRole",
    "Project",
    "ProjectStatus",
    "Task",
    "TaskPriority",
    "TaskStatus",
]
