"""Taskboard: projects, tasks and team members behind a kanban dashboard."""

__version__ = "1.0.0"
