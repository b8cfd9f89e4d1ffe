"""HTTP client for the Taskboard API and a board session built on it.

``BoardSession`` is what a kanban front end drives: it keeps the last fetched
task list, projects it into columns, and turns drops into ``PUT`` calls.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from taskboard.schemas.member import MemberResponse
from taskboard.schemas.project import ProjectResponse
from taskboard.schemas.task import TaskResponse
from taskboard.services.board import BoardColumns, StatusChangeRequest, on_drop, project_tasks, resolve_drop_target

logger = logging.getLogger(__name__)


class TaskboardClient:
    """HTTP client for the Taskboard REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", session=None, timeout: float = 5):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    def _get(self, path: str, **kwargs) -> Any:
        r = self.session.get(self._url(path), timeout=self.timeout, **kwargs)
        r.raise_for_status()
        return r.json()

    def list_tasks(self, project_id: Optional[int] = None) -> List[TaskResponse]:
        path = f"/projects/{project_id}/tasks" if project_id is not None else "/tasks"
        return [TaskResponse.model_validate(item) for item in self._get(path)]

    def update_task(self, task_id: int, **fields) -> TaskResponse:
        """Send a partial update, e.g. ``update_task(3, status="done")``."""
        r = self.session.put(self._url(f"/tasks/{task_id}"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return TaskResponse.model_validate(r.json())

    def list_projects(self) -> List[ProjectResponse]:
        return [ProjectResponse.model_validate(item) for item in self._get("/projects")]

    def list_members(self) -> List[MemberResponse]:
        return [MemberResponse.model_validate(item) for item in self._get("/members")]

    def health(self) -> bool:
        """Check if the API is reachable."""
        try:
            r = self.session.get(self._url("/health"), timeout=self.timeout)
        except requests.RequestException:
            return False
        return r.ok


class BoardSession:
    """Client-side board state for one task collection.

    The task list is only ever replaced by a re-fetch; a failed update is
    reported in ``notifications`` and never rolled back or retried.
    """

    def __init__(self, client: TaskboardClient, project_id: Optional[int] = None):
        self.client = client
        self.project_id = project_id
        self.tasks: List[TaskResponse] = []
        self.notifications: List[str] = []

    @property
    def columns(self) -> BoardColumns:
        return project_tasks(self.tasks)

    def refresh(self) -> List[TaskResponse]:
        self.tasks = self.client.list_tasks(self.project_id)
        return self.tasks

    def drop(self, active_id: int, over_id: Any) -> Optional[StatusChangeRequest]:
        """Handle the end of a drag. Returns the request that was sent, if any."""
        target = resolve_drop_target(self.tasks, over_id)
        change = on_drop(self.tasks, active_id, target)
        if change is None:
            return None

        try:
            self.client.update_task(change.id, status=change.status)
        except requests.RequestException as exc:
            self._notify(f"Failed to move task {change.id} to {change.status}: {exc}")

        # Re-fetch whether or not the update went through
        try:
            self.refresh()
        except requests.RequestException as exc:
            self._notify(f"Failed to reload tasks: {exc}")
        return change

    def _notify(self, message: str) -> None:
        logger.error(message)
        self.notifications.append(message)

    def summary(self) -> Dict[str, int]:
        board = self.columns
        return {status: len(tasks) for status, tasks in board.as_dict().items()}
