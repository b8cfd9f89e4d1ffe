"""Demo data for a fresh database."""
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from taskboard.models import Project, ProjectStatus, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session) -> bool:
    """Insert two demo projects with tasks if there are no projects yet.

    Returns True when data was inserted.
    """
    if db.query(Project).first() is not None:
        return False

    website = Project(
        name="Website Redesign",
        description="Revamp the company website with modern UI",
        status=ProjectStatus.ACTIVE.value,
    )
    mobile = Project(
        name="Mobile App",
        description="Flutter app for Android and iOS",
        status=ProjectStatus.ACTIVE.value,
    )
    db.add_all([website, mobile])
    db.flush()

    db.add_all(
        [
            Task(
                project_id=website.id,
                title="Design Mockups",
                description="Create Figma designs for homepage",
                status=TaskStatus.DONE.value,
                priority=TaskPriority.HIGH.value,
                due_date=datetime.now(timezone.utc),
            ),
            Task(
                project_id=website.id,
                title="Implement Landing Page",
                description="Convert designs to React components",
                status=TaskStatus.IN_PROGRESS.value,
                priority=TaskPriority.HIGH.value,
            ),
            Task(
                project_id=mobile.id,
                title="Setup CI/CD",
                description="Configure GitHub Actions",
                status=TaskStatus.TODO.value,
                priority=TaskPriority.MEDIUM.value,
            ),
        ]
    )
    db.commit()
    logger.info("Seeded demo projects and tasks")
    return True
