"""Project endpoints"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.database import fits_id_column, get_db
from taskboard.models import Project
from taskboard.schemas import ProjectCreate, ProjectResponse, ProjectUpdate

router = APIRouter()


def find_project(project_id: int, db: Session) -> Optional[Project]:
    if not fits_id_column(project_id):
        return None
    return db.query(Project).filter(Project.id == project_id).first()


def get_project_or_404(project_id: int, db: Session) -> Project:
    project = find_project(project_id, db)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("", response_model=List[ProjectResponse])
def list_projects(db: Session = Depends(get_db)):
    return db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return get_project_or_404(project_id, db)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(project_data: ProjectCreate, db: Session = Depends(get_db)):
    project = Project(**project_data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(project_id: int, project_update: ProjectUpdate, db: Session = Depends(get_db)):
    """Partially update a project; omitted fields are left untouched."""
    project = get_project_or_404(project_id, db)

    update_data = project_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # Every project column is required
        if value is None:
            continue
        setattr(project, field, value)

    db.commit()
    db.refresh(project)
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    """Delete a project and its tasks. Deleting a missing project is not an error."""
    project = find_project(project_id, db)
    if project is not None:
        db.delete(project)
        db.commit()
