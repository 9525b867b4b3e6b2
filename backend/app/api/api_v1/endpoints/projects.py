"""
Project endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from app.api.deps import get_current_user
from app.core.database import get_db
from app.models.project import Project
from app.models.user import User
from app.schemas.project import ProjectCreate, ProjectResponse
from app.services import policies

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_model=List[ProjectResponse])
def list_projects(
    organization_id: Optional[UUID] = Query(None, description="Only projects of this organization"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Projects visible to the caller, ordered by name
    """
    query = policies.visible_projects(db, user)
    if organization_id is not None:
        query = query.filter(Project.organization_id == organization_id)
    return query.order_by(Project.name).all()

@router.post("/", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Insert a project into an organization the caller belongs to
    """
    if not policies.can_insert_project(db, user, project_data.organization_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="New row violates row-level security policy for table \"projects\"",
        )

    try:
        project = Project(
            name=project_data.name,
            description=project_data.description,
            status=project_data.status,
            organization_id=project_data.organization_id,
        )
        db.add(project)
        db.commit()
        db.refresh(project)
    except (ValueError, IntegrityError) as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"User {user.id} created project {project.id}")
    return project
