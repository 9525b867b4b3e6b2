"""
Organization and membership endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from app.api.deps import get_current_user
from app.core.database import get_db
from app.models.organization import Organization, OrganizationMember
from app.models.user import User
from app.schemas.organization import (
    OrganizationCreate,
    OrganizationMemberCreate,
    OrganizationMemberResponse,
    OrganizationResponse,
)
from app.services import policies

logger = logging.getLogger(__name__)

router = APIRouter()

OWNER_ROLE = "owner"

@router.get("/", response_model=List[OrganizationResponse])
def list_organizations(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Organizations the caller belongs to, ordered by name
    """
    return (
        policies.visible_organizations(db, user)
        .order_by(Organization.name)
        .all()
    )

@router.post("/", response_model=OrganizationResponse, status_code=status.HTTP_201_CREATED)
def create_organization(
    org_data: OrganizationCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Insert an organization; the caller becomes its owner
    """
    try:
        organization = Organization(name=org_data.name, settings=org_data.settings)
        db.add(organization)
        db.flush()
        db.add(OrganizationMember(
            organization_id=organization.id,
            user_id=user.id,
            role=OWNER_ROLE,
        ))
        db.commit()
        db.refresh(organization)
    except (ValueError, IntegrityError) as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"User {user.id} created organization {organization.id}")
    return organization

@router.get("/{organization_id}/members", response_model=List[OrganizationMemberResponse])
def list_members(
    organization_id: UUID,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Members of an organization; empty unless the caller is a member too
    """
    members = (
        policies.visible_members(db, user)
        .filter(OrganizationMember.organization_id == organization_id)
        .order_by(OrganizationMember.created_at)
        .all()
    )
    return [
        OrganizationMemberResponse(
            id=m.id,
            organization_id=m.organization_id,
            user_id=m.user_id,
            role=m.role,
            created_at=m.created_at,
            full_name=m.user.full_name if m.user else None,
        )
        for m in members
    ]

@router.post(
    "/{organization_id}/members",
    response_model=OrganizationMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_member(
    organization_id: UUID,
    member_data: OrganizationMemberCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Add a user to an organization (owners and admins only)
    """
    if not policies.can_add_member(db, user, organization_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="New row violates row-level security policy for table \"organization_members\"",
        )

    if db.query(User).filter(User.id == member_data.user_id).first() is None:
        raise HTTPException(status_code=404, detail="User not found")

    member = OrganizationMember(
        organization_id=organization_id,
        user_id=member_data.user_id,
        role=member_data.role,
    )
    try:
        db.add(member)
        db.commit()
        db.refresh(member)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="User is already a member of this organization")

    return OrganizationMemberResponse(
        id=member.id,
        organization_id=member.organization_id,
        user_id=member.user_id,
        role=member.role,
        created_at=member.created_at,
        full_name=member.user.full_name if member.user else None,
    )
