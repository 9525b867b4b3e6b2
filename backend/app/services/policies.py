"""
Row-level security policies

Select policies narrow queries to rows the user may see (foreign rows are
simply absent). Insert policies return False and the endpoint rejects the
write with 403.
"""

from sqlalchemy import select
from sqlalchemy.orm import Query, Session
from uuid import UUID

from app.models.document import Document
from app.models.organization import Organization, OrganizationMember
from app.models.project import Project
from app.models.user import User


def member_organization_ids(db: Session, user: User):
    """Subquery of organization ids the user belongs to"""
    return select(OrganizationMember.organization_id).where(
        OrganizationMember.user_id == user.id
    )


def get_membership(db: Session, user: User, organization_id: UUID) -> OrganizationMember | None:
    return (
        db.query(OrganizationMember)
        .filter(
            OrganizationMember.organization_id == organization_id,
            OrganizationMember.user_id == user.id,
        )
        .first()
    )


# ── Select policies ────────────────────────────────────────────────────

def visible_organizations(db: Session, user: User) -> Query:
    return db.query(Organization).filter(
        Organization.id.in_(member_organization_ids(db, user))
    )


def visible_members(db: Session, user: User) -> Query:
    return db.query(OrganizationMember).filter(
        OrganizationMember.organization_id.in_(member_organization_ids(db, user))
    )


def visible_projects(db: Session, user: User) -> Query:
    return db.query(Project).filter(
        Project.organization_id.in_(member_organization_ids(db, user))
    )


def visible_documents(db: Session, user: User) -> Query:
    return (
        db.query(Document)
        .join(Project, Document.project_id == Project.id)
        .filter(Project.organization_id.in_(member_organization_ids(db, user)))
    )


# ── Insert policies ────────────────────────────────────────────────────

def can_add_member(db: Session, user: User, organization_id: UUID) -> bool:
    """Only owners and admins may add members"""
    membership = get_membership(db, user, organization_id)
    return membership is not None and membership.can_manage_members()


def can_insert_project(db: Session, user: User, organization_id: UUID) -> bool:
    return get_membership(db, user, organization_id) is not None


def can_insert_document(db: Session, user: User, project_id: UUID, created_by: UUID) -> bool:
    """Caller must be the recorded creator and a member of the project's organization"""
    if created_by != user.id:
        return False
    project = db.query(Project).filter(Project.id == project_id).first()
    if project is None:
        return False
    return get_membership(db, user, project.organization_id) is not None
