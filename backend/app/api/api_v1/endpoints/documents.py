"""
Document endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from app.api.deps import get_current_user
from app.core.database import get_db
from app.models.document import Document
from app.models.user import User
from app.schemas.document import DocumentCreate, DocumentResponse
from app.services import policies

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_model=List[DocumentResponse])
def list_documents(
    project_id: Optional[UUID] = Query(None, description="Only documents of this project"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Documents visible to the caller, ordered by name
    """
    query = policies.visible_documents(db, user)
    if project_id is not None:
        query = query.filter(Document.project_id == project_id)
    return query.order_by(Document.name).all()

@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
def create_document(
    document_data: DocumentCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Insert a document; created_by must be the caller
    """
    if not policies.can_insert_document(db, user, document_data.project_id, document_data.created_by):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="New row violates row-level security policy for table \"documents\"",
        )

    try:
        document = Document(
            name=document_data.name,
            content=document_data.content,
            encrypted_content=document_data.encrypted_content,
            project_id=document_data.project_id,
            created_by=document_data.created_by,
        )
        db.add(document)
        db.commit()
        db.refresh(document)
    except (ValueError, IntegrityError) as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"User {user.id} created document {document.id}")
    return document
