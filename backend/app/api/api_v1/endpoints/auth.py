"""
Authentication endpoints: password sign-up / sign-in and session management
"""

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session
import logging

from app.api.deps import get_bearer_token, get_current_user
from app.core.database import get_db
from app.models.user import User
from app.schemas.user import SessionResponse, SignInRequest, SignUpRequest, UserResponse
from app.services.auth_service import AuthError, AuthService

logger = logging.getLogger(__name__)

router = APIRouter()

def _session_response(payload: dict) -> SessionResponse:
    return SessionResponse(
        access_token=payload["access_token"],
        token_type=payload["token_type"],
        expires_at=payload["expires_at"],
        user=UserResponse.model_validate(payload["user"]),
    )

@router.get("/health")
async def auth_health():
    """Health check for auth endpoints"""
    return {"status": "healthy", "service": "authentication"}

@router.post("/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def sign_up(request_data: SignUpRequest, db: Session = Depends(get_db)):
    """
    Create an account and return its first session
    """
    try:
        payload = AuthService(db).sign_up(
            email=request_data.email,
            password=request_data.password,
            full_name=request_data.full_name,
        )
        return _session_response(payload)
    except AuthError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.post("/signin", response_model=SessionResponse)
def sign_in(request_data: SignInRequest, db: Session = Depends(get_db)):
    """
    Exchange email + password for a session
    """
    try:
        payload = AuthService(db).sign_in(request_data.email, request_data.password)
        return _session_response(payload)
    except AuthError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

@router.post("/signout")
def sign_out(token: str = Depends(get_bearer_token), db: Session = Depends(get_db)):
    """
    Revoke the session behind the bearer token
    """
    revoked = AuthService(db).sign_out(token)
    return {"success": True, "revoked": revoked}

@router.get("/session", response_model=UserResponse)
def get_session(user: User = Depends(get_current_user)):
    """
    Return the user behind the bearer token (401 when the session is gone)
    """
    return user
