"""
User profile endpoints
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.user import UserResponse

router = APIRouter()

@router.get("/me", response_model=UserResponse)
def read_current_user(user: User = Depends(get_current_user)):
    """Profile of the signed-in user"""
    return user
