from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edugamify.core.database import get_db
from edugamify.core.errors import NotFoundError
from edugamify.core.security import get_current_user_id
from edugamify.schemas.user import BadgeStatus, UserProfile
from edugamify.services.user import UserService

router = APIRouter(tags=["user"])


@router.get("/user/me", response_model=UserProfile)
def get_me(
    db: Session = Depends(get_db), current_user_id: int = Depends(get_current_user_id)
):
    try:
        return UserService(db).get_profile(current_user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/user/badges", response_model=List[BadgeStatus])
def get_badges(
    db: Session = Depends(get_db), current_user_id: int = Depends(get_current_user_id)
):
    """Every badge in the catalog with the caller's earned status"""
    try:
        return UserService(db).get_badges(current_user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
