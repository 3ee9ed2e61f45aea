from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edugamify.core.database import get_db
from edugamify.core.errors import AuthenticationError, DuplicateEmailError
from edugamify.schemas.user import AuthResponse, UserLogin, UserRegister
from edugamify.services.user import UserService

router = APIRouter(tags=["auth"])


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(payload: UserRegister, db: Session = Depends(get_db)):
    """Create an account and return a bearer token"""
    try:
        return UserService(db).register(payload)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.post("/auth/login", response_model=AuthResponse)
def login_user(payload: UserLogin, db: Session = Depends(get_db)):
    try:
        return UserService(db).login(payload)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )
