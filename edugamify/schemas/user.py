from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from edugamify.schemas.common import CamelModel


class UserRegister(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class EarnedBadge(CamelModel):
    name: str
    earned: bool = True
    earned_at: datetime


class UserProfile(CamelModel):
    id: int
    name: str
    email: str
    points: int
    badges: List[EarnedBadge] = []


class AuthResponse(UserProfile):
    token: str
    message: str


class BadgeStatus(CamelModel):
    name: str
    description: str
    icon: str
    earned: bool
    earned_at: Optional[datetime] = None
