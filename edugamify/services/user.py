import logging
from typing import List

from sqlalchemy.orm import Session

from edugamify.core.errors import AuthenticationError, DuplicateEmailError, NotFoundError
from edugamify.core.security import create_access_token, get_password_hash, verify_password
from edugamify.domain.badges import DEFAULT_BADGE_RULES, BadgeRuleSet
from edugamify.models.user import User
from edugamify.repositories.user_repository import UserRepository
from edugamify.schemas.user import (
    AuthResponse,
    BadgeStatus,
    EarnedBadge,
    UserLogin,
    UserProfile,
    UserRegister,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session, badge_rules: BadgeRuleSet = DEFAULT_BADGE_RULES):
        self.db = db
        self.user_repository = UserRepository(db)
        self.badge_rules = badge_rules

    def register(self, payload: UserRegister) -> AuthResponse:
        email = payload.email.lower()
        if self.user_repository.get_by_email(email):
            raise DuplicateEmailError("User already exists")

        user = self.user_repository.create(
            {
                "name": payload.name,
                "email": email,
                "password_hash": get_password_hash(payload.password),
                "points": 0,
            }
        )
        logger.info(f"🎉 Registered user {user.id}")
        return self._auth_response(
            user, "🎉 Welcome to EduGamify! Start earning points and badges!"
        )

    def login(self, payload: UserLogin) -> AuthResponse:
        user = self.user_repository.get_by_email(payload.email.lower())
        if not user or not verify_password(payload.password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return self._auth_response(user, f"🎮 Welcome back, {user.name}!")

    def get_profile(self, user_id: int) -> UserProfile:
        return self._profile(self._get_user(user_id))

    def get_badges(self, user_id: int) -> List[BadgeStatus]:
        """The whole catalog with the user's earned flags filled in"""
        user = self._get_user(user_id)
        earned = {badge.name: badge for badge in user.badges if badge.earned}
        return [
            BadgeStatus(
                name=badge.name,
                description=badge.description,
                icon=badge.icon,
                earned=badge.name in earned,
                earned_at=earned[badge.name].earned_at if badge.name in earned else None,
            )
            for badge in self.badge_rules
        ]

    def _get_user(self, user_id: int) -> User:
        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def _profile(user: User) -> UserProfile:
        return UserProfile(
            id=user.id,
            name=user.name,
            email=user.email,
            points=user.points or 0,
            badges=[
                EarnedBadge(name=b.name, earned=b.earned, earned_at=b.earned_at)
                for b in user.badges
            ],
        )

    def _auth_response(self, user: User, message: str) -> AuthResponse:
        profile = self._profile(user)
        return AuthResponse(
            **profile.model_dump(),
            token=create_access_token(user.id),
            message=message,
        )
