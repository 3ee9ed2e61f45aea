from datetime import datetime
from typing import List, Optional

from sqlalchemy import insert, literal, select, update
from sqlalchemy.orm import Session
from sqlalchemy.types import DateTime, Integer, String

from edugamify.models.user import User, UserBadge


class UserRepository:
    """
    Repository for users and their earned badges.

    `atomic_add_points` and `add_badge_if_absent` only flush; the caller
    owns the transaction and commits the whole unit of work.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, user_data: dict) -> User:
        """Create a new user"""
        db_user = User(**user_data)
        self.db.add(db_user)
        self.db.commit()
        self.db.refresh(db_user)
        return db_user

    def atomic_add_points(self, user_id: int, delta: int) -> bool:
        """
        Increment points in a single UPDATE so concurrent submissions never
        lose an increment. Returns False when the user does not exist.
        """
        result = self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(points=User.points + delta)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def add_badge_if_absent(self, user_id: int, name: str, earned_at: datetime) -> bool:
        """
        Insert the badge only when the user does not hold it yet.
        Returns True when a row was inserted.
        """
        already_held = (
            select(UserBadge.id)
            .where(UserBadge.user_id == user_id, UserBadge.name == name)
            .correlate(None)
            .exists()
        )
        rows = select(
            literal(user_id, Integer),
            literal(name, String),
            literal(True),
            literal(earned_at, DateTime(timezone=True)),
        ).where(~already_held)
        result = self.db.execute(
            insert(UserBadge.__table__).from_select(
                ["user_id", "name", "earned", "earned_at"], rows
            )
        )
        return result.rowcount == 1

    def get_badges(self, user_id: int) -> List[UserBadge]:
        return (
            self.db.query(UserBadge)
            .filter(UserBadge.user_id == user_id)
            .order_by(UserBadge.id)
            .all()
        )

    def get_top_by_points(self, limit: int = 10) -> List[User]:
        """Highest points first; ties keep creation order"""
        return (
            self.db.query(User)
            .order_by(User.points.desc(), User.id.asc())
            .limit(limit)
            .all()
        )
