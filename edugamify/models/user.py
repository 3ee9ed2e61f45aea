from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from edugamify.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    points = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    badges = relationship(
        "UserBadge",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserBadge.id",
        lazy="selectin",
    )


class UserBadge(Base):
    __tablename__ = "user_badges"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    earned = Column(Boolean, nullable=False, default=True)
    earned_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="badges")

    # A badge name appears at most once per user
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_user_badge_name"),)
