from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import JSON, DateTime

from edugamify.core.database import Base


class Result(Base):
    __tablename__ = "results"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    quiz_id = Column(Integer, ForeignKey("quizzes.id"), nullable=False, index=True)
    quiz_title = Column(String(200), nullable=False)
    score = Column(Integer, nullable=False)  # correct answers
    total_questions = Column(Integer, nullable=False)
    percentage = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    time_spent = Column(Integer, nullable=False)
    breakdown = Column(JSON, nullable=False, default=list)
    new_badges = Column(JSON, nullable=False, default=list)
    submission_key = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Replays of the same client submission resolve to one row
    __table_args__ = (
        UniqueConstraint("user_id", "submission_key", name="uq_result_submission_key"),
    )
