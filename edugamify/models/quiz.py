from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.sql import func
from sqlalchemy.types import JSON, DateTime

from edugamify.core.database import Base


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    # Ordered list of {"question", "options", "correctAnswer", "points"}
    questions = Column(JSON, nullable=False, default=list)
    time_limit = Column(Integer, nullable=True)  # seconds
    difficulty = Column(String(50), nullable=False, default="Medium")
    points = Column(Integer, nullable=False, default=100)
    subject = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
