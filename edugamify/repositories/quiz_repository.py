from typing import List, Optional

from sqlalchemy.orm import Session

from edugamify.models.quiz import Quiz


class QuizRepository:
    """Repository for the read-mostly quiz catalog"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        """Get a quiz, answer key included"""
        return self.db.query(Quiz).filter(Quiz.id == quiz_id).first()

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Quiz]:
        """Get quizzes in creation order with pagination"""
        return self.db.query(Quiz).order_by(Quiz.id).offset(skip).limit(limit).all()

    def count(self) -> int:
        return self.db.query(Quiz).count()

    def create_bulk(self, quiz_data_list: List[dict]) -> List[Quiz]:
        """Create multiple quizzes (content seeding)"""
        db_quiz_list = [Quiz(**data) for data in quiz_data_list]
        self.db.add_all(db_quiz_list)
        self.db.commit()
        for quiz in db_quiz_list:
            self.db.refresh(quiz)
        return db_quiz_list
