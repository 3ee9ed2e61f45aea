from typing import List, Optional

from sqlalchemy.orm import Session

from edugamify.models.result import Result


class ResultRepository:
    """Append-only store of quiz results"""

    def __init__(self, db: Session):
        self.db = db

    def append(self, result_data: dict) -> Result:
        """Stage a new result; the caller commits"""
        db_result = Result(**result_data)
        self.db.add(db_result)
        self.db.flush()
        return db_result

    def get_by_id(self, result_id: int) -> Optional[Result]:
        return self.db.query(Result).filter(Result.id == result_id).first()

    def get_by_submission_key(self, user_id: int, submission_key: str) -> Optional[Result]:
        return (
            self.db.query(Result)
            .filter(Result.user_id == user_id, Result.submission_key == submission_key)
            .first()
        )

    def count_by_user(self, user_id: int) -> int:
        return self.db.query(Result).filter(Result.user_id == user_id).count()

    def recent_by_user(self, user_id: int, limit: int = 5) -> List[Result]:
        """Newest first"""
        return (
            self.db.query(Result)
            .filter(Result.user_id == user_id)
            .order_by(Result.created_at.desc(), Result.id.desc())
            .limit(limit)
            .all()
        )

    def get_all_by_user(self, user_id: int) -> List[Result]:
        """Full history, newest first"""
        return (
            self.db.query(Result)
            .filter(Result.user_id == user_id)
            .order_by(Result.created_at.desc(), Result.id.desc())
            .all()
        )
