import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from edugamify.core.config import settings
from edugamify.core.errors import (
    DependencyUnavailableError,
    NotFoundError,
    PersistenceConflictError,
)
from edugamify.domain.badges import BadgeDefinition
from edugamify.domain.scoring import Outcome
from edugamify.models.quiz import Quiz
from edugamify.models.result import Result
from edugamify.repositories.result_repository import ResultRepository
from edugamify.repositories.user_repository import UserRepository

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class LedgerEntry:
    result: Result
    granted_badges: List[str] = field(default_factory=list)
    replayed: bool = False


class AccountLedger:
    """
    Applies one scored submission to a user's account as a single transaction:
    the result row, the point increment and the badge grants commit together
    or not at all.
    """

    def __init__(self, db: Session, max_retries: Optional[int] = None):
        self.db = db
        self.user_repository = UserRepository(db)
        self.result_repository = ResultRepository(db)
        self.max_retries = max_retries or settings.LEDGER_MAX_RETRIES

    def apply(
        self,
        user_id: int,
        quiz: Quiz,
        outcome: Outcome,
        badges: Sequence[BadgeDefinition],
        time_spent: int,
        submission_key: Optional[str] = None,
    ) -> LedgerEntry:
        last_error = None

        for attempt in range(1, self.max_retries + 1):
            try:
                if submission_key:
                    existing = self.result_repository.get_by_submission_key(
                        user_id, submission_key
                    )
                    if existing:
                        logger.info(
                            f"🔁 Submission {submission_key} already applied for user {user_id}"
                        )
                        return LedgerEntry(result=existing, replayed=True)

                entry = self._apply_once(
                    user_id, quiz, outcome, badges, time_spent, submission_key
                )
                self.db.commit()
                self.db.refresh(entry.result)

                logger.info(
                    f"💎 User {user_id} earned {outcome.points_earned} points "
                    f"on quiz {quiz.id}; badges granted: {entry.granted_badges or 'none'}"
                )
                return entry

            except NotFoundError:
                self.db.rollback()
                raise
            except (IntegrityError, OperationalError) as e:
                self.db.rollback()
                last_error = e
                logger.warning(
                    f"⚠️ Ledger attempt {attempt}/{self.max_retries} for user {user_id} failed: {e}"
                )

        if isinstance(last_error, IntegrityError):
            logger.error(f"❌ Ledger gave up on user {user_id} after conflicting updates")
            raise PersistenceConflictError(
                "Concurrent updates to this account kept conflicting; please retry"
            ) from last_error

        logger.error(f"❌ Ledger could not reach the database for user {user_id}")
        raise DependencyUnavailableError("Database is unavailable") from last_error

    def _apply_once(
        self,
        user_id: int,
        quiz: Quiz,
        outcome: Outcome,
        badges: Sequence[BadgeDefinition],
        time_spent: int,
        submission_key: Optional[str],
    ) -> LedgerEntry:
        now = datetime.now(timezone.utc)

        if not self.user_repository.atomic_add_points(user_id, outcome.points_earned):
            raise NotFoundError(f"User {user_id} not found")

        granted = [
            badge.name
            for badge in badges
            if self.user_repository.add_badge_if_absent(user_id, badge.name, now)
        ]

        result = self.result_repository.append(
            {
                "user_id": user_id,
                "quiz_id": quiz.id,
                "quiz_title": quiz.title,
                "score": outcome.correct_count,
                "total_questions": outcome.total_questions,
                "percentage": outcome.percentage,
                "points": outcome.points_earned,
                "time_spent": time_spent,
                "breakdown": [q.to_document() for q in outcome.per_question],
                "new_badges": [badge.name for badge in badges],
                "submission_key": submission_key,
            }
        )
        return LedgerEntry(result=result, granted_badges=granted)
