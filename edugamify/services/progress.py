from typing import Optional

from sqlalchemy.orm import Session

from edugamify.core.config import settings
from edugamify.core.errors import NotFoundError
from edugamify.domain.progress import summarize_progress
from edugamify.domain.quiz_domain import QuizDomain
from edugamify.repositories.quiz_repository import QuizRepository
from edugamify.repositories.result_repository import ResultRepository
from edugamify.repositories.user_repository import UserRepository
from edugamify.schemas.progress import ProgressResponse, ProgressSummary
from edugamify.schemas.user import EarnedBadge


class ProgressService:
    def __init__(self, db: Session, recent_limit: Optional[int] = None):
        self.db = db
        self.quiz_repository = QuizRepository(db)
        self.user_repository = UserRepository(db)
        self.result_repository = ResultRepository(db)
        self.recent_limit = recent_limit or settings.RECENT_RESULTS_LIMIT

    def get_user_progress(self, user_id: int) -> ProgressResponse:
        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")

        snapshot = summarize_progress(
            total_quizzes_available=self.quiz_repository.count(),
            total_points=user.points,
            earned_badges=user.badges,
            results=self.result_repository.get_all_by_user(user_id),
            recent_limit=self.recent_limit,
        )

        return ProgressResponse(
            progress=ProgressSummary(
                total_quizzes_available=snapshot.total_quizzes_available,
                completed_count=snapshot.completed_count,
                total_points=snapshot.total_points,
                average_score=snapshot.average_score,
                earned_badges=[
                    EarnedBadge(
                        name=badge.name, earned=badge.earned, earned_at=badge.earned_at
                    )
                    for badge in snapshot.earned_badges
                ],
                recent_results=[
                    QuizDomain.result_to_recent(result)
                    for result in snapshot.recent_results
                ],
            ),
            message=f"📊 Progress report for {user.name}",
        )
