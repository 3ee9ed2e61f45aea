import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from edugamify.core.config import settings
from edugamify.core.errors import InvalidSubmissionError, NotFoundError
from edugamify.domain.badges import (
    BadgeDefinition,
    BadgeEvaluator,
    HistorySnapshot,
    RequirementType,
)
from edugamify.domain.quiz_domain import QuizDomain
from edugamify.domain.scoring import Outcome, QuestionKey, Scorer
from edugamify.models.user import User
from edugamify.repositories.quiz_repository import QuizRepository
from edugamify.repositories.result_repository import ResultRepository
from edugamify.repositories.user_repository import UserRepository
from edugamify.schemas.quiz import (
    QuizDetailResponse,
    QuizListResponse,
    QuizSubmission,
    SubmissionResponse,
)
from edugamify.services.ledger import AccountLedger

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class QuizService:
    def __init__(
        self,
        db: Session,
        badge_evaluator: Optional[BadgeEvaluator] = None,
        evaluate_history: Optional[bool] = None,
    ):
        self.db = db
        self.quiz_repository = QuizRepository(db)
        self.user_repository = UserRepository(db)
        self.result_repository = ResultRepository(db)
        self.ledger = AccountLedger(db)
        self.badge_evaluator = badge_evaluator or BadgeEvaluator()
        self.evaluate_history = (
            settings.EVALUATE_HISTORY_BADGES
            if evaluate_history is None
            else evaluate_history
        )

    def list_quizzes(self) -> QuizListResponse:
        quizzes = QuizDomain.to_response_list(self.quiz_repository.get_all())
        return QuizListResponse(count=len(quizzes), quizzes=quizzes)

    def get_quiz(self, quiz_id: int) -> QuizDetailResponse:
        quiz = self.quiz_repository.get_by_id(quiz_id)
        if not quiz:
            raise NotFoundError(f"Quiz {quiz_id} not found")
        return QuizDetailResponse(
            quiz=QuizDomain.to_response(quiz), message=f"🎯 Starting {quiz.title}!"
        )

    def submit_quiz(
        self,
        quiz_id: int,
        user_id: int,
        submission: QuizSubmission,
        submission_key: Optional[str] = None,
    ) -> SubmissionResponse:
        """Score a submission, award badges and apply it to the user's account"""
        quiz = self.quiz_repository.get_by_id(quiz_id)
        if not quiz:
            raise NotFoundError(f"Quiz {quiz_id} not found")
        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")

        questions = Scorer.load_answer_key(quiz.questions)
        self.validate_submission(questions, submission)

        outcome = Scorer.score(questions, submission.answers)
        logger.info(
            f"📝 User {user_id} scored {outcome.correct_count}/{outcome.total_questions} "
            f"({outcome.percentage}%) on '{quiz.title}'"
        )

        prior_count = self.result_repository.count_by_user(user_id)
        badges = self.badge_evaluator.evaluate(
            outcome, quiz.title, submission.time_spent, prior_count
        )
        if self.evaluate_history:
            badges = self._with_history_badges(user, outcome, prior_count, badges)

        entry = self.ledger.apply(
            user_id=user_id,
            quiz=quiz,
            outcome=outcome,
            badges=badges,
            time_spent=submission.time_spent,
            submission_key=submission_key,
        )

        if entry.replayed:
            report = QuizDomain.result_to_report(entry.result, self.badge_evaluator.rules)
        else:
            report = QuizDomain.outcome_to_report(outcome, badges, submission.time_spent)

        return SubmissionResponse(
            result=report,
            message=QuizDomain.completion_message(report),
            badges=QuizDomain.badge_summary(report.new_badges),
            replayed=entry.replayed,
        )

    @staticmethod
    def validate_submission(
        questions: Sequence[QuestionKey], submission: QuizSubmission
    ) -> None:
        """Reject malformed input before anything is scored or stored"""
        if submission.time_spent is None or submission.time_spent < 0:
            raise InvalidSubmissionError("timeSpent must be a non-negative number of seconds")
        if len(submission.answers) > len(questions):
            raise InvalidSubmissionError(
                f"Got {len(submission.answers)} answers for {len(questions)} questions"
            )
        for index, answer in enumerate(submission.answers):
            if answer is None:
                continue
            if isinstance(answer, bool) or not isinstance(answer, int):
                raise InvalidSubmissionError(f"Answer {index} must be an option index")
            if answer < 0:
                raise InvalidSubmissionError(f"Answer {index} must not be negative")

    def _with_history_badges(
        self,
        user: User,
        outcome: Outcome,
        prior_count: int,
        badges: List[BadgeDefinition],
    ) -> List[BadgeDefinition]:
        window = max(
            (
                b.requirement.value
                for b in self.badge_evaluator.rules
                if b.requirement.type == RequirementType.STREAK
            ),
            default=0,
        )
        recent = self.result_repository.recent_by_user(user.id, limit=window) if window else []
        history = HistorySnapshot(
            completed_count=prior_count + 1,
            total_points=(user.points or 0) + outcome.points_earned,
            recent_percentages=[outcome.percentage] + [r.percentage for r in recent],
        )
        # Threshold rules stay true once reached; only report them the first time
        reached = BadgeEvaluator.exclude_earned(
            self.badge_evaluator.evaluate_history(history),
            [badge.name for badge in user.badges],
        )
        return self.badge_evaluator.merge(badges, reached)
