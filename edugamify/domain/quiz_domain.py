from typing import List, Sequence

from edugamify.domain.badges import BadgeDefinition, BadgeRuleSet
from edugamify.domain.scoring import Outcome, normalize_points
from edugamify.models.quiz import Quiz
from edugamify.models.result import Result
from edugamify.schemas.progress import RecentResult
from edugamify.schemas.quiz import (
    BadgeInfo,
    QuestionBreakdown,
    QuestionPublic,
    QuizResponse,
    SubmissionReport,
)


class QuizDomain:
    """Conversions between stored quiz/result rows and API schemas"""

    @staticmethod
    def to_response(quiz: Quiz) -> QuizResponse:
        """
        Convert a Quiz row to its public form. The answer key is dropped here
        so it can never reach a client before submission.
        """
        return QuizResponse(
            id=quiz.id,
            title=quiz.title,
            description=quiz.description,
            difficulty=quiz.difficulty or "Medium",
            points=quiz.points or 0,
            time_limit=quiz.time_limit,
            subject=quiz.subject,
            questions=[
                QuestionPublic(
                    question=str(doc.get("question", "")),
                    options=list(doc.get("options") or []),
                    points=normalize_points(doc.get("points")),
                )
                for doc in quiz.questions or []
            ],
        )

    @staticmethod
    def to_response_list(quizzes: List[Quiz]) -> List[QuizResponse]:
        return [QuizDomain.to_response(quiz) for quiz in quizzes]

    @staticmethod
    def badge_info(badge: BadgeDefinition) -> BadgeInfo:
        return BadgeInfo(name=badge.name, description=badge.description, icon=badge.icon)

    @staticmethod
    def outcome_to_report(
        outcome: Outcome, badges: Sequence[BadgeDefinition], time_spent: int
    ) -> SubmissionReport:
        return SubmissionReport(
            score=outcome.correct_count,
            total_questions=outcome.total_questions,
            percentage=outcome.percentage,
            points_earned=outcome.points_earned,
            time_spent=time_spent,
            new_badges=[QuizDomain.badge_info(badge) for badge in badges],
            per_question=[
                QuestionBreakdown(
                    question=q.question,
                    user_answer=q.user_answer,
                    correct_answer=q.correct_answer,
                    is_correct=q.is_correct,
                    points=q.points,
                )
                for q in outcome.per_question
            ],
        )

    @staticmethod
    def result_to_report(result: Result, rules: BadgeRuleSet) -> SubmissionReport:
        """Rebuild the report of an already stored submission"""
        badges = [rules.get(name) for name in result.new_badges or []]
        return SubmissionReport(
            score=result.score,
            total_questions=result.total_questions,
            percentage=result.percentage,
            points_earned=result.points,
            time_spent=result.time_spent,
            new_badges=[QuizDomain.badge_info(b) for b in badges if b is not None],
            per_question=[
                QuestionBreakdown(
                    question=item.get("question", ""),
                    user_answer=item.get("userAnswer"),
                    correct_answer=item.get("correctAnswer", -1),
                    is_correct=bool(item.get("isCorrect")),
                    points=normalize_points(item.get("points")),
                )
                for item in result.breakdown or []
            ],
        )

    @staticmethod
    def result_to_recent(result: Result) -> RecentResult:
        return RecentResult(
            id=result.id,
            quiz_id=result.quiz_id,
            quiz_title=result.quiz_title,
            score=result.score,
            total_questions=result.total_questions,
            percentage=result.percentage,
            points=result.points,
            time_spent=result.time_spent,
            new_badges=list(result.new_badges or []),
            created_at=result.created_at,
        )

    @staticmethod
    def completion_message(report: SubmissionReport) -> str:
        return (
            f"🎉 Quiz completed! You scored {report.percentage}% "
            f"and earned {report.points_earned} points!"
        )

    @staticmethod
    def badge_summary(badges: Sequence[BadgeInfo]):
        if not badges:
            return None
        return "🏆 New badges earned: " + ", ".join(f"{b.icon} {b.name}" for b in badges)
