import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)"""
    return int(math.floor(value + 0.5))


def normalize_points(value: Any) -> int:
    """Coerce a stored point value to a non-negative int; anything unusable becomes 0"""
    if value is None or isinstance(value, bool):
        return 0
    try:
        points = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(points, 0)


@dataclass(frozen=True)
class QuestionKey:
    """A question together with its answer key, normalized once at load time"""

    question: str
    options: Tuple[str, ...]
    correct_answer: int
    points: int = 0

    @classmethod
    def from_document(cls, doc: dict) -> "QuestionKey":
        correct_answer = doc.get("correctAnswer")
        return cls(
            question=str(doc.get("question", "")),
            options=tuple(doc.get("options") or ()),
            correct_answer=int(correct_answer) if correct_answer is not None else -1,
            points=normalize_points(doc.get("points")),
        )


@dataclass(frozen=True)
class QuestionOutcome:
    question: str
    user_answer: Optional[int]
    correct_answer: int
    is_correct: bool
    points: int

    def to_document(self) -> dict:
        return {
            "question": self.question,
            "userAnswer": self.user_answer,
            "correctAnswer": self.correct_answer,
            "isCorrect": self.is_correct,
            "points": self.points,
        }


@dataclass(frozen=True)
class Outcome:
    """Scoring result of one submission, before badges or persistence"""

    correct_count: int
    total_questions: int
    percentage: int
    points_earned: int
    per_question: List[QuestionOutcome] = field(default_factory=list)

    @property
    def is_perfect(self) -> bool:
        return self.total_questions > 0 and self.correct_count == self.total_questions


class Scorer:
    """Pure scoring of answers against a quiz answer key"""

    @staticmethod
    def load_answer_key(documents: Sequence[dict]) -> List[QuestionKey]:
        return [QuestionKey.from_document(doc) for doc in documents or []]

    @staticmethod
    def score(
        questions: Sequence[QuestionKey], answers: Sequence[Optional[int]]
    ) -> Outcome:
        """
        Compare each answer to the key by position.

        Missing positions count as unanswered and are always incorrect.
        A quiz without questions scores 0%.
        """
        correct_count = 0
        points_earned = 0
        per_question = []

        for index, question in enumerate(questions):
            user_answer = answers[index] if index < len(answers) else None
            is_correct = user_answer is not None and user_answer == question.correct_answer
            awarded = question.points if is_correct else 0
            if is_correct:
                correct_count += 1
                points_earned += awarded
            per_question.append(
                QuestionOutcome(
                    question=question.question,
                    user_answer=user_answer,
                    correct_answer=question.correct_answer,
                    is_correct=is_correct,
                    points=awarded,
                )
            )

        total = len(questions)
        percentage = round_half_up(100 * correct_count / total) if total else 0

        return Outcome(
            correct_count=correct_count,
            total_questions=total,
            percentage=percentage,
            points_earned=points_earned,
            per_question=per_question,
        )
