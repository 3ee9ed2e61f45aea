from dataclasses import dataclass, field
from typing import Any, List, Sequence

from edugamify.domain.scoring import round_half_up


@dataclass
class ProgressSnapshot:
    total_quizzes_available: int
    completed_count: int
    total_points: int
    average_score: int
    earned_badges: List[Any] = field(default_factory=list)
    recent_results: List[Any] = field(default_factory=list)


def average_percentage(percentages: Sequence[int]) -> int:
    """Rounded mean; an empty history averages to 0"""
    if not percentages:
        return 0
    return round_half_up(sum(percentages) / len(percentages))


def summarize_progress(
    total_quizzes_available: int,
    total_points: int,
    earned_badges: Sequence[Any],
    results: Sequence[Any],
    recent_limit: int = 5,
) -> ProgressSnapshot:
    """Summarize a full result history given newest first"""
    return ProgressSnapshot(
        total_quizzes_available=total_quizzes_available,
        completed_count=len(results),
        total_points=total_points or 0,
        average_score=average_percentage([r.percentage or 0 for r in results]),
        earned_badges=[b for b in earned_badges if getattr(b, "earned", True)],
        recent_results=list(results[:recent_limit]),
    )
