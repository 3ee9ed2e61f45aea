from datetime import datetime
from typing import List, Optional

from edugamify.schemas.common import CamelModel
from edugamify.schemas.user import EarnedBadge


class RecentResult(CamelModel):
    id: int
    quiz_id: int
    quiz_title: str
    score: int
    total_questions: int
    percentage: int
    points: int
    time_spent: int
    new_badges: List[str] = []
    created_at: Optional[datetime] = None


class ProgressSummary(CamelModel):
    total_quizzes_available: int
    completed_count: int
    total_points: int
    average_score: int
    earned_badges: List[EarnedBadge]
    recent_results: List[RecentResult]


class ProgressResponse(CamelModel):
    success: bool = True
    progress: ProgressSummary
    message: str
