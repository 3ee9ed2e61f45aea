"""Badge catalog and the rules that decide when a badge is earned.

Rules split in two groups. Submission rules look only at the current
outcome and the number of earlier results. History rules need aggregate
history (milestones, point totals, streaks) and are evaluated separately
so callers can opt in.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Sequence

from edugamify.domain.scoring import Outcome


class RequirementType(str, Enum):
    QUIZZES_COMPLETED = "quizzes_completed"
    PERFECT_SCORE = "perfect_score"
    SPEED = "speed"
    TOTAL_POINTS = "total_points"
    STREAK = "streak"
    SPECIFIC_QUIZ = "specific_quiz"


@dataclass(frozen=True)
class BadgeRequirement:
    type: RequirementType
    value: int = 0
    # specific_quiz: substring of the quiz title
    keyword: Optional[str] = None
    # specific_quiz and streak: minimum percentage
    score: Optional[int] = None


@dataclass(frozen=True)
class BadgeDefinition:
    name: str
    description: str
    icon: str
    requirement: BadgeRequirement

    @property
    def is_submission_rule(self) -> bool:
        req = self.requirement
        if req.type == RequirementType.QUIZZES_COMPLETED:
            return req.value <= 1
        return req.type in (
            RequirementType.PERFECT_SCORE,
            RequirementType.SPEED,
            RequirementType.SPECIFIC_QUIZ,
        )


class BadgeRuleSet:
    """Immutable, ordered badge catalog keyed by badge name"""

    def __init__(self, badges: Iterable[BadgeDefinition]):
        self._badges = tuple(badges)
        by_name = {}
        for badge in self._badges:
            if badge.name in by_name:
                raise ValueError(f"Duplicate badge name in catalog: {badge.name}")
            by_name[badge.name] = badge
        self._by_name = MappingProxyType(by_name)

    def __iter__(self) -> Iterator[BadgeDefinition]:
        return iter(self._badges)

    def __len__(self) -> int:
        return len(self._badges)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[BadgeDefinition]:
        return self._by_name.get(name)

    @property
    def names(self) -> List[str]:
        return [badge.name for badge in self._badges]


DEFAULT_BADGE_RULES = BadgeRuleSet(
    [
        BadgeDefinition(
            "First Steps",
            "Complete your first quiz",
            "🎯",
            BadgeRequirement(RequirementType.QUIZZES_COMPLETED, value=1),
        ),
        BadgeDefinition(
            "Knowledge Seeker",
            "Complete 5 quizzes",
            "📚",
            BadgeRequirement(RequirementType.QUIZZES_COMPLETED, value=5),
        ),
        BadgeDefinition(
            "Quiz Master",
            "Complete 10 quizzes",
            "🏆",
            BadgeRequirement(RequirementType.QUIZZES_COMPLETED, value=10),
        ),
        BadgeDefinition(
            "Perfect Score",
            "Get 100% on any quiz",
            "⭐",
            BadgeRequirement(RequirementType.PERFECT_SCORE, value=1),
        ),
        BadgeDefinition(
            "Speed Demon",
            "Complete a quiz in under 2 minutes",
            "⚡",
            BadgeRequirement(RequirementType.SPEED, value=120),
        ),
        BadgeDefinition(
            "Point Collector",
            "Earn 500 points",
            "💎",
            BadgeRequirement(RequirementType.TOTAL_POINTS, value=500),
        ),
        BadgeDefinition(
            "Streak Master",
            "Complete 3 quizzes in a row",
            "🔥",
            BadgeRequirement(RequirementType.STREAK, value=3, score=60),
        ),
        BadgeDefinition(
            "JavaScript Ninja",
            "Complete JavaScript Fundamentals with 90%+",
            "🥷",
            BadgeRequirement(RequirementType.SPECIFIC_QUIZ, keyword="javascript", score=90),
        ),
        BadgeDefinition(
            "React Rockstar",
            "Complete React Basics with 90%+",
            "⚛️",
            BadgeRequirement(RequirementType.SPECIFIC_QUIZ, keyword="react", score=90),
        ),
        BadgeDefinition(
            "Node.js Expert",
            "Complete Node.js Essentials with 90%+",
            "🚀",
            BadgeRequirement(RequirementType.SPECIFIC_QUIZ, keyword="node", score=90),
        ),
    ]
)


@dataclass(frozen=True)
class HistorySnapshot:
    """Aggregate history of a user, including the submission being applied"""

    completed_count: int
    total_points: int
    # Newest first
    recent_percentages: Sequence[int] = ()


class BadgeEvaluator:
    def __init__(self, rules: BadgeRuleSet = DEFAULT_BADGE_RULES):
        self.rules = rules

    def evaluate(
        self,
        outcome: Outcome,
        quiz_title: str,
        time_spent: int,
        prior_result_count: int,
    ) -> List[BadgeDefinition]:
        """Badges earned by this submission alone, in catalog order"""
        title = (quiz_title or "").lower()
        earned = []
        for badge in self.rules:
            if not badge.is_submission_rule:
                continue
            req = badge.requirement
            if req.type == RequirementType.QUIZZES_COMPLETED:
                hit = prior_result_count + 1 == max(req.value, 1)
            elif req.type == RequirementType.PERFECT_SCORE:
                hit = outcome.percentage == 100
            elif req.type == RequirementType.SPEED:
                hit = time_spent < req.value
            else:
                hit = (
                    bool(req.keyword)
                    and outcome.percentage >= (req.score or 0)
                    and req.keyword.lower() in title
                )
            if hit:
                earned.append(badge)
        return earned

    def evaluate_history(self, history: HistorySnapshot) -> List[BadgeDefinition]:
        """Badges whose aggregate threshold the history has reached, in catalog order"""
        earned = []
        for badge in self.rules:
            if badge.is_submission_rule:
                continue
            req = badge.requirement
            if req.type == RequirementType.QUIZZES_COMPLETED:
                hit = history.completed_count >= req.value
            elif req.type == RequirementType.TOTAL_POINTS:
                hit = history.total_points >= req.value
            elif req.type == RequirementType.STREAK:
                hit = self._streak_length(history.recent_percentages, req.score or 0) >= req.value
            else:
                hit = False
            if hit:
                earned.append(badge)
        return earned

    def merge(self, *groups: Iterable[BadgeDefinition]) -> List[BadgeDefinition]:
        """Union of badge groups in catalog order, each name once"""
        wanted = {badge.name for group in groups for badge in group}
        return [badge for badge in self.rules if badge.name in wanted]

    @staticmethod
    def exclude_earned(
        badges: Iterable[BadgeDefinition], earned_names: Iterable[str]
    ) -> List[BadgeDefinition]:
        held = set(earned_names)
        return [badge for badge in badges if badge.name not in held]

    @staticmethod
    def _streak_length(percentages: Sequence[int], minimum: int) -> int:
        streak = 0
        for percentage in percentages:
            if percentage < minimum:
                break
            streak += 1
        return streak
