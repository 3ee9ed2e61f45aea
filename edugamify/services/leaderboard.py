from typing import Optional

from sqlalchemy.orm import Session

from edugamify.core.config import settings
from edugamify.domain.leaderboard import Standing, rank_standings
from edugamify.repositories.user_repository import UserRepository
from edugamify.schemas.leaderboard import LeaderboardEntry, LeaderboardResponse


class LeaderboardService:
    def __init__(self, db: Session, size: Optional[int] = None):
        self.db = db
        self.user_repository = UserRepository(db)
        self.size = size or settings.LEADERBOARD_SIZE

    def get_leaderboard(self) -> LeaderboardResponse:
        users = self.user_repository.get_top_by_points(self.size)
        standings = [
            Standing(
                name=user.name,
                points=user.points or 0,
                badge_count=sum(1 for badge in user.badges if badge.earned),
            )
            for user in users
        ]
        ranked = rank_standings(standings, limit=self.size)
        return LeaderboardResponse(
            leaderboard=[
                LeaderboardEntry(
                    rank=r.rank, name=r.name, points=r.points, badge_count=r.badge_count
                )
                for r in ranked
            ]
        )
