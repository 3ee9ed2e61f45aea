from typing import List

from edugamify.schemas.common import CamelModel


class LeaderboardEntry(CamelModel):
    rank: int
    name: str
    points: int
    badge_count: int


class LeaderboardResponse(CamelModel):
    success: bool = True
    leaderboard: List[LeaderboardEntry]
    message: str = "🏆 Current leaderboard"
