from .leaderboard import LeaderboardService
from .ledger import AccountLedger
from .progress import ProgressService
from .quiz import QuizService
from .user import UserService

__all__ = [
    "AccountLedger",
    "LeaderboardService",
    "ProgressService",
    "QuizService",
    "UserService",
]
