from .quiz import Quiz
from .result import Result
from .user import User, UserBadge

__all__ = ["Quiz", "Result", "User", "UserBadge"]
