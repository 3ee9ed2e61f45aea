from .quiz_repository import QuizRepository
from .result_repository import ResultRepository
from .user_repository import UserRepository

__all__ = ["QuizRepository", "ResultRepository", "UserRepository"]
