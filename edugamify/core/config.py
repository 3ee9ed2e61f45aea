from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    DATABASE_URL: str = "sqlite:///./edugamify.db"
    SECRET_KEY: str = "supersecret"
    PROJECT_NAME: str = "EduGamify API"

    # Auth
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Frontend origins (CRA and Vite dev servers)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Gamification
    LEADERBOARD_SIZE: int = 10
    RECENT_RESULTS_LIMIT: int = 5
    LEDGER_MAX_RETRIES: int = 3
    EVALUATE_HISTORY_BADGES: bool = False
    SEED_SAMPLE_QUIZZES: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
