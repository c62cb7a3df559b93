import os
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Read from environment variables (.env file)
    """
    APP_NAME: str = "Friend Graph API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./friends.db"
    )

    SECRET_KEY: str = os.getenv(
        "SECRET_KEY",
        "your-secret-key-change-in-production"
    )

    ALGORITHM: str = "HS256"

    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "120")
    )

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    SUGGESTIONS_LIMIT: int = 10
    SEARCH_LIMIT: int = 20
    SEARCH_MIN_LENGTH: int = 2
    # mutual friends shown per suggestion; mutual_count is never capped
    MUTUAL_LIST_DISPLAY_LIMIT: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
