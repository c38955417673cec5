from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATA_FILE: str = "data/tournament.json"

    MIN_GROUP_SIZE: int = 4
    MAX_GROUP_SIZE: int = 6
    MAX_CATEGORIES_PER_PLAYER: int = 2
    PLAYER_LIMIT_PER_CATEGORY: int = 50 # Soft limit, only reported

    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password"
    ADMIN_PASSWORD_HASH: Optional[str] = None # Takes precedence over ADMIN_PASSWORD when set
    SECRET_KEY: str = "YOUR_SECRET_KEY_HERE"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash-preview-09-2025"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT_SECONDS: float = 60.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
