"""Blog Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data/blog.db"

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10

    # Media
    UPLOAD_DIR: str = "./data/uploads"
    AVATAR_MAX_BYTES: int = 500_000
    THUMBNAIL_MAX_BYTES: int = 2_000_000

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
