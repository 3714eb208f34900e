"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./ngo_cms.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:5174"]

    # JWT
    # No default: a missing signing key must stop the process at startup.
    JWT_SECRET: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # File upload
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5 MiB
    ALLOWED_IMAGE_TYPES: List[str] = [
        "image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp",
    ]
    UPLOAD_DIR: str = "uploads"
    PUBLIC_BASE_URL: Optional[str] = None

    # First admin bootstrap (only used when the admin table is empty)
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    @field_validator("JWT_SECRET")
    @classmethod
    def _require_secret(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("JWT_SECRET must be set to a non-empty value")
        return value

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
