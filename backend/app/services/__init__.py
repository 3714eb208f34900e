"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    auth_service,
    content_repository,
    impact_service,
    news_service,
    blog_service,
    gallery_service,
    settings_service,
    upload_service,
)

__all__ = [
    "auth_service",
    "content_repository",
    "impact_service",
    "news_service",
    "blog_service",
    "gallery_service",
    "settings_service",
    "upload_service",
]
