"""News Service 도메인 서비스 레이어입니다."""

from app.models.news import NewsItem
from app.services.content_repository import ContentRepository

news = ContentRepository(
    NewsItem,
    label="News item",
    ordering=("date", "created_at"),
    search_fields=("title", "body"),
    slug_field="slug",
    rich_text_fields=("body",),
)
