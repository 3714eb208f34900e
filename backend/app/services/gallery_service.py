"""Gallery Service 도메인 서비스 레이어입니다."""

from app.models.gallery import GalleryImage
from app.services.content_repository import ContentRepository

gallery = ContentRepository(
    GalleryImage,
    label="Gallery image",
    ordering=("order", "created_at"),
    search_fields=("title", "description"),
    reorderable=True,
)
