"""Blog Service 도메인 서비스 레이어입니다."""

from app.models.blog import BlogPost
from app.services.content_repository import ContentRepository

blogs = ContentRepository(
    BlogPost,
    label="Blog post",
    ordering=("order", "published_at", "created_at"),
    search_fields=("title", "excerpt", "author"),
    slug_field="slug",
    rich_text_fields=("content",),
    reorderable=True,
)


def create_blog(db, data: dict):
    # 발행일 미지정 시 생성 시각을 사용한다.
    payload = {key: value for key, value in data.items() if not (key == "published_at" and value is None)}
    return blogs.create(db, payload)
