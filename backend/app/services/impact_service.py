"""Impact Service 도메인 서비스 레이어입니다. 후기/성공 사례/마일스톤 저장소 구성을 정의합니다."""

from app.models.impact import Milestone, SuccessStory, Testimonial
from app.services.content_repository import ContentRepository

testimonials = ContentRepository(
    Testimonial,
    label="Testimonial",
    search_fields=("name", "role", "quote"),
)

stories = ContentRepository(
    SuccessStory,
    label="Story",
    search_fields=("title", "excerpt", "content"),
    slug_field="slug",
    rich_text_fields=("content",),
)

milestones = ContentRepository(
    Milestone,
    label="Milestone",
    ordering=("achieved_on", "created_at"),
    search_fields=("title", "description"),
)
