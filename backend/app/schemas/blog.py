"""블로그 게시글 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from app.schemas.common import ApiModel, OptionalUrl, PartialUpdate, Slug, UtcDatetime


class BlogPostCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    author: str = Field(min_length=1, max_length=100)
    excerpt: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    cover_url: OptionalUrl = None
    order: int = Field(default=0, ge=0)
    published_at: Optional[UtcDatetime] = None


class BlogPostUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = (
        "title", "slug", "author", "excerpt", "content", "order", "published_at",
    )

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[Slug] = None
    author: Optional[str] = Field(default=None, min_length=1, max_length=100)
    excerpt: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    cover_url: OptionalUrl = None
    order: Optional[int] = Field(default=None, ge=0)
    published_at: Optional[UtcDatetime] = None


class BlogPostOut(ApiModel):
    id: str
    title: str
    slug: str
    author: str
    excerpt: str
    content: str
    cover_url: Optional[str] = None
    order: int
    published_at: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None
