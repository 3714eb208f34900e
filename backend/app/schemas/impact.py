"""Impact(후기/성공 사례/마일스톤) 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from app.schemas.common import ApiModel, OptionalUrl, PartialUpdate, Slug, UtcDatetime


class TestimonialCreate(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    role: Optional[str] = Field(default=None, max_length=100)
    quote: str = Field(min_length=1, max_length=280)
    rating: int = Field(ge=1, le=5)
    avatar_url: OptionalUrl = None


class TestimonialUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "quote", "rating")

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    role: Optional[str] = Field(default=None, max_length=100)
    quote: Optional[str] = Field(default=None, min_length=1, max_length=280)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    avatar_url: OptionalUrl = None


class TestimonialOut(ApiModel):
    id: str
    name: str
    role: Optional[str] = None
    quote: str
    rating: int
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class SuccessStoryCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    excerpt: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    cover_url: OptionalUrl = None


class SuccessStoryUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "slug", "excerpt", "content")

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[Slug] = None
    excerpt: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    cover_url: OptionalUrl = None


class SuccessStoryOut(ApiModel):
    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    cover_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class MilestoneCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    achieved_on: UtcDatetime


class MilestoneUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "achieved_on")

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    achieved_on: Optional[UtcDatetime] = None


class MilestoneOut(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    achieved_on: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None
