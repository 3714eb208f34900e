"""소식/행사 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import ClassVar, List, Literal, Optional

from pydantic import Field

from app.schemas.common import ApiModel, OptionalUrl, PartialUpdate, RequiredUrl, Slug, UtcDatetime

NewsType = Literal["NEWS", "EVENT"]


class NewsItemCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    type: NewsType
    date: UtcDatetime
    body: str = Field(min_length=1)
    hero_url: OptionalUrl = None
    gallery: List[RequiredUrl] = Field(default_factory=list, max_length=8)


class NewsItemUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "slug", "type", "date", "body", "gallery")

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[Slug] = None
    type: Optional[NewsType] = None
    date: Optional[UtcDatetime] = None
    body: Optional[str] = Field(default=None, min_length=1)
    hero_url: OptionalUrl = None
    gallery: Optional[List[RequiredUrl]] = Field(default=None, max_length=8)


class NewsItemOut(ApiModel):
    id: str
    title: str
    slug: str
    type: str
    date: datetime
    body: str
    hero_url: Optional[str] = None
    gallery: List[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None
