"""갤러리 이미지 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from app.schemas.common import ApiModel, PartialUpdate, RequiredUrl


class GalleryImageCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    image_url: RequiredUrl
    order: int = Field(default=0, ge=0)
    featured: bool = False


class GalleryImageUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "image_url", "order", "featured")

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    image_url: Optional[RequiredUrl] = None
    order: Optional[int] = Field(default=None, ge=0)
    featured: Optional[bool] = None


class GalleryImageOut(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    image_url: str
    order: int
    featured: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
