"""사이트 설정 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from app.schemas.common import HEX_COLOR_PATTERN, ApiModel, OptionalUrl, PartialUpdate


class SiteSettingsUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("site_name", "primary_hex")

    site_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    primary_hex: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    logo_url: OptionalUrl = None
    vision: Optional[str] = Field(default=None, max_length=2000)
    mission: Optional[str] = Field(default=None, max_length=5000)
    founder_story: Optional[str] = None
    who_we_are: Optional[str] = None


class SiteSettingsOut(ApiModel):
    id: int
    site_name: str
    primary_hex: str
    logo_url: Optional[str] = None
    vision: Optional[str] = None
    mission: Optional[str] = None
    founder_story: Optional[str] = None
    who_we_are: Optional[str] = None
    updated_at: Optional[datetime] = None
