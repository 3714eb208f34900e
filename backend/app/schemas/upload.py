"""Upload 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime

from app.schemas.common import ApiModel


class UploadedFileOut(ApiModel):
    id: str
    url: str
    filename: str


class MediaAssetOut(ApiModel):
    id: str
    url: str
    filename: str
    created_at: datetime
