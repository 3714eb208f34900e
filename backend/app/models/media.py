"""업로드된 미디어 파일 메타데이터 모델 정의입니다."""

from sqlalchemy import Column, DateTime, String
from app.database import Base
from app.utils.helpers import new_id, utcnow


class MediaAsset(Base):
    __tablename__ = "media"

    id = Column(String(32), primary_key=True, default=new_id)
    url = Column(String(500), nullable=False)
    filename = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
