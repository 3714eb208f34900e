"""갤러리 이미지 모델 정의입니다."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from app.database import Base
from app.utils.helpers import new_id, utcnow


class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    description = Column(String(500))
    image_url = Column(String(500), nullable=False)
    order = Column(Integer, nullable=False, default=0)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
