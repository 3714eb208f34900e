"""소식/행사(NewsItem) 모델 정의입니다."""

from sqlalchemy import JSON, Column, DateTime, String, Text
from app.database import Base
from app.utils.helpers import new_id, utcnow


class NewsItem(Base):
    __tablename__ = "news_items"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    type = Column(String(10), nullable=False)  # NEWS/EVENT
    date = Column(DateTime, nullable=False)
    body = Column(Text, nullable=False)
    hero_url = Column(String(500))
    gallery = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
