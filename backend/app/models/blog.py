"""블로그 게시글 모델 정의입니다."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from app.database import Base
from app.utils.helpers import new_id, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    author = Column(String(100), nullable=False)
    excerpt = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    cover_url = Column(String(500))
    order = Column(Integer, nullable=False, default=0)
    published_at = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
