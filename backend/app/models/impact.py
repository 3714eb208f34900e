"""Impact 페이지(후기/성공 사례/마일스톤) SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from app.database import Base
from app.utils.helpers import new_id, utcnow


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    role = Column(String(100))
    quote = Column(String(280), nullable=False)
    rating = Column(Integer, nullable=False)
    avatar_url = Column(String(500))
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class SuccessStory(Base):
    __tablename__ = "success_stories"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    excerpt = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    cover_url = Column(String(500))
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Milestone(Base):
    __tablename__ = "milestones"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    description = Column(String(500))
    achieved_on = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
