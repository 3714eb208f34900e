"""관리자 계정(자격 증명 저장소) SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, String, DateTime
from app.database import Base
from app.utils.helpers import new_id, utcnow


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
