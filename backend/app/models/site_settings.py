"""사이트 전역 설정(단일 행) 모델 정의입니다."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from app.database import Base
from app.utils.helpers import utcnow

SETTINGS_ROW_ID = 1
DEFAULT_SITE_NAME = "Our NGO"
DEFAULT_PRIMARY_HEX = "#0038B8"


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    site_name = Column(String(100), nullable=False, default=DEFAULT_SITE_NAME)
    primary_hex = Column(String(7), nullable=False, default=DEFAULT_PRIMARY_HEX)
    logo_url = Column(String(500))
    vision = Column(Text)
    mission = Column(Text)
    founder_story = Column(Text)
    who_we_are = Column(Text)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
