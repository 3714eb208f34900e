"""Site Settings 도메인 서비스 레이어입니다. 단일 행 설정의 조회/자동 생성/부분 수정을 담당합니다."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.site_settings import (
    DEFAULT_PRIMARY_HEX,
    DEFAULT_SITE_NAME,
    SETTINGS_ROW_ID,
    SiteSettings,
)
from app.utils.html_sanitizer import sanitize_html

RICH_TEXT_FIELDS = ("founder_story", "who_we_are")


def get_settings(db: Session) -> SiteSettings:
    row = db.query(SiteSettings).filter(SiteSettings.id == SETTINGS_ROW_ID).first()
    if row:
        return row
    row = SiteSettings(id=SETTINGS_ROW_ID, site_name=DEFAULT_SITE_NAME, primary_hex=DEFAULT_PRIMARY_HEX)
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        # 동시 최초 조회로 다른 요청이 먼저 생성한 경우
        db.rollback()
        return db.query(SiteSettings).filter(SiteSettings.id == SETTINGS_ROW_ID).one()
    db.refresh(row)
    return row


def update_settings(db: Session, changes: dict) -> SiteSettings:
    row = get_settings(db)
    for key, value in changes.items():
        if key in RICH_TEXT_FIELDS and value is not None:
            value = sanitize_html(value)
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row
