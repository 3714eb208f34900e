"""사이트 설정 API 라우터입니다. 조회는 공개, 수정은 관리자 토큰이 필요합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.site_settings import SiteSettingsOut, SiteSettingsUpdate
from app.services import settings_service

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SiteSettingsOut)
def get_site_settings(db: Session = Depends(get_db)):
    return settings_service.get_settings(db)


@router.put("", response_model=SiteSettingsOut)
def update_site_settings(
    data: SiteSettingsUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return settings_service.update_settings(db, data.changes())
