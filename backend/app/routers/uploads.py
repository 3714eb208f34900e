"""Uploads 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, File, Request, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.common import MessageOut
from app.schemas.upload import MediaAssetOut, UploadedFileOut
from app.services import upload_service

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_model=UploadedFileOut)
async def upload_image(
    request: Request,
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return await upload_service.save_image(db, file, str(request.base_url))


@router.get("", response_model=List[MediaAssetOut])
def list_media(
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return upload_service.list_media(db)


@router.delete("/{media_id}", response_model=MessageOut)
def delete_media(
    media_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    upload_service.delete_media(db, media_id)
    return {"message": "Media deleted successfully"}
