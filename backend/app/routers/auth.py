"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.common import MessageOut
from app.schemas.user import AdminOut, ChangePasswordRequest, LoginRequest, TokenResponse
from app.services import auth_service
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    admin = auth_service.authenticate(db, request.email, request.password)
    token = auth_service.create_access_token(admin.id)
    return TokenResponse(token=token, user=AdminOut.model_validate(admin))


@router.post("/change-password", response_model=MessageOut)
def change_password(
    request: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    auth_service.change_password(db, current_admin, request.old_password, request.new_password)
    return {"message": "Password updated successfully"}


@router.get("/me", response_model=AdminOut)
def me(current_admin: AdminUser = Depends(get_current_admin)):
    return current_admin
