"""관리자 인증 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import EmailStr, Field

from app.schemas.common import ApiModel


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=6)


class ChangePasswordRequest(ApiModel):
    old_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)


class AdminOut(ApiModel):
    id: str
    email: str


class TokenResponse(ApiModel):
    token: str
    user: AdminOut