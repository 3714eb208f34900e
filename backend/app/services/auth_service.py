"""Auth Service 도메인 서비스 레이어입니다. 토큰 발급/검증과 관리자 자격 증명 흐름을 캡슐화합니다."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.config import settings
from app.models.user import AdminUser
from app.utils.errors import AppError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class InvalidCredentialsError(AppError):
    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "Invalid credentials"


class InvalidPasswordError(AppError):
    status_code = 400
    code = "INVALID_PASSWORD"
    message = "Current password is incorrect"


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def create_access_token(subject_id: str, issued_at: datetime | None = None) -> str:
    now = issued_at or datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(subject_id),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def verify_access_token(token: str | None) -> str | None:
    """Return the subject id of a valid token, or None for anything else."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        return None
    return subject


def get_admin(db: Session, admin_id: str) -> AdminUser | None:
    return db.query(AdminUser).filter(AdminUser.id == admin_id).first()


def authenticate(db: Session, email: str, password: str) -> AdminUser:
    admin = db.query(AdminUser).filter(AdminUser.email == email.strip().lower()).first()
    if not admin or not verify_password(password, admin.password_hash):
        logger.info("failed login attempt for %s", email)
        raise InvalidCredentialsError()
    return admin


def change_password(db: Session, admin: AdminUser, old_password: str, new_password: str) -> None:
    if not verify_password(old_password, admin.password_hash):
        raise InvalidPasswordError()
    admin.password_hash = hash_password(new_password)
    db.commit()


def create_admin(db: Session, email: str, password: str) -> AdminUser:
    """Create an admin, or reset the password of an existing one with the same email."""
    normalized = email.strip().lower()
    admin = db.query(AdminUser).filter(AdminUser.email == normalized).first()
    if admin:
        admin.password_hash = hash_password(password)
    else:
        admin = AdminUser(email=normalized, password_hash=hash_password(password))
        db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def ensure_bootstrap_admin(db: Session) -> AdminUser | None:
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return None
    if db.query(AdminUser.id).first():
        return None
    admin = create_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    logger.info("bootstrapped admin account %s", admin.email)
    return admin
