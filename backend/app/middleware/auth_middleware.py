from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import AdminUser
from app.services.auth_service import get_admin, verify_access_token
from app.utils.errors import AuthError

security = HTTPBearer(auto_error=False)


def get_current_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> AdminUser:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthError("Authorization token required")

    admin_id = verify_access_token(credentials.credentials)
    if admin_id is None:
        raise AuthError("Invalid or expired token")

    admin = get_admin(db, admin_id)
    if not admin:
        raise AuthError("Invalid or expired token")
    request.state.admin_id = admin.id
    return admin
