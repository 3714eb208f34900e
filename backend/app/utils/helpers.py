import mimetypes
import secrets
import time
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    # DB 컬럼은 timezone 없는 UTC 기준으로 저장한다.
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


IMAGE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


def file_extension(content_type: str | None) -> str:
    # 저장 확장자는 검증된 MIME 타입에서만 정한다. 클라이언트 파일명은 신뢰하지 않는다.
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in IMAGE_EXTENSIONS:
        return IMAGE_EXTENSIONS[mime]
    guessed = mimetypes.guess_extension(mime) or ""
    return guessed.lstrip(".").lower() or "bin"


def generate_unique_filename(content_type: str | None) -> str:
    timestamp = int(time.time() * 1000)
    token = secrets.token_hex(8)
    return f"{timestamp}_{token}.{file_extension(content_type)}"
