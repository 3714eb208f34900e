"""Upload Service 도메인 서비스 레이어입니다. 이미지 파일 검증/저장과 미디어 레코드 생성, 실패 시 보상 삭제를 담당합니다."""

import logging
import os

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.media import MediaAsset
from app.utils.errors import InternalError, NotFoundError, UploadError
from app.utils.helpers import generate_unique_filename

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def _upload_dir() -> str:
    folder = os.path.abspath(settings.UPLOAD_DIR)
    os.makedirs(folder, exist_ok=True)
    return folder


def _public_url(filename: str, base_url: str) -> str:
    base = (settings.PUBLIC_BASE_URL or base_url).rstrip("/")
    return f"{base}/uploads/{filename}"


def _remove_file(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("could not remove upload file %s: %s", path, exc)


def validate_image(file: UploadFile | None) -> UploadFile:
    if file is None or not file.filename:
        raise UploadError("No file provided", code="NO_FILE")
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type not in {t.lower() for t in settings.ALLOWED_IMAGE_TYPES}:
        raise UploadError("Invalid file type. Only images are allowed.", code="INVALID_FILE_TYPE")
    return file


async def _read_within_limit(file: UploadFile) -> bytes:
    chunks = []
    size = 0
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > settings.MAX_UPLOAD_SIZE:
            raise UploadError("File size too large", code="FILE_TOO_LARGE")
        chunks.append(chunk)
    return b"".join(chunks)


def _create_media_record(db: Session, filename: str, url: str) -> MediaAsset:
    media = MediaAsset(url=url, filename=filename)
    db.add(media)
    db.commit()
    db.refresh(media)
    return media


async def save_image(db: Session, file: UploadFile | None, base_url: str) -> MediaAsset:
    file = validate_image(file)
    content = await _read_within_limit(file)

    filename = generate_unique_filename(file.content_type)
    path = os.path.join(_upload_dir(), filename)
    try:
        with open(path, "wb") as f:
            f.write(content)
    except OSError as exc:
        logger.error("failed to write upload %s: %s", path, exc)
        _remove_file(path)
        raise InternalError("Upload failed", code="UPLOAD_ERROR") from exc

    try:
        media = _create_media_record(db, filename, _public_url(filename, base_url))
    except SQLAlchemyError as exc:
        db.rollback()
        _remove_file(path)
        logger.error("media record write failed, removed orphan file %s: %s", filename, exc)
        raise InternalError("Upload failed", code="UPLOAD_ERROR") from exc

    logger.info("stored upload %s (%d bytes)", filename, len(content))
    return media


def list_media(db: Session) -> list[MediaAsset]:
    return db.query(MediaAsset).order_by(MediaAsset.created_at.desc()).all()


def delete_media(db: Session, media_id: str) -> None:
    media = db.query(MediaAsset).filter(MediaAsset.id == media_id).first()
    if not media:
        raise NotFoundError("Media not found")

    path = os.path.join(os.path.abspath(settings.UPLOAD_DIR), os.path.basename(media.filename))
    if os.path.exists(path):
        try:
            os.remove(path)
        except OSError as exc:
            # 레코드가 목록의 기준이므로 파일 삭제 실패는 레코드 삭제를 막지 않는다.
            logger.warning("could not delete media file %s: %s", path, exc)
    else:
        logger.warning("media file missing on delete: %s", path)

    db.delete(media)
    db.commit()


def cleanup_orphan_files(db: Session, dry_run: bool = True) -> dict:
    """Find (and optionally delete) files in the upload root that no media record points at."""
    root = os.path.abspath(settings.UPLOAD_DIR)
    existing = set()
    if os.path.isdir(root):
        existing = {name for name in os.listdir(root) if os.path.isfile(os.path.join(root, name))}
    referenced = {row[0] for row in db.query(MediaAsset.filename).all()}
    orphans = sorted(existing - referenced)

    deleted_count = 0
    if not dry_run:
        for name in orphans:
            path = os.path.join(root, name)
            try:
                os.remove(path)
                deleted_count += 1
            except OSError as exc:
                logger.warning("could not remove orphan upload %s: %s", path, exc)
        logger.info("orphan upload cleanup removed %d of %d files", deleted_count, len(orphans))

    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "existing_count": len(existing),
        "orphan_count": len(orphans),
        "deleted_count": deleted_count,
        "orphan_files": orphans,
    }
