"""Gallery 기능 API 라우터입니다."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.common import MessageOut, Page, ReorderItem
from app.schemas.gallery import GalleryImageCreate, GalleryImageOut, GalleryImageUpdate
from app.services.gallery_service import gallery
from app.utils.pagination import PageRequest

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=Page[GalleryImageOut])
def list_gallery_images(
    page: str | None = None,
    limit: str | None = None,
    featured: bool | None = None,
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return gallery.list(db, PageRequest.from_query(page, limit), q=q, filters={"featured": featured})


@router.post("/reorder", response_model=MessageOut)
def reorder_gallery(
    data: List[ReorderItem],
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    gallery.reorder(db, data)
    return {"message": "Gallery order updated successfully"}


@router.get("/{image_id}", response_model=GalleryImageOut)
def get_gallery_image(image_id: str, db: Session = Depends(get_db)):
    return gallery.get_or_404(db, image_id)


@router.post("", response_model=GalleryImageOut, status_code=201)
def create_gallery_image(
    data: GalleryImageCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return gallery.create(db, data.model_dump())


@router.put("/{image_id}", response_model=GalleryImageOut)
def update_gallery_image(
    image_id: str,
    data: GalleryImageUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return gallery.update(db, image_id, data.changes())


@router.delete("/{image_id}", response_model=MessageOut)
def delete_gallery_image(
    image_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    gallery.delete(db, image_id)
    return {"message": "Gallery image deleted successfully"}
