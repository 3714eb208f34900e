"""Blogs 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate
from app.schemas.common import MessageOut, Page, ReorderItem
from app.services import blog_service
from app.services.blog_service import blogs
from app.utils.errors import NotFoundError
from app.utils.pagination import PageRequest

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=Page[BlogPostOut])
def list_blogs(
    page: str | None = None,
    limit: str | None = None,
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return blogs.list(db, PageRequest.from_query(page, limit), q=q)


@router.post("/reorder", response_model=MessageOut)
def reorder_blogs(
    data: List[ReorderItem],
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    blogs.reorder(db, data)
    return {"message": "Blog order updated successfully"}


@router.get("/{slug}", response_model=BlogPostOut)
def get_blog(slug: str, db: Session = Depends(get_db)):
    blog = blogs.get_by_slug(db, slug)
    if not blog:
        raise NotFoundError("Blog post not found")
    return blog


@router.post("", response_model=BlogPostOut, status_code=201)
def create_blog(
    data: BlogPostCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return blog_service.create_blog(db, data.model_dump())


@router.put("/{blog_id}", response_model=BlogPostOut)
def update_blog(
    blog_id: str,
    data: BlogPostUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return blogs.update(db, blog_id, data.changes())


@router.delete("/{blog_id}", response_model=MessageOut)
def delete_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    blogs.delete(db, blog_id)
    return {"message": "Blog post deleted successfully"}
