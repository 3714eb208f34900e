"""News(소식/행사) API 라우터입니다."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.common import MessageOut, Page
from app.schemas.news import NewsItemCreate, NewsItemOut, NewsItemUpdate, NewsType
from app.services.news_service import news
from app.utils.errors import NotFoundError
from app.utils.pagination import PageRequest

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get("", response_model=Page[NewsItemOut])
def list_news(
    page: str | None = None,
    limit: str | None = None,
    type: Optional[NewsType] = Query(None),
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return news.list(db, PageRequest.from_query(page, limit), q=q, filters={"type": type})


@router.get("/{slug}", response_model=NewsItemOut)
def get_news_item(slug: str, db: Session = Depends(get_db)):
    item = news.get_by_slug(db, slug)
    if not item:
        raise NotFoundError("News item not found")
    return item


@router.post("", response_model=NewsItemOut, status_code=201)
def create_news_item(
    data: NewsItemCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return news.create(db, data.model_dump())


@router.put("/{news_id}", response_model=NewsItemOut)
def update_news_item(
    news_id: str,
    data: NewsItemUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return news.update(db, news_id, data.changes())


@router.delete("/{news_id}", response_model=MessageOut)
def delete_news_item(
    news_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    news.delete(db, news_id)
    return {"message": "News item deleted successfully"}
