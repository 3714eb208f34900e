"""콘텐츠 엔티티 공통 저장소입니다. 목록/검색/페이지네이션, slug 고유성, 부분 수정, 일괄 재정렬 규칙을 캡슐화합니다."""

import logging
from typing import Any, Iterable, Sequence

from sqlalchemy import case, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.utils.errors import ConflictError, NotFoundError, ValidationError
from app.utils.html_sanitizer import sanitize_html
from app.utils.pagination import PageRequest

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ContentRepository:
    """CRUD + list/search/reorder for one content table.

    ``ordering`` is a sequence of column names; each is sorted descending,
    earlier names take precedence. ``rich_text_fields`` are passed through the
    HTML sanitizer on every write that touches them.
    """

    def __init__(
        self,
        model,
        *,
        label: str,
        ordering: Sequence[str] = ("created_at",),
        search_fields: Sequence[str] = (),
        slug_field: str | None = None,
        rich_text_fields: Sequence[str] = (),
        reorderable: bool = False,
    ):
        self.model = model
        self.label = label
        self.ordering = tuple(ordering)
        self.search_fields = tuple(search_fields)
        self.slug_field = slug_field
        self.rich_text_fields = tuple(rich_text_fields)
        self.reorderable = reorderable

    # ----- reads -----

    def _order_by(self):
        return [getattr(self.model, name).desc() for name in self.ordering]

    def _filtered_query(self, db: Session, q: str | None, filters: dict[str, Any] | None):
        query = db.query(self.model)
        for name, value in (filters or {}).items():
            if value is None:
                continue
            query = query.filter(getattr(self.model, name) == value)
        if q and q.strip() and self.search_fields:
            keyword = f"%{_escape_like(q.strip())}%"
            query = query.filter(
                or_(*(getattr(self.model, name).ilike(keyword, escape="\\") for name in self.search_fields))
            )
        return query

    def list(
        self,
        db: Session,
        page: PageRequest,
        q: str | None = None,
        filters: dict[str, Any] | None = None,
    ) -> dict:
        query = self._filtered_query(db, q, filters)
        total = query.count()
        # 마지막 페이지 이후는 조회 없이 빈 목록 (offset이 DB 정수 범위를 넘을 수 있음)
        if page.offset >= total:
            items = []
        else:
            items = query.order_by(*self._order_by()).offset(page.offset).limit(page.limit).all()
        return {
            "items": items,
            "pagination": {
                "page": page.page,
                "limit": page.limit,
                "total": total,
                "pages": page.pages_for(total),
            },
        }

    def get_by_id(self, db: Session, item_id: str):
        return db.query(self.model).filter(self.model.id == item_id).first()

    def get_by_slug(self, db: Session, slug: str):
        if not self.slug_field:
            return None
        return db.query(self.model).filter(getattr(self.model, self.slug_field) == slug).first()

    def get_or_404(self, db: Session, item_id: str):
        row = self.get_by_id(db, item_id)
        if not row:
            raise NotFoundError(f"{self.label} not found")
        return row

    # ----- writes -----

    def _sanitize(self, payload: dict) -> dict:
        for name in self.rich_text_fields:
            if payload.get(name) is not None:
                payload[name] = sanitize_html(payload[name])
        return payload

    def _slug_taken(self, db: Session, slug: str, exclude_id: str | None = None) -> bool:
        column = getattr(self.model, self.slug_field)
        query = db.query(self.model.id).filter(column == slug)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None

    def _ensure_slug_available(self, db: Session, payload: dict, exclude_id: str | None = None):
        if not self.slug_field:
            return
        slug = payload.get(self.slug_field)
        if slug is not None and self._slug_taken(db, slug, exclude_id=exclude_id):
            raise ConflictError()

    def _commit(self, db: Session, row):
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            # check-then-insert 경쟁 상태에서는 DB unique 제약이 최종 판정한다.
            if self.slug_field and self.slug_field in str(exc.orig):
                logger.info("%s slug constraint hit: %s", self.label, exc.orig)
                raise ConflictError() from exc
            raise
        db.refresh(row)
        return row

    def create(self, db: Session, data: dict):
        payload = self._sanitize(dict(data))
        self._ensure_slug_available(db, payload)
        row = self.model(**payload)
        db.add(row)
        return self._commit(db, row)

    def update(self, db: Session, item_id: str, changes: dict):
        row = self.get_or_404(db, item_id)
        payload = self._sanitize(dict(changes))
        self._ensure_slug_available(db, payload, exclude_id=row.id)
        for key, value in payload.items():
            setattr(row, key, value)
        return self._commit(db, row)

    def delete(self, db: Session, item_id: str) -> None:
        row = self.get_or_404(db, item_id)
        db.delete(row)
        db.commit()

    def reorder(self, db: Session, items: Iterable) -> int:
        """Apply every ``{id, order}`` pair in one statement, or none of them."""
        if not self.reorderable:
            raise ValidationError(f"{self.label} does not support reordering")
        order_map: dict[str, int] = {}
        for item in items:
            if item.id in order_map:
                raise ValidationError("Duplicate id in reorder batch", details=[{"field": "id", "message": item.id}])
            order_map[item.id] = item.order
        if not order_map:
            raise ValidationError("Reorder batch is empty")

        found = {row[0] for row in db.query(self.model.id).filter(self.model.id.in_(list(order_map))).all()}
        missing = sorted(set(order_map) - found)
        if missing:
            raise NotFoundError(
                f"{self.label} not found",
                details=[{"field": "id", "message": item_id} for item_id in missing],
            )

        try:
            updated = (
                db.query(self.model)
                .filter(self.model.id.in_(list(order_map)))
                .update(
                    {self.model.order: case(order_map, value=self.model.id)},
                    synchronize_session=False,
                )
            )
            if updated != len(order_map):
                raise NotFoundError(f"{self.label} not found")
            db.commit()
        except Exception:
            db.rollback()
            raise
        return updated
