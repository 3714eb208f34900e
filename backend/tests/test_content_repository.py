"""공통 콘텐츠 저장소의 slug 경쟁 처리, 재정렬 규칙, 페이지 계산을 검증하는 테스트입니다."""

import pytest

from app.models.blog import BlogPost
from app.schemas.common import ReorderItem
from app.services.blog_service import blogs, create_blog
from app.services.impact_service import testimonials
from app.utils.errors import ConflictError, NotFoundError, ValidationError
from app.utils.pagination import PageRequest


def _blog(slug: str, **overrides) -> dict:
    data = {
        "title": slug.title(),
        "slug": slug,
        "author": "Asha",
        "excerpt": "Short",
        "content": "<p>Body</p>",
    }
    data.update(overrides)
    return data


def test_unique_constraint_backs_up_slug_precheck(db, monkeypatch):
    create_blog(db, _blog("race"))
    # 다른 요청이 사전 검사 직후 같은 slug를 먼저 저장한 상황
    monkeypatch.setattr(blogs, "_slug_taken", lambda *args, **kwargs: False)

    with pytest.raises(ConflictError):
        create_blog(db, _blog("race", title="Second"))
    assert db.query(BlogPost).count() == 1


def test_create_blog_defaults_published_at(db):
    post = create_blog(db, _blog("dated", published_at=None))
    assert post.published_at is not None
    assert post.order == 0


def test_update_only_touches_given_fields(db):
    post = create_blog(db, _blog("partial", author="Original"))
    blogs.update(db, post.id, {"title": "New title"})
    db.refresh(post)
    assert post.title == "New title"
    assert post.author == "Original"


def test_reorder_rejects_duplicates_and_empty_batches(db):
    post = create_blog(db, _blog("only", order=2))

    with pytest.raises(ValidationError):
        blogs.reorder(db, [ReorderItem(id=post.id, order=1), ReorderItem(id=post.id, order=3)])
    with pytest.raises(ValidationError):
        blogs.reorder(db, [])

    db.refresh(post)
    assert post.order == 2


def test_reorder_reports_missing_ids(db):
    post = create_blog(db, _blog("known", order=2))

    with pytest.raises(NotFoundError) as exc_info:
        blogs.reorder(db, [ReorderItem(id=post.id, order=7), ReorderItem(id="ghost", order=1)])
    assert exc_info.value.details == [{"field": "id", "message": "ghost"}]

    db.refresh(post)
    assert post.order == 2


def test_reorder_updates_every_row(db):
    a = create_blog(db, _blog("a-one", order=0))
    b = create_blog(db, _blog("b-two", order=0))
    c = create_blog(db, _blog("c-three", order=0))

    updated = blogs.reorder(
        db,
        [ReorderItem(id=a.id, order=3), ReorderItem(id=b.id, order=1), ReorderItem(id=c.id, order=2)],
    )
    assert updated == 3

    db.expire_all()
    orders = {row.slug: row.order for row in db.query(BlogPost).all()}
    assert orders == {"a-one": 3, "b-two": 1, "c-three": 2}


def test_reorder_not_supported_for_unordered_entities(db):
    with pytest.raises(ValidationError):
        testimonials.reorder(db, [ReorderItem(id="x", order=1)])


def test_delete_missing_raises_not_found(db):
    with pytest.raises(NotFoundError):
        blogs.delete(db, "missing")


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 10)),
        ("3", "20", (3, 20)),
        ("0", "0", (1, 10)),
        ("-2", "-1", (1, 10)),
        ("abc", "1.5", (1, 10)),
        ("2", "999", (2, 50)),
        (" 4 ", " 5 ", (4, 5)),
    ],
)
def test_page_request_from_query(page, limit, expected):
    req = PageRequest.from_query(page, limit)
    assert (req.page, req.limit) == expected


def test_page_request_offset_and_page_count():
    req = PageRequest.from_query("3", "10")
    assert req.offset == 20
    assert req.pages_for(0) == 0
    assert req.pages_for(1) == 1
    assert req.pages_for(30) == 3
    assert req.pages_for(31) == 4
