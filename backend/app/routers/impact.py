"""Impact(후기/성공 사례/마일스톤) API 라우터입니다. 조회는 공개, 변경은 관리자 토큰이 필요합니다."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.user import AdminUser
from app.schemas.common import MessageOut, Page
from app.schemas.impact import (
    MilestoneCreate,
    MilestoneOut,
    MilestoneUpdate,
    SuccessStoryCreate,
    SuccessStoryOut,
    SuccessStoryUpdate,
    TestimonialCreate,
    TestimonialOut,
    TestimonialUpdate,
)
from app.services.impact_service import milestones, stories, testimonials
from app.utils.errors import NotFoundError
from app.utils.pagination import PageRequest

router = APIRouter(prefix="/api/impact", tags=["impact"])


# Testimonials

@router.get("/testimonials", response_model=Page[TestimonialOut])
def list_testimonials(
    page: str | None = None,
    limit: str | None = None,
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return testimonials.list(db, PageRequest.from_query(page, limit), q=q)


@router.post("/testimonials", response_model=TestimonialOut, status_code=201)
def create_testimonial(
    data: TestimonialCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return testimonials.create(db, data.model_dump())


@router.put("/testimonials/{testimonial_id}", response_model=TestimonialOut)
def update_testimonial(
    testimonial_id: str,
    data: TestimonialUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return testimonials.update(db, testimonial_id, data.changes())


@router.delete("/testimonials/{testimonial_id}", response_model=MessageOut)
def delete_testimonial(
    testimonial_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    testimonials.delete(db, testimonial_id)
    return {"message": "Testimonial deleted successfully"}


# Success stories

@router.get("/stories", response_model=Page[SuccessStoryOut])
def list_stories(
    page: str | None = None,
    limit: str | None = None,
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return stories.list(db, PageRequest.from_query(page, limit), q=q)


@router.get("/stories/{slug}", response_model=SuccessStoryOut)
def get_story(slug: str, db: Session = Depends(get_db)):
    story = stories.get_by_slug(db, slug)
    if not story:
        raise NotFoundError("Story not found")
    return story


@router.post("/stories", response_model=SuccessStoryOut, status_code=201)
def create_story(
    data: SuccessStoryCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return stories.create(db, data.model_dump())


@router.put("/stories/{story_id}", response_model=SuccessStoryOut)
def update_story(
    story_id: str,
    data: SuccessStoryUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return stories.update(db, story_id, data.changes())


@router.delete("/stories/{story_id}", response_model=MessageOut)
def delete_story(
    story_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    stories.delete(db, story_id)
    return {"message": "Story deleted successfully"}


# Milestones

@router.get("/milestones", response_model=Page[MilestoneOut])
def list_milestones(
    page: str | None = None,
    limit: str | None = None,
    q: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return milestones.list(db, PageRequest.from_query(page, limit), q=q)


@router.post("/milestones", response_model=MilestoneOut, status_code=201)
def create_milestone(
    data: MilestoneCreate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return milestones.create(db, data.model_dump())


@router.put("/milestones/{milestone_id}", response_model=MilestoneOut)
def update_milestone(
    milestone_id: str,
    data: MilestoneUpdate,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    return milestones.update(db, milestone_id, data.changes())


@router.delete("/milestones/{milestone_id}", response_model=MessageOut)
def delete_milestone(
    milestone_id: str,
    db: Session = Depends(get_db),
    _current_admin: AdminUser = Depends(get_current_admin),
):
    milestones.delete(db, milestone_id)
    return {"message": "Milestone deleted successfully"}
