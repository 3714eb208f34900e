"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import AdminUser
from app.models.impact import Testimonial, SuccessStory, Milestone
from app.models.news import NewsItem
from app.models.blog import BlogPost
from app.models.gallery import GalleryImage
from app.models.media import MediaAsset
from app.models.site_settings import SiteSettings

__all__ = [
    "AdminUser",
    "Testimonial", "SuccessStory", "Milestone",
    "NewsItem",
    "BlogPost",
    "GalleryImage",
    "MediaAsset",
    "SiteSettings",
]
