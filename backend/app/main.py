"""FastAPI 애플리케이션 진입점. 미들웨어, 오류 핸들러, API 라우터, 업로드 정적 파일 서빙을 등록합니다."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import SessionLocal, init_db
from app.routers import auth, impact, news, blogs, gallery, uploads, settings as site_settings
from app.services import auth_service
from app.utils.errors import register_exception_handlers

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="NGO Content API",
    description="비영리 단체 웹사이트 콘텐츠 관리/공개 조회 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register all routers
app.include_router(auth.router)
app.include_router(impact.router)
app.include_router(news.router)
app.include_router(blogs.router)
app.include_router(gallery.router)
app.include_router(uploads.router)
app.include_router(site_settings.router)


@app.on_event("startup")
def ensure_schema():
    init_db()
    db = SessionLocal()
    try:
        auth_service.ensure_bootstrap_admin(db)
    finally:
        db.close()


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "NGO Content API"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
