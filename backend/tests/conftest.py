import os
import tempfile
from pathlib import Path

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_ngo_cms.db")
os.environ.setdefault("UPLOAD_DIR", str(Path(tempfile.gettempdir()) / "ngo_cms_test_uploads"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.user import AdminUser
from app.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_ngo_cms.db"
ADMIN_EMAIL = "admin@ngo.org"
ADMIN_PASSWORD = "ChangeMe123!"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_admin(db):
    admin = AdminUser(email=ADMIN_EMAIL, password_hash=hash_password(ADMIN_PASSWORD))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    folder = tmp_path / "uploads"
    folder.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(folder))
    return folder


def get_token(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_headers(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}


def error_code(resp) -> str:
    return resp.json()["error"]["code"]
