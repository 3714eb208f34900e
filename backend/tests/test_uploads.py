"""Test Uploads 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

from sqlalchemy.exc import OperationalError

from app.config import settings
from app.main import app
from app.models.media import MediaAsset
from app.services import upload_service
from tests.conftest import auth_headers, error_code

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _png(name: str = "photo.png", content: bytes = PNG_BYTES, content_type: str = "image/png"):
    return {"file": (name, content, content_type)}


def test_upload_requires_auth(client, seed_admin, upload_dir):
    resp = client.post("/api/upload", files=_png())
    assert resp.status_code == 401
    assert error_code(resp) == "UNAUTHORIZED"
    assert list(upload_dir.iterdir()) == []


def test_upload_image_success(client, db, seed_admin, upload_dir):
    headers = auth_headers(client)
    resp = client.post("/api/upload", files=_png(), headers=headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()

    assert data["filename"].endswith(".png")
    assert data["url"] == f"http://testserver/uploads/{data['filename']}"
    assert (upload_dir / data["filename"]).read_bytes() == PNG_BYTES

    media = db.query(MediaAsset).filter(MediaAsset.id == data["id"]).one()
    assert media.filename == data["filename"]


def test_upload_uses_public_base_url(client, seed_admin, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "PUBLIC_BASE_URL", "https://cdn.ngo.org/")
    resp = client.post("/api/upload", files=_png(), headers=auth_headers(client))
    assert resp.status_code == 200
    assert resp.json()["url"].startswith("https://cdn.ngo.org/uploads/")


def test_stored_extension_follows_mime_type(client, seed_admin, upload_dir):
    resp = client.post("/api/upload", files=_png("x.html"), headers=auth_headers(client))
    assert resp.status_code == 200, resp.text
    filename = resp.json()["filename"]
    assert filename.endswith(".png")
    assert [path.name for path in upload_dir.iterdir()] == [filename]


def test_upload_filenames_are_unique(client, seed_admin, upload_dir):
    headers = auth_headers(client)
    first = client.post("/api/upload", files=_png("same.png"), headers=headers).json()
    second = client.post("/api/upload", files=_png("same.png"), headers=headers).json()
    assert first["filename"] != second["filename"]
    assert len(list(upload_dir.iterdir())) == 2


def test_upload_rejects_non_image(client, db, seed_admin, upload_dir):
    resp = client.post(
        "/api/upload",
        files=_png("doc.pdf", b"%PDF-1.4", "application/pdf"),
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert error_code(resp) == "INVALID_FILE_TYPE"
    assert list(upload_dir.iterdir()) == []
    assert db.query(MediaAsset).count() == 0


def test_upload_rejects_too_large_file(client, db, seed_admin, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)
    resp = client.post("/api/upload", files=_png(), headers=auth_headers(client))
    assert resp.status_code == 400
    assert error_code(resp) == "FILE_TOO_LARGE"
    assert list(upload_dir.iterdir()) == []
    assert db.query(MediaAsset).count() == 0


def test_upload_without_file(client, seed_admin, upload_dir):
    resp = client.post("/api/upload", headers=auth_headers(client))
    assert resp.status_code == 400
    assert error_code(resp) == "NO_FILE"


def test_record_failure_removes_written_file(client, db, seed_admin, upload_dir, monkeypatch):
    def _fail(*args, **kwargs):
        raise OperationalError("INSERT INTO media", {}, Exception("database is locked"))

    monkeypatch.setattr(upload_service, "_create_media_record", _fail)
    resp = client.post("/api/upload", files=_png(), headers=auth_headers(client))

    assert resp.status_code == 500
    assert resp.json() == {"error": {"message": "Upload failed", "code": "UPLOAD_ERROR"}}
    assert list(upload_dir.iterdir()) == []
    assert db.query(MediaAsset).count() == 0


def test_list_media(client, seed_admin, upload_dir):
    headers = auth_headers(client)
    client.post("/api/upload", files=_png("a.png"), headers=headers)
    client.post("/api/upload", files=_png("b.jpg", content_type="image/jpeg"), headers=headers)

    resp = client.get("/api/upload", headers=headers)
    assert resp.status_code == 200
    items = resp.json()
    assert len(items) == 2
    assert {item["filename"].rsplit(".", 1)[-1] for item in items} == {"png", "jpg"}

    assert client.get("/api/upload").status_code == 401


def test_delete_media_removes_file_and_record(client, db, seed_admin, upload_dir):
    headers = auth_headers(client)
    uploaded = client.post("/api/upload", files=_png(), headers=headers).json()

    resp = client.delete(f"/api/upload/{uploaded['id']}", headers=headers)
    assert resp.status_code == 200
    assert not (upload_dir / uploaded["filename"]).exists()
    assert db.query(MediaAsset).count() == 0


def test_delete_media_with_missing_file_still_succeeds(client, db, seed_admin, upload_dir):
    headers = auth_headers(client)
    uploaded = client.post("/api/upload", files=_png(), headers=headers).json()
    (upload_dir / uploaded["filename"]).unlink()

    resp = client.delete(f"/api/upload/{uploaded['id']}", headers=headers)
    assert resp.status_code == 200
    assert db.query(MediaAsset).count() == 0


def test_delete_unknown_media(client, seed_admin, upload_dir):
    resp = client.delete("/api/upload/unknown", headers=auth_headers(client))
    assert resp.status_code == 404
    assert error_code(resp) == "NOT_FOUND"


def test_cleanup_orphan_files(client, db, seed_admin, upload_dir):
    headers = auth_headers(client)
    kept = client.post("/api/upload", files=_png(), headers=headers).json()
    (upload_dir / "stray.png").write_bytes(PNG_BYTES)

    preview = upload_service.cleanup_orphan_files(db, dry_run=True)
    assert preview["orphan_files"] == ["stray.png"]
    assert preview["deleted_count"] == 0
    assert (upload_dir / "stray.png").exists()

    result = upload_service.cleanup_orphan_files(db, dry_run=False)
    assert result["deleted_count"] == 1
    assert not (upload_dir / "stray.png").exists()
    assert (upload_dir / kept["filename"]).exists()


def _mounted_upload_dir() -> str:
    for route in app.routes:
        if getattr(route, "name", None) == "uploads":
            return str(route.app.directory)
    raise AssertionError("uploads mount not registered")


def test_uploaded_file_is_served(client, seed_admin, upload_dir, monkeypatch):
    # StaticFiles는 앱 생성 시점의 디렉터리를 서빙하므로 설정된 기본 경로에 저장한다.
    monkeypatch.setattr(settings, "UPLOAD_DIR", _mounted_upload_dir())
    uploaded = client.post("/api/upload", files=_png(), headers=auth_headers(client)).json()
    try:
        resp = client.get(f"/uploads/{uploaded['filename']}")
        assert resp.status_code == 200
        assert resp.content == PNG_BYTES
    finally:
        client.delete(f"/api/upload/{uploaded['id']}", headers=auth_headers(client))
