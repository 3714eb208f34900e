"""후기/성공 사례/마일스톤 API 동작을 검증하는 테스트입니다."""

import pytest

from tests.conftest import auth_headers, error_code


@pytest.fixture
def headers(client, seed_admin):
    return auth_headers(client)


def _story(slug: str, **overrides) -> dict:
    payload = {
        "title": f"Story {slug}",
        "slug": slug,
        "excerpt": "A family found clean water",
        "content": "<p>Full story</p>",
    }
    payload.update(overrides)
    return payload


# Testimonials

def test_testimonial_crud(client, headers):
    created = client.post(
        "/api/impact/testimonials",
        json={"name": "Maria", "role": "Volunteer", "quote": "Life changing", "rating": 5},
        headers=headers,
    )
    assert created.status_code == 201, created.text
    testimonial = created.json()
    assert testimonial["rating"] == 5
    assert testimonial["avatarUrl"] is None

    listed = client.get("/api/impact/testimonials").json()
    assert listed["pagination"]["total"] == 1
    assert listed["items"][0]["name"] == "Maria"

    updated = client.put(
        f"/api/impact/testimonials/{testimonial['id']}",
        json={"rating": 4},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["rating"] == 4
    assert updated.json()["quote"] == "Life changing"

    deleted = client.delete(f"/api/impact/testimonials/{testimonial['id']}", headers=headers)
    assert deleted.status_code == 200
    assert client.get("/api/impact/testimonials").json()["items"] == []


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Maria", "quote": "Great", "rating": 6},
        {"name": "Maria", "quote": "Great", "rating": 0},
        {"name": "Maria", "quote": "q" * 281, "rating": 3},
        {"name": "", "quote": "Great", "rating": 3},
        {"name": "Maria", "quote": "Great", "rating": 3, "avatarUrl": "ftp://host/a.png"},
    ],
)
def test_testimonial_validation(client, headers, payload):
    resp = client.post("/api/impact/testimonials", json=payload, headers=headers)
    assert resp.status_code == 400
    assert error_code(resp) == "VALIDATION_ERROR"


def test_testimonial_empty_avatar_is_cleared(client, headers):
    resp = client.post(
        "/api/impact/testimonials",
        json={"name": "Maria", "quote": "Great", "rating": 3, "avatarUrl": ""},
        headers=headers,
    )
    assert resp.status_code == 201
    assert resp.json()["avatarUrl"] is None


def test_testimonial_search(client, headers):
    for name, quote in [("Maria", "The school changed my life"), ("John", "Clean water at last")]:
        client.post(
            "/api/impact/testimonials",
            json={"name": name, "quote": quote, "rating": 5},
            headers=headers,
        )
    data = client.get("/api/impact/testimonials", params={"q": "WATER"}).json()
    assert [item["name"] for item in data["items"]] == ["John"]


def test_testimonial_writes_require_auth(client):
    resp = client.post("/api/impact/testimonials", json={"name": "M", "quote": "Q", "rating": 5})
    assert resp.status_code == 401
    assert error_code(resp) == "UNAUTHORIZED"


# Success stories

def test_story_slug_lookup_and_conflict(client, headers):
    created = client.post("/api/impact/stories", json=_story("clean-water"), headers=headers)
    assert created.status_code == 201

    duplicate = client.post("/api/impact/stories", json=_story("clean-water"), headers=headers)
    assert duplicate.status_code == 400
    assert error_code(duplicate) == "SLUG_EXISTS"

    fetched = client.get("/api/impact/stories/clean-water")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == created.json()["id"]

    missing = client.get("/api/impact/stories/unknown-story")
    assert missing.status_code == 404
    assert error_code(missing) == "NOT_FOUND"


def test_story_content_is_sanitized(client, headers):
    resp = client.post(
        "/api/impact/stories",
        json=_story("safe", content='<h2>Title</h2><iframe src="https://evil.example"></iframe><p>ok</p>'),
        headers=headers,
    )
    assert resp.status_code == 201
    content = resp.json()["content"]
    assert "<iframe" not in content
    assert "<h2>Title</h2>" in content


def test_story_update_and_delete(client, headers):
    story = client.post("/api/impact/stories", json=_story("first"), headers=headers).json()
    client.post("/api/impact/stories", json=_story("second"), headers=headers)

    conflict = client.put(f"/api/impact/stories/{story['id']}", json={"slug": "second"}, headers=headers)
    assert conflict.status_code == 400
    assert error_code(conflict) == "SLUG_EXISTS"

    renamed = client.put(f"/api/impact/stories/{story['id']}", json={"slug": "first-renamed"}, headers=headers)
    assert renamed.status_code == 200
    assert client.get("/api/impact/stories/first-renamed").status_code == 200
    assert client.get("/api/impact/stories/first").status_code == 404

    assert client.delete(f"/api/impact/stories/{story['id']}", headers=headers).status_code == 200
    again = client.delete(f"/api/impact/stories/{story['id']}", headers=headers)
    assert again.status_code == 404


def test_story_list_newest_first(client, headers):
    for slug in ("one", "two", "three"):
        client.post("/api/impact/stories", json=_story(slug), headers=headers)
    data = client.get("/api/impact/stories", params={"limit": 2}).json()
    assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}
    assert len(data["items"]) == 2


# Milestones

def test_milestones_ordered_by_achieved_date(client, headers):
    for title, achieved in [
        ("First well", "2019-03-01T00:00:00Z"),
        ("100 students", "2023-09-01T00:00:00Z"),
        ("New clinic", "2021-06-15T00:00:00Z"),
    ]:
        resp = client.post(
            "/api/impact/milestones",
            json={"title": title, "achievedOn": achieved},
            headers=headers,
        )
        assert resp.status_code == 201, resp.text

    titles = [item["title"] for item in client.get("/api/impact/milestones").json()["items"]]
    assert titles == ["100 students", "New clinic", "First well"]


def test_milestone_requires_date(client, headers):
    resp = client.post("/api/impact/milestones", json={"title": "Undated"}, headers=headers)
    assert resp.status_code == 400
    assert "achievedOn" in {item["field"] for item in resp.json()["error"]["details"]}


def test_milestone_update_rejects_null_date(client, headers):
    milestone = client.post(
        "/api/impact/milestones",
        json={"title": "First well", "achievedOn": "2019-03-01T00:00:00Z"},
        headers=headers,
    ).json()
    resp = client.put(
        f"/api/impact/milestones/{milestone['id']}",
        json={"achievedOn": None},
        headers=headers,
    )
    assert resp.status_code == 400

    ok = client.put(
        f"/api/impact/milestones/{milestone['id']}",
        json={"description": "Drilled in the north village"},
        headers=headers,
    )
    assert ok.status_code == 200
    assert ok.json()["description"] == "Drilled in the north village"
    assert ok.json()["achievedOn"].startswith("2019-03-01")
