# File: tests/test_projects_api.py
from sqlalchemy.exc import SQLAlchemyError

from backend.services import project_service


def test_projects_require_identity(client):
    assert client.get("/projects").status_code == 401
    assert client.post("/projects", json={"template_type": "social"}).status_code == 401


def test_create_banner_project_defaults(client, auth_headers):
    resp = client.post("/projects", json={"template_type": "banner"}, headers=auth_headers)
    assert resp.status_code == 201
    project = resp.json()
    assert project["title"] == "New banner Ad"
    assert project["template_type"] == "banner"
    assert project["content"] == {}
    assert project["thumbnail_url"] is None
    assert project["id"]


def test_create_with_explicit_title(client, auth_headers):
    resp = client.post("/projects", json={"template_type": "story", "title": "Launch"}, headers=auth_headers)
    assert resp.json()["title"] == "Launch"


def test_list_is_owner_scoped_and_ordered_by_update(client, auth_headers, other_headers):
    first = client.post("/projects", json={"template_type": "social"}, headers=auth_headers).json()
    second = client.post("/projects", json={"template_type": "banner"}, headers=auth_headers).json()
    client.post("/projects", json={"template_type": "story"}, headers=other_headers)

    # 첫 번째를 저장하면 목록 맨 앞으로 온다
    client.put(f"/projects/{first['id']}", json={"title": "Edited", "content": {}}, headers=auth_headers)

    projects = client.get("/projects", headers=auth_headers).json()
    assert [p["id"] for p in projects] == [first["id"], second["id"]]


def test_read_own_project(client, auth_headers):
    created = client.post("/projects", json={"template_type": "social"}, headers=auth_headers).json()
    resp = client.get(f"/projects/{created['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]


def test_foreign_project_is_not_found(client, auth_headers, other_headers):
    created = client.post("/projects", json={"template_type": "social"}, headers=auth_headers).json()
    client.put(
        f"/projects/{created['id']}",
        json={"title": "Secret", "content": {"headline": "Private"}},
        headers=auth_headers,
    )

    resp = client.get(f"/projects/{created['id']}", headers=other_headers)
    assert resp.status_code == 404
    assert "Private" not in resp.text

    resp = client.put(
        f"/projects/{created['id']}",
        json={"title": "Hijack", "content": {}},
        headers=other_headers,
    )
    assert resp.status_code == 404


def test_missing_project_is_not_found(client, auth_headers):
    assert client.get("/projects/does-not-exist", headers=auth_headers).status_code == 404


def test_save_replaces_whole_content(client, auth_headers):
    created = client.post("/projects", json={"template_type": "social"}, headers=auth_headers).json()
    pid = created["id"]
    client.put(
        f"/projects/{pid}",
        json={"title": "One", "content": {"headline": "H", "bodyText": "B", "imageUrl": "https://x/y.png"}},
        headers=auth_headers,
    )
    resp = client.put(f"/projects/{pid}", json={"title": "Two", "content": {"cta": "Go"}}, headers=auth_headers)
    assert resp.status_code == 200
    saved = resp.json()
    assert saved["title"] == "Two"
    assert saved["content"] == {"cta": "Go"}
    assert saved["updated_at"] >= created["updated_at"]


def test_failed_save_leaves_record_unchanged(client, auth_headers, monkeypatch):
    created = client.post("/projects", json={"template_type": "social"}, headers=auth_headers).json()
    pid = created["id"]
    before = {"headline": "Keep me", "bgColor": "#112233"}
    client.put(f"/projects/{pid}", json={"title": "Stable", "content": before}, headers=auth_headers)

    def _boom(self):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr("sqlalchemy.orm.Session.commit", _boom)
    resp = client.put(f"/projects/{pid}", json={"title": "Broken", "content": {"headline": "Lost"}}, headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("update project failed")
    monkeypatch.undo()

    stored = client.get(f"/projects/{pid}", headers=auth_headers).json()
    assert stored["title"] == "Stable"
    assert stored["content"] == before


def test_list_failure_names_operation(client, auth_headers, monkeypatch):
    def _boom(db, owner_id):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(project_service, "list_projects", _boom)
    resp = client.get("/projects", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("list projects failed")
