"""API tests for homework CRUD and the conflict check endpoint."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from homework_scheduler.domain.models import Homework, Subject
from homework_scheduler.main import app, homework_repo


@pytest.fixture(autouse=True)
def _clear_repo():
    """Reset the in-memory repo before each test."""
    homework_repo._store.clear()
    yield
    homework_repo._store.clear()


@pytest.fixture()
def client():
    return TestClient(app)


def _seed_homework(due_day: int = 22, assigned_day: int = 15, **overrides) -> Homework:
    defaults = dict(
        subject=Subject.WEB,
        title="React Component Library",
        description="Build a reusable component library",
        assigned_date=datetime(2024, 1, assigned_day),
        due_date=datetime(2024, 1, due_day),
        created_by="Prof. Smith",
    )
    defaults.update(overrides)
    homework = Homework(**defaults)
    homework_repo.add(homework)
    return homework


def _draft_payload(**overrides) -> dict:
    payload = {
        "subject": "Database",
        "title": "SQL Query Optimization",
        "description": "Optimize 5 complex queries",
        "assignedDate": "2024-01-17",
        "dueDate": "2024-01-24",
        "createdBy": "Prof. Williams",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Tests: CRUD
# ---------------------------------------------------------------------------


def test_create_homework(client: TestClient):
    resp = client.post("/homeworks", json=_draft_payload())
    assert resp.status_code == 201
    body = resp.json()

    assert body["id"]
    assert body["subject"] == "Database"
    assert body["dueDate"] == "2024-01-24T00:00:00"
    assert body["createdBy"] == "Prof. Williams"
    assert homework_repo.get(body["id"]) is not None


def test_create_rejects_unknown_subject(client: TestClient):
    resp = client.post("/homeworks", json=_draft_payload(subject="Chemistry"))
    assert resp.status_code == 422
    assert homework_repo.list_all() == []


def test_create_rejects_missing_fields(client: TestClient):
    payload = _draft_payload()
    del payload["createdBy"]
    resp = client.post("/homeworks", json=payload)
    assert resp.status_code == 422


def test_create_rejects_due_before_assigned(client: TestClient):
    resp = client.post(
        "/homeworks", json=_draft_payload(assignedDate="2024-02-10", dueDate="2024-02-05")
    )
    assert resp.status_code == 422


def test_list_is_ordered_by_due_date(client: TestClient):
    _seed_homework(due_day=25, title="later")
    _seed_homework(due_day=20, assigned_day=10, title="sooner")
    _seed_homework(due_day=22, title="middle")

    resp = client.get("/homeworks")
    assert resp.status_code == 200
    assert [hw["title"] for hw in resp.json()] == ["sooner", "middle", "later"]


def test_get_homework(client: TestClient):
    homework = _seed_homework()
    resp = client.get(f"/homeworks/{homework.id}")
    assert resp.status_code == 200
    assert resp.json()["title"] == homework.title


def test_get_missing_homework_returns_404(client: TestClient):
    resp = client.get("/homeworks/not-found")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Homework not found"


def test_update_changes_only_given_fields(client: TestClient):
    homework = _seed_homework()

    resp = client.put(f"/homeworks/{homework.id}", json={"dueDate": "2024-01-26"})
    assert resp.status_code == 200
    body = resp.json()

    assert body["dueDate"] == "2024-01-26T00:00:00"
    assert body["title"] == homework.title
    assert body["id"] == homework.id
    assert homework_repo.get(homework.id).due_date == datetime(2024, 1, 26)


def test_update_rejects_unknown_subject(client: TestClient):
    homework = _seed_homework()
    resp = client.put(f"/homeworks/{homework.id}", json={"subject": "Chemistry"})
    assert resp.status_code == 422
    assert homework_repo.get(homework.id).subject == Subject.WEB


def test_update_rejects_inverted_span(client: TestClient):
    homework = _seed_homework()
    resp = client.put(f"/homeworks/{homework.id}", json={"dueDate": "2024-01-10"})
    assert resp.status_code == 400
    assert "due_date" in resp.json()["detail"]


def test_update_missing_homework_returns_404(client: TestClient):
    resp = client.put("/homeworks/not-found", json={"title": "New title"})
    assert resp.status_code == 404


def test_delete_homework(client: TestClient):
    homework = _seed_homework()

    resp = client.delete(f"/homeworks/{homework.id}")
    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted"}
    assert client.get(f"/homeworks/{homework.id}").status_code == 404


def test_delete_missing_homework_returns_404(client: TestClient):
    resp = client.delete("/homeworks/not-found")
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Tests: conflict check
# ---------------------------------------------------------------------------


def test_check_conflicts_scenario(client: TestClient):
    _seed_homework(due_day=22)
    _seed_homework(due_day=22)
    _seed_homework(due_day=25)

    resp = client.post("/homeworks/check-conflicts", json={"dueDate": "2024-01-22"})
    assert resp.status_code == 200
    assert resp.json() == [
        {
            "type": "sameDay",
            "message": "2 other homework assignment(s) due on the same day",
            "affectedDates": ["2024-01-22"],
        }
    ]


def test_check_conflicts_excludes_edited_homework(client: TestClient):
    homework = _seed_homework(due_day=22)

    resp = client.post(
        "/homeworks/check-conflicts", json={"dueDate": "2024-01-22", "id": homework.id}
    )
    assert resp.status_code == 200
    assert resp.json() == []


def test_check_conflicts_without_collisions(client: TestClient):
    _seed_homework(due_day=22)
    resp = client.post("/homeworks/check-conflicts", json={"dueDate": "2024-01-23"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_check_conflicts_requires_due_date(client: TestClient):
    resp = client.post("/homeworks/check-conflicts", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing required field: dueDate"


def test_check_conflicts_rejects_unparseable_due_date(client: TestClient):
    resp = client.post("/homeworks/check-conflicts", json={"dueDate": "banana"})
    assert resp.status_code == 400
    assert "Invalid dueDate format" in resp.json()["detail"]


def test_conflicts_do_not_block_creation(client: TestClient):
    """Warnings are advisory: a colliding homework can still be created."""
    _seed_homework(due_day=24)

    warnings = client.post("/homeworks/check-conflicts", json={"dueDate": "2024-01-24"})
    assert len(warnings.json()) == 1

    resp = client.post("/homeworks", json=_draft_payload())
    assert resp.status_code == 201
    assert len(homework_repo.list_all()) == 2
