"""
Tests de l'API HTTP (FastAPI TestClient, base SQLite en memoire).

Verifie l'enveloppe de reponse, la traduction des erreurs du domaine en
statuts HTTP et l'utilisateur lu depuis l'en-tete X-User-Id.
"""

from datetime import datetime, timedelta, timezone

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from pointeuse.container import Container
from pointeuse.core.entities.balance import BalanceSnapshot
from pointeuse.web.app import create_app

U1 = {"X-User-Id": "U1"}
U2 = {"X-User-Id": "U2"}


def _iso(value: datetime) -> str:
    return value.isoformat()


@pytest.fixture
def container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.config.reset_override()


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as client:
        yield client


@pytest.fixture
def recent_start() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0) - timedelta(hours=2)


def _start(client, start: datetime, headers=U1):
    return client.post(
        "/api/worklogs/start",
        json={"startTime": _iso(start), "location": "office", "description": "Daily"},
        headers=headers,
    )


class TestWorklogRoutes:
    def test_start_returns_envelope(self, client, recent_start):
        response = _start(client, recent_start)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "in_progress"
        assert body["data"]["location"] == "office"
        assert body["data"]["userId"] == "U1"
        assert body["data"]["endTime"] is None

    def test_second_start_is_conflict(self, client, recent_start):
        _start(client, recent_start)

        response = _start(client, recent_start + timedelta(minutes=1))

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": {
                "type": "ConflictError",
                "message": "Un worklog est deja en cours pour cet utilisateur",
            },
        }

    def test_complete_then_complete_again(self, client, recent_start):
        worklog_id = _start(client, recent_start).json()["data"]["id"]
        end = {"endTime": _iso(recent_start + timedelta(hours=1))}

        first = client.post(f"/api/worklogs/{worklog_id}/complete", json=end, headers=U1)
        second = client.post(f"/api/worklogs/{worklog_id}/complete", json=end, headers=U1)

        assert first.status_code == 200
        assert first.json()["data"]["status"] == "completed"
        assert first.json()["data"]["durationHours"] == pytest.approx(1.0)
        assert second.status_code == 409

    def test_complete_with_end_before_start_is_bad_request(self, client, recent_start):
        worklog_id = _start(client, recent_start).json()["data"]["id"]

        response = client.post(
            f"/api/worklogs/{worklog_id}/complete",
            json={"endTime": _iso(recent_start)},
            headers=U1,
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "ValidationError"

    def test_modify_worklog(self, client, recent_start):
        worklog_id = _start(client, recent_start).json()["data"]["id"]

        response = client.patch(
            f"/api/worklogs/{worklog_id}",
            json={"description": "Atelier", "location": "remote"},
            headers=U1,
        )

        assert response.status_code == 200
        assert response.json()["data"]["description"] == "Atelier"
        assert response.json()["data"]["location"] == "remote"

    def test_create_completed_work(self, client):
        response = client.post(
            "/api/worklogs/completed",
            json={
                "startTime": "2024-01-01T09:00",
                "endTime": "2024-01-01T17:00",
                "location": "remote",
            },
            headers=U1,
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "completed"
        assert response.json()["data"]["durationHours"] == pytest.approx(8.0)

    def test_unknown_location_is_bad_request(self, client, recent_start):
        response = client.post(
            "/api/worklogs/start",
            json={"startTime": _iso(recent_start), "location": "beach"},
            headers=U1,
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_foreign_worklog_is_not_found(self, client, recent_start):
        worklog_id = _start(client, recent_start).json()["data"]["id"]

        assert client.get(f"/api/worklog/{worklog_id}", headers=U2).status_code == 404
        assert client.delete(f"/api/worklogs/{worklog_id}", headers=U2).status_code == 404
        assert client.get(f"/api/worklog/{worklog_id}", headers=U1).status_code == 200

    def test_delete_twice(self, client, recent_start):
        worklog_id = _start(client, recent_start).json()["data"]["id"]

        first = client.delete(f"/api/worklogs/{worklog_id}", headers=U1)
        second = client.delete(f"/api/worklogs/{worklog_id}", headers=U1)

        assert first.status_code == 200
        assert first.json()["data"] == {"success": True}
        assert second.status_code == 404

    def test_query_worklogs(self, client, recent_start):
        _start(client, recent_start)
        _start(client, recent_start, headers=U2)

        response = client.get(
            "/api/worklogs",
            params={"status": "in_progress", "page": 1, "limit": 10},
            headers=U1,
        )

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["total"] == 1
        assert data["page"] == 1
        assert data["limit"] == 10
        assert data["hasMore"] is False
        assert [item["userId"] for item in data["items"]] == ["U1"]

    def test_query_rejects_page_zero(self, client):
        response = client.get("/api/worklogs", params={"page": 0}, headers=U1)

        assert response.status_code == 400

    def test_missing_user_header_is_unauthorized(self, client):
        response = client.get("/api/worklogs")

        assert response.status_code == 401
        assert response.json()["success"] is False


class TestBalanceRoutes:
    def _add_snapshots(self, container):
        with container.session() as session:
            repo = container.balance_repository(session=session)
            for day in (1, 2, 3):
                repo.add(
                    BalanceSnapshot(
                        user_id="U1", timestamp=datetime(2024, 1, day), value=float(day)
                    )
                )

    def test_balance_of_new_user_is_zero(self, client):
        response = client.get("/api/balance", headers=U1)

        assert response.status_code == 200
        assert response.json()["data"]["balance"]["value"] == 0.0

    def test_balance_includes_completed_work(self, client, container):
        self._add_snapshots(container)
        client.post(
            "/api/worklogs/completed",
            json={
                "startTime": "2024-01-04T09:00",
                "endTime": "2024-01-04T11:30",
                "location": "office",
            },
            headers=U1,
        )

        balance = client.get("/api/balance", headers=U1).json()["data"]["balance"]

        assert balance["settledValue"] == 3.0
        assert balance["unsettledHours"] == 2.5
        assert balance["value"] == 5.5

    def test_history_is_ascending(self, client, container):
        self._add_snapshots(container)

        response = client.get(
            "/api/balance/history",
            params={"startDate": "2024-01-02T00:00:00", "endDate": "2024-01-31T00:00:00"},
            headers=U1,
        )

        assert response.status_code == 200
        assert [entry["value"] for entry in response.json()["data"]] == [2.0, 3.0]

    def test_history_accepts_naive_and_aware_bounds(self, client, container):
        self._add_snapshots(container)

        response = client.get(
            "/api/balance/history",
            params={"startDate": "2024-01-01T00:00:00", "endDate": "2024-01-02T00:00:00Z"},
            headers=U1,
        )

        assert response.status_code == 200
        assert [entry["value"] for entry in response.json()["data"]] == [1.0, 2.0]

    def test_history_mixed_bounds_still_require_end_after_start(self, client):
        response = client.get(
            "/api/balance/history",
            params={"startDate": "2024-01-02T02:00:00+02:00", "endDate": "2024-01-01T23:00:00"},
            headers=U1,
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "ValidationError"

    def test_history_requires_end_after_start(self, client):
        response = client.get(
            "/api/balance/history",
            params={"startDate": "2024-01-02T00:00:00", "endDate": "2024-01-02T00:00:00"},
            headers=U1,
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "ValidationError"
