# tests/test_api.py
"""
API tests for the gate-pass workflow.
Runs the FastAPI app against an in-memory store and a controllable clock.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))

import pytest
from fastapi.testclient import TestClient
from gatepass.database import get_store
from gatepass.dependencies import get_clock
from gatepass.main import app
from gatepass.services.snapshot_store import InMemoryStore
from fakes import FakeClock, seeded_snapshot

EXPECTED_RETURN = "2026-03-02T10:00:00Z"   # one hour after the fake clock's start


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(clock):
    store = InMemoryStore(seeded_snapshot())
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


def create_pass(client):
    res = client.post("/api/passes", json={
        "studentId": "1",
        "studentName": "Student One",
        "reason": "Family visit",
        "destination": "Home",
        "expectedReturn": EXPECTED_RETURN,
    })
    assert res.status_code == 200
    return res.json()["pass"]


def approve(client, pass_id):
    return client.put(f"/api/passes/{pass_id}/status", json={
        "status": "approved", "remarks": "ok", "moderatorName": "Moderator One",
    })


class TestLogin:
    def test_valid_credentials(self, client):
        res = client.post("/api/login", json={"username": "student1", "password": "student123"})
        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        assert body["user"] == {"id": "1", "username": "student1", "role": "student", "name": "Student One"}

    def test_mismatched_password_leaks_nothing(self, client):
        res = client.post("/api/login", json={"username": "student1", "password": "wrong"})
        assert res.status_code == 401
        assert res.json() == {"success": False, "message": "Invalid username or password"}


class TestStudentAndModerator:
    def test_created_pass_is_pending(self, client):
        p = create_pass(client)
        assert p["status"] == "pending"
        assert p["studentId"] == "1"
        assert p["moderatorRemarks"] == ""
        assert p["approvedBy"] is None
        assert p["exitTime"] is None
        assert p["entryTime"] is None

    def test_pending_and_student_lists(self, client):
        p = create_pass(client)
        assert [x["id"] for x in client.get("/api/passes/pending").json()["passes"]] == [p["id"]]
        assert [x["id"] for x in client.get("/api/passes/student/1").json()["passes"]] == [p["id"]]
        assert client.get("/api/passes/student/99").json() == {"success": True, "passes": []}

    def test_decision_moves_pass_out_of_pending(self, client):
        p = create_pass(client)
        res = approve(client, p["id"])
        assert res.status_code == 200
        decided = res.json()["pass"]
        assert decided["status"] == "approved"
        assert decided["approvedBy"] == "Moderator One"
        assert decided["approvedAt"] is not None
        assert client.get("/api/passes/pending").json()["passes"] == []
        assert len(client.get("/api/passes/all").json()["passes"]) == 1

    def test_decision_on_unknown_pass_is_404(self, client):
        res = approve(client, "does-not-exist")
        assert res.status_code == 404
        assert res.json() == {"success": False, "message": "Pass not found"}

    def test_any_status_value_is_stored_as_given(self, client):
        p = create_pass(client)
        res = client.put(f"/api/passes/{p['id']}/status", json={"status": "cancelled"})
        assert res.status_code == 200
        decided = res.json()["pass"]
        assert decided["status"] == "cancelled"
        assert decided["moderatorRemarks"] == ""
        assert client.get(f"/api/passes/{p['id']}").json()["pass"]["status"] == "cancelled"


class TestGatekeeper:
    def test_get_pass(self, client):
        p = create_pass(client)
        assert client.get(f"/api/passes/{p['id']}").json()["pass"]["id"] == p["id"]
        assert client.get("/api/passes/unknown").status_code == 404

    def test_exit_requires_approval(self, client):
        p = create_pass(client)
        res = client.put(f"/api/passes/{p['id']}/exit")
        assert res.status_code == 400
        assert res.json() == {"success": False, "message": "Pass is not approved"}

    def test_entry_requires_exit(self, client):
        p = create_pass(client)
        approve(client, p["id"])
        res = client.put(f"/api/passes/{p['id']}/entry")
        assert res.status_code == 400
        assert res.json()["message"] == "Student has not exited yet"

    def test_unknown_pass_on_exit_and_entry(self, client):
        assert client.put("/api/passes/nope/exit").status_code == 404
        assert client.put("/api/passes/nope/entry").status_code == 404

    def test_full_round_trip_leaves_active_list(self, client):
        p = create_pass(client)
        approve(client, p["id"])
        assert len(client.get("/api/passes/active").json()["passes"]) == 1

        out = client.put(f"/api/passes/{p['id']}/exit").json()["pass"]
        assert out["exitTime"] is not None
        back = client.put(f"/api/passes/{p['id']}/entry").json()["pass"]
        assert back["entryTime"] is not None
        assert client.get("/api/passes/active").json()["passes"] == []


class TestTracking:
    def test_on_time_student_is_not_tracked(self, client):
        p = create_pass(client)
        approve(client, p["id"])
        client.put(f"/api/passes/{p['id']}/exit")

        assert client.get("/api/passes/late").json()["passes"] == []
        res = client.post(f"/api/passes/{p['id']}/location", json={"latitude": 12.97, "longitude": 77.59})
        assert res.status_code == 200
        body = res.json()
        assert body == {"success": False, "message": "Not late, location not tracked"}

    def test_overdue_student_is_listed_and_tracked(self, client, clock):
        p = create_pass(client)
        approve(client, p["id"])
        client.put(f"/api/passes/{p['id']}/exit")
        clock.advance(hours=2)

        late = client.get("/api/passes/late").json()["passes"]
        assert [x["id"] for x in late] == [p["id"]]

        res = client.post(f"/api/passes/{p['id']}/location", json={
            "latitude": 12.97, "longitude": 77.59, "timestamp": "2026-03-02T10:59:00Z",
        })
        body = res.json()
        assert body["success"] is True
        assert body["message"] == "Location tracked"
        assert body["pass"]["location"]["isLate"] is True
        assert body["pass"]["location"]["latitude"] == 12.97

    def test_location_for_unknown_pass_is_404(self, client):
        res = client.post("/api/passes/nope/location", json={"latitude": 1, "longitude": 2})
        assert res.status_code == 404

    def test_out_of_range_latitude_is_rejected(self, client):
        p = create_pass(client)
        res = client.post(f"/api/passes/{p['id']}/location", json={"latitude": 123, "longitude": 2})
        assert res.status_code == 422


class TestHealth:
    def test_health_reports_storage(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["storage"] == "ok"
