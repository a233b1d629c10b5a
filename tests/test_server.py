import pytest
from fastapi.testclient import TestClient

from calltriage.core import config
from server.app import app

@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DB_PATH", str(tmp_path / "api.db"))
    with TestClient(app) as c:
        yield c

def test_classify_one(client):
    resp = client.post("/api/classify", json={"id": "c1", "duration": 45,
                                              "transcript_text": "Home Depot phone sale, $243.17 for the Lafayette job"})
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["category"] == "operations"
    assert result["extracted"]["amount"] == "$243.17"

def test_batch_is_stored(client):
    resp = client.post("/api/batch", json={"calls": [
        {"id": "a", "duration": 8, "transcript_text": ""},
        {"id": "b", "duration": 90, "transcript_text": "I'm calling about a bathroom remodel, my address is 12 Oak Street"},
    ]})
    assert resp.status_code == 200
    run_id = resp.json()["run_id"]

    runs = client.get("/api/runs").json()
    assert runs[0]["run_id"] == run_id and runs[0]["total"] == 2
    assert client.get(f"/api/runs/{run_id}").json()["report"]["total"] == 2
    call = client.get(f"/api/runs/{run_id}/calls/b").json()
    assert call["result"]["sub_category"] == "bathroom_remodel"

def test_bad_requests(client):
    assert client.post("/api/batch", json={"calls": "nope"}).status_code == 400
    assert client.get("/api/runs/missing").status_code == 404
    assert client.get("/api/runs/missing/calls/x").status_code == 404

def test_rules_listing(client):
    body = client.get("/api/rules").json()
    assert body["count"] == len(body["rules"]) > 0
