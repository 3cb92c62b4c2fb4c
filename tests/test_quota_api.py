from __future__ import annotations

import pytest

from attendance_quota.main import create_app

FIVE_DAY_WEEK = {"Monday": 3, "Tuesday": 3, "Wednesday": 3, "Thursday": 3, "Friday": 3, "Saturday": 0}


@pytest.fixture()
def client():
    app = create_app("attendance_quota.config.testing")
    return app.test_client()


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_totals(client):
    resp = client.post("/api/quota/totals", json={"schedule": FIVE_DAY_WEEK, "months_in_term": 4})

    assert resp.status_code == 200
    assert resp.get_json()["totals"] == {"week": 15, "month": 60, "term": 240}


def test_totals_rejects_non_object_body(client):
    resp = client.post("/api/quota/totals", json=[1, 2, 3])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_report(client):
    resp = client.post(
        "/api/quota/report",
        json={
            "schedule": FIVE_DAY_WEEK,
            "progress": {
                "month": {"attended": 40, "elapsed": 45},
                "term": {"percentage": 90, "elapsed": {"months": 1, "weeks": 2, "days": 3}},
            },
        },
    )

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["totals"] == {"week": 15, "month": 60, "term": 180}
    assert data["horizons"]["month"]["allowed_misses"] == 4
    assert data["horizons"]["term"]["elapsed"] == 99
    assert data["horizons"]["week"]["allowed_misses"] == 2


def test_report_rejects_bad_schedule(client):
    resp = client.post("/api/quota/report", json={"schedule": {"Funday": 3}})

    assert resp.status_code == 400
    assert "Funday" in resp.get_json()["message"]


def test_horizon(client):
    resp = client.post("/api/quota/horizon?horizon=month", json={"total": 25, "required_percentage": 85})

    assert resp.status_code == 200
    result = resp.get_json()["result"]
    assert result["horizon"] == "month"
    assert result["required_for_period"] == 22
    assert result["allowed_misses"] == 3


def test_horizon_with_progress(client):
    resp = client.post("/api/quota/horizon", json={"total": 60, "attended": 40, "elapsed": 45})

    assert resp.status_code == 200
    assert resp.get_json()["result"]["allowed_misses"] == 4


@pytest.mark.parametrize(
    "url,body",
    [
        ("/api/quota/horizon?horizon=year", {"total": 10}),
        ("/api/quota/horizon", {"attended": 3}),
        ("/api/quota/horizon", {"total": "ten"}),
    ],
)
def test_horizon_rejects_bad_input(client, url, body):
    resp = client.post(url, json=body)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_horizon_with_huge_attended_count(client):
    resp = client.post("/api/quota/horizon", json={"total": 1, "attended": 10**400, "elapsed": 1})

    assert resp.status_code == 200
    assert resp.get_json()["result"]["status"] == "ON_TRACK"
