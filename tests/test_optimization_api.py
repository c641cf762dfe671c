"""Tests for the approach optimization API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.factories import approach_json

AS_OF = "2026-04-06T12:00:00Z"


def test_optimal_send_time_defaults(client: TestClient) -> None:
    resp = client.post("/api/optimization/optimal-send-time", json={"period_stats": []})
    assert resp.status_code == 200
    data = resp.json()
    assert data["hour"] == 10
    assert data["day_of_week"] == 2
    assert data["recommendation"] == "Sending on Tuesday around 10:00 is the most effective"


def test_optimal_send_time_best_bucket(client: TestClient) -> None:
    body = {
        "period_stats": [
            {"date": "2026-01-08T15:00:00", "sent": 100, "opened": 60, "replied": 30},
            {"date": "2026-01-06T10:00:00", "sent": 100, "opened": 10, "replied": 1},
        ],
        "locale": "ja",
    }
    resp = client.post("/api/optimization/optimal-send-time", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert (data["day_of_week"], data["hour"]) == (4, 15)
    assert data["recommendation"] == "木曜日の15時頃の送信が最も効果的です"


def test_optimal_send_time_locale_from_settings(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RECOMMENDATION_LOCALE", "ja")
    from approach_engine.config import get_settings

    get_settings.cache_clear()
    resp = client.post("/api/optimization/optimal-send-time", json={})
    assert resp.json()["recommendation"] == "火曜日の10時頃の送信が最も効果的です"


def test_optimal_send_time_malformed_date_is_422(client: TestClient) -> None:
    body = {"period_stats": [{"date": "not-a-date", "sent": 1}]}
    resp = client.post("/api/optimization/optimal-send-time", json=body)
    assert resp.status_code == 422
    assert "detail" in resp.json()


def test_optimal_send_time_negative_counts_rejected(client: TestClient) -> None:
    body = {"period_stats": [{"date": "2026-01-06", "sent": -1}]}
    resp = client.post("/api/optimization/optimal-send-time", json=body)
    assert resp.status_code == 422


def test_select_targets(client: TestClient) -> None:
    body = {
        "candidates": [
            {"id": "E1", "name": "Aoi", "skills": ["Python"], "current_status": "assigned"},
            {
                "id": "E2",
                "name": "Ren",
                "skills": ["Python", "AWS"],
                "experience_years": 6,
                "current_status": "available",
            },
        ],
        "criteria": {
            "skills": ["python", "aws"],
            "experience": 3,
            "status": ["available"],
            "exclude_recently_approached": True,
        },
        "approach_history": [
            approach_json(id="A1", sent_at="2026-03-30T10:00:00Z", engineer_ids=["E1"]),
        ],
        "as_of": AS_OF,
    }
    resp = client.post("/api/optimization/select-targets", json=body)
    assert resp.status_code == 200
    selections = resp.json()["selections"]
    assert [s["candidate_id"] for s in selections] == ["E2", "E1"]
    assert selections[0]["score"] == 100
    assert selections[0]["is_recommended"] is True
    assert selections[1]["score"] == -30
    assert "Approached 7 days ago" in selections[1]["reasons"]


def test_select_targets_recent_days_from_settings(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """RECENT_APPROACH_DAYS=5 → a 7-day-old approach no longer counts."""
    monkeypatch.setenv("RECENT_APPROACH_DAYS", "5")
    from approach_engine.config import get_settings

    get_settings.cache_clear()
    body = {
        "candidates": [{"id": "E1", "name": "Aoi"}],
        "criteria": {"exclude_recently_approached": True},
        "approach_history": [
            approach_json(sent_at="2026-03-30T10:00:00Z", engineer_ids=["E1"]),
        ],
        "as_of": AS_OF,
    }
    resp = client.post("/api/optimization/select-targets", json=body)
    assert resp.json()["selections"][0]["score"] == 10


def test_duplicate_check(client: TestClient) -> None:
    body = {
        "target_id": "C1",
        "target_type": "company",
        "history": [approach_json(sent_at="2026-03-27T09:00:00Z")],
        "as_of": AS_OF,
    }
    resp = client.post("/api/optimization/duplicate-check", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_duplicate"] is True
    assert data["days_since_last_approach"] == 10
    assert data["last_approach_date"].startswith("2026-03-27T09:00:00")


def test_duplicate_check_empty_history(client: TestClient) -> None:
    body = {"target_id": "C1", "target_type": "company", "history": []}
    data = client.post("/api/optimization/duplicate-check", json=body).json()
    assert data["is_duplicate"] is False
    assert data["last_approach_date"] is None


def test_duplicate_check_custom_interval(client: TestClient) -> None:
    body = {
        "target_id": "C1",
        "target_type": "company",
        "history": [approach_json(sent_at="2026-03-27T09:00:00Z")],
        "min_interval_days": 7,
        "as_of": AS_OF,
    }
    assert client.post("/api/optimization/duplicate-check", json=body).json()["is_duplicate"] is False


def test_duplicate_check_invalid_target_type(client: TestClient) -> None:
    body = {"target_id": "C1", "target_type": "partner", "history": []}
    assert client.post("/api/optimization/duplicate-check", json=body).status_code == 422


def test_freelance_limit(client: TestClient) -> None:
    body = {
        "freelancer_id": "F1",
        "history": [
            approach_json(id="A1", target_type="freelancer", target_id="F1", sent_at="2026-01-01T09:00:00Z"),
            approach_json(id="A2", target_type="freelancer", target_id="F1", sent_at="2026-02-10T09:00:00Z"),
        ],
        "as_of": AS_OF,
    }
    resp = client.post("/api/optimization/freelance-limit", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["can_approach"] is False
    assert data["days_since_last_approach"] == 55
    assert data["days_until_next_approach"] == 35


def test_conversion_analysis(client: TestClient) -> None:
    approaches = [
        approach_json(id=f"A{i}", template_id="tpl-a", status="accepted" if i < 5 else "sent")
        for i in range(10)
    ]
    body = {"approaches": approaches, "templates": [{"id": "tpl-a", "name": "templateA"}]}
    resp = client.post("/api/optimization/conversion-analysis", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["overall_conversion_rate"] == 0.5
    assert data["by_template"] == [
        {"template_id": "tpl-a", "template_name": "templateA", "conversion_rate": 0.5, "sample_size": 10}
    ]
    assert data["by_time_slot"][0]["hour"] == 10
    assert data["by_day_of_week"][0]["day_of_week"] == 3  # 2026-04-01 is a Wednesday
    assert any("templateA" in rec for rec in data["recommendations"])


def test_conversion_analysis_empty(client: TestClient) -> None:
    data = client.post("/api/optimization/conversion-analysis", json={}).json()
    assert data["overall_conversion_rate"] == 0
    assert data["by_template"] == []
    assert data["recommendations"] == []


def test_conversion_analysis_invalid_status(client: TestClient) -> None:
    body = {"approaches": [approach_json(status="bounced")]}
    assert client.post("/api/optimization/conversion-analysis", json=body).status_code == 422


def test_effectiveness(client: TestClient) -> None:
    body = {
        "approaches": [
            approach_json(id="A1", status="accepted", replied_at="2026-04-01T18:00:00Z"),
            approach_json(id="A2", status="rejected"),
        ]
    }
    resp = client.post("/api/optimization/effectiveness", json=body)
    assert resp.status_code == 200
    assert resp.json()["scores"] == [
        {"approach_id": "A1", "score": 120},
        {"approach_id": "A2", "score": 0},
    ]


def test_period_stats(client: TestClient) -> None:
    body = {
        "approaches": [
            approach_json(id="A1", status="accepted", sent_at="2026-04-01T10:05:00Z"),
            approach_json(id="A2", status="sent", sent_at="2026-04-01T10:40:00Z"),
            approach_json(id="A3", status="opened", sent_at="2026-04-02T09:00:00Z"),
            approach_json(id="A4", target_type="freelancer", target_id="E1"),
        ],
        "granularity": "day",
    }
    resp = client.post("/api/optimization/period-stats", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert [p["date"] for p in data["period_stats"]] == ["2026-04-01", "2026-04-02"]
    assert data["period_stats"][0]["sent"] == 3
    assert data["by_company"] == [
        {"company_id": "C1", "sent": 3, "opened": 2, "replied": 1, "accepted": 1}
    ]
    assert data["summary"]["total_sent"] == 4
    assert data["summary"]["total_opened"] == 2
    assert data["summary"]["accept_rate"] == pytest.approx(1 / 4)
