"""Route tests for user analytics, logs, sales comments and reports."""

import csv
import io

from app_insights_api.app.services import report_service


def test_user_analytics_crud(client):
    resp = client.post(
        "/api/v1/user-analytics/",
        json={"userEmail": "new@corp.io", "company": "Corp", "planType": "Free"},
    )
    assert resp.status_code == 201
    record = resp.json()
    assert record["Id"] == 9
    assert record["signupDate"]

    resp = client.put("/api/v1/user-analytics/9", json={"totalApps": 2})
    assert resp.json()["totalApps"] == 2

    assert client.delete("/api/v1/user-analytics/9").status_code == 200
    resp = client.get("/api/v1/user-analytics/9")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Analytics with ID 9 not found"


def test_user_analytics_sorted_and_summary(client):
    resp = client.get("/api/v1/user-analytics/", params={"sort_by": "totalApps", "order": "desc"})
    assert resp.json()[0]["userEmail"] == "mike@socialbuzz.com"

    summary = client.get("/api/v1/user-analytics/summary").json()
    assert summary["totalUsers"] == 8
    assert summary["avgAppsPerUser"] == 3.5


def test_logs_by_level_and_counts(client):
    resp = client.get("/api/v1/logs/", params={"level": "warn"})
    assert [log["Id"] for log in resp.json()] == [2, 7, 12]

    counts = client.get("/api/v1/logs/level-counts").json()
    assert counts["total"] == 12
    assert counts["counts"]["INFO"] == 4


def test_log_create_and_missing(client):
    resp = client.post("/api/v1/logs/", json={"level": "DEBUG", "message": "ping"})
    assert resp.status_code == 201
    assert resp.json()["Id"] == 13
    assert resp.json()["metadata"] is None

    assert client.get("/api/v1/logs/99").status_code == 404


def test_log_rejects_unknown_level(client):
    resp = client.post("/api/v1/logs/", json={"level": "TRACE", "message": "nope"})
    assert resp.status_code == 422


def test_sales_comments_flow(client):
    resp = client.get("/api/v1/sales-comments/", params={"app_id": 1})
    assert [c["Id"] for c in resp.json()] == [6, 2, 1]

    resp = client.post(
        "/api/v1/sales-comments/",
        json={"appId": 1, "comment": "Signed!", "author": "Mark Davis", "priority": "high"},
    )
    assert resp.status_code == 201
    new_id = resp.json()["Id"]
    assert new_id == 7

    resp = client.get("/api/v1/sales-comments/", params={"app_id": 1})
    assert resp.json()[0]["Id"] == new_id

    resp = client.put(f"/api/v1/sales-comments/{new_id}", json={"comment": "Signed, invoice sent"})
    assert resp.json()["comment"] == "Signed, invoice sent"
    assert resp.json()["appId"] == 1

    assert client.delete(f"/api/v1/sales-comments/{new_id}").status_code == 200
    resp = client.get(f"/api/v1/sales-comments/{new_id}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == f"Sales comment with ID {new_id} not found"


def test_null_in_put_clears_optional_fields(client):
    resp = client.put("/api/v1/sales-comments/1", json={"followUpDate": None})
    assert resp.status_code == 200
    assert resp.json()["followUpDate"] is None
    assert resp.json()["author"] == "Sarah Johnson"

    resp = client.put("/api/v1/logs/2", json={"metadata": None, "level": None})
    assert resp.status_code == 200
    assert resp.json()["metadata"] is None
    assert resp.json()["level"] == "WARN"


def test_sales_comments_require_app_id(client):
    assert client.get("/api/v1/sales-comments/").status_code == 422


def test_report_json_and_csv(client, monkeypatch, seed_now):
    monkeypatch.setattr(report_service, "_utcnow", lambda: seed_now)

    resp = client.get("/api/v1/reports/system-logs", params={"date_range": "1y"})
    assert resp.status_code == 200
    assert resp.json()["reportType"] == "system-logs"
    assert "system-logs-1y.json" in resp.headers["content-disposition"]
    assert resp.json()["rowCount"] == 12

    resp = client.get("/api/v1/reports/apps-overview", params={"date_range": "7d", "format": "csv"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    rows = list(csv.DictReader(io.StringIO(resp.text)))
    assert [row["appName"] for row in rows[:2]] == ["ShopFlow", "SocialBuzz"]
    assert len(rows) == 10
    assert rows[0]["lastActivity"] == "2024-01-15T14:30:00Z"


def test_report_rejects_unknown_type(client):
    resp = client.get("/api/v1/reports/security")
    assert resp.status_code == 422
    assert "Unknown report type" in resp.json()["detail"]
