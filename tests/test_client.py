"""Tests for the requests-based AppInsightsAPI client."""

from unittest.mock import MagicMock

import pytest
import requests

from app_insights_client import AppInsightsAPI


def _response(status_code=200, json_data=None, text="", content_type="application/json"):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.headers = {"Content-Type": content_type}
    resp.text = text
    resp.content = b"x" if (json_data is not None or text) else b""
    resp.json.return_value = json_data
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return AppInsightsAPI(base_url="http://dashboard.local/", api_key="secret", session=session)


def test_list_apps_sends_filters_and_auth(api, session):
    session.request.return_value = _response(json_data=[{"Id": 1}])

    apps, error = api.list_apps(search="shop", plan="Pro")

    assert apps == [{"Id": 1}]
    assert error is None
    session.request.assert_called_once_with(
        method="GET",
        url="http://dashboard.local/api/v1/apps/",
        params={"search": "shop", "plan": "Pro"},
        json=None,
        headers={"Authorization": "Bearer secret"},
        timeout=15,
    )


def test_get_app_not_found_returns_error(api, session):
    session.request.return_value = _response(404, json_data={"detail": "App with ID 9 not found"})

    app, error = api.get_app(9)

    assert app is None
    assert error == {"status_code": 404, "message": "App with ID 9 not found"}
    assert session.request.call_args.kwargs["url"].endswith("/api/v1/apps/9")


def test_list_failure_returns_empty_list(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    logs, error = api.list_logs(level="ERROR")

    assert logs == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_update_uses_put_with_body(api, session):
    session.request.return_value = _response(json_data={"Id": 3, "plan": "Pro"})

    data, error = api.update_app(3, {"plan": "Pro"})

    assert error is None
    assert data["plan"] == "Pro"
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["json"] == {"plan": "Pro"}


def test_delete_sales_comment(api, session):
    session.request.return_value = _response(json_data={"Id": 2})

    data, error = api.delete_sales_comment(2)

    assert data == {"Id": 2}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["url"] == "http://dashboard.local/api/v1/sales-comments/2"


def test_csv_report_returns_text(api, session):
    session.request.return_value = _response(text="Id,level\n1,ERROR\n", content_type="text/csv; charset=utf-8")

    report, error = api.generate_report("system-logs", date_range="7d", fmt="csv")

    assert error is None
    assert report.startswith("Id,level")
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"].endswith("/api/v1/reports/system-logs")
    assert kwargs["params"] == {"date_range": "7d", "format": "csv"}


def test_empty_csv_report_is_empty_text(api, session):
    session.request.return_value = _response(text="", content_type="text/csv; charset=utf-8")

    report, error = api.generate_report("apps-overview", date_range="7d", fmt="csv")

    assert report == ""
    assert error is None


def test_empty_json_body_is_none(api, session):
    session.request.return_value = _response()

    data, error = api.get_app_stats()

    assert data is None
    assert error is None


def test_validation_error_detail_is_stringified(api, session):
    detail = [{"loc": ["body", "appName"], "msg": "Field required"}]
    session.request.return_value = _response(422, json_data={"detail": detail})

    data, error = api.create_app({})

    assert data is None
    assert error["status_code"] == 422
    assert "Field required" in error["message"]


def test_non_json_error_body(api, session):
    resp = _response(500, text="Internal Server Error")
    resp.json.side_effect = ValueError("not json")
    session.request.return_value = resp

    stats, error = api.get_app_stats()

    assert stats is None
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_without_api_key_no_auth_header(session):
    api = AppInsightsAPI(base_url="http://dashboard.local", session=session)
    session.request.return_value = _response(json_data={"totalUsers": 0})

    api.get_user_summary()

    assert session.request.call_args.kwargs["headers"] == {}
    assert session.request.call_args.kwargs["params"] is None


def test_against_live_app(client):
    """The client speaks the same wire format the API serves."""
    session = MagicMock(spec=requests.Session)

    def forward(method, url, params=None, json=None, headers=None, timeout=None):
        path = url.replace("http://testserver", "")
        served = client.request(method, path, params=params, json=json, headers=headers)
        resp = requests.Response()
        resp.status_code = served.status_code
        resp._content = served.content
        resp.headers.update(served.headers)
        resp.url = url
        return resp

    session.request.side_effect = forward
    api = AppInsightsAPI(base_url="http://testserver", session=session)

    comments, error = api.list_sales_comments(1)
    assert error is None
    assert [c["Id"] for c in comments] == [6, 2, 1]

    created, error = api.create_log({"level": "info", "message": "from client"})
    assert error is None
    assert created["level"] == "INFO"

    missing, error = api.get_user_analytics(999)
    assert missing is None
    assert error["status_code"] == 404
