"""App Insights dashboard API client.

This module defines a small client wrapper around the App Insights
Dashboard REST API.  It is what the dashboard pages use to load their
data: every method returns a ``(data, error)`` tuple instead of
raising, so a page can either render the data or show a generic
"try again" message built from ``error["message"]``.

The client exposes one method per server operation:

* applications: :meth:`list_apps`, :meth:`get_app`, :meth:`create_app`,
  :meth:`update_app`, :meth:`delete_app`, :meth:`get_app_stats`
* user analytics: :meth:`list_user_analytics`, :meth:`get_user_summary`
  and the matching CRUD methods
* log entries: :meth:`list_logs`, :meth:`get_log_level_counts` and CRUD
* sales comments: :meth:`list_sales_comments` and CRUD
* reports: :meth:`generate_report`

The client uses the ``requests`` library internally.  An optional API
key is sent as ``Authorization: Bearer <key>`` for deployments that
place the API behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """A server operation.

    Attributes:
        path: The URI template relative to the API prefix, e.g.
            ``/apps/`` or ``/apps/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
    """

    path: str
    method: str


def _crud_endpoints(resource: str) -> Dict[str, ApiEndpoint]:
    return {
        "list": ApiEndpoint(f"/{resource}/", "GET"),
        "get": ApiEndpoint(f"/{resource}/{{id}}", "GET"),
        "create": ApiEndpoint(f"/{resource}/", "POST"),
        "update": ApiEndpoint(f"/{resource}/{{id}}", "PUT"),
        "delete": ApiEndpoint(f"/{resource}/{{id}}", "DELETE"),
    }


class AppInsightsAPI:
    """Client for interacting with the App Insights Dashboard API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token added to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.endpoints: Dict[str, Dict[str, ApiEndpoint]] = {
            "apps": {**_crud_endpoints("apps"), "stats": ApiEndpoint("/apps/stats", "GET")},
            "user_analytics": {
                **_crud_endpoints("user-analytics"),
                "summary": ApiEndpoint("/user-analytics/summary", "GET"),
            },
            "logs": {
                **_crud_endpoints("logs"),
                "level_counts": ApiEndpoint("/logs/level-counts", "GET"),
            },
            "sales_comments": _crud_endpoints("sales-comments"),
            "reports": {"generate": ApiEndpoint("/reports/{id}", "GET")},
        }

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/apps/``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            (or text for non‑JSON responses, ``""`` for an empty text
            body) on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            content_type = response.headers.get("Content-Type", "application/json")
            if not response.content:
                # Empty text bodies (a CSV report with no rows) stay text.
                return ("" if content_type.startswith("text/") else None), None
            if "json" in content_type:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            if not isinstance(message, str):
                # FastAPI validation errors carry a list of problems.
                message = str(message)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(
        self, category: str, operation: str, record_id: Any = None, **kwargs: Any
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self.endpoints[category][operation]
        path = ep.path.replace("{id}", str(record_id)) if record_id is not None else ep.path
        return self._request(ep.method, path, **kwargs)

    def _call_list(self, category: str, operation: str, **kwargs: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call(category, operation, **kwargs)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------
    def list_apps(
        self,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        plan: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve applications, applying the table filters server side.

        Returns:
            A tuple ``(apps, error)``.  ``apps`` is empty on failure.
        """
        params = {"search": search, "category": category, "plan": plan, "sort_by": sort_by, "order": order}
        return self._call_list("apps", "list", params=params)

    def get_app(self, app_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("apps", "get", app_id)

    def create_app(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("apps", "create", json_body=payload)

    def update_app(self, app_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("apps", "update", app_id, json_body=payload)

    def delete_app(self, app_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("apps", "delete", app_id)

    def get_app_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve ``totalApps``, ``activeUsers``, ``totalMessages`` and ``avgResponseTime``."""
        return self._call("apps", "stats")

    # ------------------------------------------------------------------
    # User analytics
    # ------------------------------------------------------------------
    def list_user_analytics(
        self, *, sort_by: Optional[str] = None, order: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._call_list("user_analytics", "list", params={"sort_by": sort_by, "order": order})

    def get_user_analytics(self, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("user_analytics", "get", record_id)

    def create_user_analytics(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("user_analytics", "create", json_body=payload)

    def update_user_analytics(self, record_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("user_analytics", "update", record_id, json_body=payload)

    def delete_user_analytics(self, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("user_analytics", "delete", record_id)

    def get_user_summary(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("user_analytics", "summary")

    # ------------------------------------------------------------------
    # Log entries
    # ------------------------------------------------------------------
    def list_logs(
        self,
        *,
        level: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve log entries, optionally for one level only."""
        return self._call_list("logs", "list", params={"level": level, "sort_by": sort_by, "order": order})

    def get_log(self, log_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("logs", "get", log_id)

    def create_log(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("logs", "create", json_body=payload)

    def update_log(self, log_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("logs", "update", log_id, json_body=payload)

    def delete_log(self, log_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("logs", "delete", log_id)

    def get_log_level_counts(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("logs", "level_counts")

    # ------------------------------------------------------------------
    # Sales comments
    # ------------------------------------------------------------------
    def list_sales_comments(self, app_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the comments of one application, newest first."""
        return self._call_list("sales_comments", "list", params={"app_id": app_id})

    def get_sales_comment(self, comment_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("sales_comments", "get", comment_id)

    def create_sales_comment(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("sales_comments", "create", json_body=payload)

    def update_sales_comment(self, comment_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("sales_comments", "update", comment_id, json_body=payload)

    def delete_sales_comment(self, comment_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("sales_comments", "delete", comment_id)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def generate_report(
        self, report_type: str, *, date_range: str = "30d", fmt: str = "json"
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Generate a report.

        Returns:
            A tuple ``(report, error)``.  ``report`` is a dictionary for
            JSON reports and the CSV text for ``fmt="csv"``.
        """
        return self._call(
            "reports",
            "generate",
            report_type,
            params={"date_range": date_range, "format": fmt},
        )
