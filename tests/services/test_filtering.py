"""Tests for the filter/sort helpers."""

from datetime import datetime, timezone

import pytest

from app_insights_api.app.core.store import get_store
from app_insights_api.app.services.filtering import (
    APP_SORT_FIELDS,
    filter_apps,
    filter_logs_by_level,
    matches_search,
    sort_records,
)


@pytest.fixture
def apps():
    return get_store("apps").all()


def test_empty_filters_return_full_sequence_in_order(apps):
    assert filter_apps(apps) == apps
    assert filter_apps(apps, search="", category="", plan="") == apps


def test_search_matches_name_email_or_category_ignoring_case(apps):
    assert [a.id for a in filter_apps(apps, search="shop")] == [1, 7]
    assert [a.id for a in filter_apps(apps, search="LEARNHUB.EDU")] == [6]
    assert [a.id for a in filter_apps(apps, search="social")] == [2]


def test_selectors_are_exact_and_combined(apps):
    assert [a.id for a in filter_apps(apps, category="Finance", plan="Enterprise")] == [9]
    assert filter_apps(apps, category="finance") == []
    assert [a.id for a in filter_apps(apps, search="o", plan="Basic")] == [3, 7, 10]


def test_filter_does_not_mutate_input(apps):
    before = list(apps)
    filter_apps(apps, search="zzz")
    assert apps == before


def test_matches_search_handles_enums_and_missing_fields(apps):
    assert matches_search(apps[4], "STUCK", ["chat_analysis_status"])
    assert not matches_search(apps[4], "x", ["no_such_field"])


@pytest.mark.parametrize("field", ["app_name", "user_email", "messages_count", "last_activity", "id"])
def test_descending_is_exact_reverse_for_strict_fields(apps, field):
    ascending = sort_records(apps, field, "asc", allowed=APP_SORT_FIELDS)
    descending = sort_records(apps, field, "desc", allowed=APP_SORT_FIELDS)
    assert descending == list(reversed(ascending))


def test_text_sort_is_case_insensitive():
    records = get_store("apps").all()[:3]
    records[0].app_name = "beta"
    records[1].app_name = "Alpha"
    records[2].app_name = "gamma"
    assert [r.app_name for r in sort_records(records, "app_name")] == ["Alpha", "beta", "gamma"]


def test_numeric_sort(apps):
    ordered = sort_records(apps, "messagesCount")
    counts = [a.messages_count for a in ordered]
    assert counts == sorted(counts)


def test_ties_keep_incoming_order(apps):
    ordered = sort_records(apps, "plan")
    pro = [a.id for a in ordered if a.plan == "Pro"]
    assert pro == [1, 4, 8]


def test_unknown_field_and_order_fall_back(apps):
    ordered = sort_records(apps, "secret", "sideways", allowed=APP_SORT_FIELDS, default="app_name")
    names = [a.app_name for a in ordered]
    assert names == sorted(names, key=str.casefold)


def test_boolean_sort_puts_false_first(apps):
    ordered = sort_records(apps, "db_connected")
    flags = [a.db_connected for a in ordered]
    assert flags == sorted(flags)


def test_filter_logs_by_level():
    logs = get_store("log_entries").all()
    assert filter_logs_by_level(logs, "") == logs
    assert [log.id for log in filter_logs_by_level(logs, "debug")] == [4, 9]


def test_naive_datetimes_sort_as_utc(apps, tokyo_local_time):
    naive = apps[0].model_copy(update={"last_activity": datetime(2024, 1, 15, 14, 45)})
    aware = apps[1].model_copy(update={"last_activity": datetime(2024, 1, 15, 14, 30, tzinfo=timezone.utc)})

    ordered = sort_records([aware, naive], "lastActivity", "desc", APP_SORT_FIELDS)
    assert [a.id for a in ordered] == [1, 2]
    ordered = sort_records([naive, aware], "lastActivity", "asc", APP_SORT_FIELDS)
    assert [a.id for a in ordered] == [2, 1]
