"""Tests for listing parameter handling"""

import pytest

from issuetracker.exceptions import InvalidQueryError
from issuetracker.models import IssueStatus
from issuetracker.storage.issue_query import IssueQuery, resolve_sort


@pytest.mark.parametrize("page, limit", [(0, 10), (-1, 10), (1, 0), (1, 101)])
def test_invalid_pagination_rejected(page, limit):
    """page must be >= 1 and limit within 1..100"""
    with pytest.raises(InvalidQueryError, match="Invalid pagination parameters"):
        IssueQuery(page=page, limit=limit)


def test_limit_bounds_accepted():
    assert IssueQuery(page=1, limit=1).limit == 1
    assert IssueQuery(page=1, limit=100).limit == 100


def test_offset_is_computed_from_page():
    assert IssueQuery(page=1, limit=10).offset == 0
    assert IssueQuery(page=3, limit=25).offset == 50


def test_total_pages_rounds_up():
    query = IssueQuery(page=1, limit=10)
    assert query.total_pages(0) == 0
    assert query.total_pages(10) == 1
    assert query.total_pages(11) == 2


def test_defaults_sort_by_updated_at_desc():
    query = IssueQuery()
    assert (query.sort_field, query.sort_direction) == ("updated_at", "desc")


def test_supported_sort_fields():
    """camelCase and snake_case spellings of updatedAt are both accepted"""
    assert resolve_sort("updatedAt", "asc") == ("updated_at", "asc")
    assert resolve_sort("updated_at", "asc") == ("updated_at", "asc")
    assert resolve_sort("priority", "desc") == ("priority", "desc")
    assert resolve_sort("status", "ASC") == ("status", "asc")


def test_unsupported_sort_field_falls_back_to_default():
    """An unknown field drops the requested direction too"""
    assert resolve_sort("title", "asc") == ("updated_at", "desc")
    assert resolve_sort("id; DROP TABLE issues", "asc") == ("updated_at", "desc")


def test_unknown_direction_means_desc():
    assert resolve_sort("priority", "sideways") == ("priority", "desc")
    assert resolve_sort(None, "asc") == ("updated_at", "asc")


def test_enum_filters_are_normalized():
    query = IssueQuery(status=IssueStatus.IN_PROGRESS, priority="high")
    assert query.status == "in_progress"
    assert query.priority == "high"


def test_invalid_enum_filter_rejected():
    with pytest.raises(InvalidQueryError):
        IssueQuery(status="blocked")


def test_conditions_follow_active_filters():
    """One predicate per supplied filter, none when nothing is filtered"""
    assert IssueQuery().conditions() == []

    query = IssueQuery(search="login", status="todo", priority="low", assignee_id="u1", label_id="l1")
    assert len(query.conditions()) == 5
