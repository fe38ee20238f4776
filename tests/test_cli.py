"""Tests for the command line interface"""

import pytest

from issuetracker.cli import DEMO_ISSUES, DEMO_LABELS, DEMO_USERS, main
from issuetracker.storage.database import Database
from issuetracker.storage.issue_query import IssueQuery
from issuetracker.storage.issue_service import IssueService
from issuetracker.storage.label_service import LabelService
from issuetracker.storage.migrations import needs_migration
from issuetracker.storage.user_service import UserService


@pytest.fixture
def cli_database_url(database_url, monkeypatch):
    monkeypatch.setenv("ISSUETRACKER_DATABASE_URL", database_url)
    return database_url


def test_init_migrates(cli_database_url, capsys):
    main(["init"])

    assert needs_migration(cli_database_url) is False
    assert "Database ready" in capsys.readouterr().out


def test_seed_inserts_demo_data(cli_database_url):
    main(["seed"])

    db = Database(cli_database_url)
    try:
        assert len(UserService(db).list_users()) == len(DEMO_USERS)
        assert len(LabelService(db).list_labels()) == len(DEMO_LABELS)

        result = IssueService(db).list_issues(IssueQuery(limit=100))
        assert result["meta"]["total_issues"] == len(DEMO_ISSUES)

        mobile = [issue for issue in result["data"] if issue["title"] == "Fix mobile responsiveness"][0]
        assert mobile["assignee"] is None
        assert sorted(label["name"] for label in mobile["labels"]) == ["bug", "feature"]

        john = UserService(db).authenticate("john@test.com", "password123")
        assert john.name == "John Doe"
    finally:
        db.dispose()


def test_drop_removes_tables(cli_database_url, capsys):
    main(["seed"])
    main(["drop"])

    assert needs_migration(cli_database_url) is True
    assert "All tables dropped" in capsys.readouterr().out


def test_no_command_prints_help(cli_database_url, capsys):
    main([])

    assert "usage" in capsys.readouterr().out.lower()
