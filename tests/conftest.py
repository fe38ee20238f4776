"""Test configuration and fixtures"""

import pytest
from fastapi.testclient import TestClient

from issuetracker import security
from issuetracker.config import Config
from issuetracker.main import create_app
from issuetracker.storage.comment_service import CommentService
from issuetracker.storage.database import Database
from issuetracker.storage.issue_service import IssueService
from issuetracker.storage.label_service import LabelService
from issuetracker.storage.migrations import initialize_database
from issuetracker.storage.user_service import UserService


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Keep PBKDF2 cheap so registering users in tests is quick"""
    monkeypatch.setattr(security, "PBKDF2_ITERATIONS", 1000)


@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file inside the test's temp directory"""
    return f"sqlite:///{tmp_path / '.issuetracker' / 'database.db'}"


@pytest.fixture
def database(database_url):
    """Migrated database handle"""
    initialize_database(database_url)
    db = Database(database_url)

    yield db

    db.dispose()


@pytest.fixture
def config(database_url):
    config = Config()
    config.database_url = database_url
    config.jwt_secret = "test-secret-with-enough-bytes-for-hs256"
    return config


@pytest.fixture
def issue_service(database):
    return IssueService(database)


@pytest.fixture
def label_service(database):
    return LabelService(database)


@pytest.fixture
def comment_service(database):
    return CommentService(database)


@pytest.fixture
def user_service(database):
    return UserService(database)


@pytest.fixture
def user(user_service):
    """A registered user to act as issue creator"""
    return user_service.register_user("alice@example.com", "Alice", "secret123")


@pytest.fixture
def other_user(user_service):
    return user_service.register_user("bob@example.com", "Bob", "secret123")


@pytest.fixture
def labels(label_service):
    """Three labels keyed by name"""
    return {
        name: label_service.create_label(name, color)
        for name, color in [("bug", "#ef4444"), ("feature", "#3b82f6"), ("docs", "#10b981")]
    }


@pytest.fixture
def client(config, database):
    """Create test client"""
    app = create_app(config=config, database=database)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(client):
    """Register a user through the API and return its bearer header"""
    response = client.post(
        "/auth/register",
        json={"email": "carol@example.com", "name": "Carol", "password": "secret123"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
