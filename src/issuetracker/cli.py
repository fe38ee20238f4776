"""issuetracker CLI entry point"""

import argparse
import logging

import uvicorn

from .config import Config
from .logging import setup_logging
from .models import IssuePriority, IssueStatus
from .storage.database import Database
from .storage.issue_service import IssueService
from .storage.label_service import LabelService
from .storage.migrations import initialize_database
from .storage.user_service import UserService

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    ("john@test.com", "John Doe"),
    ("jane@test.com", "Jane Smith"),
]

DEMO_LABELS = [
    ("bug", "#ef4444"),
    ("feature", "#3b82f6"),
    ("performance", "#f59e0b"),
]

# (title, description, status, priority, assignee email, creator email, labels)
DEMO_ISSUES = [
    ("Fix login page validation", "Login fails on invalid input",
     IssueStatus.TODO, IssuePriority.HIGH, "john@test.com", "jane@test.com", ["bug"]),
    ("Performance optimization", "Improve page load speed",
     IssueStatus.IN_PROGRESS, IssuePriority.HIGH, "john@test.com", "jane@test.com", ["performance"]),
    ("Add dark mode support", "Add dark theme",
     IssueStatus.IN_PROGRESS, IssuePriority.MEDIUM, "jane@test.com", "john@test.com", ["feature"]),
    ("Fix mobile responsiveness", "UI breaks on small screens",
     IssueStatus.DONE, IssuePriority.MEDIUM, None, "jane@test.com", ["bug", "feature"]),
    ("Fix login page and registration page validation", "Both forms accept empty input",
     IssueStatus.DONE, IssuePriority.HIGH, "john@test.com", "jane@test.com", ["bug"]),
    ("Cache dashboard queries", "Dashboard is slow for large projects",
     IssueStatus.CANCELLED, IssuePriority.LOW, "john@test.com", "jane@test.com", ["performance"]),
]


def init_database(config: Config):
    """Create the database and apply all migrations"""
    initialize_database(config.database_url)
    print(f"Database ready at {config.database_url}")


def seed(config: Config):
    """Insert demo users, labels and issues into a migrated database"""
    initialize_database(config.database_url)
    db = Database(config.database_url)
    try:
        users = UserService(db)
        labels = LabelService(db)
        issues = IssueService(db)

        user_ids = {}
        for email, name in DEMO_USERS:
            user_ids[email] = users.register_user(email, name, DEMO_PASSWORD).id

        label_ids = {}
        for name, color in DEMO_LABELS:
            label_ids[name] = labels.create_label(name, color).id

        for title, description, status, priority, assignee, creator, issue_labels in DEMO_ISSUES:
            issues.create_issue(
                title=title,
                description=description,
                status=status,
                priority=priority,
                assignee_id=user_ids[assignee] if assignee else None,
                label_ids=[label_ids[name] for name in issue_labels],
                created_by=user_ids[creator],
            )
    finally:
        db.dispose()

    print(f"Seeded {len(DEMO_USERS)} users, {len(DEMO_LABELS)} labels and {len(DEMO_ISSUES)} issues")
    print(f"Demo users log in with password '{DEMO_PASSWORD}'")


def drop(config: Config):
    """Drop all issue tracker tables"""
    db = Database(config.database_url)
    try:
        db.drop_all()
    finally:
        db.dispose()
    print("All tables dropped")


def serve(host: str, port: int, reload: bool = False):
    """Start the API server"""
    uvicorn.run(
        "issuetracker.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def main(argv=None):
    """Main CLI entry point"""
    config = Config()
    setup_logging(config.log_level)

    parser = argparse.ArgumentParser(description="issuetracker - issue tracker API server")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Init command
    subparsers.add_parser("init", help="Create the database and run migrations")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=config.host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=config.port, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    subparsers.add_parser("seed", help="Insert demo users, labels and issues")
    subparsers.add_parser("drop", help="Drop all tables")

    args = parser.parse_args(argv)

    if args.command == "init":
        init_database(config)
    elif args.command == "serve":
        serve(args.host, args.port, args.reload)
    elif args.command == "seed":
        seed(config)
    elif args.command == "drop":
        drop(config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
