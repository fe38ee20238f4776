"""Runtime configuration loaded from the environment"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///.issuetracker/database.db"
DEFAULT_JWT_SECRET = "issuetracker-dev-secret-change-me"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Settings for the API server, CLI and storage layer.

    Every value can be overridden with an ``ISSUETRACKER_*`` environment
    variable. Values are read when the instance is created, so tests can
    patch the environment and build a fresh ``Config()``.
    """

    def __init__(self):
        self.database_url = os.getenv("ISSUETRACKER_DATABASE_URL", DEFAULT_DATABASE_URL)
        self.jwt_secret = os.getenv("ISSUETRACKER_JWT_SECRET", DEFAULT_JWT_SECRET)
        self.jwt_algorithm = "HS256"
        self.jwt_expires_days = int(os.getenv("ISSUETRACKER_JWT_EXPIRES_DAYS", "7"))
        self.cors_origins = _split_csv(
            os.getenv(
                "ISSUETRACKER_CORS_ORIGINS",
                "http://localhost:5173,http://127.0.0.1:5173",
            )
        )
        self.log_level = os.getenv("ISSUETRACKER_LOG_LEVEL", "INFO").upper()
        self.host = os.getenv("ISSUETRACKER_HOST", "127.0.0.1")
        self.port = int(os.getenv("ISSUETRACKER_PORT", "8080"))

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    def __repr__(self):
        return f"<Config(database_url='{self.database_url}', log_level='{self.log_level}')>"
