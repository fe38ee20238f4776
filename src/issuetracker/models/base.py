"""Base SQLAlchemy models and shared column helpers"""

from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone
import enum
import uuid

Base = declarative_base()


class IssueStatus(str, enum.Enum):
    """Issue status enumeration"""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELLED = "cancelled"


class IssuePriority(str, enum.Enum):
    """Issue priority enumeration"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def enum_check(column: str, enum_cls) -> str:
    """SQL CHECK expression restricting ``column`` to the enum's values"""
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"


def new_id() -> str:
    """Generate a new primary key (UUID4 string)"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
