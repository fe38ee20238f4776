"""issuetracker models package"""

from .base import Base, IssueStatus, IssuePriority
from .user import User
from .label import Label, IssueLabel
from .issue import Issue
from .comment import Comment

__all__ = [
    "Base",
    "IssueStatus",
    "IssuePriority",
    "User",
    "Label",
    "IssueLabel",
    "Issue",
    "Comment",
]
