"""Filter, sort and pagination parameters for issue listing"""

import math
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import asc, case, desc, exists, func

from ..exceptions import InvalidQueryError
from ..models import Issue, IssueLabel, IssuePriority, IssueStatus

MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "updated_at"
DEFAULT_SORT_DIRECTION = "desc"

# Accepted sortField spellings -> canonical name
SORT_FIELD_ALIASES = {
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
    "priority": "priority",
    "status": "status",
}

# Enum declaration order is the rank: low < medium < high, todo < ... < cancelled
PRIORITY_RANK = case(
    {member.value: rank for rank, member in enumerate(IssuePriority)},
    value=Issue.priority,
)
STATUS_RANK = case(
    {member.value: rank for rank, member in enumerate(IssueStatus)},
    value=Issue.status,
)

SORT_EXPRESSIONS = {
    "updated_at": Issue.updated_at,
    "priority": PRIORITY_RANK,
    "status": STATUS_RANK,
}


def resolve_sort(field: Optional[str], direction: Optional[str]) -> tuple:
    """Map requested sort options to a supported (field, direction) pair.

    A missing field keeps the requested direction on ``updated_at``; an
    unsupported field falls back to ``updated_at desc`` entirely.
    """
    normalized_direction = "asc" if (direction or "").lower() == "asc" else "desc"
    if not field:
        return DEFAULT_SORT_FIELD, normalized_direction
    if field not in SORT_FIELD_ALIASES:
        return DEFAULT_SORT_FIELD, DEFAULT_SORT_DIRECTION
    return SORT_FIELD_ALIASES[field], normalized_direction


@dataclass
class IssueQuery:
    """One page of a filtered, sorted issue listing.

    Each optional filter contributes one bound SQLAlchemy predicate; all
    predicates are ANDed. Values are always bound parameters.
    """

    page: int = 1
    limit: int = 10
    search: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee_id: Optional[str] = None
    label_id: Optional[str] = None
    sort_field: Optional[str] = None
    sort_direction: Optional[str] = None

    def __post_init__(self):
        if self.page < 1 or self.limit < 1 or self.limit > MAX_LIMIT:
            raise InvalidQueryError("Invalid pagination parameters")

        try:
            if self.status:
                self.status = IssueStatus(self.status).value
            if self.priority:
                self.priority = IssuePriority(self.priority).value
        except ValueError as e:
            raise InvalidQueryError(str(e)) from e

        self.sort_field, self.sort_direction = resolve_sort(self.sort_field, self.sort_direction)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def conditions(self) -> List:
        """SQLAlchemy predicates for the active filters"""
        conditions = []
        if self.search:
            conditions.append(
                func.lower(Issue.title).contains(self.search.lower(), autoescape=True)
            )
        if self.status:
            conditions.append(Issue.status == self.status)
        if self.priority:
            conditions.append(Issue.priority == self.priority)
        if self.assignee_id:
            conditions.append(Issue.assignee_id == self.assignee_id)
        if self.label_id:
            # Existence test keeps one row per issue for paging and counting
            conditions.append(
                exists().where(
                    IssueLabel.issue_id == Issue.id,
                    IssueLabel.label_id == self.label_id,
                )
            )
        return conditions

    def order_by(self) -> List:
        """ORDER BY clauses; issue id breaks ties so pages never overlap"""
        direction = asc if self.sort_direction == "asc" else desc
        return [direction(SORT_EXPRESSIONS[self.sort_field]), asc(Issue.id)]

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)
