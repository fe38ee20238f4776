"""Issue service layer: listing, lookup and transactional writes"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session, aliased

from ..exceptions import InvalidReferenceError
from ..models import Issue, IssueLabel, IssuePriority, IssueStatus, Label, User
from ..models.base import utcnow
from .assembler import build_issues
from .database import Database
from .issue_query import IssueQuery

logger = logging.getLogger(__name__)

# Passed as assignee_id to keep the stored assignee
UNCHANGED = object()

Creator = aliased(User, name="creator")
Assignee = aliased(User, name="assignee")

# Flat columns of the issue/creator/assignee/label join, one row per label
ISSUE_ROW_COLUMNS = (
    Issue.id,
    Issue.title,
    Issue.description,
    Issue.status,
    Issue.priority,
    Issue.created_at,
    Issue.updated_at,
    Creator.id.label("creator_id"),
    Creator.name.label("creator_name"),
    Assignee.id.label("assignee_id"),
    Assignee.name.label("assignee_name"),
    Label.id.label("label_id"),
    Label.name.label("label_name"),
    Label.color.label("label_color"),
)


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


class IssueService:
    """Service class for issue operations"""

    def __init__(self, db: Database):
        self.db = db

    def list_issues(self, query: IssueQuery) -> Dict[str, Any]:
        """List one page of issues with their creator, assignee and labels.

        LIMIT/OFFSET run on a subquery of issue ids, so a page always holds
        ``query.limit`` distinct issues no matter how many labels each has.
        """
        conditions = query.conditions()
        order_by = query.order_by()

        with self.db.session() as session:
            total = session.query(func.count(Issue.id)).filter(*conditions).scalar()

            # Pages past the end are empty; the offset may not fit in an INTEGER
            if query.offset >= total:
                rows = []
            else:
                rows = self._page_rows(session, query, conditions, order_by)

        return {
            "data": build_issues(row._asdict() for row in rows),
            "meta": {
                "page": query.page,
                "limit": query.limit,
                "total_issues": total,
                "total_pages": query.total_pages(total),
            },
        }

    def get_issue(self, issue_id: str) -> Optional[Dict[str, Any]]:
        """Get issue by ID"""
        with self.db.session() as session:
            rows = (
                self._issue_rows(session)
                .filter(Issue.id == issue_id)
                .order_by(Label.name)
                .all()
            )

        issues = build_issues(row._asdict() for row in rows)
        return issues[0] if issues else None

    def issue_exists(self, issue_id: str) -> bool:
        with self.db.session() as session:
            return session.query(Issue.id).filter(Issue.id == issue_id).first() is not None

    def create_issue(
        self,
        title: str,
        description: str,
        created_by: str,
        status: IssueStatus = IssueStatus.TODO,
        priority: IssuePriority = IssuePriority.MEDIUM,
        assignee_id: Optional[str] = None,
        label_ids: Optional[List[str]] = None,
    ) -> str:
        """Create an issue and its label links in one transaction.

        Raises InvalidReferenceError (nothing is written) when the assignee
        or any label does not exist. Returns the new issue id.
        """
        label_ids = _distinct(label_ids or [])

        with self.db.session() as session:
            self._check_references(session, assignee_id, label_ids)

            issue = Issue(
                title=title,
                description=description,
                status=IssueStatus(status).value,
                priority=IssuePriority(priority).value,
                assignee_id=assignee_id,
                created_by=created_by,
            )
            session.add(issue)
            session.flush()  # Get the issue ID

            self._insert_labels(session, issue.id, label_ids)
            issue_id = issue.id

        logger.info("Created issue %s with %d label(s)", issue_id, len(label_ids))
        return issue_id

    def update_issue(
        self,
        issue_id: str,
        assignee_id: Union[Optional[str], object] = UNCHANGED,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[IssueStatus] = None,
        priority: Optional[IssuePriority] = None,
        label_ids: Optional[List[str]] = None,
    ) -> bool:
        """Update an issue and replace its labels in one transaction.

        Scalar fields left as ``None`` keep their stored value. ``assignee_id``
        left as ``UNCHANGED`` keeps the stored assignee, ``None`` clears it. The
        label set is
        replaced wholesale by ``label_ids`` (``None`` or ``[]`` removes all).
        Returns False if the issue does not exist.
        """
        label_ids = _distinct(label_ids or [])

        with self.db.session() as session:
            issue = session.get(Issue, issue_id)
            if issue is None:
                return False

            if assignee_id is UNCHANGED:
                assignee_id = issue.assignee_id
                self._check_references(session, None, label_ids)
            else:
                self._check_references(session, assignee_id, label_ids)

            if title is not None:
                issue.title = title
            if description is not None:
                issue.description = description
            if status is not None:
                issue.status = IssueStatus(status).value
            if priority is not None:
                issue.priority = IssuePriority(priority).value
            issue.assignee_id = assignee_id
            issue.updated_at = utcnow()
            session.flush()

            session.query(IssueLabel).filter(IssueLabel.issue_id == issue_id).delete(
                synchronize_session=False
            )
            self._insert_labels(session, issue_id, label_ids)

        logger.info("Updated issue %s (%d label(s))", issue_id, len(label_ids))
        return True

    def delete_issue(self, issue_id: str) -> bool:
        """Delete an issue permanently

        Comments and label links are removed by the store's ON DELETE CASCADE.
        Returns True if deleted, False if the issue was not found.
        """
        with self.db.session() as session:
            deleted = (
                session.query(Issue)
                .filter(Issue.id == issue_id)
                .delete(synchronize_session=False)
            )

        if deleted:
            logger.info("Deleted issue %s", issue_id)
        return deleted > 0

    def _page_rows(self, session: Session, query: IssueQuery, conditions, order_by):
        page = (
            session.query(Issue.id.label("id"))
            .filter(*conditions)
            .order_by(*order_by)
            .offset(query.offset)
            .limit(query.limit)
            .subquery("page")
        )
        return (
            self._issue_rows(session, page)
            .order_by(*order_by, Label.name)
            .all()
        )

    def _issue_rows(self, session: Session, page=None):
        """Joined row query; ``page`` restricts it to a subquery of issue ids"""
        query = session.query(*ISSUE_ROW_COLUMNS)
        if page is not None:
            query = query.select_from(page).join(Issue, Issue.id == page.c.id)
        else:
            query = query.select_from(Issue)

        return (
            query
            .outerjoin(Creator, Creator.id == Issue.created_by)
            .outerjoin(Assignee, Assignee.id == Issue.assignee_id)
            .outerjoin(IssueLabel, IssueLabel.issue_id == Issue.id)
            .outerjoin(Label, Label.id == IssueLabel.label_id)
        )

    def _check_references(self, session: Session, assignee_id: Optional[str], label_ids: List[str]):
        if assignee_id is not None and session.get(User, assignee_id) is None:
            raise InvalidReferenceError(f"Assignee {assignee_id} not found")

        if label_ids:
            found = {
                label_id
                for (label_id,) in session.query(Label.id).filter(Label.id.in_(label_ids))
            }
            missing = [label_id for label_id in label_ids if label_id not in found]
            if missing:
                raise InvalidReferenceError(f"Unknown label id(s): {', '.join(missing)}")

    def _insert_labels(self, session: Session, issue_id: str, label_ids: List[str]):
        session.add_all(IssueLabel(issue_id=issue_id, label_id=label_id) for label_id in label_ids)
        session.flush()
