"""Comment service layer"""

import logging
from typing import Any, Dict, List, Optional

from ..models import Comment, Issue, User
from .database import Database

logger = logging.getLogger(__name__)


class CommentService:
    """Service class for comment operations"""

    def __init__(self, db: Database):
        self.db = db

    def create_comment(self, issue_id: str, user_id: str, content: str) -> Optional[Dict[str, Any]]:
        """Add a comment to an issue; returns None if the issue does not exist"""
        with self.db.session() as session:
            if session.get(Issue, issue_id) is None:
                return None

            comment = Comment(issue_id=issue_id, user_id=user_id, content=content)
            session.add(comment)
            session.flush()
            author = session.get(User, user_id)

            result = {
                "id": comment.id,
                "issue_id": comment.issue_id,
                "content": comment.content,
                "created_at": comment.created_at,
                "author": {"id": author.id, "name": author.name} if author else None,
            }

        logger.info("Added comment %s to issue %s", result["id"], issue_id)
        return result

    def list_comments(self, issue_id: str) -> List[Dict[str, Any]]:
        """Comments of an issue, oldest first"""
        with self.db.session() as session:
            rows = (
                session.query(
                    Comment.id,
                    Comment.issue_id,
                    Comment.content,
                    Comment.created_at,
                    User.id.label("user_id"),
                    User.name.label("user_name"),
                )
                .outerjoin(User, User.id == Comment.user_id)
                .filter(Comment.issue_id == issue_id)
                .order_by(Comment.created_at.asc(), Comment.id.asc())
                .all()
            )

        return [
            {
                "id": row.id,
                "issue_id": row.issue_id,
                "content": row.content,
                "created_at": row.created_at,
                "author": {"id": row.user_id, "name": row.user_name} if row.user_id else None,
            }
            for row in rows
        ]

    def delete_comment(self, comment_id: str) -> bool:
        with self.db.session() as session:
            deleted = (
                session.query(Comment)
                .filter(Comment.id == comment_id)
                .delete(synchronize_session=False)
            )
        return deleted > 0
