"""Issue model"""

from sqlalchemy import Column, String, DateTime, Text, ForeignKey, CheckConstraint

from .base import Base, IssueStatus, IssuePriority, enum_check, new_id, utcnow


class Issue(Base):
    """Issue model; labels live in ``issue_labels``"""

    __tablename__ = "issues"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)

    # Stored as plain strings, constrained by CHECKs below
    status = Column(String(20), nullable=False, default=IssueStatus.TODO.value)
    priority = Column(String(20), nullable=False, default=IssuePriority.MEDIUM.value)

    assignee_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    __table_args__ = (
        CheckConstraint(enum_check("status", IssueStatus), name="ck_issues_status"),
        CheckConstraint(enum_check("priority", IssuePriority), name="ck_issues_priority"),
    )

    def __repr__(self):
        return f"<Issue(id='{self.id}', title='{self.title[:50]}...', status='{self.status}')>"
