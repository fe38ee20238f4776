"""Comment model"""

from sqlalchemy import Column, String, DateTime, Text, ForeignKey

from .base import Base, new_id, utcnow


class Comment(Base):
    """Comment on an issue, deleted together with its issue"""

    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=new_id)
    issue_id = Column(String(36), ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True)
    # Kept when the author account is removed
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Comment(id='{self.id}', issue='{self.issue_id}')>"
