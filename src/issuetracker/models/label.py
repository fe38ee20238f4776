"""Label model and the issue/label association table"""

from sqlalchemy import Column, String, ForeignKey

from .base import Base, new_id


class Label(Base):
    """Named, colored tag attachable to many issues"""

    __tablename__ = "labels"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False, unique=True)
    color = Column(String(32), nullable=False)

    def __repr__(self):
        return f"<Label(id='{self.id}', name='{self.name}')>"


class IssueLabel(Base):
    """Association row linking an issue to a label"""

    __tablename__ = "issue_labels"

    # Composite primary key: an issue carries each label at most once
    issue_id = Column(String(36), ForeignKey("issues.id", ondelete="CASCADE"), primary_key=True)
    label_id = Column(String(36), ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True, index=True)

    def __repr__(self):
        return f"<IssueLabel(issue='{self.issue_id}', label='{self.label_id}')>"
