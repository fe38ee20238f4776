"""User model"""

from sqlalchemy import Column, String, DateTime, Text

from .base import Base, new_id, utcnow


class User(Base):
    """Registered user; may create, be assigned to and comment on issues"""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(320), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}')>"
