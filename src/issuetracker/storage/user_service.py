"""User service layer: registration, login and listing"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..exceptions import AuthenticationError, DuplicateError
from ..models import User
from ..security import hash_password, verify_password
from .database import Database

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Service class for user operations"""

    def __init__(self, db: Database):
        self.db = db

    def register_user(self, email: str, name: str, password: str) -> User:
        """Create a user; raises DuplicateError if the email is taken"""
        email = normalize_email(email)
        try:
            with self.db.session() as session:
                if session.query(User.id).filter(User.email == email).first():
                    raise DuplicateError("User already exists")

                user = User(email=email, name=name, password_hash=hash_password(password))
                session.add(user)
                session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            raise DuplicateError("User already exists") from e

        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials, else raise AuthenticationError"""
        with self.db.session() as session:
            user = session.query(User).filter(User.email == normalize_email(email)).first()

        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        with self.db.session() as session:
            return session.get(User, user_id)

    def list_users(self) -> List[User]:
        """All users ordered by name (used for assignee selection)"""
        with self.db.session() as session:
            return session.query(User).order_by(User.name.asc()).all()
