"""Label service layer"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from ..exceptions import DuplicateError
from ..models import Label
from .database import Database

logger = logging.getLogger(__name__)


class LabelService:
    """Service class for label operations"""

    def __init__(self, db: Database):
        self.db = db

    def list_labels(self) -> List[Label]:
        """All labels ordered by name"""
        with self.db.session() as session:
            return session.query(Label).order_by(Label.name.asc()).all()

    def create_label(self, name: str, color: str) -> Label:
        """Create a label; raises DuplicateError if the name is taken"""
        try:
            with self.db.session() as session:
                label = Label(name=name, color=color)
                session.add(label)
                session.flush()
        except IntegrityError as e:
            # Unique constraint on labels.name
            raise DuplicateError("Label already exists") from e

        logger.info("Created label %s (%s)", label.id, label.name)
        return label

    def delete_label(self, label_id: str) -> bool:
        """Delete a label; its issue links go with it, the issues stay"""
        with self.db.session() as session:
            deleted = (
                session.query(Label)
                .filter(Label.id == label_id)
                .delete(synchronize_session=False)
            )
        return deleted > 0
