"""Shared persistence operations for the entity managers.

Every manager wraps one SQLAlchemy model and exposes list/get/create/update/
delete. Constraint violations surface as ConflictError, dangling references
as ValidationError, and any other database failure as PersistenceError.
"""

import logging
import uuid
from typing import Any, Dict, List, Tuple, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class CrudManager:
    """Base class for managers backed by a single model.

    Subclasses set ``model`` and ``label`` and may declare ``references``,
    a mapping of foreign key field to ``(model, label)`` that is checked
    before writes.
    """

    model: Type[Any] = None
    label: str = "Record"
    references: Dict[str, Tuple[Type[Any], str]] = {}

    def __init__(self, db: Session):
        """Initialize the manager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def _query(self):
        return self.db.query(self.model)

    def list(self) -> List[Any]:
        return self._query().all()

    def get(self, record_id: str) -> Any:
        """Get one record by primary key.

        Raises:
            NotFoundError: If no record has this ID.
        """
        model = self.db.get(self.model, record_id)
        if model is None:
            raise NotFoundError(self.label, record_id)
        return model

    def create(self, data: Dict[str, Any]) -> Any:
        """Insert a new record.

        Args:
            data: Column values; ``id`` is generated when absent.

        Returns:
            The refreshed model instance.
        """
        self._check_references(data)
        values = dict(data)
        values.setdefault("id", new_id())
        model = self.model(**values)
        self.db.add(model)
        self._commit()
        self.db.refresh(model)
        logger.info("Created %s: %s", self.label.lower(), model.id)
        return model

    def update(self, record_id: str, changes: Dict[str, Any]) -> Any:
        """Apply allow-listed changes to an existing record.

        Args:
            record_id: ID of the record to change.
            changes: Only the fields the caller explicitly set.

        Raises:
            NotFoundError: If the record does not exist.
            ValidationError: If a required column is set to null or a
                referenced row does not exist.
        """
        model = self.get(record_id)
        self._check_required(changes)
        self._check_references(changes)
        for field, value in changes.items():
            setattr(model, field, value)
        self._commit()
        self.db.refresh(model)
        logger.info("Updated %s: %s (%s)", self.label.lower(), record_id, ", ".join(changes))
        return model

    def delete(self, record_id: str) -> None:
        model = self.get(record_id)
        self.db.delete(model)
        self._commit()
        logger.info("Deleted %s: %s", self.label.lower(), record_id)

    def _check_required(self, changes: Dict[str, Any]) -> None:
        columns = self.model.__table__.columns
        for field, value in changes.items():
            if value is None and field in columns and not columns[field].nullable:
                raise ValidationError(f"{field} cannot be null")

    def _check_references(self, data: Dict[str, Any]) -> None:
        for field, (ref_model, ref_label) in self.references.items():
            value = data.get(field)
            if value is not None and self.db.get(ref_model, value) is None:
                raise ValidationError(f"{ref_label} '{value}' does not exist")

    def _commit(self) -> None:
        """Commit the session, translating database errors.

        Handles the race where a uniqueness pre-check passes for two
        requests: the database constraint catches the second one.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Constraint violation on %s: %s", self.label.lower(), e.orig)
            raise ConflictError(
                f"{self.label} conflicts with an existing record or is still referenced"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error on %s: %s", self.label.lower(), e)
            raise PersistenceError(f"Failed to save {self.label.lower()}") from e
