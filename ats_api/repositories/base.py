"""Generic SQLAlchemy repository used as the backend for domain records."""

from typing import Any, Generic, Optional, TypeVar

import structlog
from sqlalchemy.orm import Session

from ats_api.config.database import Base

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=Base)


class RecordNotFoundError(LookupError):
    """No row exists for the given primary key."""

    def __init__(self, model: str, record_id: int):
        self.model = model
        self.record_id = record_id
        super().__init__(f"{model} {record_id} not found")


class SqlAlchemyRepository(Generic[ModelT]):
    """
    CRUD over one ORM model.

    Writes are flushed, not committed: the caller owns the transaction.
    ``create`` and ``update`` return the refreshed ORM instance, which is
    what domain records hand back from ``save()``.
    """

    model: type[ModelT]

    def __init__(self, session: Session, model: Optional[type[ModelT]] = None):
        self.session = session
        if model is not None:
            self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def create(self, payload: dict[str, Any]) -> ModelT:
        """Insert a new row."""
        instance = self.model(**payload)
        self.session.add(instance)
        self.session.flush()
        self.session.refresh(instance)

        logger.debug("Row created", model=self.model_name, id=instance.id)
        return instance

    def update(self, record_id: int, payload: dict[str, Any]) -> ModelT:
        """Overwrite the given fields of an existing row."""
        instance = self.get(record_id)
        if instance is None:
            raise RecordNotFoundError(self.model_name, record_id)

        for key, value in payload.items():
            setattr(instance, key, value)

        self.session.flush()
        self.session.refresh(instance)

        logger.debug("Row updated", model=self.model_name, id=record_id)
        return instance

    def get(self, record_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, record_id)

    def get_all(self, offset: int = 0, limit: Optional[int] = None) -> list[ModelT]:
        query = self.session.query(self.model).order_by(self.model.id).offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def delete(self, record_id: int) -> None:
        instance = self.get(record_id)
        if instance is None:
            raise RecordNotFoundError(self.model_name, record_id)

        self.session.delete(instance)
        self.session.flush()

        logger.debug("Row deleted", model=self.model_name, id=record_id)
