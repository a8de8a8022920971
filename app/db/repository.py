"""Generic data-access helpers shared by the restaurant and dish services."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.orm.interfaces import ORMOption

from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Largest value an INTEGER primary key column can hold.
MAX_KEY = 2**63 - 1


def _key_in_range(entity_id: Any) -> bool:
    parts = entity_id if isinstance(entity_id, tuple) else (entity_id,)
    return all(not isinstance(part, int) or -MAX_KEY - 1 <= part <= MAX_KEY for part in parts)


class WriteResult(str, Enum):
    """Outcome of a write that can lose a race with another request."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class Repository(Generic[ModelT]):
    """CRUD access to one mapped model through a request-scoped session."""

    def __init__(self, db: Session, model: type[ModelT]) -> None:
        self.db = db
        self.model = model

    def get(self, entity_id: Any, *options: ORMOption) -> ModelT | None:
        if not _key_in_range(entity_id):
            return None
        return self.db.get(self.model, entity_id, options=options or None)

    def exists(self, entity_id: Any) -> bool:
        if not _key_in_range(entity_id):
            return False
        return self.db.get(self.model, entity_id, populate_existing=True) is not None

    def find(self, *criteria: ColumnElement[bool], options: tuple[ORMOption, ...] = ()) -> list[ModelT]:
        """Return rows matching all criteria in primary key order."""
        primary_key = self.model.__mapper__.primary_key
        query = select(self.model).options(*options).order_by(*primary_key)
        if criteria:
            query = query.where(*criteria)
        return list(self.db.scalars(query).all())

    def add(self, entity: ModelT) -> WriteResult:
        """Insert a new row; a key or constraint clash is reported as a conflict."""
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Insert into %s rejected: %s", self.model.__tablename__, exc.orig)
            return WriteResult.CONFLICT
        self.db.refresh(entity)
        return WriteResult.SUCCESS

    def update(self, entity_id: Any, values: dict[str, Any], expected_version: int | None = None) -> WriteResult:
        """Apply values to an existing row under optimistic concurrency.

        ``expected_version`` is the version the caller read the row at; a row
        that has moved on since then is a conflict. A row that changes or
        disappears between our read and the commit surfaces from SQLAlchemy as
        StaleDataError and is resolved by checking whether it still exists.
        """
        entity = self.get(entity_id)
        if entity is None:
            return WriteResult.NOT_FOUND
        if expected_version is not None and entity.version != expected_version:
            logger.warning(
                "%s id=%s is at version %s, caller expected %s",
                self.model.__tablename__,
                entity_id,
                entity.version,
                expected_version,
            )
            return WriteResult.CONFLICT

        for key, value in values.items():
            setattr(entity, key, value)
        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            if not self.exists(entity_id):
                logger.info("%s id=%s vanished during update", self.model.__tablename__, entity_id)
                return WriteResult.NOT_FOUND
            logger.warning("%s id=%s was changed concurrently", self.model.__tablename__, entity_id)
            return WriteResult.CONFLICT
        return WriteResult.SUCCESS

    def delete(self, entity_id: Any) -> WriteResult:
        entity = self.get(entity_id)
        if entity is None:
            return WriteResult.NOT_FOUND
        self.db.delete(entity)
        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            return WriteResult.NOT_FOUND
        return WriteResult.SUCCESS
