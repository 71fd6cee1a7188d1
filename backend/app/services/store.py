"""
Noteful Backend — Record Store Base
=====================================

What:  The CRUD contract shared by FolderService and NoteService.
How:   Each method takes the request's AsyncSession, performs one statement,
       and commits (writes) before returning. Any SQLAlchemy failure is rolled
       back and re-raised as StoreError.
Why:   Folders and notes need the same five operations; only the table, the
       resource name and the writable columns differ.
Who:   Subclassed per resource; the subclasses set `model`, `resource` and
       the whitelist of columns a partial update may touch.

Contract:
    get_all(db)               → list of every record, id order
    get_by_id(db, id)         → record or None (absence is not an error)
    insert(db, fields)        → the new record with store-assigned columns
    update(db, id, fields)    → affected row count, only `fields` are written
    delete(db, id)            → affected row count
"""

import logging
from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Optional, Type, TypeVar

from sqlalchemy import asc, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """Async CRUD over one table. Stateless; one shared instance per resource."""

    model: ClassVar[Type[Base]]
    resource: ClassVar[str] = "record"
    updatable_fields: ClassVar[FrozenSet[str]] = frozenset()

    async def get_all(self, db: AsyncSession) -> List[ModelT]:
        try:
            result = await db.execute(select(self.model).order_by(asc(self.model.id)))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._fail(db, "list", e)

    async def get_by_id(self, db: AsyncSession, record_id: int) -> Optional[ModelT]:
        try:
            result = await db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail(db, "get", e, record_id=record_id)

    async def insert(self, db: AsyncSession, fields: Dict[str, Any]) -> ModelT:
        """
        Persist a new record and return it fully populated.

        The refresh after commit reads back the store-assigned columns
        (id, and for notes the modified timestamp).
        """
        record = self.model(**fields)
        try:
            db.add(record)
            await db.commit()
            await db.refresh(record)
        except SQLAlchemyError as e:
            raise await self._fail(db, "insert", e)
        logger.info("Inserted %s %s", self.resource, record.id)
        return record

    async def update(self, db: AsyncSession, record_id: int, fields: Dict[str, Any]) -> int:
        """Apply a partial update; columns absent from `fields` keep their values."""
        unknown = set(fields) - self.updatable_fields
        if unknown:
            raise ValueError(
                f"Cannot update {self.resource} field(s): {', '.join(sorted(unknown))}"
            )
        # Why no statement for an empty update: validation already rejected it,
        # and an UPDATE with no SET clause is invalid SQL
        if not fields:
            return 0
        try:
            result = await db.execute(
                update(self.model)
                .where(self.model.id == record_id)
                .values(**fields)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(db, "update", e, record_id=record_id)
        logger.info("Updated %s %s (%s)", self.resource, record_id, ", ".join(sorted(fields)))
        return result.rowcount

    async def delete(self, db: AsyncSession, record_id: int) -> int:
        try:
            result = await db.execute(
                delete(self.model)
                .where(self.model.id == record_id)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(db, "delete", e, record_id=record_id)
        logger.info("Deleted %s %s", self.resource, record_id)
        return result.rowcount

    async def _fail(
        self,
        db: AsyncSession,
        operation: str,
        error: SQLAlchemyError,
        record_id: Optional[int] = None,
    ) -> StoreError:
        """Roll back the failed unit of work and build the StoreError to raise."""
        try:
            await db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback after failed %s %s also failed", self.resource, operation)
        context: Dict[str, Any] = {
            "operation": operation,
            "resource": self.resource,
            "error_type": type(error).__name__,
            "original_error": str(error.orig) if getattr(error, "orig", None) else str(error),
        }
        if record_id is not None:
            context["record_id"] = record_id
        logger.error("Store %s on %s failed: %s", operation, self.resource, context["original_error"])
        return StoreError(
            message=f"Could not {operation} {self.resource}",
            context=context,
        )
