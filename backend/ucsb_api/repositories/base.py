"""
UCSB Resources API — Base Repository
=====================================

What:  The repository contract shared by every resource and its SQLAlchemy
       implementation.
How:   `Repository` is a Protocol: route handlers are typed against it, so
       any object with the three methods can stand in (tests pass mocks).
       `SQLAlchemyRepository` implements it once for any mapped model;
       resource repositories only name the model and their ordering.

Contract:
    find_all()       -> list of entities, insertion/storage order
    find_by_id(key)  -> entity or None (never raises for a missing key)
    save(entity)     -> persisted entity; inserts when new, overwrites when
                        the key already exists
"""

import logging
from typing import Any, Generic, List, Optional, Protocol, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ucsb_api.database import Base
from ucsb_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Protocol[ModelT]):
    """Persistence contract for one resource."""

    async def find_all(self) -> List[ModelT]: ...

    async def find_by_id(self, key: Any) -> Optional[ModelT]: ...

    async def save(self, entity: ModelT) -> ModelT: ...


class SQLAlchemyRepository(Generic[ModelT]):
    """
    Repository backed by an AsyncSession.

    The session is owned by `get_db_session`, which commits after the route
    returns; `save` only flushes so generated ids are populated on the
    returned entity.

    Subclasses set:
        model:     the mapped class
        order_by:  optional column name for find_all (None keeps storage order)
    """

    model: Type[ModelT]
    order_by: Optional[str] = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[ModelT]:
        query = select(self.model)
        if self.order_by is not None:
            query = query.order_by(getattr(self.model, self.order_by))
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error("Database error listing %s: %s", self.model.__name__, str(e))
            raise DatabaseError(
                message=f"Could not retrieve {self.model.__name__} records.",
                context={"error_type": type(e).__name__},
            ) from e
        return list(result.scalars().all())

    async def find_by_id(self, key: Any) -> Optional[ModelT]:
        """Primary-key lookup; uses the identity map before querying."""
        try:
            return await self.session.get(self.model, key)
        except SQLAlchemyError as e:
            logger.error(
                "Database error fetching %s %s: %s", self.model.__name__, key, str(e)
            )
            raise DatabaseError(
                message=f"Could not retrieve {self.model.__name__}.",
                context={"key": str(key), "error_type": type(e).__name__},
            ) from e

    async def save(self, entity: ModelT) -> ModelT:
        """
        Insert or overwrite `entity`.

        merge() returns the session-bound instance: the entity itself when it
        was loaded through this session, a pending copy for new rows, or the
        existing row updated with the entity's values when the key is taken.
        """
        try:
            merged = await self.session.merge(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving %r: %s", entity, str(e))
            raise DatabaseError(
                message=f"Could not save {self.model.__name__}.",
                context={"error_type": type(e).__name__},
            ) from e
        return merged
