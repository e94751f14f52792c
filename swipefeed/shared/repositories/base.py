"""
Base Repository

This module provides a generic base repository with the common operations
the services need from the store: insert and select.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- get_by_ids()   → Fetch multiple records by primary key
- list()         → List records with equality filters and ordering
- create()       → Insert a new record

Nothing here deletes: listings are never deleted, and the taxonomy is
maintained outside the application. The one replace-style write (genre
associations) lives in ListingGenreRepository.

Generic Type Pattern:
=====================
    class ListingRepository(BaseRepository[Listing]):
        pass

    repo = ListingRepository(db)
    listing = await repo.get(listing_id)  # Returns Listing, not Any

flush() vs commit():
====================
Repository methods only flush(): the SQL is sent and visible within the
session, but the transaction stays open. Services decide when a step is
durable and call commit() themselves.
"""

from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common read and insert operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Listing, Genre)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: Iterable[Any]) -> list[ModelType]:
        """
        Get multiple records by their primary keys in one IN query.

        Args:
            ids: Ids to fetch

        Returns:
            Matching model instances (fewer than requested if some are missing),
            in no particular order
        """
        ids = list(ids)
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def list(
        self,
        *,
        offset: int = 0,
        limit: Optional[int] = None,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List records with optional equality filters and ordering.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return (None for all)
            filters: Dict of field=value for WHERE clauses
            order_by: Field name to order results by; ties are broken by id
            order_desc: If True, order descending; if False, ascending

        Returns:
            List of model instances

        Example:
            genres = await repo.list(
                filters={"is_active": True},
                order_by="sort_order",
                order_desc=False,
            )
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            if order_desc:
                query = query.order_by(order_field.desc(), self.model.id.desc())
            else:
                query = query.order_by(order_field.asc(), self.model.id.asc())

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new record.

        Adds the instance to the session and flushes to get the generated id
        and defaults.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
