# shelves/sa/repositories/base.py
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type
from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session, joinedload

SortSpec = Sequence[Tuple[str, str]]

class OwnedRecordRepository:
    """Read access to a collection of records owned by a user.

    Every query is scoped to ``user_id``. Subclasses set ``model`` to a mapped
    class with ``user_id``, ``book`` and ``id`` attributes.
    """

    model: Type[Any]

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _order_by(self, sort: Optional[SortSpec]) -> list:
        """Translate ``[(field, "asc"|"desc"), ...]`` into ORDER BY clauses.

        The primary key (descending) is always appended so equal sort keys
        come back in a stable order.
        """
        clauses = []
        for field, direction in sort or ():
            column = getattr(self.model, field, None)
            if column is None:
                raise ValueError(f"Cannot sort {self.model.__name__} by unknown field '{field}'")
            if direction not in ("asc", "desc"):
                raise ValueError(f"Invalid sort direction '{direction}' for field '{field}'")
            clauses.append(desc(column) if direction == "desc" else asc(column))
        clauses.append(desc(self.model.id))
        return clauses

    def _owned(self, user_id: int, filters: Optional[Dict[str, Any]]):
        """Records of one user whose book still exists.

        The inner join keeps finds, counts and offsets on the same row set.
        """
        stmt = (
            select(self.model)
            .join(self.model.book)
            .where(self.model.user_id == user_id)
        )
        for field, value in (filters or {}).items():
            stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    def find_by_owner(
        self,
        user_id: int,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[Any]:
        """Find records for a user with their book loaded.
        
        Args:
            user_id: The owner of the records
            filters: Optional equality filters (e.g. {"status": "reading"})
            sort: Sort fields and directions, applied in order
            skip: Number of records to skip
            limit: Maximum number of records to return (None for no limit)
            
        Returns:
            List of records with the ``book`` relationship loaded
        """
        stmt = (
            self._owned(user_id, filters)
            .options(joinedload(self.model.book))
            .order_by(*self._order_by(sort))
        )
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt).unique().all())

    def count_by_owner(self, user_id: int, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count records for a user matching the given filters."""
        stmt = select(func.count()).select_from(self._owned(user_id, filters).subquery())
        return self.session.scalar(stmt) or 0

    def find_one(
        self,
        user_id: int,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None
    ) -> Optional[Any]:
        """Get the first record for a user in the given order, or None."""
        stmt = self._owned(user_id, filters).order_by(*self._order_by(sort)).limit(1)
        return self.session.scalars(stmt).first()
