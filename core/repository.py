"""Repository classes for database operations.

Wraps common CRUD operations so routers do not repeat session handling.
"""

from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from database.models import Base, Report

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def delete_by_id(self, id: Any) -> bool:
        """Delete an object by its primary key.

        Returns:
            True if object was deleted, False if not found.
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.session.delete(obj)
        self.session.commit()
        return True


class ReportRepository(BaseRepository[Report]):
    """Queries specific to saved calculation reports."""

    def __init__(self, session: Session):
        super().__init__(Report, session)

    def count(self) -> int:
        return self.session.query(Report).count()

    def list_recent(self, skip: int = 0, limit: int = 50) -> List[Report]:
        """Return reports newest first, with pagination.

        Args:
            skip: Number of records to skip.
            limit: Maximum number of records to return.
        """
        return (
            self.session.query(Report)
            .order_by(Report.created_at.desc(), Report.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
