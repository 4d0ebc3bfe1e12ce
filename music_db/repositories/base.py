"""
Base repository pattern implementation for database operations.

This module provides a generic repository that specific model repositories
extend. Repositories only flush: committing or rolling back is left to the
caller, so several repository calls can share one transaction.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy import select
from sqlalchemy.orm import Session
import logging

from music_db.models.base import Base

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic repository for database operations.

    Attributes:
        db (Session): SQLAlchemy database session
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository with a database session and model class.

        Args:
            db (Session): SQLAlchemy database session
            model (Type[T]): SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        """
        Get all records with pagination, ordered by primary key.

        Args:
            skip (int): Number of records to skip
            limit (int): Maximum number of records to return

        Returns:
            List[T]: List of model instances
        """
        stmt = select(self.model).order_by(self.model.id).offset(skip).limit(limit)
        return list(self.db.scalars(stmt).all())

    def get_by(self, **filters: Any) -> Optional[T]:
        """
        Get the single record whose columns equal the given values.

        Args:
            **filters: Column name / value pairs, e.g. ``name="Miles Davis"``

        Returns:
            Optional[T]: Model instance if found, None otherwise

        Raises:
            MultipleResultsFound: If more than one record matches
        """
        stmt = select(self.model).filter_by(**filters)
        return self.db.scalars(stmt).one_or_none()

    def add(self, db_item: T) -> T:
        """
        Stage a new or modified record and flush it to the database.

        Args:
            db_item (T): Model instance

        Returns:
            T: The same instance, with database-generated keys populated
        """
        self.db.add(db_item)
        self.db.flush()
        return db_item

    def delete(self, db_item: T) -> None:
        """
        Delete a record and flush.

        Args:
            db_item (T): Model instance to remove
        """
        self.db.delete(db_item)
        self.db.flush()

    def search(self, query: str, skip: int = 0, limit: int = 100) -> List[T]:
        """
        Search for records matching a query string.

        Repositories that support searching override this with their own
        predicate.

        Args:
            query (str): Search query string
            skip (int): Number of records to skip
            limit (int): Maximum number of records to return

        Returns:
            List[T]: List of matching model instances
        """
        raise NotImplementedError(f"{self.model.__name__} does not support search")
