"""
Base Repository Pattern Implementation

Provides abstract base repository with common database operations
and transaction management using SQLAlchemy async sessions.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Dict, Any, Type, NoReturn

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError

from jobtrack.core.database import DatabaseManager
from jobtrack.core.exceptions import DatabaseException
from jobtrack.utils.logger import get_logger

ModelType = TypeVar("ModelType")

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType], ABC):
    """Abstract base repository providing common CRUD operations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @property
    @abstractmethod
    def model(self) -> Type[ModelType]:
        """Return the SQLAlchemy model class."""
        pass

    def get_session(self) -> AsyncSession:
        """Get database session."""
        return self.db_manager.session_factory()

    def _raise_database_error(self, action: str, error: SQLAlchemyError) -> NoReturn:
        logger.error(f"Error {action} {self.model.__name__}: {error}")
        raise DatabaseException(f"Failed {action} {self.model.__name__}") from error

    async def find_one(self, *conditions) -> Optional[ModelType]:
        """Get the single entity matching all conditions."""
        async with self.get_session() as session:
            try:
                result = await session.execute(select(self.model).where(*conditions))
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                self._raise_database_error("getting", e)

    async def count(self, *conditions) -> int:
        """Count entities matching all conditions."""
        async with self.get_session() as session:
            try:
                query = select(func.count()).select_from(self.model).where(*conditions)
                result = await session.execute(query)
                return result.scalar() or 0
            except SQLAlchemyError as e:
                self._raise_database_error("counting", e)

    async def create(self, create_data: Dict[str, Any]) -> ModelType:
        """Create new entity."""
        async with self.get_session() as session:
            try:
                db_obj = self.model(**create_data)
                session.add(db_obj)
                await session.commit()
                await session.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await session.rollback()
                self._raise_database_error("creating", e)

    async def update_where(
        self,
        update_data: Dict[str, Any],
        *conditions
    ) -> Optional[ModelType]:
        """Update the single entity matching all conditions."""
        async with self.get_session() as session:
            try:
                result = await session.execute(select(self.model).where(*conditions))
                db_obj = result.scalar_one_or_none()
                if not db_obj:
                    return None

                for field, value in update_data.items():
                    if hasattr(db_obj, field):
                        setattr(db_obj, field, value)

                await session.commit()
                await session.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await session.rollback()
                self._raise_database_error("updating", e)

    async def delete_where(self, *conditions) -> bool:
        """Delete the single entity matching all conditions."""
        async with self.get_session() as session:
            try:
                result = await session.execute(select(self.model).where(*conditions))
                db_obj = result.scalar_one_or_none()
                if not db_obj:
                    return False

                await session.delete(db_obj)
                await session.commit()
                return True
            except SQLAlchemyError as e:
                await session.rollback()
                self._raise_database_error("deleting", e)
