"""
Job Repository Implementation

Repository for owner-scoped job operations: filtered listing, counting
and the grouping queries behind the statistics endpoint.
"""

from typing import List, Optional, Dict, Any, Type, Tuple

from sqlalchemy import select, func, extract
from sqlalchemy.exc import SQLAlchemyError

from jobtrack.repositories.base_repository import BaseRepository
from jobtrack.models.job import Job
from jobtrack.schemas.job import JobFilter, JobSort
from jobtrack.utils.logger import get_logger

logger = get_logger(__name__)


class JobRepository(BaseRepository[Job]):
    """Repository for job database operations."""

    @property
    def model(self) -> Type[Job]:
        return Job

    def _filter_conditions(self, job_filter: JobFilter) -> list:
        """Translate a JobFilter into WHERE clauses."""
        conditions = [self.model.created_by == job_filter.created_by]

        # Case-insensitive, unanchored match on the position
        if job_filter.search:
            conditions.append(
                func.lower(self.model.position).contains(
                    job_filter.search.lower(), autoescape=True
                )
            )

        if job_filter.status:
            conditions.append(self.model.status == job_filter.status)

        if job_filter.job_type:
            conditions.append(self.model.job_type == job_filter.job_type)

        return conditions

    def _order_by(self, sort: Optional[JobSort]):
        if sort is JobSort.LATEST:
            return self.model.created_at.desc()
        if sort is JobSort.OLDEST:
            return self.model.created_at.asc()
        if sort is JobSort.A_Z:
            return self.model.position.asc()
        if sort is JobSort.Z_A:
            return self.model.position.desc()
        return None

    async def find_page(
        self,
        job_filter: JobFilter,
        skip: int = 0,
        limit: int = 10,
        sort: Optional[JobSort] = None
    ) -> List[Job]:
        """Get one page of the owner's jobs matching the filter."""
        async with self.get_session() as session:
            try:
                query = select(self.model).where(*self._filter_conditions(job_filter))

                order = self._order_by(sort)
                if order is not None:
                    query = query.order_by(order)

                query = query.offset(skip).limit(limit)

                result = await session.execute(query)
                return list(result.scalars().all())

            except SQLAlchemyError as e:
                self._raise_database_error("listing", e)

    async def count_matching(self, job_filter: JobFilter) -> int:
        """Count all of the owner's jobs matching the filter, ignoring pagination."""
        return await self.count(*self._filter_conditions(job_filter))

    async def get_owned(self, job_id: int, owner_id: str) -> Optional[Job]:
        """Get a job by ID only if it belongs to the owner."""
        return await self.find_one(
            self.model.id == job_id,
            self.model.created_by == owner_id
        )

    async def update_owned(
        self,
        job_id: int,
        owner_id: str,
        update_data: Dict[str, Any]
    ) -> Optional[Job]:
        """Update a job by ID only if it belongs to the owner."""
        return await self.update_where(
            update_data,
            self.model.id == job_id,
            self.model.created_by == owner_id
        )

    async def delete_owned(self, job_id: int, owner_id: str) -> bool:
        """Delete a job by ID only if it belongs to the owner."""
        return await self.delete_where(
            self.model.id == job_id,
            self.model.created_by == owner_id
        )

    async def count_by_status(self, owner_id: str) -> Dict[str, int]:
        """Group the owner's jobs by status. Statuses with no jobs are absent."""
        async with self.get_session() as session:
            try:
                query = select(
                    self.model.status,
                    func.count(self.model.id).label("job_count")
                ).where(
                    self.model.created_by == owner_id
                ).group_by(
                    self.model.status
                )

                result = await session.execute(query)
                return {row.status: row.job_count for row in result.all()}

            except SQLAlchemyError as e:
                self._raise_database_error("grouping by status", e)

    async def count_by_month(self, owner_id: str, months: int = 6) -> List[Tuple[int, int, int]]:
        """
        Count the owner's jobs per (year, month) of creation.

        Args:
            owner_id: Owner user ID
            months: Maximum number of month groups to return

        Returns:
            List[Tuple[int, int, int]]: (year, month, count), newest month
            first; month is 1-indexed
        """
        async with self.get_session() as session:
            try:
                year = extract("year", self.model.created_at)
                month = extract("month", self.model.created_at)

                query = select(
                    year.label("year"),
                    month.label("month"),
                    func.count(self.model.id).label("job_count")
                ).where(
                    self.model.created_by == owner_id
                ).group_by(
                    year, month
                ).order_by(
                    year.desc(), month.desc()
                ).limit(months)

                result = await session.execute(query)
                return [
                    (int(row.year), int(row.month), row.job_count)
                    for row in result.all()
                ]

            except SQLAlchemyError as e:
                self._raise_database_error("grouping by month", e)
