"""
Job Query Service

Read side of the job tracker: filtered, sorted, paginated listings and
per-owner statistics.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict

from jobtrack.repositories.job_repository import JobRepository
from jobtrack.schemas.job import JobFilter, JobSort, JobStatus, PageRequest
from jobtrack.models.job import Job
from jobtrack.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class JobPage:
    """One page of a listing."""

    items: List[Job]
    total_count: int
    page_count: int


@dataclass
class MonthlyCount:
    """Applications created in a calendar month."""

    label: str
    count: int


@dataclass
class JobStats:
    """Per-status counts and the trailing monthly trend."""

    status_counts: Dict[str, int]
    monthly_trend: List[MonthlyCount] = field(default_factory=list)


MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_label(year: int, month: int) -> str:
    """
    Format a (year, 1-indexed month) pair as e.g. "Mar 2024".

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


class JobQueryService:
    """Service layer for read-only job queries."""

    def __init__(self, job_repo: JobRepository, stats_months: int = 6):
        self.job_repo = job_repo
        self.stats_months = stats_months

    async def list_jobs(
        self,
        job_filter: JobFilter,
        pagination: PageRequest,
        sort: Optional[JobSort] = None
    ) -> JobPage:
        """
        List the owner's jobs.

        Args:
            job_filter: Normalised filter, always scoped to one owner
            pagination: Page number and size
            sort: Ordering, or None for store order

        Returns:
            JobPage: Page items, total matching count and page count
        """
        items = await self.job_repo.find_page(
            job_filter,
            skip=pagination.offset,
            limit=pagination.limit,
            sort=sort
        )
        total_count = await self.job_repo.count_matching(job_filter)

        logger.debug(
            "Listed jobs",
            owner_id=job_filter.created_by,
            page=pagination.page,
            returned=len(items),
            total=total_count
        )
        return JobPage(
            items=items,
            total_count=total_count,
            page_count=pagination.page_count(total_count)
        )

    async def get_job_stats(self, owner_id: str) -> JobStats:
        """
        Aggregate the owner's jobs.

        Every JobStatus appears in ``status_counts`` (0 when the owner has
        none); ``monthly_trend`` holds at most ``stats_months`` entries,
        newest month first.
        """
        status_counts = {job_status.value: 0 for job_status in JobStatus}
        status_counts.update(await self.job_repo.count_by_status(owner_id))

        monthly = await self.job_repo.count_by_month(owner_id, months=self.stats_months)
        monthly_trend = [
            MonthlyCount(label=month_label(year, month), count=count)
            for year, month, count in monthly
        ]

        return JobStats(status_counts=status_counts, monthly_trend=monthly_trend)
