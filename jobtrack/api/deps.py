"""
API Dependencies

Common dependencies used across API endpoints: database access,
services, listing parameters.
"""

from typing import Optional
from fastapi import Depends, Query

from jobtrack.core.config import Settings, get_settings
from jobtrack.core.container import get_container
from jobtrack.core.database import DatabaseManager
from jobtrack.repositories.job_repository import JobRepository
from jobtrack.schemas.job import JobSort, PageRequest
from jobtrack.services.job_query_service import JobQueryService
from jobtrack.services.job_mutation_service import JobMutationService


def get_db_manager() -> DatabaseManager:
    """Database manager dependency."""
    return get_container().get("db_manager")


def get_job_repository(
    db_manager: DatabaseManager = Depends(get_db_manager)
) -> JobRepository:
    """Job repository dependency."""
    return JobRepository(db_manager)


def get_job_query_service(
    job_repo: JobRepository = Depends(get_job_repository),
    settings: Settings = Depends(get_settings)
) -> JobQueryService:
    """Read-side job service dependency."""
    return JobQueryService(job_repo, stats_months=settings.STATS_MONTHS)


def get_job_mutation_service(
    job_repo: JobRepository = Depends(get_job_repository)
) -> JobMutationService:
    """Write-side job service dependency."""
    return JobMutationService(job_repo)


async def get_pagination(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Page size, defaults to DEFAULT_PAGE_LIMIT"),
    settings: Settings = Depends(get_settings)
) -> PageRequest:
    """
    Pagination dependency.

    Values are taken as raw strings so malformed input falls back to the
    defaults instead of failing validation.
    """
    return PageRequest.from_query(
        page=page,
        limit=limit,
        default_limit=settings.DEFAULT_PAGE_LIMIT,
        max_limit=settings.MAX_PAGE_LIMIT
    )


async def get_sort(
    sort: Optional[str] = Query(None, description="latest, oldest, a-z or z-a")
) -> Optional[JobSort]:
    """Sort dependency; unknown keys mean store order."""
    return JobSort.parse(sort)
