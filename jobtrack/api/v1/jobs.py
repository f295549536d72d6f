"""
Job API v1 Endpoints

RESTful endpoints for the authenticated user's job applications.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from jobtrack.api.deps import (
    get_job_query_service,
    get_job_mutation_service,
    get_pagination,
    get_sort,
)
from jobtrack.core.security import CurrentUser, get_current_user, require_writable_user
from jobtrack.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobEnvelope,
    JobListResponse,
    JobFilter,
    JobSort,
    JobStatsResponse,
    MonthlyApplications,
    PageRequest,
    StatusCounts,
)
from jobtrack.services.job_query_service import JobQueryService
from jobtrack.services.job_mutation_service import JobMutationService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def get_all_jobs(
    search: Optional[str] = Query(None, description="Case-insensitive match on position"),
    job_status: Optional[str] = Query(None, alias="status", description="Status or 'all'"),
    job_type: Optional[str] = Query(None, alias="jobType", description="Job type or 'all'"),
    pagination: PageRequest = Depends(get_pagination),
    sort: Optional[JobSort] = Depends(get_sort),
    current_user: CurrentUser = Depends(get_current_user),
    service: JobQueryService = Depends(get_job_query_service)
):
    """List the current user's jobs."""
    job_filter = JobFilter.build(
        created_by=current_user.user_id,
        search=search,
        status=job_status,
        job_type=job_type
    )
    page = await service.list_jobs(job_filter, pagination, sort)

    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in page.items],
        total_jobs=page.total_count,
        num_of_pages=page.page_count
    )


@router.get("/stats", response_model=JobStatsResponse)
async def show_stats(
    current_user: CurrentUser = Depends(get_current_user),
    service: JobQueryService = Depends(get_job_query_service)
):
    """Per-status counts and monthly applications for the current user."""
    stats = await service.get_job_stats(current_user.user_id)

    return JobStatsResponse(
        default_stats=StatusCounts(**stats.status_counts),
        monthly_applications=[
            MonthlyApplications(date=item.label, count=item.count)
            for item in stats.monthly_trend
        ]
    )


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(
    job_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: JobMutationService = Depends(get_job_mutation_service)
):
    """Get one of the current user's jobs."""
    job = await service.get_job(current_user.user_id, job_id)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    current_user: CurrentUser = Depends(require_writable_user),
    service: JobMutationService = Depends(get_job_mutation_service)
):
    """Create a job owned by the current user."""
    job = await service.create_job(current_user.user_id, job_data)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: int,
    job_data: JobUpdate,
    current_user: CurrentUser = Depends(require_writable_user),
    service: JobMutationService = Depends(get_job_mutation_service)
):
    """Update one of the current user's jobs."""
    job = await service.update_job(current_user.user_id, job_id, job_data)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_job(
    job_id: int,
    current_user: CurrentUser = Depends(require_writable_user),
    service: JobMutationService = Depends(get_job_mutation_service)
):
    """Delete one of the current user's jobs."""
    await service.delete_job(current_user.user_id, job_id)
    return Response(status_code=status.HTTP_200_OK)
