"""
Job Pydantic Schemas

Request/response models for job-related API endpoints, plus the value
objects used to describe a listing query.
"""

from typing import Optional, List
from datetime import datetime
from enum import Enum
import math

from pydantic import BaseModel, Field, ConfigDict


class JobStatus(str, Enum):
    """Application status."""
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobType(str, Enum):
    """Kind of position applied for."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    INTERNSHIP = "internship"


class JobSort(str, Enum):
    """Supported listing orders."""
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["JobSort"]:
        """Return the matching sort key, or None for absent/unknown keys."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Filter value meaning "no constraint"
ALL = "all"


class JobCreate(BaseModel):
    """Schema for creating a new job. Ownership is never read from the payload."""

    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(..., min_length=1, max_length=50, description="Company name")
    position: str = Field(..., min_length=1, max_length=100, description="Position applied for")
    status: JobStatus = Field(JobStatus.PENDING, description="Application status")
    job_type: JobType = Field(JobType.FULL_TIME, alias="jobType", description="Job type")


class JobUpdate(BaseModel):
    """Schema for updating an existing job."""

    model_config = ConfigDict(populate_by_name=True)

    # Emptiness is checked by the service so it surfaces as a 400
    company: Optional[str] = Field(None, max_length=50, description="Company name")
    position: Optional[str] = Field(None, max_length=100, description="Position applied for")
    status: Optional[JobStatus] = Field(None, description="Application status")
    job_type: Optional[JobType] = Field(None, alias="jobType", description="Job type")


class JobResponse(BaseModel):
    """Schema for job response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., description="Job ID")
    company: str = Field(..., description="Company name")
    position: str = Field(..., description="Position applied for")
    status: JobStatus = Field(..., description="Application status")
    job_type: JobType = Field(..., alias="jobType", description="Job type")
    created_by: str = Field(..., alias="createdBy", description="Owner user ID")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")


class JobEnvelope(BaseModel):
    """Single job wrapped under ``job``."""

    job: JobResponse


class JobListResponse(BaseModel):
    """Schema for paginated job list response."""

    model_config = ConfigDict(populate_by_name=True)

    jobs: List[JobResponse] = Field(..., description="Jobs on the requested page")
    total_jobs: int = Field(..., alias="totalJobs", description="Jobs matching the filters")
    num_of_pages: int = Field(..., alias="numOfPages", description="Total number of pages")


class JobFilter(BaseModel):
    """
    Listing filter for one owner.

    ``None`` means no constraint on that field; ``created_by`` is always
    applied.
    """

    model_config = ConfigDict(frozen=True)

    created_by: str
    search: Optional[str] = None
    status: Optional[str] = None
    job_type: Optional[str] = None

    @classmethod
    def build(
        cls,
        created_by: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None
    ) -> "JobFilter":
        """
        Build a filter from raw query values.

        Empty values and the "all" sentinel impose no constraint.

        Args:
            created_by: Owner user ID (from the authenticated identity)
            search: Substring to look for in the position
            status: Status to match exactly
            job_type: Job type to match exactly

        Returns:
            JobFilter: Normalised filter
        """
        return cls(
            created_by=created_by,
            search=search or None,
            status=status if status and status != ALL else None,
            job_type=job_type if job_type and job_type != ALL else None,
        )


# Largest value a 64-bit signed SQL INTEGER column or OFFSET can hold
MAX_SQL_INT = 2 ** 63 - 1


def _positive_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_SQL_INT else None


class PageRequest(BaseModel):
    """Page number and size for a listing."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def page_count(self, total: int) -> int:
        """Number of pages needed to show ``total`` items."""
        return math.ceil(total / self.limit)

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        default_limit: int = 10,
        max_limit: Optional[int] = None
    ) -> "PageRequest":
        """
        Parse raw ``page``/``limit`` query values.

        Absent, non-numeric, non-positive and out-of-range values fall
        back to the defaults. The page is capped so the offset stays a
        valid SQL integer. ``max_limit`` clamps the page size when configured.
        """
        size = _positive_int(limit) or default_limit
        if max_limit is not None:
            size = min(size, max_limit)

        number = min(_positive_int(page) or 1, MAX_SQL_INT // size + 1)
        return cls(page=number, limit=size)


class StatusCounts(BaseModel):
    """Job count per status; every status is always present."""

    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplications(BaseModel):
    """Applications created in one calendar month."""

    date: str = Field(..., description="Month label, e.g. 'Mar 2024'")
    count: int = Field(..., ge=0)


class JobStatsResponse(BaseModel):
    """Schema for the statistics endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    default_stats: StatusCounts = Field(..., alias="defaultStats")
    monthly_applications: List[MonthlyApplications] = Field(..., alias="monthlyApplications")
