"""
Service Layer

Business logic for listing, aggregating and mutating tracked jobs.
"""

from .job_query_service import JobQueryService, JobPage, JobStats, MonthlyCount, month_label
from .job_mutation_service import JobMutationService

__all__ = [
    "JobQueryService",
    "JobMutationService",
    "JobPage",
    "JobStats",
    "MonthlyCount",
    "month_label",
]
