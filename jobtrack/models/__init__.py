"""
Database Models Package

Contains SQLAlchemy ORM models for the Jobtrack application.
"""

from jobtrack.core.database import Base
from jobtrack.models.job import Job, JOB_STATUSES, JOB_TYPES

__all__ = [
    "Base",
    "Job",
    "JOB_STATUSES",
    "JOB_TYPES",
]
