"""
Repository Layer

Data access layer using the repository pattern for clean separation
of database operations from business logic.
"""

from .base_repository import BaseRepository
from .job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "JobRepository",
]
