"""
Job Database Model

SQLAlchemy 2.0 model for tracked job applications.
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from jobtrack.core.database import Base


JOB_STATUSES = ("pending", "interview", "declined")
JOB_TYPES = ("full-time", "part-time", "remote", "internship")


def _in_clause(column: str, values: tuple) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


class Job(Base):
    """
    A job application tracked by one user.

    Every row belongs to exactly one owner (``created_by``) and all
    queries against this table are scoped by it.
    """

    __tablename__ = "jobs"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Application details
    company: Mapped[str] = mapped_column(String(50), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)
    job_type: Mapped[str] = mapped_column(String(20), default="full-time", nullable=False)

    # Ownership
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    # Table constraints
    __table_args__ = (
        CheckConstraint("length(company) > 0", name="ck_job_company_not_empty"),
        CheckConstraint("length(position) > 0", name="ck_job_position_not_empty"),
        CheckConstraint(_in_clause("status", JOB_STATUSES), name="ck_job_status_valid"),
        CheckConstraint(_in_clause("job_type", JOB_TYPES), name="ck_job_type_valid"),

        # Owner-scoped lookups, listing and monthly stats
        Index("idx_job_created_by", "created_by"),
        Index("idx_job_owner_status", "created_by", "status"),
        Index("idx_job_owner_created_at", "created_by", "created_at"),
    )

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, position='{self.position}', company='{self.company}')>"
