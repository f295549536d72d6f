"""
Job Mutation Service

Owner-scoped create, fetch, update and delete for tracked jobs.
"""

from jobtrack.repositories.job_repository import JobRepository
from jobtrack.core.exceptions import JobNotFoundException, EmptyJobFieldException
from jobtrack.schemas.job import JobCreate, JobUpdate
from jobtrack.models.job import Job
from jobtrack.utils.logger import get_logger

logger = get_logger(__name__)


class JobMutationService:
    """Service layer for job writes and single-job reads."""

    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    async def create_job(self, owner_id: str, job_data: JobCreate) -> Job:
        """
        Create a job owned by ``owner_id``.

        Args:
            owner_id: Authenticated user ID; the only source of ownership
            job_data: Validated job fields

        Returns:
            Job: Created job
        """
        create_data = job_data.model_dump(mode="json")
        create_data["created_by"] = owner_id

        job = await self.job_repo.create(create_data)
        logger.info(f"Job {job.id} created", owner_id=owner_id)
        return job

    async def get_job(self, owner_id: str, job_id: int) -> Job:
        """
        Get one of the owner's jobs.

        Raises:
            JobNotFoundException: If no job with this ID belongs to the owner
        """
        job = await self.job_repo.get_owned(job_id, owner_id)
        if not job:
            raise JobNotFoundException(job_id)
        return job

    async def update_job(self, owner_id: str, job_id: int, job_data: JobUpdate) -> Job:
        """
        Update one of the owner's jobs with the fields that were supplied.

        Raises:
            EmptyJobFieldException: If company or position is supplied empty
            JobNotFoundException: If no job with this ID belongs to the owner
        """
        empty_fields = [
            name for name in ("company", "position")
            if name in job_data.model_fields_set
            and not (getattr(job_data, name) or "").strip()
        ]
        if empty_fields:
            raise EmptyJobFieldException(empty_fields)

        update_data = job_data.model_dump(mode="json", exclude_unset=True, exclude_none=True)

        job = await self.job_repo.update_owned(job_id, owner_id, update_data)
        if not job:
            raise JobNotFoundException(job_id)

        logger.info(f"Job {job_id} updated", owner_id=owner_id, fields=sorted(update_data))
        return job

    async def delete_job(self, owner_id: str, job_id: int) -> None:
        """
        Delete one of the owner's jobs.

        Raises:
            JobNotFoundException: If no job with this ID belongs to the owner
        """
        if not await self.job_repo.delete_owned(job_id, owner_id):
            raise JobNotFoundException(job_id)
        logger.info(f"Job {job_id} deleted", owner_id=owner_id)
