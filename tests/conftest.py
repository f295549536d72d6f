"""
Test Configuration for Jobtrack

Fixtures for an in-memory database, an async HTTP client, bearer tokens
and seeded jobs.
"""

import os

# Must be set before jobtrack is imported: settings are cached on first use
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("ENVIRONMENT", "testing")

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from jose import jwt

from jobtrack.main import app
from jobtrack.core.container import init_container, shutdown_container, get_container
from jobtrack.core.config import get_settings
from jobtrack.models.job import Job
from jobtrack.repositories.job_repository import JobRepository

OWNER_ID = "user-owner"
OTHER_ID = "user-other"
DEMO_ID = "user-demo"


def make_token(
    user_id: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
    **claims
) -> str:
    """Sign a token the way the upstream auth service does."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    payload = {"sub": user_id, "iat": now, "exp": expire, **claims}
    return jwt.encode(payload, secret_key or settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def db_manager():
    """Fresh in-memory database per test."""
    await init_container()
    yield get_container().get("db_manager")
    await shutdown_container()


@pytest.fixture
def job_repo(db_manager) -> JobRepository:
    return JobRepository(db_manager)


@pytest_asyncio.fixture
async def test_client(db_manager):
    """Async test client fixture."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers() -> dict:
    return bearer(make_token(OWNER_ID))


@pytest.fixture
def other_auth_headers() -> dict:
    return bearer(make_token(OTHER_ID))


@pytest.fixture
def demo_auth_headers() -> dict:
    return bearer(make_token(DEMO_ID, test_user=True))


@pytest.fixture
def add_job(db_manager):
    """Insert a job directly, optionally with a fixed creation time."""

    async def _add_job(
        position: str = "Engineer",
        company: str = "Acme",
        owner: str = OWNER_ID,
        status: str = "pending",
        job_type: str = "full-time",
        created_at: Optional[datetime] = None
    ) -> Job:
        job = Job(
            company=company,
            position=position,
            status=status,
            job_type=job_type,
            created_by=owner
        )
        if created_at is not None:
            job.created_at = created_at
            job.updated_at = created_at

        async with db_manager.session_factory() as session:
            session.add(job)
            await session.commit()
            await session.refresh(job)
        return job

    return _add_job
