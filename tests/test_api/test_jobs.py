"""
Tests for Jobs API endpoints.

Tests CRUD operations, filtering, sorting, pagination, statistics
and error handling for the job endpoints.
"""

import pytest
from datetime import datetime
from httpx import AsyncClient

from tests.conftest import OWNER_ID, OTHER_ID, DEMO_ID

JOBS_URL = "/api/v1/jobs"


@pytest.mark.api
@pytest.mark.asyncio
class TestListJobs:
    """GET /jobs"""

    async def test_get_jobs_empty(self, test_client: AsyncClient, auth_headers):
        """Test listing when the user has no jobs."""
        response = await test_client.get(JOBS_URL, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data == {"jobs": [], "totalJobs": 0, "numOfPages": 0}

    async def test_response_uses_camel_case(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="Engineer", company="Acme", job_type="remote")

        response = await test_client.get(JOBS_URL, headers=auth_headers)

        job = response.json()["jobs"][0]
        assert job["position"] == "Engineer"
        assert job["company"] == "Acme"
        assert job["jobType"] == "remote"
        assert job["createdBy"] == OWNER_ID
        assert "createdAt" in job and "updatedAt" in job

    async def test_only_own_jobs_are_listed(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="Mine")
        await add_job(position="Theirs", owner=OTHER_ID)

        response = await test_client.get(JOBS_URL, headers=auth_headers)

        data = response.json()
        assert data["totalJobs"] == 1
        assert [job["position"] for job in data["jobs"]] == ["Mine"]
        assert all(job["createdBy"] == OWNER_ID for job in data["jobs"])

    async def test_search_is_case_insensitive_substring(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="Engineer")
        await add_job(position="ENGINEERING Lead")
        await add_job(position="Manager")

        response = await test_client.get(JOBS_URL, params={"search": "eng"}, headers=auth_headers)

        positions = sorted(job["position"] for job in response.json()["jobs"])
        assert positions == ["ENGINEERING Lead", "Engineer"]

    async def test_search_treats_wildcards_literally(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="100% Remote")
        await add_job(position="Backend")

        response = await test_client.get(JOBS_URL, params={"search": "%"}, headers=auth_headers)

        assert [job["position"] for job in response.json()["jobs"]] == ["100% Remote"]

    async def test_status_and_job_type_filters(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="A", status="interview", job_type="remote")
        await add_job(position="B", status="interview", job_type="full-time")
        await add_job(position="C", status="declined", job_type="remote")

        response = await test_client.get(
            JOBS_URL,
            params={"status": "interview", "jobType": "remote"},
            headers=auth_headers
        )

        assert [job["position"] for job in response.json()["jobs"]] == ["A"]

    async def test_all_sentinel_imposes_no_constraint(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="A", status="interview")
        await add_job(position="B", status="declined", job_type="internship")

        response = await test_client.get(
            JOBS_URL,
            params={"status": "all", "jobType": "all", "search": ""},
            headers=auth_headers
        )

        assert response.json()["totalJobs"] == 2

    @pytest.mark.parametrize("sort,expected", [
        ("a-z", ["Apple", "Banana"]),
        ("z-a", ["Banana", "Apple"]),
    ])
    async def test_sort_by_position(self, test_client: AsyncClient, auth_headers, add_job, sort, expected):
        await add_job(position="Banana")
        await add_job(position="Apple")

        response = await test_client.get(JOBS_URL, params={"sort": sort}, headers=auth_headers)

        assert [job["position"] for job in response.json()["jobs"]] == expected

    @pytest.mark.parametrize("sort,expected", [
        ("latest", ["New", "Middle", "Old"]),
        ("oldest", ["Old", "Middle", "New"]),
    ])
    async def test_sort_by_creation_time(self, test_client: AsyncClient, auth_headers, add_job, sort, expected):
        await add_job(position="Middle", created_at=datetime(2024, 2, 1))
        await add_job(position="Old", created_at=datetime(2024, 1, 1))
        await add_job(position="New", created_at=datetime(2024, 3, 1))

        response = await test_client.get(JOBS_URL, params={"sort": sort}, headers=auth_headers)

        assert [job["position"] for job in response.json()["jobs"]] == expected

    async def test_unknown_sort_is_ignored(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="Only")

        response = await test_client.get(JOBS_URL, params={"sort": "salary"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["totalJobs"] == 1

    async def test_pagination(self, test_client: AsyncClient, auth_headers, add_job):
        for day in range(1, 8):
            await add_job(position=f"Job {day}", created_at=datetime(2024, 1, day))

        response = await test_client.get(
            JOBS_URL,
            params={"sort": "oldest", "page": "2", "limit": "3"},
            headers=auth_headers
        )

        data = response.json()
        assert [job["position"] for job in data["jobs"]] == ["Job 4", "Job 5", "Job 6"]
        assert data["totalJobs"] == 7
        assert data["numOfPages"] == 3

    async def test_total_ignores_pagination(self, test_client: AsyncClient, auth_headers, add_job):
        for index in range(3):
            await add_job(position=f"Job {index}")

        response = await test_client.get(
            JOBS_URL, params={"page": "5", "limit": "2"}, headers=auth_headers
        )

        data = response.json()
        assert data["jobs"] == []
        assert data["totalJobs"] == 3
        assert data["numOfPages"] == 2

    async def test_malformed_pagination_uses_defaults(self, test_client: AsyncClient, auth_headers, add_job):
        for index in range(12):
            await add_job(position=f"Job {index}")

        response = await test_client.get(
            JOBS_URL, params={"page": "abc", "limit": "0"}, headers=auth_headers
        )

        data = response.json()
        assert response.status_code == 200
        assert len(data["jobs"]) == 10
        assert data["numOfPages"] == 2

    async def test_huge_limit_uses_default(self, test_client: AsyncClient, auth_headers, add_job):
        for index in range(12):
            await add_job(position=f"Job {index}")

        response = await test_client.get(
            JOBS_URL, params={"limit": str(10 ** 20)}, headers=auth_headers
        )

        assert response.status_code == 200
        assert len(response.json()["jobs"]) == 10

    async def test_largest_page_is_empty(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job()

        response = await test_client.get(
            JOBS_URL, params={"page": str(2 ** 63 - 1), "limit": "7"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["jobs"] == []
        assert response.json()["totalJobs"] == 1

    async def test_out_of_range_page_uses_first_page(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(position="Only")

        response = await test_client.get(
            JOBS_URL, params={"page": str(10 ** 20)}, headers=auth_headers
        )

        assert response.status_code == 200
        assert [job["position"] for job in response.json()["jobs"]] == ["Only"]


@pytest.mark.api
@pytest.mark.asyncio
class TestJobStats:
    """GET /jobs/stats"""

    async def test_stats_empty(self, test_client: AsyncClient, auth_headers):
        response = await test_client.get(f"{JOBS_URL}/stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "defaultStats": {"pending": 0, "interview": 0, "declined": 0},
            "monthlyApplications": []
        }

    async def test_stats_default_missing_statuses_to_zero(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(status="pending")
        await add_job(status="pending")
        await add_job(status="interview")
        await add_job(status="declined", owner=OTHER_ID)

        response = await test_client.get(f"{JOBS_URL}/stats", headers=auth_headers)

        assert response.json()["defaultStats"] == {"pending": 2, "interview": 1, "declined": 0}

    async def test_monthly_applications(self, test_client: AsyncClient, auth_headers, add_job):
        await add_job(created_at=datetime(2024, 3, 15))
        await add_job(created_at=datetime(2024, 3, 2))
        await add_job(created_at=datetime(2023, 12, 31))
        await add_job(created_at=datetime(2024, 1, 10))

        response = await test_client.get(f"{JOBS_URL}/stats", headers=auth_headers)

        assert response.json()["monthlyApplications"] == [
            {"date": "Mar 2024", "count": 2},
            {"date": "Jan 2024", "count": 1},
            {"date": "Dec 2023", "count": 1},
        ]

    async def test_monthly_applications_keep_six_most_recent(self, test_client: AsyncClient, auth_headers, add_job):
        for month in range(1, 10):
            await add_job(created_at=datetime(2024, month, 1))

        response = await test_client.get(f"{JOBS_URL}/stats", headers=auth_headers)

        labels = [item["date"] for item in response.json()["monthlyApplications"]]
        assert labels == ["Sep 2024", "Aug 2024", "Jul 2024", "Jun 2024", "May 2024", "Apr 2024"]


@pytest.mark.api
@pytest.mark.asyncio
class TestJobCrud:
    """Single-job endpoints."""

    async def test_create_job(self, test_client: AsyncClient, auth_headers):
        payload = {"company": "Acme", "position": "Backend Engineer", "jobType": "remote"}

        response = await test_client.post(JOBS_URL, json=payload, headers=auth_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["id"] is not None
        assert job["company"] == "Acme"
        assert job["position"] == "Backend Engineer"
        assert job["status"] == "pending"
        assert job["jobType"] == "remote"
        assert job["createdBy"] == OWNER_ID

    async def test_create_job_ignores_client_owner(self, test_client: AsyncClient, auth_headers):
        payload = {"company": "Acme", "position": "Engineer", "createdBy": OTHER_ID}

        response = await test_client.post(JOBS_URL, json=payload, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["job"]["createdBy"] == OWNER_ID

    async def test_create_job_missing_required_fields(self, test_client: AsyncClient, auth_headers):
        response = await test_client.post(JOBS_URL, json={"company": "Acme"}, headers=auth_headers)

        assert response.status_code == 422
        assert any("position" in str(error["loc"]) for error in response.json()["errors"])

    async def test_create_job_invalid_status(self, test_client: AsyncClient, auth_headers):
        payload = {"company": "Acme", "position": "Engineer", "status": "hired"}

        response = await test_client.post(JOBS_URL, json=payload, headers=auth_headers)

        assert response.status_code == 422

    async def test_get_job(self, test_client: AsyncClient, auth_headers, add_job):
        job = await add_job(position="Engineer")

        response = await test_client.get(f"{JOBS_URL}/{job.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["job"]["id"] == job.id

    async def test_get_job_not_found(self, test_client: AsyncClient, auth_headers):
        response = await test_client.get(f"{JOBS_URL}/99999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "No job with id 99999"

    async def test_update_job(self, test_client: AsyncClient, auth_headers, add_job):
        job = await add_job(position="Engineer", status="pending")

        response = await test_client.patch(
            f"{JOBS_URL}/{job.id}",
            json={"status": "interview", "position": "Senior Engineer"},
            headers=auth_headers
        )

        assert response.status_code == 200
        updated = response.json()["job"]
        assert updated["status"] == "interview"
        assert updated["position"] == "Senior Engineer"
        assert updated["company"] == job.company

    async def test_update_job_with_empty_company(self, test_client: AsyncClient, auth_headers, add_job):
        job = await add_job(company="Acme")

        response = await test_client.patch(
            f"{JOBS_URL}/{job.id}", json={"company": ""}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Company or Position fields cannot be empty"

        stored = await test_client.get(f"{JOBS_URL}/{job.id}", headers=auth_headers)
        assert stored.json()["job"]["company"] == "Acme"

    async def test_update_job_not_found(self, test_client: AsyncClient, auth_headers):
        response = await test_client.patch(
            f"{JOBS_URL}/99999", json={"status": "declined"}, headers=auth_headers
        )

        assert response.status_code == 404

    async def test_delete_job(self, test_client: AsyncClient, auth_headers, add_job):
        job = await add_job()

        response = await test_client.delete(f"{JOBS_URL}/{job.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.content == b""

        missing = await test_client.get(f"{JOBS_URL}/{job.id}", headers=auth_headers)
        assert missing.status_code == 404

    async def test_delete_job_not_found(self, test_client: AsyncClient, auth_headers):
        response = await test_client.delete(f"{JOBS_URL}/99999", headers=auth_headers)

        assert response.status_code == 404


@pytest.mark.api
@pytest.mark.asyncio
class TestOwnershipIsolation:
    """Another user's job must look exactly like a missing one."""

    async def test_cannot_read_other_users_job(self, test_client: AsyncClient, other_auth_headers, add_job):
        job = await add_job()

        response = await test_client.get(f"{JOBS_URL}/{job.id}", headers=other_auth_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "JOB_NOT_FOUND"

    async def test_cannot_update_other_users_job(
        self, test_client: AsyncClient, auth_headers, other_auth_headers, add_job
    ):
        job = await add_job(status="pending")

        response = await test_client.patch(
            f"{JOBS_URL}/{job.id}", json={"status": "declined"}, headers=other_auth_headers
        )

        assert response.status_code == 404
        stored = await test_client.get(f"{JOBS_URL}/{job.id}", headers=auth_headers)
        assert stored.json()["job"]["status"] == "pending"

    async def test_cannot_delete_other_users_job(
        self, test_client: AsyncClient, auth_headers, other_auth_headers, add_job
    ):
        job = await add_job()

        response = await test_client.delete(f"{JOBS_URL}/{job.id}", headers=other_auth_headers)

        assert response.status_code == 404
        stored = await test_client.get(f"{JOBS_URL}/{job.id}", headers=auth_headers)
        assert stored.status_code == 200


@pytest.mark.api
@pytest.mark.asyncio
class TestAuthentication:
    """Bearer token handling and the read-only demo account."""

    async def test_missing_token(self, test_client: AsyncClient):
        response = await test_client.get(JOBS_URL)

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_REQUIRED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_invalid_token(self, test_client: AsyncClient):
        response = await test_client.get(JOBS_URL, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_TOKEN"

    async def test_demo_user_can_read(self, test_client: AsyncClient, demo_auth_headers):
        response = await test_client.get(JOBS_URL, headers=demo_auth_headers)

        assert response.status_code == 200

    async def test_demo_user_cannot_create(self, test_client: AsyncClient, demo_auth_headers):
        response = await test_client.post(
            JOBS_URL,
            json={"company": "Acme", "position": "Engineer"},
            headers=demo_auth_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Test user - Read Only Permission"

    async def test_demo_user_cannot_update_or_delete(self, test_client: AsyncClient, demo_auth_headers, add_job):
        job = await add_job(owner=DEMO_ID)

        patch = await test_client.patch(
            f"{JOBS_URL}/{job.id}", json={"status": "declined"}, headers=demo_auth_headers
        )
        delete = await test_client.delete(f"{JOBS_URL}/{job.id}", headers=demo_auth_headers)

        assert patch.status_code == 400
        assert delete.status_code == 400
        assert delete.json()["error_code"] == "READ_ONLY_USER"
