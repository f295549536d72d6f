"""
Health Check API v1 Endpoints

System health and status monitoring endpoints.
"""

from datetime import datetime, timezone
from typing import Dict, Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from jobtrack.api.deps import get_db_manager
from jobtrack.core.config import get_settings
from jobtrack.core.database import DatabaseManager
from jobtrack.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    db_manager: DatabaseManager = Depends(get_db_manager)
) -> JSONResponse:
    """Health check including a database round-trip."""
    settings = get_settings()
    database_ok = await db_manager.check_connection()

    body: Dict[str, Any] = {
        "status": "healthy" if database_ok else "unhealthy",
        "database": "healthy" if database_ok else "unavailable",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    if not database_ok:
        logger.error("Health check failed: database unavailable")

    return JSONResponse(
        status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body
    )
