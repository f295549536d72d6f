"""
Global Error Handling for Jobtrack

Maps application exceptions, request validation failures and unexpected
errors to structured JSON responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from jobtrack.core.config import get_settings
from jobtrack.core.exceptions import BaseApplicationException, ErrorSeverity
from jobtrack.utils.logger import get_logger, log_error

logger = get_logger(__name__)


async def application_exception_handler(
    request: Request,
    exc: BaseApplicationException
) -> JSONResponse:
    """Render an application exception with its own status code."""
    if exc.severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
        log_error(exc, context={"path": request.url.path, "method": request.method})
    else:
        logger.info(
            "Request rejected",
            error_code=exc.error_code,
            status_code=exc.http_status,
            path=request.url.path
        )

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
        headers=exc.headers
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Request validation failed",
            "errors": jsonable_encoder(exc.errors())
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    log_error(exc, context={"path": request.url.path, "method": request.method})

    content = {"detail": "Internal server error"}
    # Don't expose internal errors in production
    if get_settings().ENVIRONMENT != "production":
        content["error"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(BaseApplicationException, application_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
