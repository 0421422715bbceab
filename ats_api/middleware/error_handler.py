"""Global exception handlers for the API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ats_api.domain.exceptions import InvalidDateError, RecordError
from ats_api.repositories.base import RecordNotFoundError

logger = structlog.get_logger()


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        code: str = "API_ERROR",
        status_code: int = 400,
        details: dict = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(
            message=f"{resource} not found",
            code="NOT_FOUND",
            status_code=404,
            details={"resource": resource, "id": identifier},
        )


class ConflictError(APIError):
    """Resource already exists."""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message=message,
            code="CONFLICT",
            status_code=409,
            details={"field": field} if field else {},
        )


def error_response(status_code: int, code: str, message: str, details: dict = None) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({
            "message": message,
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
        }),
    )


def _validation_errors_response(request: Request, errors: list) -> JSONResponse:
    first_error = errors[0] if errors else {}
    field = ".".join(str(loc) for loc in first_error.get("loc", []))
    message = first_error.get("msg", "Validation error")

    logger.warning(
        "Validation error",
        field=field,
        message=message,
        path=request.url.path,
    )
    # ctx may hold exception instances
    clean_errors = [{k: v for k, v in e.items() if k != "ctx"} for e in errors]
    return error_response(
        422,
        "VALIDATION_ERROR",
        message,
        {"field": field, "errors": clean_errors},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Handle custom API errors."""
        logger.warning(
            "API error",
            code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return error_response(exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body/query validation errors."""
        return _validation_errors_response(request, list(exc.errors()))

    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError) -> JSONResponse:
        """Handle malformed record data (bad dates, missing fields)."""
        field = getattr(exc, "field", None)
        logger.warning(
            "Invalid record data",
            field=field,
            message=str(exc),
            path=request.url.path,
        )
        code = "INVALID_DATE" if isinstance(exc, InvalidDateError) else "VALIDATION_ERROR"
        return error_response(422, code, str(exc), {"field": field} if field else {})

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        """Handle updates and deletes of rows that do not exist."""
        logger.warning("Record not found", model=exc.model, id=exc.record_id, path=request.url.path)
        return error_response(
            404,
            "NOT_FOUND",
            f"{exc.model} not found",
            {"resource": exc.model, "id": exc.record_id},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors."""
        logger.error(
            "Database error",
            error=str(exc),
            path=request.url.path,
        )
        return error_response(500, "DATABASE_ERROR", "A database error occurred")

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected errors."""
        logger.exception(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
