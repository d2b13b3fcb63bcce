import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class InvalidExerciseReference(ValidationFailed):
    def __init__(self, exercise_id):
        self.exercise_id = exercise_id
        super().__init__(f"Invalid exercise reference: {exercise_id}")


class NotAuthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class NotAuthorized(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Not authorized"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class UpstreamError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Upstream service failed"


class TemplateGenerationFailed(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Coach returned an unusable template"


class UpstreamUnavailable(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service unavailable"


def format_validation_errors(errors) -> str:
    """Collapse pydantic errors into 'field: reason' pairs, body prefix dropped."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
