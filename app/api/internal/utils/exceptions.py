# Third-party imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
import sentry_sdk
from starlette.exceptions import HTTPException

# Local application imports
from app.api.internal.utils.json_encoder import CustomJSONResponse
from app.core.monitoring.logging import get_logger
from app.schemas.common import BaseResponse
from app.services.exceptions import ServiceError

logger = get_logger(__name__)

# Map specific HTTP status codes to custom error codes
ERROR_MAP = {
    400: "bad_request",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "unprocessable_entity",
    500: "internal_server_error",
}

MAX_VALIDATION_ERRORS = 5


def _clean_message(message: str) -> str:
    # Remove "Value error, " prefixes pydantic adds to custom validator messages
    for prefix in ("body: Value error, ", "Value error, "):
        if message.startswith(prefix):
            return message[len(prefix) :]
    return message


def format_validation_errors(errors: list[dict]) -> tuple[str, list[dict[str, str]]]:
    """
    Turn pydantic error dicts into a short message plus per-field details.

    The field is the dotted location without the request part, e.g. "description"
    for a body field or "take" for a query parameter.
    """
    details = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(location), "message": _clean_message(error.get("msg", ""))})

    shown = [f"{d['field']}: {d['message']}" if d["field"] else d["message"] for d in details[:MAX_VALIDATION_ERRORS]]
    if len(details) > MAX_VALIDATION_ERRORS:
        shown.append("...and more errors")
    message = "; ".join(shown) if shown else "Invalid request data"
    return message, details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_exception_handler(
        request: Request,  # noqa
        exc: ServiceError,
    ) -> CustomJSONResponse:
        response = BaseResponse.failure(code=exc.code, message=exc.message)
        return CustomJSONResponse(status_code=exc.status_code, content=response.model_dump())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: HTTPException,
    ) -> CustomJSONResponse:
        error_code = ERROR_MAP.get(exc.status_code, "error")
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response = BaseResponse.failure(code=error_code, message=detail)
        return CustomJSONResponse(status_code=exc.status_code, content=response.model_dump())

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> CustomJSONResponse:
        message, details = format_validation_errors(list(exc.errors()))
        response = BaseResponse.failure(code="bad_request", message=message, details=details)
        return CustomJSONResponse(status_code=400, content=response.model_dump())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: ValidationError,
    ) -> CustomJSONResponse:
        message, details = format_validation_errors(list(exc.errors()))
        response = BaseResponse.failure(code="bad_request", message=message, details=details)
        return CustomJSONResponse(status_code=400, content=response.model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> CustomJSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
        sentry_sdk.capture_exception(exc)
        response = BaseResponse.failure(
            code="internal_server_error",
            message="An unexpected error occurred. Please try again later.",
        )
        return CustomJSONResponse(status_code=500, content=response.model_dump())
