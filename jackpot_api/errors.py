"""
Domain errors and their translation into the uniform JSON error envelope.

Every failed request is answered with {status, message, error, timestamp}.
Domain errors carry their own status; request validation errors report the
first failing field only; anything unexpected becomes a masked 500.
"""
from datetime import datetime, timezone
from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


class JackpotServiceError(Exception):
    """Base class for expected, client-facing failures."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def error(self) -> str:
        return _error_code(self.status_code)


class InvalidBetAmount(JackpotServiceError):
    """Bet amount missing or not strictly positive."""


class InvalidJackpotSpec(JackpotServiceError):
    """Blank jackpot name or win probability outside [0.0, 1.0]."""


class InvalidBetRequest(JackpotServiceError):
    """Bet request that cannot be settled, e.g. against an unknown jackpot."""


class JackpotNotFound(JackpotServiceError):
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, jackpot_id):
        super().__init__(f"Jackpot not found with ID: {jackpot_id}")
        self.jackpot_id = jackpot_id


def _error_code(status_code: int) -> str:
    """HTTPStatus.NOT_FOUND -> "NOT_FOUND"."""
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return "ERROR"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=int(status_code),
        content={
            "status": int(status_code),
            "message": message,
            "error": _error_code(status_code),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def first_validation_message(exc: RequestValidationError) -> str:
    """Format the first failing field as "<field>: <message>"."""
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    # loc is e.g. ("body", "betAmount") or ("query", "limit")
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if first.get("type") == "missing" and loc:
        message = f"{loc[-1]} is required"
    else:
        message = str(first.get("msg", "invalid value")).removeprefix("Value error, ")
    if not loc:
        return message
    return f"{'.'.join(loc)}: {message}"


async def handle_service_error(request: Request, exc: JackpotServiceError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(HTTPStatus.BAD_REQUEST, first_validation_message(exc))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled_exception", method=request.method, path=request.url.path, exc_info=exc)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JackpotServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
