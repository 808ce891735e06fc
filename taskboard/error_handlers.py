"""Translate failures into problem responses.

Every handler answers with an ``application/problem+json`` body carrying
``type``, ``title``, ``status``, ``detail``, ``instance`` and ``timestamp``.
No retries or recovery happen here.
"""
from datetime import datetime, timezone
from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import BadRequestError, ConflictError, NotFoundError, TaskboardError
from .schemas import ProblemDetail

logger = structlog.get_logger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
INTERNAL_ERROR_DETAIL = "An unexpected error occurred"

_STATUS_BY_ERROR = {
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def problem_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    problem = ProblemDetail(
        title=HTTPStatus(status_code).phrase,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(problem),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _validation_detail(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "malformed request"


async def handle_domain_error(request: Request, exc: TaskboardError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("request_rejected", status_code=status_code, detail=exc.message)
    return problem_response(request, status_code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = _validation_detail(exc)
    logger.info("request_rejected", status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return problem_response(request, status.HTTP_400_BAD_REQUEST, detail)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return problem_response(request, exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", error_type=type(exc).__name__, exc_info=exc)
    return problem_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_DETAIL)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
