import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


class NotFoundError(Exception):
    """Доменный сигнал "не найдено" (в том числе чужой объект)"""


def problem_response(request: Request, status_code: int, title: str, detail, **extra) -> JSONResponse:
    """Ответ в формате RFC 7807 problem details"""
    body = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
    }
    body.update(extra)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        media_type=PROBLEM_JSON
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return problem_response(request, status.HTTP_404_NOT_FOUND, "Not Found", str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Bad Request",
        "Invalid request parameters",
        errors=errors
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
