"""Exception handlers mapping errors to the API's JSON error body."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from crmpro.errors import CRMProError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def crmpro_exception_handler(request: Request, exc: CRMProError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> 400: invalid request body")
    return error_response(status.HTTP_400_BAD_REQUEST, "Geçersiz istek")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Sunucu hatası")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CRMProError, crmpro_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
