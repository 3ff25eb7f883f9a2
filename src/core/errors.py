# Error handling utilities

import traceback

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.core.config import config
from src.core.logger import logger


class ErrorResponse(Exception):
    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


def error_response_handler(request: Request, exc: ErrorResponse):
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        **exc.details,
    }
    if config.is_development:
        metadata["traceback"] = traceback.format_exc()

    logger.error(f"Error: {exc.message}", metadata=metadata)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(
        f"HTTPException: {exc.detail}",
        metadata={"event": "http_exception", "status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    logger.error(
        "Validation error",
        metadata={"event": "validation_error", "errors": errors},
    )
    return JSONResponse(
        status_code=422, content={"error": "Validation error", "details": errors}
    )


class ErrorResponseModel(BaseModel):
    error: str
    details: dict = None
