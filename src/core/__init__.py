"""
Core utilities package.

Centralized core components for the Product Details Service:
- config: Environment-driven settings
- logger: Structured logging with correlation IDs
- errors: Custom exception classes and handlers
"""

# Config
from .config import config

# Errors
from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    error_response_handler,
    http_exception_handler,
    validation_exception_handler,
)

# Logger
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "error_response_handler",
    "http_exception_handler",
    "validation_exception_handler",
    "logger",
]
