"""
Correlation ID utilities for request tracing
"""

import uuid
from contextvars import ContextVar
from typing import Dict, Optional

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Context variable to store correlation ID across async operations
correlation_id_context: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context

    Returns:
        The correlation ID of the current request, or None outside a request
    """
    return correlation_id_context.get("") or None


def set_correlation_id(correlation_id: str) -> None:
    """
    Set the correlation ID in context

    Args:
        correlation_id: The correlation ID to set
    """
    correlation_id_context.set(correlation_id)


def create_correlation_id() -> str:
    """
    Create a new correlation ID

    Returns:
        str: New UUID-based correlation ID
    """
    return str(uuid.uuid4())


def extract_correlation_id_from_headers(headers: Dict[str, str]) -> Optional[str]:
    """
    Extract correlation ID from request headers

    Args:
        headers: Request headers dictionary

    Returns:
        Correlation ID from headers, or None when the caller sent none
    """
    # Try different header variations (case-insensitive)
    return (
        headers.get("x-correlation-id")
        or headers.get("X-Correlation-ID")
        or headers.get("X-CORRELATION-ID")
    )
