"""
Shared utilities package
"""

from .clock import as_utc, to_iso8601, utc_now
from .correlation_id import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    set_correlation_id,
    create_correlation_id,
    extract_correlation_id_from_headers,
)

__all__ = [
    # Clock
    "as_utc",
    "to_iso8601",
    "utc_now",
    # Correlation ID utilities
    "CORRELATION_ID_HEADER",
    "get_correlation_id",
    "set_correlation_id",
    "create_correlation_id",
    "extract_correlation_id_from_headers",
]
