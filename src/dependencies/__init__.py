"""
FastAPI dependency injection functions.

This module contains dependency providers for services, the request clock,
and other injectable components.
"""

from src.dependencies.services import (
    get_clock,
    get_pricing_engine,
    get_snapshot_assembler,
)
from src.utils.correlation_id import get_correlation_id

__all__ = [
    "get_clock",
    "get_pricing_engine",
    "get_snapshot_assembler",
    "get_correlation_id",
]
