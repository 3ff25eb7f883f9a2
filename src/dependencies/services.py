"""
Service layer dependency injection for FastAPI.

Provides the shared pricing engine, snapshot assembler and clock. Tests
replace any of them through `app.dependency_overrides`.
"""

from datetime import datetime

from src.services.pricing_engine import PricingEngine
from src.services.snapshot_assembler import SnapshotAssembler
from src.utils.clock import utc_now

# Stateless, so one instance serves every request
_pricing_engine = PricingEngine()
_snapshot_assembler = SnapshotAssembler(pricing_engine=_pricing_engine)


def get_clock() -> datetime:
    """
    FastAPI dependency returning the evaluation time of the request.

    Returns:
        Current UTC time
    """
    return utc_now()


def get_pricing_engine() -> PricingEngine:
    return _pricing_engine


def get_snapshot_assembler() -> SnapshotAssembler:
    """
    FastAPI dependency to get the SnapshotAssembler instance.

    Usage:
        @router.post("/snapshot")
        async def build_snapshot(
            assembler: SnapshotAssembler = Depends(get_snapshot_assembler)
        ):
            ...
    """
    return _snapshot_assembler
