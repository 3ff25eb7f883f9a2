import time
from datetime import datetime

from src.core.config import config
from src.core.errors import ErrorResponse
from src.core.logger import logger
from src.models.pricing import PriceResult, PricingPreviewRequest
from src.models.product import ProductAggregate
from src.models.product_snapshot import ProductSnapshot
from src.services.pricing_engine import PricingEngine
from src.services.snapshot_assembler import SnapshotAssembler


def build_product_snapshot(
    product: ProductAggregate,
    assembler: SnapshotAssembler,
    now: datetime,
) -> ProductSnapshot:
    """
    Assemble the detail snapshot of an already-loaded product.

    Args:
        product: Product aggregate supplied by the caller
        assembler: Snapshot assembler
        now: Evaluation time for discount windows and freshness

    Returns:
        ProductSnapshot: Client-ready product detail

    Raises:
        ErrorResponse: If no product aggregate was supplied
    """
    if product is None:
        logger.warning(
            "Snapshot assembly rejected: no product aggregate",
            metadata={"event": "product_snapshot_rejected"},
        )
        raise ErrorResponse("Product aggregate is required to assemble a snapshot", status_code=400)

    started = time.perf_counter()
    snapshot = assembler.assemble(product, now)

    logger.performance(
        "assemble_product_snapshot",
        (time.perf_counter() - started) * 1000,
        threshold_ms=config.slow_assembly_threshold_ms,
        metadata={"productId": product.id},
    )
    return snapshot


def preview_pricing(
    request: PricingPreviewRequest,
    pricing_engine: PricingEngine,
    now: datetime,
) -> PriceResult:
    """
    Evaluate price and discount inputs without a full product.

    Returns:
        PriceResult: Final price, discount amount, activation and remaining days
    """
    result = pricing_engine.compute_effective_price(
        request.price,
        request.discount_percent,
        request.discount_fixed,
        request.discount_start,
        request.discount_end,
        now,
    )
    logger.info(
        "Pricing preview evaluated",
        metadata={
            "event": "pricing_preview",
            "basePrice": request.price,
            "finalPrice": result.final_price,
            "discountActive": result.is_active,
        },
    )
    return result
