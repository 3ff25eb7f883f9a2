from datetime import datetime

from fastapi import APIRouter, Depends

import src.controllers.product_controller as product_controller
from src.core.errors import ErrorResponseModel
from src.dependencies.services import (
    get_clock,
    get_pricing_engine,
    get_snapshot_assembler,
)
from src.models.pricing import PriceResult, PricingPreviewRequest
from src.models.product import ProductAggregate
from src.models.product_snapshot import ProductSnapshot
from src.services.pricing_engine import PricingEngine
from src.services.snapshot_assembler import SnapshotAssembler

router = APIRouter()


@router.post(
    "/snapshot",
    response_model=ProductSnapshot,
    responses={400: {"model": ErrorResponseModel}, 422: {"model": ErrorResponseModel}},
)
async def build_product_snapshot(
    product: ProductAggregate,
    assembler: SnapshotAssembler = Depends(get_snapshot_assembler),
    now: datetime = Depends(get_clock),
):
    """
    Build the product detail snapshot of a fully-loaded product aggregate.

    The aggregate must already carry every relation (category chain, brand,
    variations, approved reviews, media, specifications, SEO meta, FAQs,
    related products). Returns:
    - pricing: effective price, discount window state, tax, profit margin
    - inventory: stock flags and stock by location
    - reviews: rating average, distribution and percentages
    - badges, seo, related_products and the remaining detail blocks
    """
    return product_controller.build_product_snapshot(product, assembler, now)


@router.post(
    "/pricing",
    response_model=PriceResult,
    responses={422: {"model": ErrorResponseModel}},
)
async def preview_pricing(
    request: PricingPreviewRequest,
    pricing_engine: PricingEngine = Depends(get_pricing_engine),
    now: datetime = Depends(get_clock),
):
    """
    Evaluate a price and discount window at the current time.
    """
    return product_controller.preview_pricing(request, pricing_engine, now)
