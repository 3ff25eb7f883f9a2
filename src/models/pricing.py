"""
Pricing models.

Results produced by the pricing engine and the price-derived calculations,
plus the request body of the pricing preview endpoint.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DiscountType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"
    NONE = "none"


class PriceResult(BaseModel):
    """Effective price of a product at a point in time."""
    model_config = ConfigDict(frozen=True)

    final_price: float
    discount_amount: float = 0.0
    is_active: bool = False
    remaining_days: Optional[int] = None


class ProfitMargin(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float
    percentage: float = 0.0


class PriceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class PricingPreviewRequest(BaseModel):
    """Price and discount inputs to evaluate without a full product."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "price": 1200.0,
                "discount_percent": 10,
                "discount_start": "2025-11-01T00:00:00Z",
                "discount_end": "2025-11-30T23:59:59Z",
            }
        }
    )

    price: float = Field(0.0, ge=0)
    discount_percent: Optional[float] = Field(None, ge=0, le=100)
    discount_fixed: Optional[float] = Field(None, ge=0)
    discount_start: Optional[datetime] = None
    discount_end: Optional[datetime] = None
