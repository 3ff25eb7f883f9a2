"""
Product Variation Models

A variant is a concrete purchasable SKU under a parent product,
differentiated by an attribute combination (e.g. size and color).
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from src.models.inventory import StockStatus
from src.models.media import ProductPhoto


class VariantAggregate(BaseModel):
    """A variation as supplied by the aggregate loader."""
    id: int
    product_id: Optional[int] = None
    sku: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Attribute combination (e.g. {'color': 'red', 'size': 'XL'})"
    )
    regular_price: Optional[float] = Field(None, ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    stock_quantity: int = Field(0, ge=0)
    stock_status: StockStatus = StockStatus.IN_STOCK
    primary_photo: Optional[ProductPhoto] = None
    weight: Optional[float] = Field(None, ge=0)
    length: Optional[float] = Field(None, ge=0)
    width: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
