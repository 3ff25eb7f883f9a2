"""Inventory models: stock status and stock held per shop location"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class StockStatus(str, Enum):
    """Enumeration of stock states a product or variant can be in."""
    IN_STOCK = "in_stock"
    OUT_OF_STOCK = "out_of_stock"
    ON_BACKORDER = "on_backorder"
    PREORDER = "preorder"


class ShopStock(BaseModel):
    """Quantity of a product held at one shop."""
    shop_id: int
    shop_name: Optional[str] = None
    shop_slug: Optional[str] = None
    quantity: int = Field(0, ge=0)
