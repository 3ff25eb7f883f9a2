# Router modules for the product details service
from .product_router import router as product_router

__all__ = [
    "product_router",
]
