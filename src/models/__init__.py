"""
Product models package.

Exports the aggregate (input) and snapshot (output) Pydantic models.
"""

from .inventory import ShopStock, StockStatus
from .media import ProductPhoto, ProductVideo
from .pricing import (
    DiscountType,
    PriceRange,
    PriceResult,
    PricingPreviewRequest,
    ProfitMargin,
)
from .product import (
    BrandRef,
    BulkPricingTier,
    CategoryRef,
    CountryRef,
    FaqEntry,
    ProductAggregate,
    ProductAnalytics,
    ProductAttribute,
    ProductType,
    RelatedProductLink,
    RelationType,
    SeoMetaEntry,
    SpecificationEntry,
    SupplierRef,
    UserRef,
    Visibility,
)
from .product_snapshot import ProductSnapshot
from .review import RatingAggregate, ReviewAggregate
from .variation import VariantAggregate

__all__ = [
    "ShopStock",
    "StockStatus",
    "ProductPhoto",
    "ProductVideo",
    "DiscountType",
    "PriceRange",
    "PriceResult",
    "PricingPreviewRequest",
    "ProfitMargin",
    "BrandRef",
    "BulkPricingTier",
    "CategoryRef",
    "CountryRef",
    "FaqEntry",
    "ProductAggregate",
    "ProductAnalytics",
    "ProductAttribute",
    "ProductType",
    "RelatedProductLink",
    "RelationType",
    "SeoMetaEntry",
    "SpecificationEntry",
    "SupplierRef",
    "UserRef",
    "Visibility",
    "ProductSnapshot",
    "RatingAggregate",
    "ReviewAggregate",
    "VariantAggregate",
]
