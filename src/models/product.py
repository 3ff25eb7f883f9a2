"""
Product aggregate models.

The aggregate loader hydrates a ProductAggregate with every relation the
detail snapshot needs. Optional relations are explicit nullable fields and
collections default to empty, so assembly never loads anything lazily.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from src.models.inventory import ShopStock, StockStatus
from src.models.media import ProductPhoto, ProductVideo
from src.models.review import ReviewAggregate
from src.models.variation import VariantAggregate

STATUS_ACTIVE = 1
STATUS_INACTIVE = 0


class Visibility(str, Enum):
    VISIBLE = "visible"
    CATALOG = "catalog"
    SEARCH = "search"
    HIDDEN = "hidden"


class ProductType(str, Enum):
    SIMPLE = "simple"
    VARIABLE = "variable"
    GROUPED = "grouped"
    BUNDLE = "bundle"


class RelationType(str, Enum):
    """Kinds of product-to-product recommendation links."""
    SIMILAR = "similar"
    FREQUENTLY_BOUGHT_TOGETHER = "frequently_bought_together"
    CUSTOMERS_ALSO_VIEWED = "customers_also_viewed"
    RECENTLY_VIEWED = "recently_viewed"


class CategoryRef(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class BrandRef(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    logo: Optional[str] = None  # file name under the brand thumbnail path


class SupplierRef(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class CountryRef(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None


class UserRef(BaseModel):
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProductAttribute(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    value: Optional[str] = None


class SpecificationEntry(BaseModel):
    group: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None


class SeoMetaEntry(BaseModel):
    name: str
    content: Optional[str] = None


class FaqEntry(BaseModel):
    id: int
    question: Optional[str] = None
    answer: Optional[str] = None


class RelatedProductLink(BaseModel):
    related_product_id: int
    relation_type: RelationType


class ProductAnalytics(BaseModel):
    views_count: int = 0
    clicks_count: int = 0
    add_to_cart_count: int = 0
    purchase_count: int = 0
    wishlist_count: int = 0
    conversion_rate: float = 0.0


class BulkPricingTier(BaseModel):
    min_quantity: int = Field(0, ge=0)
    max_quantity: Optional[int] = Field(None, ge=0)
    price: float = Field(0.0, ge=0)
    discount_percentage: Optional[float] = Field(None, ge=0, le=100)


class ProductAggregate(BaseModel):
    # Identity
    id: int
    sku: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    status: Optional[int] = STATUS_ACTIVE
    visibility: Optional[Visibility] = None
    type: Optional[ProductType] = None
    parent_id: Optional[int] = None

    # Pricing inputs
    price: Optional[float] = Field(None, ge=0)
    cost: Optional[float] = Field(None, ge=0)
    old_price: Optional[float] = Field(None, ge=0)
    discount_percent: Optional[float] = Field(None, ge=0, le=100)
    discount_fixed: Optional[float] = Field(None, ge=0)
    discount_start: Optional[datetime] = None
    discount_end: Optional[datetime] = None
    tax_rate: Optional[float] = Field(None, ge=0, le=100)
    tax_included: bool = False
    tax_class: Optional[str] = None
    currency: Optional[str] = None
    currency_symbol: Optional[str] = None
    bulk_pricing: List[BulkPricingTier] = Field(default_factory=list)

    # Inventory inputs
    stock: Optional[int] = Field(None, ge=0)
    low_stock_threshold: Optional[int] = Field(None, ge=0)
    stock_status: Optional[StockStatus] = None
    allow_backorders: bool = False
    manage_stock: bool = True
    sold_count: int = Field(0, ge=0)
    restock_date: Optional[datetime] = None
    shops: List[ShopStock] = Field(default_factory=list)

    # Categorization
    category: Optional[CategoryRef] = None
    sub_category: Optional[CategoryRef] = None
    child_sub_category: Optional[CategoryRef] = None
    tags: List[str] = Field(default_factory=list)

    # Brand, manufacturer, origin
    brand: Optional[BrandRef] = None
    supplier: Optional[SupplierRef] = None
    country: Optional[CountryRef] = None

    # Variations and attributes
    variations: List[VariantAggregate] = Field(default_factory=list)
    product_attributes: List[ProductAttribute] = Field(default_factory=list)

    # Content
    approved_reviews: List[ReviewAggregate] = Field(default_factory=list)
    analytics: Optional[ProductAnalytics] = None
    primary_photo: Optional[ProductPhoto] = None
    photos: List[ProductPhoto] = Field(default_factory=list)
    videos: List[ProductVideo] = Field(default_factory=list)
    specifications: List[SpecificationEntry] = Field(default_factory=list)
    seo_meta: List[SeoMetaEntry] = Field(default_factory=list)
    faqs: List[FaqEntry] = Field(default_factory=list)
    related_products: List[RelatedProductLink] = Field(default_factory=list)

    # Shipping
    weight: Optional[float] = Field(None, ge=0)
    weight_unit: Optional[str] = None
    length: Optional[float] = Field(None, ge=0)
    width: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    dimension_unit: Optional[str] = None
    shipping_class: Optional[str] = None
    free_shipping: bool = False
    ships_from_country: Optional[str] = None
    ships_from_city: Optional[str] = None
    min_delivery_days: Optional[int] = Field(None, ge=0)
    max_delivery_days: Optional[int] = Field(None, ge=0)
    express_available: bool = False

    # Badge flags
    is_new: bool = False
    is_featured: bool = False
    is_trending: bool = False
    is_bestseller: bool = False
    is_limited_edition: bool = False
    is_exclusive: bool = False
    is_eco_friendly: bool = False

    # Warranty and returns
    has_warranty: bool = False
    warranty_duration: Optional[int] = Field(None, ge=0)
    warranty_duration_unit: Optional[str] = None
    warranty_type: Optional[str] = None
    warranty_details: Optional[str] = None
    returnable: bool = True
    return_window_days: Optional[int] = Field(None, ge=0)
    return_conditions: Optional[str] = None
    minimum_order_quantity: Optional[int] = Field(None, ge=1)
    maximum_order_quantity: Optional[int] = Field(None, ge=1)

    # Audit trail
    created_by: Optional[UserRef] = None
    updated_by: Optional[UserRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
