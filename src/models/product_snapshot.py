"""
Product detail snapshot models.

The snapshot is the client-facing read model of a product. Field names and
nesting are the wire contract front-end clients depend on, so renaming or
restructuring any of them is a breaking change. Every model is frozen and
holds only tuples and read-only mappings: a snapshot is built once per
request and never mutated afterwards, nested collections included.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from src.models.inventory import StockStatus
from src.models.pricing import DiscountType, PriceRange, ProfitMargin


def _read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _as_dict(value: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(value)


def empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


ReadOnlyMap = Annotated[
    Mapping[str, Any],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=Dict[str, Any]),
]
ReadOnlyCounts = Annotated[
    Mapping[str, int],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=Dict[str, int]),
]


class SnapshotModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ===== Categorization =====

class CategoryLevel(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    slug: str = ""
    level: int


class BreadcrumbItem(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    slug: str = ""


# ===== Brand & manufacturer =====

class BrandSnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    slug: str = ""
    logo: Optional[str] = None


class ManufacturerSnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    country: str = ""


class CountrySnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    code: Optional[str] = None


# ===== Pricing =====

class DiscountSnapshot(SnapshotModel):
    type: DiscountType = DiscountType.NONE
    value: float = 0.0
    fixed_amount: Optional[float] = None
    percent: Optional[float] = None
    amount: float = 0.0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: bool = False
    remaining_days: Optional[int] = None


class TaxSnapshot(SnapshotModel):
    rate: float = 0.0
    amount: float = 0.0
    included: bool = False
    tax_class: str = Field("standard", alias="class")


class PricingSnapshot(SnapshotModel):
    currency: str
    currency_symbol: str
    cost_price: float = 0.0
    regular_price: float = 0.0
    old_price: Optional[float] = None
    sale_price: Optional[float] = None
    final_price: float = 0.0
    discount: DiscountSnapshot
    tax: TaxSnapshot
    profit_margin: ProfitMargin
    price_range: Optional[PriceRange] = None


# ===== Inventory =====

class ShopStockSnapshot(SnapshotModel):
    shop_id: int
    shop_name: str = ""
    shop_slug: Optional[str] = None
    quantity: int = 0
    reserved: int = 0


class InventorySnapshot(SnapshotModel):
    stock_status: StockStatus = StockStatus.IN_STOCK
    stock_quantity: int = 0
    low_stock_threshold: int = 10
    is_low_stock: bool = False
    allow_backorders: bool = False
    manage_stock: bool = True
    stock_by_location: Tuple[ShopStockSnapshot, ...] = ()
    sold_count: int = 0
    restock_date: Optional[str] = None


# ===== Variations =====

class ImageLink(SnapshotModel):
    url: Optional[str] = None
    thumbnail: Optional[str] = None


class VariantPricing(SnapshotModel):
    regular_price: float = 0.0
    sale_price: Optional[float] = None
    final_price: float = 0.0


class VariantInventory(SnapshotModel):
    stock_status: StockStatus = StockStatus.IN_STOCK
    stock_quantity: int = 0


class VariantMedia(SnapshotModel):
    primary_image: Optional[ImageLink] = None


class Dimensions(SnapshotModel):
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0


class VariantSnapshot(SnapshotModel):
    id: int
    parent_id: Optional[int] = None
    sku: str = ""
    name: str = ""
    slug: str = ""
    attributes: ReadOnlyMap = Field(default_factory=empty_mapping)
    pricing: VariantPricing
    inventory: VariantInventory
    media: VariantMedia
    weight: float = 0.0
    dimensions: Dimensions


class AttributeSnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    value: str = ""


# ===== Specifications =====

class SpecificationAttribute(SnapshotModel):
    name: str = ""
    value: str = ""


class SpecificationGroup(SnapshotModel):
    group: str
    attributes: Tuple[SpecificationAttribute, ...] = ()


# ===== Media =====

class PrimaryImage(SnapshotModel):
    id: Optional[int] = None
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    alt_text: str = ""
    width: Optional[int] = None
    height: Optional[int] = None


class GalleryImage(PrimaryImage):
    position: int = 0


class VideoSnapshot(SnapshotModel):
    id: Optional[int] = None
    type: str = "youtube"
    url: str = ""
    thumbnail: Optional[str] = None
    title: Optional[str] = None


class MediaSnapshot(SnapshotModel):
    primary_image: Optional[PrimaryImage] = None
    gallery: Tuple[GalleryImage, ...] = ()
    videos: Tuple[VideoSnapshot, ...] = ()


# ===== Reviews =====

class ReviewSummary(SnapshotModel):
    average_rating: float = 0.0
    rating_count: int = 0
    review_count: int = 0
    rating_distribution: ReadOnlyCounts = Field(default_factory=empty_mapping)
    verified_purchase_percentage: float = 0.0
    recommendation_percentage: float = 0.0


# ===== Shipping =====

class ShippingDimensions(Dimensions):
    unit: str = "cm"


class ShipsFrom(SnapshotModel):
    country: str = ""
    city: str = ""


class EstimatedDelivery(SnapshotModel):
    min_days: int = 3
    max_days: int = 7
    express_available: bool = False


class ShippingSnapshot(SnapshotModel):
    weight: float = 0.0
    weight_unit: str = "kg"
    dimensions: ShippingDimensions
    shipping_class: str = "standard"
    free_shipping: bool = False
    ships_from: ShipsFrom
    estimated_delivery: EstimatedDelivery


# ===== Badges, SEO, related products =====

class BadgesSnapshot(SnapshotModel):
    is_featured: bool = False
    is_new: bool = False
    is_trending: bool = False
    is_bestseller: bool = False
    is_on_sale: bool = False
    is_limited_edition: bool = False
    is_exclusive: bool = False
    is_eco_friendly: bool = False


class SeoSnapshot(SnapshotModel):
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: Tuple[str, ...] = ()
    canonical_url: Optional[str] = None
    og_title: str = ""
    og_description: str = ""
    og_image: Optional[str] = None
    twitter_card: str = "summary_large_image"


class RelatedProductsSnapshot(SnapshotModel):
    similar_products: Tuple[int, ...] = ()
    frequently_bought_together: Tuple[int, ...] = ()
    customers_also_viewed: Tuple[int, ...] = ()
    recently_viewed: Tuple[int, ...] = ()


# ===== Warranty, returns, bulk pricing =====

class WarrantySnapshot(SnapshotModel):
    has_warranty: bool = False
    duration: Optional[int] = None
    duration_unit: str = "months"
    type: Optional[str] = None
    details: Optional[str] = None


class ReturnPolicySnapshot(SnapshotModel):
    returnable: bool = True
    return_window_days: int = 7
    conditions: Optional[str] = None


class BulkPricingSnapshot(SnapshotModel):
    min_quantity: int = 0
    max_quantity: Optional[int] = None
    price: float = 0.0
    discount_percentage: Optional[float] = None


# ===== Supplier, FAQs, audit, analytics =====

class SupplierSnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""


class FaqSnapshot(SnapshotModel):
    id: int
    question: str = ""
    answer: str = ""


class AuditUserSnapshot(SnapshotModel):
    id: Optional[int] = None
    name: str = ""
    role: str = "admin"


class AnalyticsSnapshot(SnapshotModel):
    views_count: int = 0
    clicks_count: int = 0
    add_to_cart_count: int = 0
    purchase_count: int = 0
    conversion_rate: float = 0.0
    wishlist_count: int = 0


class ProductSnapshot(SnapshotModel):
    # Basic product information
    id: int
    sku: str = ""
    name: str = ""
    slug: str = ""
    description: str = ""
    short_description: str = ""
    status: str = "active"
    visibility: str = "visible"
    type: str = "simple"

    # Categorization
    category: Optional[CategoryLevel] = None
    sub_category: Optional[CategoryLevel] = None
    child_sub_category: Optional[CategoryLevel] = None
    breadcrumb: Tuple[BreadcrumbItem, ...] = ()
    tags: Tuple[str, ...] = ()

    # Brand & manufacturer
    brand: Optional[BrandSnapshot] = None
    manufacturer: Optional[ManufacturerSnapshot] = None
    country_of_origin: Optional[CountrySnapshot] = None

    # Pricing & inventory
    pricing: PricingSnapshot
    inventory: InventorySnapshot

    # Variations
    has_variations: bool = False
    parent_id: Optional[int] = None
    variations: Tuple[VariantSnapshot, ...] = ()
    attributes: Tuple[AttributeSnapshot, ...] = ()

    specifications: Tuple[SpecificationGroup, ...] = ()
    media: MediaSnapshot
    reviews: ReviewSummary
    shipping: ShippingSnapshot
    badges: BadgesSnapshot
    seo: SeoSnapshot
    related_products: RelatedProductsSnapshot

    # Additional information
    warranty: WarrantySnapshot
    return_policy: ReturnPolicySnapshot
    minimum_order_quantity: int = 1
    maximum_order_quantity: Optional[int] = None
    bulk_pricing: Tuple[BulkPricingSnapshot, ...] = ()

    # Supplier & vendor
    supplier: Optional[SupplierSnapshot] = None
    vendor: Optional[ReadOnlyMap] = None

    faqs: Tuple[FaqSnapshot, ...] = ()

    # Timestamps & audit
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    published_at: Optional[str] = None
    created_by: Optional[AuditUserSnapshot] = None
    updated_by: Optional[AuditUserSnapshot] = None

    analytics: AnalyticsSnapshot

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict using wire names (e.g. `tax.class`)"""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
