"""
Snapshot Assembler
Composes the product detail snapshot from a fully-loaded product aggregate.

Pricing comes from the PricingEngine, derived figures from the
DerivedAttributeCalculator, and everything else is projected straight from
the aggregate's sub-entities. Missing optional relations degrade to empty
values; assembly never fetches or persists anything.
"""
from datetime import datetime
from typing import Dict, List, Optional

from src.core.config import Config, config
from src.core.logger import logger
from src.models.inventory import StockStatus
from src.models.pricing import PriceResult
from src.models.product import (
    STATUS_ACTIVE,
    STATUS_INACTIVE,
    CategoryRef,
    ProductAggregate,
    ProductType,
    RelatedProductLink,
    RelationType,
    SpecificationEntry,
    UserRef,
    Visibility,
)
from src.models.product_snapshot import (
    AnalyticsSnapshot,
    AttributeSnapshot,
    AuditUserSnapshot,
    BadgesSnapshot,
    BrandSnapshot,
    BreadcrumbItem,
    BulkPricingSnapshot,
    CategoryLevel,
    CountrySnapshot,
    Dimensions,
    DiscountSnapshot,
    EstimatedDelivery,
    FaqSnapshot,
    GalleryImage,
    ImageLink,
    InventorySnapshot,
    ManufacturerSnapshot,
    MediaSnapshot,
    PricingSnapshot,
    PrimaryImage,
    ProductSnapshot,
    RelatedProductsSnapshot,
    ReturnPolicySnapshot,
    ReviewSummary,
    SeoSnapshot,
    ShippingDimensions,
    ShippingSnapshot,
    ShipsFrom,
    ShopStockSnapshot,
    SpecificationAttribute,
    SpecificationGroup,
    SupplierSnapshot,
    TaxSnapshot,
    VariantInventory,
    VariantMedia,
    VariantPricing,
    VariantSnapshot,
    VideoSnapshot,
    WarrantySnapshot,
)
from src.models.review import ReviewAggregate
from src.models.variation import VariantAggregate
from src.services.derived_attribute_calculator import DerivedAttributeCalculator
from src.services.media_url_resolver import MediaUrlResolver
from src.services.pricing_engine import PricingEngine
from src.utils.clock import as_utc, to_iso8601, utc_now

DEFAULT_SPECIFICATION_GROUP = "General"
DEFAULT_TWITTER_CARD = "summary_large_image"


def first_present(*candidates, default=None):
    """First candidate that is not None; empty strings count as present."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


def status_label(status: Optional[int]) -> str:
    if status == STATUS_ACTIVE:
        return "active"
    if status == STATUS_INACTIVE:
        return "inactive"
    return "draft"


class SnapshotAssembler:
    """Builds ProductSnapshot read models."""

    def __init__(
        self,
        pricing_engine: Optional[PricingEngine] = None,
        calculator: Optional[DerivedAttributeCalculator] = None,
        media_url_resolver: Optional[MediaUrlResolver] = None,
        settings: Optional[Config] = None,
    ):
        self.pricing_engine = pricing_engine or PricingEngine()
        self.calculator = calculator or DerivedAttributeCalculator()
        self.media = media_url_resolver or MediaUrlResolver()
        self.settings = settings or config

    def assemble(self, product: ProductAggregate, now: Optional[datetime] = None) -> ProductSnapshot:
        """
        Build the detail snapshot of `product` as seen at `now`.

        Args:
            product: Fully-hydrated product aggregate
            now: Evaluation time for discount windows and freshness;
                defaults to the current UTC time

        Returns:
            A new frozen ProductSnapshot

        Raises:
            ValueError: If no product aggregate is given
        """
        if product is None:
            raise ValueError("Product aggregate is required to assemble a snapshot")

        now = as_utc(now) if now is not None else utc_now()

        price = self.pricing_engine.compute_effective_price(
            product.price,
            product.discount_percent,
            product.discount_fixed,
            product.discount_start,
            product.discount_end,
            now,
        )
        has_variations = product.type == ProductType.VARIABLE and bool(product.variations)

        # Creation date overrides the stored flag
        if product.created_at is not None:
            is_new = self.calculator.is_freshly_listed(
                product.created_at, now, self.settings.new_product_window_days
            )
        else:
            is_new = product.is_new

        snapshot = ProductSnapshot(
            id=product.id,
            sku=product.sku or "",
            name=product.name or "",
            slug=product.slug or "",
            description=product.description or "",
            short_description=product.short_description or "",
            status=status_label(product.status),
            visibility=(product.visibility or Visibility.VISIBLE).value,
            type=(product.type or ProductType.SIMPLE).value,
            category=self._category_level(product.category, 1),
            sub_category=self._category_level(product.sub_category, 2),
            child_sub_category=self._category_level(product.child_sub_category, 3),
            breadcrumb=self._breadcrumb(product),
            tags=list(product.tags),
            brand=self._brand(product),
            manufacturer=self._manufacturer(product),
            country_of_origin=self._country_of_origin(product),
            pricing=self._pricing(product, price, has_variations),
            inventory=self._inventory(product),
            has_variations=has_variations,
            parent_id=product.parent_id,
            variations=[self._variant(product, variant) for variant in product.variations],
            attributes=[
                AttributeSnapshot(id=attribute.id, name=attribute.name or "", value=attribute.value or "")
                for attribute in product.product_attributes
            ],
            specifications=self._specifications(product.specifications),
            media=self._media(product),
            reviews=self._reviews(product.approved_reviews),
            shipping=self._shipping(product),
            badges=self._badges(product, is_new, price.is_active),
            seo=self._seo(product),
            related_products=self._related_products(product.related_products),
            warranty=WarrantySnapshot(
                has_warranty=product.has_warranty,
                duration=product.warranty_duration,
                duration_unit=product.warranty_duration_unit or "months",
                type=product.warranty_type,
                details=product.warranty_details,
            ),
            return_policy=ReturnPolicySnapshot(
                returnable=product.returnable,
                return_window_days=first_present(product.return_window_days, default=7),
                conditions=product.return_conditions,
            ),
            minimum_order_quantity=first_present(product.minimum_order_quantity, default=1),
            maximum_order_quantity=product.maximum_order_quantity,
            bulk_pricing=[
                BulkPricingSnapshot(
                    min_quantity=tier.min_quantity,
                    max_quantity=tier.max_quantity,
                    price=tier.price,
                    discount_percentage=tier.discount_percentage or None,
                )
                for tier in product.bulk_pricing
            ],
            supplier=self._supplier(product),
            vendor=None,
            faqs=[
                FaqSnapshot(id=faq.id, question=faq.question or "", answer=faq.answer or "")
                for faq in product.faqs
            ],
            created_at=to_iso8601(product.created_at),
            updated_at=to_iso8601(product.updated_at),
            published_at=to_iso8601(product.published_at),
            created_by=self._audit_user(product.created_by),
            updated_by=self._audit_user(product.updated_by),
            analytics=self._analytics(product),
        )

        logger.debug(
            f"Assembled snapshot for product {product.id}",
            metadata={
                "event": "product_snapshot_assembled",
                "productId": product.id,
                "discountActive": price.is_active,
                "variationCount": len(product.variations),
                "reviewCount": len(product.approved_reviews),
            },
        )
        return snapshot

    # ===== Categorization =====

    @staticmethod
    def _category_level(category: Optional[CategoryRef], level: int) -> Optional[CategoryLevel]:
        if category is None:
            return None
        return CategoryLevel(
            id=category.id,
            name=category.name or "",
            slug=category.slug or "",
            level=level,
        )

    @staticmethod
    def _breadcrumb(product: ProductAggregate) -> List[BreadcrumbItem]:
        chain = (product.category, product.sub_category, product.child_sub_category)
        return [
            BreadcrumbItem(id=level.id, name=level.name or "", slug=level.slug or "")
            for level in chain
            if level is not None
        ]

    # ===== Brand & manufacturer =====

    def _brand(self, product: ProductAggregate) -> Optional[BrandSnapshot]:
        brand = product.brand
        if brand is None:
            return None
        return BrandSnapshot(
            id=brand.id,
            name=brand.name or "",
            slug=brand.slug or "",
            logo=self.media.brand_logo(brand.logo),
        )

    @staticmethod
    def _manufacturer(product: ProductAggregate) -> Optional[ManufacturerSnapshot]:
        if product.supplier is None:
            return None
        return ManufacturerSnapshot(
            id=product.supplier.id,
            name=product.supplier.name or "",
            country=(product.country.name if product.country else None) or "",
        )

    @staticmethod
    def _country_of_origin(product: ProductAggregate) -> Optional[CountrySnapshot]:
        country = product.country
        if country is None:
            return None
        return CountrySnapshot(id=country.id, name=country.name or "", code=country.code)

    @staticmethod
    def _supplier(product: ProductAggregate) -> Optional[SupplierSnapshot]:
        supplier = product.supplier
        if supplier is None:
            return None
        return SupplierSnapshot(
            id=supplier.id,
            name=supplier.name or "",
            phone=supplier.phone or "",
            email=supplier.email or "",
            address=supplier.address or "",
        )

    # ===== Pricing & inventory =====

    def _pricing(
        self,
        product: ProductAggregate,
        price: PriceResult,
        has_variations: bool,
    ) -> PricingSnapshot:
        final_price = price.final_price
        discount_type = self.pricing_engine.discount_type(
            product.discount_percent, product.discount_fixed
        )

        return PricingSnapshot(
            currency=product.currency or self.settings.currency_name,
            currency_symbol=product.currency_symbol or self.settings.currency_symbol,
            cost_price=product.cost or 0.0,
            regular_price=product.price or 0.0,
            old_price=product.old_price or None,
            sale_price=final_price if price.is_active else None,
            final_price=final_price,
            discount=DiscountSnapshot(
                type=discount_type,
                value=product.discount_percent or 0.0,
                fixed_amount=product.discount_fixed or None,
                percent=product.discount_percent or None,
                amount=price.discount_amount,
                start_date=to_iso8601(product.discount_start),
                end_date=to_iso8601(product.discount_end),
                is_active=price.is_active,
                remaining_days=price.remaining_days,
            ),
            tax=TaxSnapshot(
                rate=product.tax_rate or 0.0,
                amount=self.calculator.tax_amount(final_price, product.tax_rate, product.tax_included),
                included=product.tax_included,
                tax_class=product.tax_class or "standard",
            ),
            profit_margin=self.calculator.profit_margin(final_price, product.cost),
            price_range=(
                self.calculator.variant_price_range(product.variations) if has_variations else None
            ),
        )

    def _inventory(self, product: ProductAggregate) -> InventorySnapshot:
        stock_quantity = product.stock or 0
        threshold = first_present(
            product.low_stock_threshold, default=self.settings.default_low_stock_threshold
        )
        return InventorySnapshot(
            stock_status=product.stock_status or StockStatus.IN_STOCK,
            stock_quantity=stock_quantity,
            low_stock_threshold=threshold,
            is_low_stock=self.calculator.is_low_stock(stock_quantity, threshold),
            allow_backorders=product.allow_backorders,
            manage_stock=product.manage_stock,
            stock_by_location=[
                ShopStockSnapshot(
                    shop_id=shop.shop_id,
                    shop_name=shop.shop_name or "",
                    shop_slug=shop.shop_slug,
                    quantity=shop.quantity,
                    reserved=0,
                )
                for shop in product.shops
            ],
            sold_count=product.sold_count,
            restock_date=to_iso8601(product.restock_date),
        )

    # ===== Variations =====

    def _variant(self, product: ProductAggregate, variant: VariantAggregate) -> VariantSnapshot:
        primary_image = None
        if variant.primary_photo is not None:
            primary_image = ImageLink(
                url=self.media.photo(variant.primary_photo.photo),
                thumbnail=self.media.photo_thumbnail(variant.primary_photo.photo),
            )

        return VariantSnapshot(
            id=variant.id,
            parent_id=first_present(variant.product_id, product.id),
            sku=variant.sku or "",
            name=variant.name or "",
            slug=variant.slug or "",
            attributes=dict(variant.attributes),
            pricing=VariantPricing(
                regular_price=variant.regular_price or 0.0,
                sale_price=variant.sale_price or None,
                final_price=self.calculator.variant_effective_price(variant),
            ),
            inventory=VariantInventory(
                stock_status=variant.stock_status,
                stock_quantity=variant.stock_quantity,
            ),
            media=VariantMedia(primary_image=primary_image),
            weight=variant.weight or 0.0,
            dimensions=Dimensions(
                length=variant.length or 0.0,
                width=variant.width or 0.0,
                height=variant.height or 0.0,
            ),
        )

    @staticmethod
    def _specifications(entries: List[SpecificationEntry]) -> List[SpecificationGroup]:
        """Group rows by group name, keeping first-seen group order."""
        grouped: Dict[str, List[SpecificationAttribute]] = {}
        for entry in entries:
            group = entry.group or DEFAULT_SPECIFICATION_GROUP
            grouped.setdefault(group, []).append(
                SpecificationAttribute(name=entry.name or "", value=entry.value or "")
            )
        return [
            SpecificationGroup(group=group, attributes=attributes)
            for group, attributes in grouped.items()
        ]

    # ===== Media =====

    def _primary_image_url(self, product: ProductAggregate) -> Optional[str]:
        if product.primary_photo is None:
            return None
        return self.media.photo(product.primary_photo.photo)

    def _media(self, product: ProductAggregate) -> MediaSnapshot:
        primary = product.primary_photo
        primary_image = None
        if primary is not None:
            primary_image = PrimaryImage(
                id=primary.id,
                url=self.media.photo(primary.photo),
                thumbnail=self.media.photo_thumbnail(primary.photo),
                alt_text=primary.alt_text or "",
                width=primary.width,
                height=primary.height,
            )

        return MediaSnapshot(
            primary_image=primary_image,
            gallery=[
                GalleryImage(
                    id=photo.id,
                    url=self.media.photo(photo.photo),
                    thumbnail=self.media.photo_thumbnail(photo.photo),
                    alt_text=photo.alt_text or "",
                    width=photo.width,
                    height=photo.height,
                    position=photo.position or 0,
                )
                for photo in product.photos
            ],
            videos=[
                VideoSnapshot(
                    id=video.id,
                    type=video.type or "youtube",
                    url=video.url or "",
                    thumbnail=video.thumbnail,
                    title=video.title,
                )
                for video in product.videos
            ],
        )

    # ===== Reviews =====

    def _reviews(self, reviews: List[ReviewAggregate]) -> ReviewSummary:
        ratings = self.calculator.rating_aggregate(reviews)
        return ReviewSummary(
            average_rating=round(ratings.average, 1),
            rating_count=ratings.count,
            review_count=ratings.count,
            rating_distribution={
                f"{star}_star": ratings.distribution.get(star, 0) for star in range(5, 0, -1)
            },
            verified_purchase_percentage=round(ratings.verified_pct, 1),
            recommendation_percentage=round(ratings.recommended_pct, 1),
        )

    # ===== Shipping & badges =====

    @staticmethod
    def _shipping(product: ProductAggregate) -> ShippingSnapshot:
        return ShippingSnapshot(
            weight=product.weight or 0.0,
            weight_unit=product.weight_unit or "kg",
            dimensions=ShippingDimensions(
                length=product.length or 0.0,
                width=product.width or 0.0,
                height=product.height or 0.0,
                unit=product.dimension_unit or "cm",
            ),
            shipping_class=product.shipping_class or "standard",
            free_shipping=product.free_shipping,
            ships_from=ShipsFrom(
                country=product.ships_from_country or "",
                city=product.ships_from_city or "",
            ),
            estimated_delivery=EstimatedDelivery(
                min_days=first_present(product.min_delivery_days, default=3),
                max_days=first_present(product.max_delivery_days, default=7),
                express_available=product.express_available,
            ),
        )

    @staticmethod
    def _badges(product: ProductAggregate, is_new: bool, is_on_sale: bool) -> BadgesSnapshot:
        return BadgesSnapshot(
            is_featured=product.is_featured,
            is_new=is_new,
            is_trending=product.is_trending,
            is_bestseller=product.is_bestseller,
            is_on_sale=is_on_sale,
            is_limited_edition=product.is_limited_edition,
            is_exclusive=product.is_exclusive,
            is_eco_friendly=product.is_eco_friendly,
        )

    # ===== SEO & related products =====

    def _seo(self, product: ProductAggregate) -> SeoSnapshot:
        """
        Each field walks its fallback chain and takes the first value that
        is set: explicit meta entry, then product copy, then a default.
        """
        meta = {entry.name: entry.content for entry in product.seo_meta}

        keywords = meta.get("meta_keywords")
        meta_keywords = (
            [keyword.strip() for keyword in keywords.split(",") if keyword.strip()]
            if keywords is not None
            else []
        )

        return SeoSnapshot(
            meta_title=first_present(meta.get("meta_title"), product.name, default=""),
            meta_description=first_present(
                meta.get("meta_description"),
                product.short_description,
                product.description,
                default="",
            ),
            meta_keywords=meta_keywords,
            canonical_url=meta.get("canonical_url"),
            og_title=first_present(meta.get("og_title"), product.name, default=""),
            og_description=first_present(
                meta.get("og_description"), product.short_description, default=""
            ),
            og_image=first_present(meta.get("og_image"), self._primary_image_url(product)),
            twitter_card=first_present(meta.get("twitter_card"), default=DEFAULT_TWITTER_CARD),
        )

    @staticmethod
    def _related_products(links: List[RelatedProductLink]) -> RelatedProductsSnapshot:
        def ids_for(relation: RelationType) -> List[int]:
            return [link.related_product_id for link in links if link.relation_type == relation]

        return RelatedProductsSnapshot(
            similar_products=ids_for(RelationType.SIMILAR),
            frequently_bought_together=ids_for(RelationType.FREQUENTLY_BOUGHT_TOGETHER),
            customers_also_viewed=ids_for(RelationType.CUSTOMERS_ALSO_VIEWED),
            recently_viewed=ids_for(RelationType.RECENTLY_VIEWED),
        )

    # ===== Audit & analytics =====

    @staticmethod
    def _audit_user(user: Optional[UserRef]) -> Optional[AuditUserSnapshot]:
        if user is None:
            return None
        name = f"{user.first_name or ''} {user.last_name or ''}".strip()
        return AuditUserSnapshot(id=user.id, name=name, role="admin")

    @staticmethod
    def _analytics(product: ProductAggregate) -> AnalyticsSnapshot:
        analytics = product.analytics
        if analytics is None:
            return AnalyticsSnapshot()
        return AnalyticsSnapshot(
            views_count=analytics.views_count,
            clicks_count=analytics.clicks_count,
            add_to_cart_count=analytics.add_to_cart_count,
            purchase_count=analytics.purchase_count,
            conversion_rate=round(analytics.conversion_rate, 2),
            wishlist_count=analytics.wishlist_count,
        )
