"""
Derived Attribute Calculator
Profit, tax, stock, freshness, rating and variant price figures derived
from an already-loaded product. Every method is pure.
"""
from datetime import datetime
from typing import Iterable, Optional

from src.core.config import config
from src.models.pricing import PriceRange, ProfitMargin
from src.models.review import RatingAggregate, ReviewAggregate, empty_distribution
from src.models.variation import VariantAggregate
from src.utils.clock import as_utc


class DerivedAttributeCalculator:
    """Computes the derived numbers shown on a product detail page."""

    @staticmethod
    def profit_margin(final_price: float, cost: Optional[float]) -> ProfitMargin:
        """
        Profit per unit at the final price.

        The percentage is relative to the final price, rounded to 2 places,
        and 0 when the final price is not positive.
        """
        amount = final_price - (cost or 0.0)
        percentage = (amount / final_price * 100) if final_price > 0 else 0.0
        return ProfitMargin(amount=amount, percentage=round(percentage, 2))

    @staticmethod
    def tax_amount(final_price: float, tax_rate: Optional[float], tax_included: bool) -> float:
        if tax_included:
            return 0.0
        return final_price * (tax_rate or 0.0) / 100

    @staticmethod
    def is_low_stock(stock_quantity: int, threshold: int) -> bool:
        return stock_quantity <= threshold

    @staticmethod
    def is_freshly_listed(
        created_at: Optional[datetime],
        now: datetime,
        window_days: Optional[int] = None,
    ) -> bool:
        """
        True when `created_at` lies at most `window_days` whole days from
        `now`, in either direction. Partial days are dropped, so 30 days and
        23 hours still counts as 30. The window defaults to the configured
        new-product window.
        """
        if created_at is None:
            return False
        if window_days is None:
            window_days = config.new_product_window_days
        elapsed = abs(as_utc(now) - as_utc(created_at))
        return elapsed.days <= window_days

    @staticmethod
    def rating_aggregate(reviews: Iterable[ReviewAggregate]) -> RatingAggregate:
        """
        Average, count, per-star distribution and verified/recommended
        percentages over approved reviews. Empty input yields all zeros.
        """
        distribution = empty_distribution()
        total = 0
        rating_sum = 0
        verified = 0
        recommended = 0

        for review in reviews:
            total += 1
            rating_sum += review.rating
            if review.rating in distribution:
                distribution[review.rating] += 1
            if review.is_verified_purchase:
                verified += 1
            if review.is_recommended:
                recommended += 1

        if total == 0:
            return RatingAggregate()

        return RatingAggregate(
            average=rating_sum / total,
            count=total,
            distribution=distribution,
            verified_pct=verified / total * 100,
            recommended_pct=recommended / total * 100,
        )

    @staticmethod
    def variant_effective_price(variant: VariantAggregate) -> float:
        """Sale price when set, else regular price, else 0."""
        if variant.sale_price is not None:
            return variant.sale_price
        if variant.regular_price is not None:
            return variant.regular_price
        return 0.0

    def variant_price_range(self, variants: Iterable[VariantAggregate]) -> Optional[PriceRange]:
        """
        Lowest and highest effective price across variants.

        Variants without a positive price are ignored; returns None when no
        variant is left.
        """
        prices = [
            price for price in (self.variant_effective_price(v) for v in variants)
            if price > 0
        ]
        if not prices:
            return None
        return PriceRange(min=min(prices), max=max(prices))
