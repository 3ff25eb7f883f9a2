"""
Pricing Engine
Computes the effective sale price of a product from its base price, a
percent or fixed discount, and the window during which the discount applies.
"""
from datetime import datetime
from typing import Optional

from src.models.pricing import DiscountType, PriceResult
from src.utils.clock import as_utc, utc_now


class PricingEngine:
    """Pure price computation; holds no state and is safe to share."""

    @staticmethod
    def is_window_active(
        window_start: Optional[datetime],
        window_end: Optional[datetime],
        now: datetime,
    ) -> bool:
        """
        A discount window is active only when both bounds are set and
        `now` falls inside them, bounds included.
        """
        if window_start is None or window_end is None:
            return False
        return as_utc(window_start) <= as_utc(now) <= as_utc(window_end)

    @staticmethod
    def discount_type(
        discount_percent: Optional[float],
        discount_fixed: Optional[float],
    ) -> DiscountType:
        """Fixed discounts take precedence over percentages."""
        if (discount_fixed or 0) > 0:
            return DiscountType.FIXED
        if (discount_percent or 0) > 0:
            return DiscountType.PERCENTAGE
        return DiscountType.NONE

    def compute_effective_price(
        self,
        base_price: Optional[float],
        discount_percent: Optional[float] = None,
        discount_fixed: Optional[float] = None,
        window_start: Optional[datetime] = None,
        window_end: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> PriceResult:
        """
        Resolve the price a customer pays at `now`.

        Args:
            base_price: Regular price; None counts as 0
            discount_percent: Percent off (0-100), used when no fixed discount
            discount_fixed: Amount off; wins over the percent when positive
            window_start: Start of the discount window
            window_end: End of the discount window
            now: Evaluation time; defaults to the current UTC time

        Returns:
            PriceResult with final price, discount amount, activation flag
            and whole days left in the window
        """
        now = as_utc(now) if now is not None else utc_now()
        base_price = base_price or 0.0

        if not self.is_window_active(window_start, window_end, now):
            return PriceResult(final_price=base_price)

        if (discount_fixed or 0) > 0:
            discount_amount = discount_fixed
        else:
            discount_amount = base_price * (discount_percent or 0) / 100

        # Never discount below zero
        discount_amount = min(discount_amount, base_price)

        end = as_utc(window_end)
        remaining_days = (end - now).days if end > now else None

        return PriceResult(
            final_price=base_price - discount_amount,
            discount_amount=discount_amount,
            is_active=True,
            remaining_days=remaining_days,
        )
