"""
Unit tests for the derived attribute calculator.
"""

import pytest
from datetime import timedelta

from src.core.config import config
from src.models.review import ReviewAggregate
from src.models.variation import VariantAggregate
from src.services.derived_attribute_calculator import DerivedAttributeCalculator


@pytest.fixture
def calculator():
    return DerivedAttributeCalculator()


class TestProfitMargin:

    def test_profit_margin(self, calculator):
        margin = calculator.profit_margin(900.0, 600.0)
        assert margin.amount == 300.0
        assert margin.percentage == 33.33

    def test_zero_final_price_guards_division(self, calculator):
        margin = calculator.profit_margin(0.0, 50.0)
        assert margin.amount == -50.0
        assert margin.percentage == 0

    def test_missing_cost_counts_as_zero(self, calculator):
        margin = calculator.profit_margin(80.0, None)
        assert margin.amount == 80.0
        assert margin.percentage == 100.0


class TestTaxAmount:

    def test_tax_added_on_top(self, calculator):
        assert calculator.tax_amount(200.0, 15, False) == 30.0

    def test_tax_included_is_zero(self, calculator):
        assert calculator.tax_amount(200.0, 15, True) == 0.0

    def test_missing_rate(self, calculator):
        assert calculator.tax_amount(200.0, None, False) == 0.0


class TestLowStock:

    @pytest.mark.parametrize("quantity,threshold,expected", [
        (0, 10, True),
        (10, 10, True),
        (11, 10, False),
        (0, 0, True),
    ])
    def test_is_low_stock(self, calculator, quantity, threshold, expected):
        assert calculator.is_low_stock(quantity, threshold) is expected


class TestFreshness:

    def test_created_exactly_thirty_days_ago_is_new(self, calculator, now):
        assert calculator.is_freshly_listed(now - timedelta(days=30), now) is True

    def test_created_thirty_one_days_ago_is_not_new(self, calculator, now):
        assert calculator.is_freshly_listed(now - timedelta(days=31), now) is False

    def test_custom_window(self, calculator, now):
        assert calculator.is_freshly_listed(now - timedelta(days=8), now, window_days=7) is False

    def test_missing_created_at(self, calculator, now):
        assert calculator.is_freshly_listed(None, now) is False

    def test_partial_day_is_dropped(self, calculator, now):
        created_at = now - timedelta(days=30, hours=23)
        assert calculator.is_freshly_listed(created_at, now) is True

    def test_future_creation_date_counts_by_distance(self, calculator, now):
        assert calculator.is_freshly_listed(now + timedelta(days=10), now) is True
        assert calculator.is_freshly_listed(now + timedelta(days=31), now) is False

    def test_window_defaults_to_config(self, calculator, now, monkeypatch):
        monkeypatch.setattr(config, "new_product_window_days", 7)

        assert calculator.is_freshly_listed(now - timedelta(days=7), now) is True
        assert calculator.is_freshly_listed(now - timedelta(days=8), now) is False


class TestRatingAggregate:

    def test_empty_reviews(self, calculator):
        result = calculator.rating_aggregate([])

        assert result.average == 0
        assert result.count == 0
        assert result.distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
        assert result.verified_pct == 0
        assert result.recommended_pct == 0

    def test_mixed_reviews(self, calculator):
        reviews = [
            ReviewAggregate(rating=5, is_verified_purchase=True, is_recommended=True),
            ReviewAggregate(rating=1, is_verified_purchase=False, is_recommended=False),
        ]

        result = calculator.rating_aggregate(reviews)

        assert result.average == 3.0
        assert result.count == 2
        assert result.distribution == {5: 1, 1: 1, 2: 0, 3: 0, 4: 0}
        assert result.verified_pct == 50.0
        assert result.recommended_pct == 50.0

    def test_accepts_generator(self, calculator):
        result = calculator.rating_aggregate(
            ReviewAggregate(rating=r) for r in (4, 4, 5)
        )
        assert result.count == 3
        assert result.distribution[4] == 2
        assert result.average == pytest.approx(13 / 3)


class TestVariantPriceRange:

    def test_no_variants(self, calculator):
        assert calculator.variant_price_range([]) is None

    def test_sale_price_wins_over_regular(self, calculator):
        variants = [
            VariantAggregate(id=1, regular_price=100.0),
            VariantAggregate(id=2, sale_price=80.0, regular_price=120.0),
        ]

        price_range = calculator.variant_price_range(variants)

        assert price_range.min == 80.0
        assert price_range.max == 100.0

    def test_unpriced_variants_are_ignored(self, calculator):
        variants = [
            VariantAggregate(id=1),
            VariantAggregate(id=2, regular_price=0.0),
            VariantAggregate(id=3, regular_price=45.0),
        ]

        price_range = calculator.variant_price_range(variants)

        assert (price_range.min, price_range.max) == (45.0, 45.0)

    def test_all_unpriced_returns_none(self, calculator):
        assert calculator.variant_price_range([VariantAggregate(id=1)]) is None
