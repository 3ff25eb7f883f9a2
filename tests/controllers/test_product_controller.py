"""Tests for the product controller"""
import pytest
from unittest.mock import Mock, patch
from pydantic import ValidationError

import src.controllers.product_controller as product_controller
from src.core.errors import ErrorResponse
from src.models.pricing import PricingPreviewRequest
from src.services.pricing_engine import PricingEngine


class TestBuildProductSnapshot:
    """Test snapshot assembly through the controller"""

    def test_returns_snapshot_and_logs_performance(self, assembler, sample_product, now):
        with patch("src.controllers.product_controller.logger") as mock_logger:
            snapshot = product_controller.build_product_snapshot(sample_product, assembler, now)

        assert snapshot.id == 42
        mock_logger.performance.assert_called_once()
        args, kwargs = mock_logger.performance.call_args
        assert args[0] == "assemble_product_snapshot"
        assert kwargs["metadata"] == {"productId": 42}

    def test_missing_aggregate_maps_to_bad_request(self, now):
        assembler = Mock()

        with patch("src.controllers.product_controller.logger"):
            with pytest.raises(ErrorResponse) as exc_info:
                product_controller.build_product_snapshot(None, assembler, now)

        assert exc_info.value.status_code == 400
        assert "required" in exc_info.value.message
        assembler.assemble.assert_not_called()

    def test_assembly_failures_are_not_client_errors(self, sample_product, now):
        assembler = Mock()
        assembler.assemble.side_effect = ValidationError.from_exception_data("ProductSnapshot", [])

        with patch("src.controllers.product_controller.logger"):
            with pytest.raises(ValidationError):
                product_controller.build_product_snapshot(sample_product, assembler, now)


class TestPreviewPricing:
    """Test the pricing preview"""

    def test_preview_uses_given_time(self, now):
        request = PricingPreviewRequest(
            price=500,
            discount_fixed=50,
            discount_start=now,
            discount_end=now,
        )

        with patch("src.controllers.product_controller.logger") as mock_logger:
            result = product_controller.preview_pricing(request, PricingEngine(), now)

        assert result.final_price == 450.0
        assert result.is_active is True
        assert result.remaining_days is None
        mock_logger.info.assert_called_once()
