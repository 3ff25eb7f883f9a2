"""Unit tests for middleware components"""
import uuid
import pytest
from unittest.mock import Mock, patch

from src.middlewares.correlation_id import CorrelationIdMiddleware
from src.utils.correlation_id import (
    extract_correlation_id_from_headers,
    get_correlation_id,
    set_correlation_id,
)


class MockRequest:
    def __init__(self, headers):
        self.headers = headers
        self.state = Mock()


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    @patch('src.middlewares.correlation_id.config')
    async def test_correlation_id_from_header(self, mock_config):
        """Test extracting correlation ID from request header"""
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured_id = None

        async def call_next(req):
            nonlocal captured_id
            captured_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(MockRequest({"X-Correlation-ID": "test-correlation-123"}), call_next)

        assert captured_id == "test-correlation-123"
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    @pytest.mark.asyncio
    @patch('src.middlewares.correlation_id.config')
    async def test_correlation_id_generated(self, mock_config):
        """Test generating new correlation ID when not provided"""
        mock_config.correlation_id_header = "X-Request-ID"
        middleware = CorrelationIdMiddleware(Mock())
        generated_id = None

        async def call_next(req):
            nonlocal generated_id
            generated_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(MockRequest({}), call_next)

        assert generated_id
        assert response.headers["X-Request-ID"] == generated_id
        assert uuid.UUID(generated_id)

    @pytest.mark.asyncio
    @patch('src.middlewares.correlation_id.config')
    async def test_configured_header_is_read(self, mock_config):
        """Test a custom correlation header name is honored on the way in"""
        mock_config.correlation_id_header = "X-Request-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured_id = None

        async def call_next(req):
            nonlocal captured_id
            captured_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(MockRequest({"X-Request-ID": "req-789"}), call_next)

        assert captured_id == "req-789"
        assert response.headers["X-Request-ID"] == "req-789"

    @pytest.mark.asyncio
    @patch('src.middlewares.correlation_id.config')
    async def test_context_reset_after_request(self, mock_config):
        """Test the request's correlation ID does not outlive the request"""
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        set_correlation_id("outer-id")

        async def call_next(req):
            response = Mock()
            response.headers = {}
            return response

        await middleware.dispatch(MockRequest({"X-Correlation-ID": "inner-id"}), call_next)

        assert get_correlation_id() == "outer-id"

    @pytest.mark.asyncio
    @patch('src.middlewares.correlation_id.config')
    async def test_context_reset_when_handler_fails(self, mock_config):
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        set_correlation_id("outer-id")

        async def call_next(req):
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError):
            await middleware.dispatch(MockRequest({"X-Correlation-ID": "inner-id"}), call_next)

        assert get_correlation_id() == "outer-id"


class TestCorrelationIdContext:
    """Test correlation ID helpers"""

    def test_set_and_get_correlation_id(self):
        set_correlation_id("test-correlation-456")
        assert get_correlation_id() == "test-correlation-456"

    def test_get_correlation_id_none(self):
        """The context variable is per-context, so reset it first"""
        set_correlation_id(None)
        assert get_correlation_id() is None

    @pytest.mark.parametrize("headers", [
        {"x-correlation-id": "abc"},
        {"X-Correlation-ID": "abc"},
        {"X-CORRELATION-ID": "abc"},
    ])
    def test_extract_from_header_variants(self, headers):
        assert extract_correlation_id_from_headers(headers) == "abc"

    def test_extract_missing(self):
        assert extract_correlation_id_from_headers({}) is None
