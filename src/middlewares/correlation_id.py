from starlette.middleware.base import BaseHTTPMiddleware

from src.core.config import config
from src.utils.correlation_id import (
    correlation_id_context,
    create_correlation_id,
    extract_correlation_id_from_headers,
)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Binds a correlation ID to each request.

    The ID comes from the configured header, then the usual X-Correlation-ID
    spellings, and is minted when the caller sent none. It is visible to the
    structured logger for the duration of the request only and is echoed on
    the response.
    """

    async def dispatch(self, request, call_next):
        header = config.correlation_id_header
        correlation_id = (
            request.headers.get(header)
            or extract_correlation_id_from_headers(dict(request.headers))
            or create_correlation_id()
        )

        token = correlation_id_context.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_context.reset(token)

        response.headers[header] = correlation_id
        return response
