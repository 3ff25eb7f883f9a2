# Industry-standard initialization pattern:
# 1. Load environment variables
# 2. Initialize logging
# 3. Start application

# STEP 1: Load environment variables
from dotenv import load_dotenv
load_dotenv()

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from src.controllers import operational_controller
from src.core.config import config
from src.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    validation_exception_handler,
)
from src.core.logger import logger
from src.middlewares import CorrelationIdMiddleware
from src.routers import product_router

app = FastAPI(
    title="Product Details Service",
    description="Assembles client-ready product detail snapshots from loaded product aggregates",
    version=config.service_version,
)

# Add correlation ID middleware first
app.add_middleware(CorrelationIdMiddleware)

# Register centralized error handlers
app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include routers
app.include_router(product_router, prefix="/api/products", tags=["products"])

# Operational endpoints for infrastructure/monitoring
app.get("/health")(operational_controller.health)
app.get("/health/ready")(operational_controller.readiness)
app.get("/health/live")(operational_controller.liveness)
app.get("/metrics")(operational_controller.metrics)

if __name__ == "__main__":
    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={
            "service": {
                "name": config.service_name,
                "version": config.service_version,
                "environment": config.environment,
                "port": config.port,
            }
        },
    )

    uvicorn.run(
        "src.main:app",
        host=config.host,
        port=config.port,
        reload=config.is_development,
    )
