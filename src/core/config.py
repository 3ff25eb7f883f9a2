"""
Core configuration and settings for the Product Details Service
Following FastAPI best practices for configuration management
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="product-details-service")
    service_version: str = Field(default="1.0.0")
    api_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=8003)
    host: str = Field(default="0.0.0.0")  # nosec B104

    # Logging configuration
    log_level: Optional[str] = Field(default=None)
    log_format: Optional[str] = Field(default=None)
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: Optional[str] = Field(default=None)

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")

    # Media
    media_base_url: str = Field(default="http://localhost:8003")

    # Catalog defaults
    currency_name: str = Field(default="BDT")
    currency_symbol: str = Field(default="৳")
    new_product_window_days: int = Field(default=30, ge=0)
    default_low_stock_threshold: int = Field(default=10, ge=0)
    slow_assembly_threshold_ms: int = Field(default=50, ge=0)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def resolved_log_level(self) -> str:
        """Explicit LOG_LEVEL wins, otherwise DEBUG in development and INFO elsewhere"""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"

    @property
    def resolved_log_format(self) -> str:
        if self.log_format:
            return self.log_format.lower()
        return "json" if self.is_production else "console"

    @property
    def resolved_log_file_path(self) -> str:
        return self.log_file_path or f"logs/{self.service_name}.log"


# Global config instance
config = Config()
