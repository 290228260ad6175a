"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from shopfront.domain.filters import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Listing API client
    catalog_api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the product listing API",
    )
    catalog_api_key: str | None = Field(
        default=None,
        description="Optional bearer token sent with every request",
    )
    request_timeout: float = Field(default=10.0, gt=0)

    # Catalog view
    listing_path: str = "/products"
    default_page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Page size a freshly mounted catalog view starts with",
    )
    lookup_limit: int = Field(
        default=100,
        description="Categories and brands fetched for the filter dropdowns",
    )

    # Seeded catalog served by the listing API
    catalog_seed: int = 42
    products_per_category: int = 6

    # Logging
    log_level: str = "INFO"

    @field_validator("default_page_size")
    @classmethod
    def check_page_size(cls, value: int) -> int:
        """Only a page size the controls offer can be the default."""
        if value not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"default_page_size must be one of {PAGE_SIZE_OPTIONS}")
        return value

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
