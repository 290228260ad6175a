"""Pydantic schemas for the listing API.

Defines the wire shapes of the product, category and brand listings.
The server renders them and the client validates responses against them.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ============================================================================
# Common Types
# ============================================================================


class PaginationSchema(BaseModel):
    """Pagination block reported with every listing."""

    current: int = Field(..., ge=1, description="Current page (1-based)")
    pages: int = Field(..., ge=0, description="Total number of pages")
    total: int = Field(..., ge=0, description="Total matching items")
    limit: int = Field(..., ge=1, description="Items per page")


class CatalogRefSchema(BaseModel):
    """Category or brand entry."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Identifier used as the filter value",
    )
    name: str = Field(..., description="Display name")
    description: str | None = Field(None, description="Description")


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error_code: str
    message: str
    details: list = Field(default_factory=list)


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as listed in the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Product ID",
    )
    name: str = Field(..., description="Product name")
    description: str = Field(default="", description="Product description")
    price: float = Field(..., ge=0, description="List price in dollars")
    discount: float = Field(default=0, ge=0, le=100, description="Discount percentage")
    discount_price: float | None = Field(
        None,
        validation_alias=AliasChoices("discountPrice", "discount_price"),
        serialization_alias="discountPrice",
        description="Price after discount",
    )
    category: CatalogRefSchema | None = Field(None, description="Category")
    brand: CatalogRefSchema | None = Field(None, description="Brand")
    image: str | None = Field(None, description="Relative image path")
    stock: int = Field(default=0, ge=0, description="Units in stock")


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    products: list[ProductSchema]
    pagination: PaginationSchema


class CategoryListResponse(BaseModel):
    """Paginated category listing."""

    categories: list[CatalogRefSchema]
    pagination: PaginationSchema


class BrandListResponse(BaseModel):
    """Paginated brand listing."""

    brands: list[CatalogRefSchema]
    pagination: PaginationSchema
