"""Product, category and brand view models.

These are the read-side shapes the catalog view works with once the
listing API's payload has been validated.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Self

from shopfront.domain.base import ValueObject

CENT = Decimal("0.01")


def format_price(amount: Decimal | float | int | None) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.50``."""
    value = Decimal(str(amount or 0)).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _identifier(data: Mapping[str, Any]) -> str:
    return str(data.get("id") or data.get("_id") or "")


@dataclass(frozen=True)
class CatalogRef(ValueObject):
    """A category or brand as listed in the filter dropdowns.

    Attributes:
        id: Opaque identifier used as the filter value.
        name: Display name.
        description: Optional description.
    """

    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Create from an API payload entry (``id`` or ``_id``)."""
        return cls(
            id=_identifier(data),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
        )


def find_name(refs: list[CatalogRef], ref_id: str) -> str | None:
    """Resolve an identifier to its display name."""
    for ref in refs:
        if ref.id == ref_id:
            return ref.name
    return None


@dataclass(frozen=True)
class Product(ValueObject):
    """Product as shown in the catalog grid.

    Attributes:
        id: Product identifier.
        name: Product name.
        description: Product description.
        price: List price in dollars.
        discount: Discount percentage (0-100).
        discount_price: Discounted price computed by the server, if any.
        category: Category reference, if assigned.
        brand: Brand reference, if assigned.
        image: Relative image path, if any.
        stock: Units in stock.
    """

    id: str
    name: str
    price: Decimal
    description: str = ""
    discount: Decimal = Decimal("0")
    discount_price: Decimal | None = None
    category: CatalogRef | None = None
    brand: CatalogRef | None = None
    image: str | None = None
    stock: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Create from a listing payload entry."""
        category = data.get("category")
        brand = data.get("brand")
        discount_price = data.get("discountPrice")
        return cls(
            id=_identifier(data),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            price=Decimal(str(data.get("price") or 0)),
            discount=Decimal(str(data.get("discount") or 0)),
            discount_price=Decimal(str(discount_price)) if discount_price is not None else None,
            category=CatalogRef.from_dict(category) if isinstance(category, Mapping) else None,
            brand=CatalogRef.from_dict(brand) if isinstance(brand, Mapping) else None,
            image=data.get("image"),
            stock=int(data.get("stock") or 0),
        )

    @property
    def display_price(self) -> Decimal:
        """Price the customer pays.

        The server's discounted price wins when present; otherwise the
        discount percentage is applied to the list price.
        """
        if self.discount_price is not None:
            return self.discount_price
        if self.discount <= 0:
            return self.price
        return self.price - self.price * self.discount / 100

    @property
    def has_discount(self) -> bool:
        """True when the product is on sale."""
        return self.discount > 0

    @property
    def short_description(self) -> str:
        """Description trimmed for grid cards."""
        if len(self.description) <= 80:
            return self.description
        return f"{self.description[:80]}..."
