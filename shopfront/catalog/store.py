"""In-memory catalog store backing the listing API.

Generates categories, brands and products with deterministic seeding and
answers the paginated, filtered queries of the listing endpoints.
"""

import hashlib
import math
import random
from dataclasses import dataclass
from decimal import Decimal

from shopfront.api.schemas import CatalogRefSchema, PaginationSchema, ProductSchema


# ============================================================================
# Constants
# ============================================================================

BRANDS = [
    {"id": "acme", "name": "Acme"},
    {"id": "contoso", "name": "Contoso"},
    {"id": "northwind", "name": "Northwind"},
    {"id": "fabrikam", "name": "Fabrikam"},
    {"id": "globex", "name": "Globex"},
    {"id": "initech", "name": "Initech"},
]

ADJECTIVES = [
    "Premium",
    "Elite",
    "Pro",
    "Ultra",
    "Classic",
    "Essential",
    "Smart",
    "Prime",
    "Nova",
    "Titan",
]

# Price ranges in dollars, chosen to spread across the catalog's price brackets
CATEGORIES = [
    {
        "id": "laptops",
        "name": "Laptops",
        "description": "Portable computers",
        "price_range": (600, 4500),
        "templates": ["{brand} {adj} Laptop 15\"", "{brand} Notebook {adj}"],
    },
    {
        "id": "headphones",
        "name": "Headphones",
        "description": "Wired and wireless audio",
        "price_range": (30, 400),
        "templates": ["{brand} {adj} Headphones", "{brand} Wireless {adj} Earbuds"],
    },
    {
        "id": "cameras",
        "name": "Cameras",
        "description": "Mirrorless and cinema cameras",
        "price_range": (900, 9000),
        "templates": ["{brand} {adj} Mirrorless Camera", "{brand} Cinema {adj} Body"],
    },
    {
        "id": "office-chairs",
        "name": "Office Chairs",
        "description": "Ergonomic seating",
        "price_range": (200, 900),
        "templates": ["{brand} {adj} Office Chair", "{brand} Ergonomic {adj} Chair"],
    },
    {
        "id": "coffee-makers",
        "name": "Coffee Makers",
        "description": "Brewers and espresso machines",
        "price_range": (50, 1200),
        "templates": ["{brand} {adj} Coffee Maker", "{brand} Espresso {adj}"],
    },
    {
        "id": "televisions",
        "name": "Televisions",
        "description": "Large-format displays",
        "price_range": (400, 12000),
        "templates": ["{brand} {adj} 65\" TV", "{brand} OLED {adj} Display"],
    },
]


# ============================================================================
# Catalog Store
# ============================================================================


@dataclass
class InMemoryProduct:
    """Internal product representation."""

    id: str
    name: str
    description: str
    price: Decimal
    discount: int
    category_id: str
    brand_id: str
    image: str
    stock: int

    @property
    def discount_price(self) -> Decimal | None:
        if self.discount <= 0:
            return None
        return (self.price * (100 - self.discount) / 100).quantize(Decimal("0.01"))


class CatalogStore:
    """In-memory catalog with deterministic generation."""

    def __init__(
        self,
        seed: int = 42,
        products_per_category: int = 6,
    ) -> None:
        """Initialize the store.

        Args:
            seed: Random seed for reproducibility.
            products_per_category: Products generated per category.
        """
        self.seed = seed
        self.products_per_category = products_per_category
        self._categories = {c["id"]: c for c in CATEGORIES}
        self._brands = {b["id"]: b for b in BRANDS}
        self._products: dict[str, InMemoryProduct] = {}
        self._generate_products()

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments."""
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_product_id(self, category_id: str, index: int) -> str:
        """Generate deterministic product ID."""
        data = f"{category_id}:{index}:{self.seed}"
        return hashlib.md5(data.encode()).hexdigest()[:24]

    def _generate_products(self) -> None:
        """Generate all products."""
        for category in CATEGORIES:
            for i in range(self.products_per_category):
                rng = random.Random(self._deterministic_seed(self.seed, category["id"], i))

                brand = rng.choice(BRANDS)
                adj = rng.choice(ADJECTIVES)
                template = rng.choice(category["templates"])

                low, high = category["price_range"]
                price = Decimal(rng.randint(low, high)) + Decimal("0.99")
                discount = rng.choice([0, 0, 0, 10, 15, 25])

                product_id = self._generate_product_id(category["id"], i)
                self._products[product_id] = InMemoryProduct(
                    id=product_id,
                    name=template.format(brand=brand["name"], adj=adj),
                    description=f"High-quality {category['name'].lower()} from {brand['name']}. "
                    f"Part of our {adj.lower()} collection.",
                    price=price,
                    discount=discount,
                    category_id=category["id"],
                    brand_id=brand["id"],
                    image=f"/uploads/{product_id[:8]}.jpg",
                    stock=rng.randint(0, 200),
                )

    @property
    def product_count(self) -> int:
        return len(self._products)

    def get_product(self, product_id: str) -> ProductSchema | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product schema or None if not found.
        """
        product = self._products.get(product_id)
        if not product:
            return None
        return self._to_schema(product)

    def list_products(
        self,
        page: int = 1,
        limit: int = 12,
        search: str | None = None,
        category: str | None = None,
        brand: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> tuple[list[ProductSchema], PaginationSchema]:
        """List products with filtering and pagination.

        Price bounds apply to the list price, inclusive on both ends. A page
        past the end is answered with the last page.

        Args:
            page: Page number (1-based).
            limit: Items per page.
            search: Case-insensitive match on name or description.
            category: Category ID.
            brand: Brand ID.
            min_price: Minimum price in dollars.
            max_price: Maximum price in dollars.

        Returns:
            Tuple of (products, pagination).
        """
        filtered = list(self._products.values())

        if category:
            filtered = [p for p in filtered if p.category_id == category]

        if brand:
            filtered = [p for p in filtered if p.brand_id == brand]

        if min_price is not None:
            filtered = [p for p in filtered if p.price >= min_price]

        if max_price is not None:
            filtered = [p for p in filtered if p.price <= max_price]

        if search:
            search_lower = search.lower()
            filtered = [
                p
                for p in filtered
                if search_lower in p.name.lower()
                or search_lower in p.description.lower()
            ]

        filtered.sort(key=lambda p: p.name)

        pagination = self._paginate(len(filtered), page, limit)
        start = (pagination.current - 1) * limit
        items = [self._to_schema(p) for p in filtered[start : start + limit]]
        return items, pagination

    def list_categories(self, page: int = 1, limit: int = 100) -> tuple[list[CatalogRefSchema], PaginationSchema]:
        """List categories ordered by name."""
        return self._list_refs(list(self._categories.values()), page, limit)

    def list_brands(self, page: int = 1, limit: int = 100) -> tuple[list[CatalogRefSchema], PaginationSchema]:
        """List brands ordered by name."""
        return self._list_refs(list(self._brands.values()), page, limit)

    def _list_refs(
        self, refs: list[dict], page: int, limit: int
    ) -> tuple[list[CatalogRefSchema], PaginationSchema]:
        refs = sorted(refs, key=lambda r: r["name"])
        pagination = self._paginate(len(refs), page, limit)
        start = (pagination.current - 1) * limit
        items = [
            CatalogRefSchema(id=r["id"], name=r["name"], description=r.get("description"))
            for r in refs[start : start + limit]
        ]
        return items, pagination

    @staticmethod
    def _paginate(total: int, page: int, limit: int) -> PaginationSchema:
        """Build the pagination block, clamping a page past the end to the last one."""
        pages = math.ceil(total / limit)
        return PaginationSchema(
            current=min(page, pages) if pages else 1,
            pages=pages,
            total=total,
            limit=limit,
        )

    def _to_schema(self, product: InMemoryProduct) -> ProductSchema:
        """Convert internal product to schema."""
        category = self._categories[product.category_id]
        brand = self._brands[product.brand_id]
        discount_price = product.discount_price
        return ProductSchema(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            discount=product.discount,
            discount_price=float(discount_price) if discount_price is not None else None,
            category=CatalogRefSchema(id=category["id"], name=category["name"]),
            brand=CatalogRefSchema(id=brand["id"], name=brand["name"]),
            image=product.image,
            stock=product.stock,
        )


# Global catalog store instance
_catalog_store: CatalogStore | None = None


def get_catalog_store(
    seed: int = 42,
    products_per_category: int = 6,
) -> CatalogStore:
    """Get or create the catalog store instance.

    Args:
        seed: Random seed.
        products_per_category: Products per category.

    Returns:
        CatalogStore instance.
    """
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = CatalogStore(seed, products_per_category)
    return _catalog_store
