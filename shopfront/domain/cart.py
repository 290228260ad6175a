"""Shopping cart aggregate.

Client-side only: the cart lives as long as the application context that
owns it and is never persisted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import uuid4

from shopfront.domain.base import Entity
from shopfront.domain.exceptions import CartItemNotFoundError, InvalidQuantityError
from shopfront.domain.products import Product


@dataclass
class CartItem:
    """A product line in the cart.

    Attributes:
        product: Product snapshot taken when the line was added.
        quantity: Number of units.
    """

    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        """Display price times quantity."""
        return self.product.display_price * self.quantity


@dataclass(eq=False)
class Cart(Entity[str]):
    """Shopping cart.

    Lines are keyed by product id, so adding the same product twice
    increases the quantity of a single line.

    Attributes:
        id: Cart identifier.
        items: Cart lines in insertion order.
    """

    items: list[CartItem] = field(default_factory=list)

    @classmethod
    def create(cls) -> "Cart":
        """Create an empty cart with a fresh identifier."""
        return cls(id=str(uuid4()))

    def get_item(self, product_id: str) -> CartItem | None:
        """Find the line for a product."""
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    def add_item(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product to the cart.

        If the product already exists in the cart, its quantity is increased.

        Args:
            product: Product to add.
            quantity: Number of units to add.

        Returns:
            The new or updated CartItem.

        Raises:
            InvalidQuantityError: If quantity is not positive.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        existing_item = self.get_item(product.id)
        if existing_item:
            existing_item.quantity += quantity
            return existing_item

        item = CartItem(product=product, quantity=quantity)
        self.items.append(item)
        return item

    def update_quantity(self, product_id: str, quantity: int) -> CartItem | None:
        """Set the quantity of a line; zero or less removes it.

        Raises:
            CartItemNotFoundError: If the product is not in the cart.
        """
        item = self.get_item(product_id)
        if item is None:
            raise CartItemNotFoundError(product_id)
        if quantity <= 0:
            self.items.remove(item)
            return None
        item.quantity = quantity
        return item

    def remove_item(self, product_id: str) -> None:
        """Remove a product line.

        Raises:
            CartItemNotFoundError: If the product is not in the cart.
        """
        item = self.get_item(product_id)
        if item is None:
            raise CartItemNotFoundError(product_id)
        self.items.remove(item)

    def clear(self) -> None:
        """Remove every line."""
        self.items.clear()

    def quantity_of(self, product_id: str) -> int:
        """Units of a product in the cart, 0 when absent."""
        item = self.get_item(product_id)
        return item.quantity if item else 0

    @property
    def item_count(self) -> int:
        """Total units across all lines."""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        """Sum of line totals."""
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        """True when the cart has no lines."""
        return not self.items
