"""Cart store.

The application-wide handle through which views read and change the cart.
One instance is created with the application context and passed to every
view that needs it.
"""

from decimal import Decimal

import structlog

from shopfront.domain.cart import Cart, CartItem
from shopfront.domain.products import Product

logger = structlog.get_logger()


class CartService:
    """Read/write access to the session's cart."""

    def __init__(self, cart: Cart | None = None) -> None:
        """Initialize with an existing cart or a new empty one."""
        self.cart = cart or Cart.create()

    def add_to_cart(self, product: Product, quantity: int = 1) -> CartItem:
        """Add units of a product, merging with an existing line."""
        item = self.cart.add_item(product, quantity)
        logger.info(
            "Added to cart",
            cart_id=self.cart.id,
            product_id=product.id,
            quantity=item.quantity,
        )
        return item

    def update_quantity(self, product_id: str, quantity: int) -> CartItem | None:
        """Set a line's quantity; zero or less removes the line."""
        item = self.cart.update_quantity(product_id, quantity)
        logger.info(
            "Cart quantity updated",
            cart_id=self.cart.id,
            product_id=product_id,
            quantity=quantity,
        )
        return item

    def remove_from_cart(self, product_id: str) -> None:
        self.cart.remove_item(product_id)
        logger.info("Removed from cart", cart_id=self.cart.id, product_id=product_id)

    def clear_cart(self) -> None:
        self.cart.clear()

    def is_in_cart(self, product_id: str) -> bool:
        return self.cart.get_item(product_id) is not None

    def get_item_quantity(self, product_id: str) -> int:
        return self.cart.quantity_of(product_id)

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    @property
    def subtotal(self) -> Decimal:
        return self.cart.subtotal
