"""Tests for the cart aggregate."""

from decimal import Decimal

import pytest

from shopfront.domain import Cart, Product
from shopfront.domain.exceptions import CartItemNotFoundError, InvalidQuantityError


@pytest.fixture
def lamp() -> Product:
    return Product(id="lamp", name="Lamp", price=Decimal("40"))


@pytest.fixture
def chair() -> Product:
    return Product(id="chair", name="Chair", price=Decimal("200"), discount=Decimal("10"))


class TestCart:
    """Tests for Cart."""

    def test_new_cart_is_empty(self) -> None:
        cart = Cart.create()
        assert cart.is_empty
        assert cart.item_count == 0
        assert cart.subtotal == Decimal("0")

    def test_add_merges_same_product(self, lamp: Product) -> None:
        cart = Cart.create()
        cart.add_item(lamp)
        item = cart.add_item(lamp, quantity=2)
        assert len(cart.items) == 1
        assert item.quantity == 3
        assert cart.quantity_of("lamp") == 3

    def test_add_non_positive_quantity(self, lamp: Product) -> None:
        with pytest.raises(InvalidQuantityError):
            Cart.create().add_item(lamp, quantity=0)

    def test_subtotal_uses_display_price(self, lamp: Product, chair: Product) -> None:
        cart = Cart.create()
        cart.add_item(lamp, quantity=2)
        cart.add_item(chair)
        assert cart.subtotal == Decimal("260")
        assert cart.item_count == 3

    def test_update_quantity_to_zero_removes(self, lamp: Product) -> None:
        cart = Cart.create()
        cart.add_item(lamp)
        assert cart.update_quantity("lamp", 0) is None
        assert cart.is_empty

    def test_update_missing_item(self) -> None:
        with pytest.raises(CartItemNotFoundError):
            Cart.create().update_quantity("ghost", 2)

    def test_remove_and_clear(self, lamp: Product, chair: Product) -> None:
        cart = Cart.create()
        cart.add_item(lamp)
        cart.add_item(chair)
        cart.remove_item("lamp")
        assert cart.get_item("lamp") is None
        with pytest.raises(CartItemNotFoundError):
            cart.remove_item("lamp")
        cart.clear()
        assert cart.is_empty

    def test_carts_compared_by_identity(self) -> None:
        first = Cart.create()
        second = Cart.create()
        assert first != second
        assert first == Cart(id=first.id)
