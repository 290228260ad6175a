"""End-to-end tests: catalog view against the real listing API.

The API client talks to the FastAPI app in-process through an ASGI
transport, so translation, validation and pagination all run for real.
"""

from decimal import Decimal

import httpx
import pytest
import pytest_asyncio

import shopfront.catalog.store as store_module
from shopfront.application.context import AppContext
from shopfront.application.notifications import NotificationLevel
from shopfront.domain import FilterState, PageAction
from shopfront.infrastructure.config import Settings
from shopfront.main import app


@pytest.fixture(autouse=True)
def reset_store():
    store_module._catalog_store = None
    yield
    store_module._catalog_store = None


@pytest_asyncio.fixture
async def context():
    """Application context wired to the in-process listing API."""
    config = Settings(_env_file=None, catalog_api_url="http://testserver")
    async with AppContext.create(
        settings=config,
        transport=httpx.ASGITransport(app=app),
    ) as ctx:
        yield ctx


class TestBrowseFlow:
    """Scenarios a shopper walks through on the listing page."""

    @pytest.mark.asyncio
    async def test_first_page(self, context: AppContext):
        view = context.catalog_view()
        await view.mount()
        await view.settle()

        assert len(view.products) == 12
        assert view.pagination.pages == 3
        assert view.results_summary() == "Showing 12 of 36 products"
        assert [str(link) for link in view.page_strip()] == ["1", "2", "3"]
        assert len(view.categories) == 6
        assert len(view.brands) == 6

    @pytest.mark.asyncio
    async def test_price_bracket(self, context: AppContext):
        view = context.catalog_view()
        await view.mount()
        view.set_filter("price_range", "5000-above")
        await view.settle()

        assert view.products
        assert all(p.price >= Decimal("5000") for p in view.products)
        assert view.fetch_cycle.last_error is None

    @pytest.mark.asyncio
    async def test_walk_pages(self, context: AppContext):
        view = context.catalog_view()
        await view.mount()
        await view.settle()
        first_page = {p.id for p in view.products}

        view.page_action(PageAction.LAST)
        await view.settle()

        assert view.pagination.current == 3
        assert not first_page & {p.id for p in view.products}
        assert view.page_action(PageAction.NEXT) is False

    @pytest.mark.asyncio
    async def test_brand_intent_then_clear(self, context: AppContext):
        """Arrive from the brand page, then clear everything."""
        navigator = context.navigator
        navigator.replace("/products?category=cameras")
        view = context.catalog_view()
        await view.mount()
        await view.settle()
        assert all(p.category.id == "cameras" for p in view.products)

        navigator.push(
            "/products?category=cameras",
            state={"brandFilter": "acme", "brandName": "Acme"},
        )
        await view.settle()

        assert view.filters == FilterState(brand="acme")
        assert all(p.brand.id == "acme" for p in view.products)
        assert "Showing products from brand: Acme" in context.notifications.messages(
            NotificationLevel.INFO
        )
        assert navigator.location.href == "/products"

        view.clear_filters()
        await view.settle()

        assert view.filters == FilterState.default()
        assert view.pagination.total == 36

    @pytest.mark.asyncio
    async def test_add_listed_product_to_cart(self, context: AppContext):
        view = context.catalog_view()
        await view.mount()
        await view.settle()

        product = view.products[0]
        view.add_to_cart(product, quantity=2)

        assert context.cart.item_count == 2
        assert context.cart.subtotal == product.display_price * 2

    @pytest.mark.asyncio
    async def test_unreachable_api_notifies(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        config = Settings(_env_file=None, catalog_api_url="http://testserver")
        async with AppContext.create(
            settings=config,
            transport=httpx.MockTransport(refuse),
        ) as ctx:
            view = ctx.catalog_view()
            await view.mount()
            await view.settle()

            assert view.products == ()
            assert view.fetch_cycle.last_error.error_code == "REQUEST_ERROR"
            assert ctx.notifications.messages(NotificationLevel.ERROR) == [
                "Failed to load products"
            ]

    @pytest.mark.asyncio
    async def test_configured_page_size(self):
        config = Settings(
            _env_file=None,
            catalog_api_url="http://testserver",
            default_page_size=24,
        )
        async with AppContext.create(
            settings=config,
            transport=httpx.ASGITransport(app=app),
        ) as ctx:
            view = ctx.catalog_view()
            await view.mount()
            await view.settle()

            assert view.filters.limit == 24
            assert len(view.products) == 24
            assert view.pagination.pages == 2
