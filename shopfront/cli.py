"""Command-line catalog browser.

Mounts a catalog view against a running listing API and prints one page
of results the way the listing page would show it, or prints the details
of a single product.

Usage:
    shopfront browse --price-range 300-1000
    shopfront browse --category laptops --page 2 --limit 24
    shopfront browse --intent-brand acme Acme --url http://localhost:8000
    shopfront show 3f2a9c0d1b7e4a5f6c8d9e0a
"""

import argparse
import asyncio
import sys

import httpx
from pydantic import ValidationError

from shopfront.api.schemas import ProductSchema
from shopfront.application.catalog_view import CatalogView
from shopfront.application.context import AppContext
from shopfront.domain.filters import PAGE_SIZE_OPTIONS, PriceRange
from shopfront.domain.products import Product, format_price
from shopfront.infrastructure.config import Settings, settings
from shopfront.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shopfront",
        description="Browse the product catalog from the terminal",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    browse = subparsers.add_parser("browse", help="List one page of products")
    browse.add_argument("--url", help="Listing API base URL (default: from settings)")
    browse.add_argument("--search", default="", help="Text to match in name or description")
    browse.add_argument("--category", default="", help="Category ID, passed in the URL")
    browse.add_argument("--brand", default="", help="Brand ID, passed in the URL")
    browse.add_argument(
        "--price-range",
        default="",
        choices=[r.value for r in PriceRange],
        help="Price bracket",
    )
    browse.add_argument("--page", type=int, default=1, help="Page to show")
    browse.add_argument(
        "--limit",
        type=int,
        default=settings.default_page_size,
        choices=PAGE_SIZE_OPTIONS,
        help="Items per page",
    )
    browse.add_argument(
        "--intent-category",
        nargs=2,
        metavar=("ID", "NAME"),
        help="Arrive from the category page with this category selected",
    )
    browse.add_argument(
        "--intent-brand",
        nargs=2,
        metavar=("ID", "NAME"),
        help="Arrive from the brand page with this brand selected",
    )

    show = subparsers.add_parser("show", help="Show one product's details")
    show.add_argument("product_id", help="Product ID")
    show.add_argument("--url", help="Listing API base URL (default: from settings)")
    return parser


def listing_href(path: str, category: str, brand: str) -> str:
    """Build the listing route with optional URL filters."""
    params = {k: v for k, v in (("category", category), ("brand", brand)) if v}
    if not params:
        return path
    return f"{path}?{httpx.QueryParams(params)}"


def render(view: CatalogView, context: AppContext) -> None:
    """Print the view's current state."""
    for notification in context.notifications.drain():
        print(f"[{notification.level.value}] {notification.message}")

    if view.filters.has_active_filters():
        tags = view.active_filter_tags()
        print("Active filters: " + ", ".join(tag.label for tag in tags))

    if not view.products:
        print("No products found")
        return

    print(view.results_summary())
    print()
    for product in view.products:
        category = product.category.name if product.category else "-"
        brand = product.brand.name if product.brand else "-"
        price = format_price(product.display_price)
        if product.has_discount:
            price = f"{price} (was {format_price(product.price)}, {float(product.discount):g}% off)"
        print(f"  {product.name:<40} {category:<15} {brand:<12} {price}")

    strip = view.page_strip()
    if strip:
        print()
        print(" ".join(f"[{link}]" if link.active else str(link) for link in strip))


def render_product(product: Product) -> None:
    """Print one product's details."""
    print(product.name)
    if product.has_discount:
        print(
            f"Price: {format_price(product.display_price)} "
            f"(was {format_price(product.price)}, {float(product.discount):g}% off)"
        )
    else:
        print(f"Price: {format_price(product.price)}")
    print(f"Category: {product.category.name if product.category else '-'}")
    print(f"Brand: {product.brand.name if product.brand else '-'}")
    print(f"Stock: {product.stock}" if product.stock else "Out of stock")
    if product.description:
        print()
        print(product.description)


def config_for(args: argparse.Namespace) -> Settings:
    """Settings with the --url override applied."""
    return Settings(catalog_api_url=args.url) if args.url else settings


async def browse(args: argparse.Namespace) -> int:
    """Run the browse command.

    Returns:
        Process exit status.
    """
    config = config_for(args)
    href = listing_href(config.listing_path, args.category, args.brand)

    async with AppContext.create(settings=config, initial_href=href) as context:
        view = context.catalog_view()
        await view.mount()

        state = {}
        if args.intent_category:
            state.update(categoryFilter=args.intent_category[0], categoryName=args.intent_category[1])
        if args.intent_brand:
            state.update(brandFilter=args.intent_brand[0], brandName=args.intent_brand[1])
        if state:
            context.navigator.push(config.listing_path, state=state)

        if args.search:
            view.set_filter("search", args.search)
        if args.price_range:
            view.set_filter("price_range", args.price_range)
        if args.limit != view.filters.limit:
            view.set_page_size(args.limit)
        await view.settle()

        if args.page > 1 and view.fetch_cycle.last_error is None:
            if args.page > view.pagination.pages:
                print(f"Page {args.page} does not exist ({view.pagination.pages} pages)")
                return 2
            view.go_to_page(args.page)
            await view.settle()

        render(view, context)
        return 1 if view.fetch_cycle.last_error is not None else 0


async def show(args: argparse.Namespace) -> int:
    """Run the show command.

    Returns:
        Process exit status.
    """
    async with AppContext.create(settings=config_for(args)) as context:
        response = await context.api.get_product(args.product_id)

    if not response.success:
        print(f"Error: {response.error.message}")
        return 1

    try:
        payload = ProductSchema.model_validate(response.data)
    except ValidationError:
        print("Error: product response does not match the expected shape")
        return 1

    render_product(Product.from_dict(payload.model_dump(by_alias=True)))
    return 0


def run(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)
    if args.command == "browse":
        return asyncio.run(browse(args))
    if args.command == "show":
        return asyncio.run(show(args))
    return 2


if __name__ == "__main__":
    sys.exit(run())
