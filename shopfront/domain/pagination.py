"""Pagination model and page-number strip.

The listing API owns the pagination arithmetic; this module takes its
``{current, pages, total, limit}`` block as reported and only derives what
the view displays from it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from shopfront.domain.base import ValueObject
from shopfront.domain.exceptions import InvalidPageError
from shopfront.domain.filters import DEFAULT_PAGE_SIZE

# Pages shown on each side of the current page.
PAGE_WINDOW = 2


class PageAction(str, Enum):
    """Navigation buttons around the page strip."""

    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class PageLink(ValueObject):
    """One entry of the page strip.

    Attributes:
        number: Page number, or None for an ellipsis.
        active: True for the current page.
    """

    number: int | None
    active: bool = False

    @property
    def is_ellipsis(self) -> bool:
        """True for a gap marker."""
        return self.number is None

    def __str__(self) -> str:
        return "…" if self.number is None else str(self.number)


ELLIPSIS = PageLink(number=None)


@dataclass(frozen=True)
class Pagination(ValueObject):
    """Pagination summary of the last successful fetch.

    Attributes:
        current: 1-based current page.
        pages: Total page count, 0 for an empty result.
        total: Total matching items.
        limit: Page size echoed by the API.
    """

    current: int = 1
    pages: int = 0
    total: int = 0
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> Self:
        """Build the model from the API's pagination block, verbatim."""
        return cls(
            current=int(data["current"]),
            pages=int(data["pages"]),
            total=int(data["total"]),
            limit=int(data["limit"]),
        )

    @property
    def is_visible(self) -> bool:
        """The strip is only worth rendering with more than one page."""
        return self.pages > 1

    def is_enabled(self, action: PageAction) -> bool:
        """Check whether a navigation button can be used.

        Args:
            action: Navigation button.

        Returns:
            False at the boundary the button points past.
        """
        if action in (PageAction.FIRST, PageAction.PREV):
            return self.current > 1
        return self.current < self.pages

    def target(self, action: PageAction) -> int | None:
        """Resolve a navigation button to the page it leads to.

        Args:
            action: Navigation button.

        Returns:
            Target page, or None when the button is disabled.
        """
        if not self.is_enabled(action):
            return None
        if action == PageAction.FIRST:
            return 1
        if action == PageAction.PREV:
            return self.current - 1
        if action == PageAction.NEXT:
            return self.current + 1
        return self.pages

    def validate_jump(self, page: int) -> int:
        """Check a numbered jump against the known page count.

        Raises:
            InvalidPageError: If the page does not exist.
        """
        if page < 1 or page > self.pages:
            raise InvalidPageError(page, self.pages)
        return page

    def strip(self, window: int = PAGE_WINDOW) -> list[PageLink]:
        """Derive the abbreviated page-number strip.

        The strip holds the first page, the last page and every page within
        ``window`` of the current one. A single ellipsis stands in for each
        run of skipped pages.

        Example:
            >>> [str(p) for p in Pagination(current=3, pages=7, total=84, limit=12).strip()]
            ['1', '2', '3', '4', '5', '…', '7']

        Args:
            window: Pages shown on each side of the current page.

        Returns:
            Ordered list of page links and ellipsis markers.
        """
        if self.pages < 1:
            return []

        low = max(1, self.current - window)
        high = min(self.pages, self.current + window)
        included = sorted({1, self.pages, *range(low, high + 1)})

        links: list[PageLink] = []
        previous = 0
        for number in included:
            if previous and number - previous > 1:
                links.append(ELLIPSIS)
            links.append(PageLink(number=number, active=number == self.current))
            previous = number
        return links

    def summary(self, shown: int) -> str:
        """Results line shown above the product list."""
        return f"Showing {shown} of {self.total} products"

    def to_dict(self) -> dict[str, int]:
        """Convert to the API's pagination shape."""
        return {
            "current": self.current,
            "pages": self.pages,
            "total": self.total,
            "limit": self.limit,
        }
