"""Tests for the pagination model and page strip."""

import pytest

from shopfront.domain import ELLIPSIS, PageAction, Pagination
from shopfront.domain.exceptions import InvalidPageError


def strip_of(current: int, pages: int) -> list[str]:
    """Render a strip as strings for compact assertions."""
    return [str(link) for link in Pagination(current=current, pages=pages, total=pages * 12).strip()]


class TestPageStrip:
    """Tests for the abbreviated page-number strip."""

    def test_current_three_of_seven(self) -> None:
        """Pages 1 and 2 are adjacent, 6 collapses into an ellipsis."""
        assert strip_of(3, 7) == ["1", "2", "3", "4", "5", "…", "7"]

    def test_current_two_of_seven(self) -> None:
        assert strip_of(2, 7) == ["1", "2", "3", "4", "…", "7"]

    def test_middle_page_has_two_ellipses(self) -> None:
        assert strip_of(5, 10) == ["1", "…", "3", "4", "5", "6", "7", "…", "10"]

    def test_single_skipped_page_still_collapses(self) -> None:
        """A gap of exactly one page is shown as an ellipsis."""
        assert strip_of(5, 7) == ["1", "…", "3", "4", "5", "6", "7"]

    def test_last_page(self) -> None:
        assert strip_of(10, 10) == ["1", "…", "8", "9", "10"]

    def test_few_pages_no_ellipsis(self) -> None:
        assert strip_of(1, 3) == ["1", "2", "3"]

    def test_single_page(self) -> None:
        assert strip_of(1, 1) == ["1"]

    def test_no_pages(self) -> None:
        assert Pagination(current=1, pages=0, total=0).strip() == []

    @pytest.mark.parametrize("pages", range(1, 16))
    def test_strip_shape(self, pages: int) -> None:
        """First and last page always shown, no duplicates, one ellipsis per side."""
        for current in range(1, pages + 1):
            links = Pagination(current=current, pages=pages, total=pages).strip()
            numbers = [link.number for link in links if not link.is_ellipsis]

            assert numbers[0] == 1
            assert numbers[-1] == pages
            assert len(numbers) == len(set(numbers))
            assert numbers == sorted(numbers)

            current_index = next(i for i, link in enumerate(links) if link.active)
            assert links[current_index].number == current
            assert links[:current_index].count(ELLIPSIS) <= 1
            assert links[current_index:].count(ELLIPSIS) <= 1

    def test_active_flag(self) -> None:
        links = Pagination(current=2, pages=3, total=30).strip()
        assert [link.active for link in links] == [False, True, False]

    def test_visibility(self) -> None:
        """The strip is only shown with more than one page."""
        assert not Pagination(current=1, pages=1, total=5).is_visible
        assert Pagination(current=1, pages=2, total=20).is_visible


class TestPageActions:
    """Tests for first/prev/next/last buttons."""

    def test_first_page_disables_first_and_prev(self) -> None:
        pagination = Pagination(current=1, pages=5, total=60)
        assert pagination.target(PageAction.FIRST) is None
        assert pagination.target(PageAction.PREV) is None
        assert pagination.target(PageAction.NEXT) == 2
        assert pagination.target(PageAction.LAST) == 5

    def test_last_page_disables_next_and_last(self) -> None:
        pagination = Pagination(current=5, pages=5, total=60)
        assert pagination.target(PageAction.NEXT) is None
        assert pagination.target(PageAction.LAST) is None
        assert pagination.target(PageAction.FIRST) == 1
        assert pagination.target(PageAction.PREV) == 4

    def test_validate_jump(self) -> None:
        pagination = Pagination(current=2, pages=4, total=48)
        assert pagination.validate_jump(4) == 4
        with pytest.raises(InvalidPageError):
            pagination.validate_jump(5)
        with pytest.raises(InvalidPageError):
            pagination.validate_jump(0)


class TestPaginationModel:
    """Tests for consuming the API's pagination block."""

    def test_from_response_verbatim(self) -> None:
        """Values are taken as reported, not recomputed."""
        pagination = Pagination.from_response({"current": 3, "pages": 7, "total": 84, "limit": 12})
        assert pagination == Pagination(current=3, pages=7, total=84, limit=12)
        assert pagination.to_dict() == {"current": 3, "pages": 7, "total": 84, "limit": 12}

    def test_summary(self) -> None:
        pagination = Pagination(current=1, pages=7, total=84, limit=12)
        assert pagination.summary(12) == "Showing 12 of 84 products"
