"""Tests for PagingPolicy, Page and PageFooter."""

import pytest

from quotepress.layout import Page, PageFooter, PagingPolicy, paginate
from quotepress.models import LineItem

from tests.conftest import make_items


class TestPagingPolicy:
    """Test suite for PagingPolicy."""

    def test_defaults(self):
        """Default policy uses the canonical constants."""
        policy = PagingPolicy()

        assert policy.base_items_per_page == 13
        assert policy.continuation_items_per_page == 13
        assert policy.long_description_length == 200
        assert policy.first_page_long_capacity == 6
        assert policy.continuation_long_capacity == 8

    @pytest.mark.parametrize("value,expected", [(0, 1), (-3, 1), (None, 1), ("7", 7), (17, 17)])
    def test_base_capacity_clamped(self, value, expected):
        """Base capacity is clamped to at least one."""
        assert PagingPolicy(base_items_per_page=value).base_items_per_page == expected

    def test_continuation_defaults_to_base(self):
        policy = PagingPolicy(base_items_per_page=9)

        assert policy.normal_capacity(0) == 9
        assert policy.normal_capacity(3) == 9

    def test_long_capacity_bounded_by_normal(self):
        policy = PagingPolicy(base_items_per_page=4)

        assert policy.long_capacity(0) == 4
        assert policy.long_capacity(1) == 4

    def test_is_long(self):
        policy = PagingPolicy()

        assert not policy.is_long("x" * 200)
        assert policy.is_long("x" * 201)
        assert not policy.is_long("")

    def test_saturation_count(self):
        policy = PagingPolicy()

        assert policy.saturation_count(17) == 9
        assert policy.saturation_count(10) == 5
        assert policy.saturation_count(1) == 1
        assert policy.saturation_count(0) == 1

    def test_ratio_clamped(self):
        assert PagingPolicy(long_description_ratio=3).long_description_ratio == 1.0
        assert PagingPolicy(long_description_ratio=-1).long_description_ratio == 0.0


class TestPage:
    """Test suite for Page."""

    def test_numbered_items_are_absolute(self):
        items = tuple(make_items(3))
        page = Page(items=items, start_index=10, number=2, total_pages=2,
                    is_first_page=False, is_last_page=True)

        assert [number for number, _ in page.numbered_items()] == [11, 12, 13]
        assert page.end_index == 13

    def test_page_info(self):
        pages = paginate(make_items(20), PagingPolicy(base_items_per_page=17))
        info = pages[1].get_page_info()

        assert info == {
            "page_number": 2,
            "total_pages": 2,
            "item_count": 3,
            "first_item": 18,
            "last_item": 20,
            "is_first_page": False,
            "is_last_page": True,
        }

    def test_empty_page_info(self):
        page = paginate([])[0]

        assert page.is_empty
        assert page.get_page_info()["first_item"] is None

    def test_page_is_immutable(self):
        page = paginate([LineItem("a", "u", 1, 1)])[0]

        with pytest.raises(AttributeError):
            page.number = 5


class TestPageFooter:
    """Test suite for PageFooter."""

    def _page(self, number, total):
        return Page(items=(), start_index=0, number=number, total_pages=total,
                    is_first_page=number == 1, is_last_page=number == total)

    def test_arabic_page_label(self):
        footer = PageFooter("Company", "arabic")

        assert footer.page_label(self._page(2, 3)) == "صفحة ٢ من ٣"

    def test_latin_page_label(self):
        footer = PageFooter("Company", "latin")

        assert footer.page_label(self._page(1, 12)) == "Page 1 of 12"

    def test_lines_skip_blank(self):
        footer = PageFooter("Company Name\n\nAddress\n  \nPhone")

        assert footer.lines() == ["Company Name", "Address", "Phone"]
