from unittest.mock import MagicMock

import pytest

from frontend.api.schemas import SearchResult
from frontend.categories import (
    Category,
    CategoryListing,
    build_listing,
    navigation_links,
)
from frontend.navbar import Navbar
from frontend.search import SearchController


class TestCategories:
    def test_paths(self):
        assert Category.SHOES.path == "/category/shoes"
        assert Category.BABY_PRODUCTS.path == "/category/baby-products"
        assert Category.BRACELETS.path == "/category/lifestyle/bracelets"

    def test_navigation_links(self):
        links = navigation_links()

        assert [link.label for link in links] == [
            "Home",
            "Shirts",
            "Pants",
            "Shoes",
            "Electronics",
            "Kitchen",
            "Baby Products",
            "Lifestyle",
        ]
        assert [child.path for child in links[-1].children] == [
            "/category/lifestyle/jewelry",
            "/category/lifestyle/glasses",
            "/category/lifestyle/watches",
            "/category/lifestyle/caps",
            "/category/lifestyle/bracelets",
        ]

    def test_build_listing_filters_by_category(self):
        posts = [
            SearchResult(id="1", title="Gold", category="bracelets"),
            SearchResult(id="2", title="Cap", category="caps"),
            SearchResult(id="3", title="Silver", category="bracelets"),
        ]

        listing = build_listing("bracelets", posts)

        assert [p.id for p in listing.posts] == ["1", "3"]
        assert listing.heading == "Bracelets News"

    def test_empty_listing(self):
        listing = CategoryListing(Category.BABY_PRODUCTS)

        assert listing.is_empty
        assert listing.empty_message == "No baby products posts available."

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            build_listing("cars", [])


class TestNavbar:
    @pytest.fixture
    def router(self):
        return MagicMock()

    @pytest.fixture
    def navbar(self, client, router):
        return Navbar(SearchController(client, router, debounce=0.01))

    def test_menu_and_mobile_search_are_exclusive(self, navbar):
        navbar.toggle_mobile_search()
        assert navbar.state.mobile_search_open is True

        navbar.toggle_menu()
        assert navbar.state.mobile_menu_open is True
        assert navbar.state.mobile_search_open is False

        navbar.toggle_mobile_search()
        assert navbar.state.mobile_menu_open is False

    def test_lifestyle_dropdown_toggle(self, navbar):
        navbar.toggle_lifestyle_dropdown()
        assert navbar.state.lifestyle_dropdown_open is True
        navbar.toggle_lifestyle_dropdown()
        assert navbar.state.lifestyle_dropdown_open is False

    def test_submit_search_closes_overlays(self, navbar, router):
        navbar.toggle_menu()
        navbar.search.query = "shoe"

        assert navbar.submit_search() is True

        router.push.assert_called_once_with("/search?q=shoe")
        assert navbar.state.mobile_menu_open is False

    def test_blank_submit_keeps_overlays(self, navbar, router):
        navbar.toggle_mobile_search()

        assert navbar.submit_search() is False
        assert navbar.state.mobile_search_open is True

    def test_select_result_closes_overlays(self, navbar, router):
        navbar.toggle_mobile_search()

        navbar.select_result("post-9")

        router.push.assert_called_once_with("/post/post-9")
        assert navbar.state.mobile_search_open is False
