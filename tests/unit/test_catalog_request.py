"""Unit tests for listing parameter validation."""

import pytest

from skin_museum.catalog.query import (
    DEFAULT_PAGE_SIZE,
    MAX_OFFSET,
    MAX_PAGE_SIZE,
    DefaultListing,
    FilteredListing,
    MuseumListing,
    Page,
    SkinsFilterOption,
    SkinsSortOption,
    listing_predicate,
    parse_catalog_request,
)
from skin_museum.catalog.store import APPROVED_SKINS, CLASSIC_SKINS
from skin_museum.errors import (
    InvalidPaginationError,
    LimitExceededError,
    UnsupportedCombinationError,
    ValidationError,
)


class TestParseCatalogRequest:
    """Tests for parse_catalog_request."""
    
    def test_defaults(self):
        """No parameters gives the default page of the plain listing."""
        request = parse_catalog_request()
        
        assert isinstance(request, DefaultListing)
        assert request.page == Page(first=DEFAULT_PAGE_SIZE, offset=0)
    
    def test_museum_sort(self):
        request = parse_catalog_request(10, 20, SkinsSortOption.MUSEUM, None)
        
        assert isinstance(request, MuseumListing)
        assert request.page == Page(first=10, offset=20)
    
    def test_approved_filter(self):
        request = parse_catalog_request(10, 0, None, SkinsFilterOption.APPROVED)
        
        assert isinstance(request, FilteredListing)
        assert request.filter == SkinsFilterOption.APPROVED
    
    def test_plain_strings_accepted(self):
        """Raw option strings parse the same as the enum members."""
        request = parse_catalog_request(5, 0, "MUSEUM", None)
        assert isinstance(request, MuseumListing)
    
    def test_maximum_page_size_allowed(self):
        request = parse_catalog_request(MAX_PAGE_SIZE, 0)
        assert request.page.first == 1000
    
    def test_page_size_over_maximum(self):
        with pytest.raises(LimitExceededError) as excinfo:
            parse_catalog_request(1001, 0)
        
        assert excinfo.value.requested == 1001
        assert excinfo.value.maximum == 1000
        assert str(excinfo.value) == "Maximum limit is 1000"
    
    def test_limit_checked_before_combination(self):
        """An oversized page fails as a limit error even when sort and filter clash."""
        with pytest.raises(LimitExceededError):
            parse_catalog_request(5000, 0, SkinsSortOption.MUSEUM, SkinsFilterOption.APPROVED)
    
    def test_sort_and_filter_rejected(self):
        with pytest.raises(UnsupportedCombinationError) as excinfo:
            parse_catalog_request(10, 0, SkinsSortOption.MUSEUM, SkinsFilterOption.APPROVED)
        
        assert excinfo.value.sort == "MUSEUM"
        assert excinfo.value.filter == "APPROVED"
        assert isinstance(excinfo.value, ValidationError)
    
    @pytest.mark.parametrize("first,offset", [(-1, 0), (10, -5)])
    def test_negative_values_rejected(self, first, offset):
        with pytest.raises(InvalidPaginationError):
            parse_catalog_request(first, offset)
    
    def test_custom_maximum(self):
        with pytest.raises(LimitExceededError):
            parse_catalog_request(51, 0, max_page_size=50)
    
    def test_default_clamped_to_maximum(self):
        request = parse_catalog_request(max_page_size=20, default_page_size=100)
        assert request.page.first == 20
    
    def test_offset_above_integer_range_rejected(self):
        with pytest.raises(InvalidPaginationError):
            parse_catalog_request(10, MAX_OFFSET + 1)
    
    def test_offset_at_integer_limit_allowed(self):
        request = parse_catalog_request(10, MAX_OFFSET, SkinsSortOption.MUSEUM)
        assert request.page.offset == MAX_OFFSET


class TestListingPredicate:
    """count() and nodes() share the predicate chosen here."""
    
    def test_default_and_museum_cover_classic_skins(self):
        page = Page(first=10, offset=0)
        assert listing_predicate(DefaultListing(page)) is CLASSIC_SKINS
        assert listing_predicate(MuseumListing(page)) is CLASSIC_SKINS
    
    def test_approved_filter(self):
        request = FilteredListing(Page(first=10, offset=0), SkinsFilterOption.APPROVED)
        assert listing_predicate(request) is APPROVED_SKINS
