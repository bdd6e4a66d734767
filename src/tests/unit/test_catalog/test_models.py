"""Tests for catalog data models."""

import pytest
from pydantic import ValidationError

from site_search.catalog.models import Catalog, SearchItem
from site_search.exceptions import CatalogValidationError


class TestSearchItem:
    def test_keywords_become_tuple(self, sample_entries):
        """Test keywords become tuple."""
        item = SearchItem(**sample_entries[0])

        assert item.keywords == ("join", "renew", "member")
        assert item.category == "membership"

    def test_category_is_optional(self, sample_entries):
        """Test category is optional."""
        item = SearchItem(**sample_entries[-1])

        assert item.category is None

    def test_items_are_immutable(self, sample_entries):
        """Test items are immutable."""
        item = SearchItem(**sample_entries[0])

        with pytest.raises(ValidationError):
            item.title = "Changed"

        assert SearchItem.model_config["frozen"] is True

    @pytest.mark.parametrize("missing", ["title", "description", "url", "keywords"])
    def test_required_fields(self, sample_entries, missing):
        """Test required fields."""
        entry = dict(sample_entries[0])
        del entry[missing]

        with pytest.raises(ValidationError):
            SearchItem(**entry)

    def test_keywords_must_be_strings(self, sample_entries):
        """Test keywords must be strings."""
        entry = dict(sample_entries[0], keywords=["ok", 3])

        with pytest.raises(ValidationError):
            SearchItem(**entry)

    @pytest.mark.parametrize("field", ["title", "url"])
    def test_blank_title_or_url_rejected(self, sample_entries, field):
        """Test blank title or url rejected."""
        entry = dict(sample_entries[0], **{field: "  "})

        with pytest.raises(ValidationError):
            SearchItem(**entry)

    def test_has_fragment(self, sample_entries):
        """Test fragment detection from the url."""
        assert SearchItem(**sample_entries[1]).has_fragment
        assert not SearchItem(**sample_entries[0]).has_fragment


class TestCatalog:
    def test_sequence_behaviour(self, sample_catalog, sample_entries):
        """Test catalog length, indexing and iteration."""
        assert len(sample_catalog) == len(sample_entries)
        assert sample_catalog[0].url == "/membership"
        assert [item.url for item in sample_catalog] == [e["url"] for e in sample_entries]
        assert sample_catalog[0] in sample_catalog

    def test_lookup_by_url(self, sample_catalog):
        """Test lookup by url."""
        assert sample_catalog.get("/contact").title == "Contact Us"
        assert sample_catalog.get("/nowhere") is None

    def test_items_is_a_tuple(self, sample_catalog):
        """Test items is a tuple."""
        assert isinstance(sample_catalog.items, tuple)

    def test_duplicate_urls_rejected(self, item_factory):
        """Test duplicate urls rejected."""
        with pytest.raises(CatalogValidationError) as exc_info:
            Catalog([item_factory("A", "/same"), item_factory("B", "/same")])

        assert exc_info.value.details == {"index": 1, "url": "/same"}

    def test_categories_in_first_seen_order(self, sample_catalog):
        """Test categories in first seen order."""
        assert sample_catalog.categories() == ["membership", "training", "conditions"]
