"""Pytest configuration and shared fixtures."""

from typing import Any, Dict, List, Optional

import pytest

from site_search.catalog.models import Catalog, SearchItem
from site_search.config.settings import SearchConfig
from site_search.search.search_engine import SearchService


def make_item(
    title: str,
    url: str,
    keywords: Optional[List[str]] = None,
    description: str = "",
    category: Optional[str] = None,
) -> SearchItem:
    """Build a search item with sensible blanks."""
    return SearchItem(
        title=title,
        description=description,
        url=url,
        keywords=keywords or [],
        category=category,
    )


@pytest.fixture
def item_factory():
    """Expose make_item to tests."""
    return make_item


@pytest.fixture
def sample_entries() -> List[Dict[str, Any]]:
    """Raw catalog entries as they appear in a catalog file."""
    return [
        {
            "title": "Membership",
            "description": "Join or renew your membership",
            "url": "/membership",
            "keywords": ["join", "renew", "member"],
            "category": "membership",
        },
        {
            "title": "Membership FAQ",
            "description": "Frequently asked questions",
            "url": "/membership#faq",
            "keywords": ["faq", "questions"],
            "category": "membership",
        },
        {
            "title": "Epilepsy Training",
            "description": "Courses on paediatric epilepsy",
            "url": "/training/pet",
            "keywords": ["epilepsy", "training", "pet"],
            "category": "training",
        },
        {
            "title": "Upcoming Events",
            "description": "Conferences and workshops",
            "url": "/training/events",
            "keywords": ["events", "training", "epilepsy"],
            "category": "training",
        },
        {
            "title": "Epilepsy Resources",
            "description": "Information on seizures",
            "url": "/resources/epilepsy",
            "keywords": ["epilepsy", "seizures"],
            "category": "conditions",
        },
        {
            "title": "Contact Us",
            "description": "Get in touch with the team",
            "url": "/contact",
            "keywords": ["contact", "email"],
        },
    ]


@pytest.fixture
def sample_catalog(sample_entries) -> Catalog:
    """Small catalog covering categories, fragments and shared keywords."""
    return Catalog(SearchItem(**entry) for entry in sample_entries)


@pytest.fixture
def search_config() -> SearchConfig:
    """Default search configuration."""
    return SearchConfig()


@pytest.fixture
def search_service(sample_catalog, search_config) -> SearchService:
    """Search service over the sample catalog."""
    return SearchService(sample_catalog, search_config)


@pytest.fixture(scope="session")
def default_service() -> SearchService:
    """Search service over the packaged site catalog."""
    return SearchService.default(SearchConfig())
