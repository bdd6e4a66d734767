"""High-level search interface for the site catalog.

:class:`SearchService` owns one immutable catalog and exposes every
query operation over it. All operations are pure reads. ``reload``
replaces the catalog with a single reference assignment, and each
operation reads that reference exactly once, so concurrent callers see
either the old catalog or the new one and never need a lock.
"""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..catalog.loader import load_catalog, load_default_catalog
from ..catalog.models import Catalog, SearchItem
from ..config.logging import get_logger, log_performance
from ..config.settings import SearchConfig
from .popularity import popular_keywords
from .query_processor import QueryProcessor, normalize_query
from .related import RelatedContentFinder
from .relevance import RelevanceRanker, RelevanceScore
from .result_processor import EMPTY_RESULT, CategoryFilter, ResultProcessor, SearchResult

logger = get_logger(__name__)


class SearchService:
    """Search, related content and popular terms over one catalog."""

    def __init__(self, catalog: Catalog, config: Optional[SearchConfig] = None):
        """Initialize the search service.

        Args:
            catalog: Validated catalog to serve
            config: Search configuration, defaults from the environment
        """
        self._catalog = catalog
        self.config = config or SearchConfig()
        self.query_processor = QueryProcessor(self.config)
        self.relevance_ranker = RelevanceRanker(self.config)
        self.result_processor = ResultProcessor()
        self.related_finder = RelatedContentFinder()

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: Optional[SearchConfig] = None
    ) -> "SearchService":
        """Create a service over a catalog file."""
        return cls(load_catalog(path), config)

    @classmethod
    def default(cls, config: Optional[SearchConfig] = None) -> "SearchService":
        """Create a service over the packaged site catalog."""
        return cls(load_default_catalog(), config)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def reload(self, catalog: Catalog) -> None:
        """Swap in a new catalog for all subsequent calls."""
        previous = self._catalog
        self._catalog = catalog
        logger.info(
            "Catalog reloaded",
            previous_item_count=len(previous),
            item_count=len(catalog),
        )

    def search(
        self,
        query: str,
        limit: Optional[int] = None,
        category: CategoryFilter = None,
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> SearchResult:
        """Rank catalog entries against a free-text query.

        Args:
            query: Raw search query
            limit: Maximum number of results (default from config, 10)
            category: Category name or collection of names to keep
            fuzzy_match: Add partial credit for multi-term queries
            boost_exact_matches: Extra credit when the title equals the query

        Returns:
            SearchResult: Ranked entries and the total match count
        """
        if limit is None:
            limit = self.config.default_limit
        if limit < 0:
            raise ValueError("limit must be >= 0")

        processed = self.query_processor.process_query(query)
        if processed.is_empty:
            return EMPTY_RESULT

        catalog = self._catalog
        start_time = time.perf_counter()

        scored = self.relevance_ranker.score_items(
            processed, catalog.items, fuzzy_match, boost_exact_matches
        )
        result = self.result_processor.process_results(scored, limit, category)

        log_performance(
            logger,
            "search",
            (time.perf_counter() - start_time) * 1000,
            query=processed.normalized_query,
            term_count=len(processed.terms),
            total_matches=result.total_matches,
            returned=len(result.results),
        )
        return result

    def explain(
        self,
        query: str,
        item: SearchItem,
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> RelevanceScore:
        """Score breakdown for one entry against a query."""
        processed = self.query_processor.process_query(query)
        if processed.is_empty:
            return RelevanceScore(total_score=0.0, factor_scores={})
        return self.relevance_ranker.calculate_relevance_score(
            processed, item, fuzzy_match, boost_exact_matches
        )

    def explain_search(
        self,
        query: str,
        limit: Optional[int] = None,
        category: CategoryFilter = None,
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> List[Dict[str, Any]]:
        """Explanations for each entry a search would return, in rank order."""
        result = self.search(query, limit, category, fuzzy_match, boost_exact_matches)
        processed = self.query_processor.process_query(query)
        return [
            self.relevance_ranker.explain_score(
                processed, item, fuzzy_match, boost_exact_matches
            )
            for item in result.results
        ]

    def get_related_content(
        self, item: SearchItem, limit: Optional[int] = None
    ) -> List[SearchItem]:
        """Entries related to ``item`` by category, then shared keywords."""
        if limit is None:
            limit = self.config.related_limit
        return self.related_finder.find_related(self._catalog, item, limit)

    def get_popular_search_terms(self, limit: Optional[int] = None) -> List[str]:
        """Most frequent keywords across the catalog."""
        if limit is None:
            limit = self.config.popular_limit
        return popular_keywords(self._catalog, limit)

    def search_site(self, query: str) -> List[SearchItem]:
        """Unranked substring match over titles, descriptions and keywords.

        Entries are returned in catalog order.
        """
        needle = normalize_query(query or "")
        if not needle:
            return []

        return [
            item
            for item in self._catalog
            if needle in item.title.lower()
            or needle in item.description.lower()
            or any(needle in keyword.lower() for keyword in item.keywords)
        ]

    def get_items_by_category(self, category: str) -> List[SearchItem]:
        """Entries in ``category``, in catalog order."""
        return [item for item in self._catalog if item.category == category]

    def get_item(self, url: str) -> Optional[SearchItem]:
        """Look up an entry by url."""
        return self._catalog.get(url)

    def categories(self) -> List[str]:
        """Distinct categories in catalog order."""
        return self._catalog.categories()
