"""Search module for the site catalog.

Main components:
- SearchService: High-level interface over one catalog
- QueryProcessor: Query normalization
- RelevanceRanker: Additive relevance scoring
- ResultProcessor: Filtering, ordering and limiting
- RelatedContentFinder: Related entries by category and keywords
"""

from .popularity import keyword_frequencies, popular_keywords
from .query_processor import ProcessedQuery, QueryProcessor
from .related import RelatedContentFinder
from .relevance import RelevanceRanker, RelevanceScore, ScoredItem
from .result_processor import ResultProcessor, SearchResult
from .search_engine import SearchService

__all__ = [
    "ProcessedQuery",
    "QueryProcessor",
    "RelatedContentFinder",
    "RelevanceRanker",
    "RelevanceScore",
    "ResultProcessor",
    "ScoredItem",
    "SearchResult",
    "SearchService",
    "keyword_frequencies",
    "popular_keywords",
]
