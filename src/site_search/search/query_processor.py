"""Query normalization for site search.

Queries are matched as plain lowercase substrings, so normalization is
deliberately small: lowercase, trim, split on whitespace. No stemming or
stop-word removal is applied.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config.settings import SearchConfig


@dataclass(frozen=True)
class ProcessedQuery:
    """Normalized search query with extracted terms."""

    original_query: str
    normalized_query: str
    terms: Tuple[str, ...]
    fuzzy_terms: Tuple[str, ...]  # terms long enough for fuzzy matching

    @property
    def is_empty(self) -> bool:
        return not self.normalized_query

    @property
    def is_multi_term(self) -> bool:
        return len(self.terms) > 1


class QueryProcessor:
    """Normalizes raw query strings."""

    def __init__(self, config: SearchConfig):
        """Initialize the query processor.

        Args:
            config: Search configuration settings
        """
        self.config = config

    def process_query(self, query: str) -> ProcessedQuery:
        """Normalize a raw query string.

        Empty or whitespace-only input yields an empty query rather than
        an error; callers short-circuit on :attr:`ProcessedQuery.is_empty`.

        Args:
            query: Raw search query string

        Returns:
            ProcessedQuery: Normalized query and its terms
        """
        normalized = normalize_query(query or "")
        terms = tuple(normalized.split())
        min_length = self.config.min_fuzzy_term_length
        fuzzy_terms = tuple(term for term in terms if len(term) >= min_length)

        return ProcessedQuery(
            original_query=query or "",
            normalized_query=normalized,
            terms=terms,
            fuzzy_terms=fuzzy_terms,
        )


def normalize_query(query: str) -> str:
    """Lowercase and trim a query."""
    return query.lower().strip()
