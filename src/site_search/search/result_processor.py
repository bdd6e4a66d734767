"""Ranking and limiting of scored search results."""

from dataclasses import dataclass
from typing import Collection, List, Sequence, Tuple, Union

from ..catalog.models import SearchItem
from .relevance import ScoredItem

CategoryFilter = Union[str, Collection[str], None]


@dataclass(frozen=True)
class SearchResult:
    """Ranked search results.

    ``total_matches`` counts every match that survived filtering, before
    the limit was applied, so callers can show how many more exist.
    """

    results: Tuple[SearchItem, ...]
    total_matches: int

    @property
    def has_more(self) -> bool:
        return self.total_matches > len(self.results)


EMPTY_RESULT = SearchResult(results=(), total_matches=0)


class ResultProcessor:
    """Filters, sorts and truncates scored items."""

    def process_results(
        self,
        scored: Sequence[ScoredItem],
        limit: int,
        category: CategoryFilter = None,
    ) -> SearchResult:
        """Turn scored catalog items into a ranked result.

        Args:
            scored: Scored items in catalog order
            limit: Maximum number of results to return
            category: A category name, or a collection of accepted names

        Returns:
            SearchResult: Ranked items and the total match count
        """
        if limit < 0:
            raise ValueError("limit must be >= 0")

        matches = [match for match in scored if match.score > 0]
        matches = self.apply_category_filter(matches, category)

        # list.sort is stable: equal scores keep catalog order
        matches.sort(key=lambda match: match.score, reverse=True)

        return SearchResult(
            results=tuple(match.item for match in matches[:limit]),
            total_matches=len(matches),
        )

    def apply_category_filter(
        self, matches: List[ScoredItem], category: CategoryFilter
    ) -> List[ScoredItem]:
        """Keep matches whose category is accepted by the filter.

        ``None`` or an empty string disables the filter. A collection
        (even an empty one) is an allow-list. Items without a category
        are treated as category ``""``, so an allow-list containing the
        empty string accepts them.
        """
        if category is None or category == "":
            return list(matches)

        accepted = _accepted_categories(category)
        return [match for match in matches if (match.item.category or "") in accepted]


def _accepted_categories(category: Union[str, Collection[str]]) -> frozenset:
    if isinstance(category, str):
        return frozenset([category])
    return frozenset(category)
