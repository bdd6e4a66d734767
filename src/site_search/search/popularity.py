"""Keyword popularity across the catalog."""

from typing import Dict, List, Tuple

from ..catalog.models import Catalog


def keyword_frequencies(catalog: Catalog) -> List[Tuple[str, int]]:
    """Count keyword occurrences across every catalog entry.

    Repeats in different entries all count. The result is ordered by
    count, highest first; equal counts keep the order in which each
    keyword first appears in the catalog.

    Returns:
        List of ``(keyword, count)`` pairs
    """
    counts: Dict[str, int] = {}
    first_seen: Dict[str, int] = {}
    position = 0
    for item in catalog:
        for keyword in item.keywords:
            if keyword not in first_seen:
                first_seen[keyword] = position
                counts[keyword] = 0
            counts[keyword] += 1
            position += 1

    return sorted(
        counts.items(), key=lambda entry: (-entry[1], first_seen[entry[0]])
    )


def popular_keywords(catalog: Catalog, limit: int = 5) -> List[str]:
    """Return the ``limit`` most frequent catalog keywords."""
    if limit < 0:
        raise ValueError("limit must be >= 0")
    return [keyword for keyword, _ in keyword_frequencies(catalog)[:limit]]
