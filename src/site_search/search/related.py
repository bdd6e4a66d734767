"""Related-content discovery by shared category and keywords."""

from typing import List, Set

from ..catalog.models import Catalog, SearchItem


class RelatedContentFinder:
    """Finds catalog entries related to a reference entry.

    Entries in the same category come first, in catalog order. They are
    followed by entries sharing keywords with the reference, most shared
    keywords first. Each url appears at most once.
    """

    def find_related(
        self, catalog: Catalog, reference: SearchItem, limit: int = 3
    ) -> List[SearchItem]:
        """Return up to ``limit`` entries related to ``reference``.

        Args:
            catalog: Catalog to search
            reference: Entry to find relations for, matched by url
            limit: Maximum number of entries to return

        Returns:
            Related entries; empty if the reference is not in the catalog
        """
        if limit < 0:
            raise ValueError("limit must be >= 0")

        # Resolve by url; the caller's object may come from another catalog
        reference = catalog.get(reference.url)
        if reference is None or limit == 0:
            return []

        related: List[SearchItem] = []
        included: Set[str] = {reference.url}

        for candidate in self._same_category(catalog, reference):
            if len(related) >= limit:
                break
            if candidate.url not in included:
                included.add(candidate.url)
                related.append(candidate)

        for candidate in self._by_shared_keywords(catalog, reference):
            if len(related) >= limit:
                break
            if candidate.url not in included:
                included.add(candidate.url)
                related.append(candidate)

        return related

    def _same_category(self, catalog: Catalog, reference: SearchItem) -> List[SearchItem]:
        # Uncategorized entries are grouped together
        return [
            item
            for item in catalog
            if item.url != reference.url and item.category == reference.category
        ]

    def _by_shared_keywords(
        self, catalog: Catalog, reference: SearchItem
    ) -> List[SearchItem]:
        reference_keywords = set(reference.keywords)
        counted = []
        for item in catalog:
            if item.url == reference.url:
                continue
            shared = sum(1 for keyword in item.keywords if keyword in reference_keywords)
            if shared > 0:
                counted.append((item, shared))

        # Stable sort keeps catalog order among equal counts
        counted.sort(key=lambda entry: entry[1], reverse=True)
        return [item for item, _ in counted]
