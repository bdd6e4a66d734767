"""Catalog data models.

A catalog is an ordered, immutable collection of :class:`SearchItem`
entries, loaded once at startup. Entries are validated on construction
so that a malformed catalog fails before any query is served.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import CatalogValidationError


class SearchItem(BaseModel):
    """A searchable page or in-page section of the site."""

    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Short summary shown in results")
    url: str = Field(..., description="Site path, optionally with a #fragment")
    keywords: Tuple[str, ...] = Field(..., description="Ordered search keywords")
    category: Optional[str] = Field(None, description="Content category")

    model_config = ConfigDict(frozen=True)

    @field_validator("title", "url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @property
    def has_fragment(self) -> bool:
        """Whether the url points at an in-page anchor."""
        return "#" in self.url


class Catalog:
    """Immutable ordered sequence of search items keyed by url."""

    __slots__ = ("_items", "_by_url")

    def __init__(self, items: Iterable[SearchItem]):
        """Build a catalog from already-validated items.

        Args:
            items: Search items in display order

        Raises:
            CatalogValidationError: If two items share a url
        """
        items = tuple(items)
        by_url: Dict[str, SearchItem] = {}
        for index, item in enumerate(items):
            if item.url in by_url:
                raise CatalogValidationError(
                    f"Duplicate catalog url: {item.url}",
                    {"index": index, "url": item.url},
                )
            by_url[item.url] = item
        self._items = items
        self._by_url = by_url

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SearchItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> SearchItem:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return isinstance(item, SearchItem) and item.url in self._by_url

    def __repr__(self) -> str:
        return f"Catalog({len(self._items)} items)"

    @property
    def items(self) -> Tuple[SearchItem, ...]:
        return self._items

    def get(self, url: str) -> Optional[SearchItem]:
        """Look up an item by its url."""
        return self._by_url.get(url)

    def categories(self) -> List[str]:
        """Distinct categories in order of first appearance."""
        seen: Dict[str, None] = {}
        for item in self._items:
            if item.category is not None:
                seen.setdefault(item.category, None)
        return list(seen)
