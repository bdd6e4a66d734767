"""Site search: relevance-ranked search over a fixed content catalog."""

from .__version__ import __version__
from .catalog import Catalog, SearchItem, load_catalog, load_default_catalog
from .exceptions import CatalogValidationError, SiteSearchError
from .search import SearchResult, SearchService

__all__ = [
    "Catalog",
    "CatalogValidationError",
    "SearchItem",
    "SearchResult",
    "SearchService",
    "SiteSearchError",
    "__version__",
    "load_catalog",
    "load_default_catalog",
]
