"""Content catalog: searchable site entries and their loader."""

from .loader import build_catalog, load_catalog, load_default_catalog
from .models import Catalog, SearchItem

__all__ = [
    "Catalog",
    "SearchItem",
    "build_catalog",
    "load_catalog",
    "load_default_catalog",
]
