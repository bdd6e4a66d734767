"""Exceptions raised by the site search engine."""

from typing import Any, Dict, Optional


class SiteSearchError(Exception):
    """Base error for the site search package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with message and optional details."""
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message with details if available."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class CatalogValidationError(SiteSearchError):
    """Catalog data is malformed and cannot be loaded.

    Raised at load time only. A catalog that fails validation must abort
    startup rather than be served partially.
    """
