"""Configuration-related exceptions."""

from ..exceptions import SiteSearchError


class ConfigurationError(SiteSearchError):
    """Configuration-related error with user-friendly messages."""
