"""Configuration package for the site search engine."""

from .exceptions import ConfigurationError
from .settings import (
    CatalogConfig,
    LoggingConfig,
    ScoringWeights,
    SearchConfig,
    Settings,
    load_settings,
)

__all__ = [
    "CatalogConfig",
    "ConfigurationError",
    "LoggingConfig",
    "ScoringWeights",
    "SearchConfig",
    "Settings",
    "load_settings",
]
