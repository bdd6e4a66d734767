"""Version information for site-search."""

__version__ = "0.1.0"
