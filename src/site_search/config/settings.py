"""Application configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class LoggingConfig(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(default="INFO", description="Log level")
    file_path: Optional[str] = Field(default=None, description="Log file path")
    json_format: bool = Field(default=False, description="Use JSON log format")
    enable_performance: bool = Field(
        default=True, description="Enable performance logging"
    )

    model_config = SettingsConfigDict(env_prefix="LOG_")


class CatalogConfig(BaseSettings):
    """Catalog source configuration."""

    path: Optional[str] = Field(
        default=None,
        description="Catalog file (YAML or JSON). Packaged catalog when unset",
    )

    model_config = SettingsConfigDict(env_prefix="CATALOG_")

    def get_catalog_path(self) -> Optional[Path]:
        """Get the configured catalog file path, if any."""
        if self.path:
            return Path(self.path)
        return None


class ScoringWeights(BaseSettings):
    """Additive relevance weights."""

    title_match: float = Field(
        default=10.0, description="Title contains the query"
    )
    exact_title: float = Field(
        default=15.0, description="Title equals the query (stacks with title_match)"
    )
    description_match: float = Field(
        default=5.0, description="Description contains the query"
    )
    keyword_exact: float = Field(
        default=8.0, description="Keyword equals the query, per keyword"
    )
    keyword_partial: float = Field(
        default=6.0, description="Keyword contains the query, per keyword"
    )
    fuzzy_terms: float = Field(
        default=4.0, description="Multiplier for the fraction of matched terms"
    )
    fragment_url: float = Field(
        default=2.0, description="URL carries a #fragment"
    )

    model_config = SettingsConfigDict(env_prefix="SEARCH_WEIGHTS_")


class SearchConfig(BaseSettings):
    """Search configuration settings."""

    default_limit: int = Field(default=10, ge=0, description="Search result limit")
    related_limit: int = Field(default=3, ge=0, description="Related content limit")
    popular_limit: int = Field(default=5, ge=0, description="Popular terms limit")
    min_fuzzy_term_length: int = Field(
        default=3, ge=1, description="Shortest query term used for fuzzy matching"
    )

    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    model_config = SettingsConfigDict(env_prefix="SEARCH_")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    debug: bool = Field(default=False, description="Enable debug mode")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def get_log_file_path(self) -> Optional[Path]:
        """Get the log file path if configured."""
        if self.logging.file_path:
            return Path(self.logging.file_path)
        return None


def load_settings() -> Settings:
    """Build settings from the environment and ``.env``.

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid configuration", {"errors": errors}) from e
