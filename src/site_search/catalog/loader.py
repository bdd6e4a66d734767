"""Catalog loading from YAML or JSON files.

Every entry is validated before the catalog is built. Any problem with
the file or an entry raises :class:`CatalogValidationError`; nothing is
skipped silently.
"""

import json
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import ValidationError

from ..config.logging import get_logger
from ..exceptions import CatalogValidationError
from .models import Catalog, SearchItem

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "default_catalog.yaml"

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load and validate a catalog file.

    The top level is either a list of entries or a mapping with an
    ``items`` list.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        Catalog: Validated, immutable catalog

    Raises:
        CatalogValidationError: If the file cannot be read or parsed, or
            any entry is malformed
    """
    path = Path(path)
    raw = _read_file(path)
    catalog = build_catalog(raw, source=str(path))
    logger.info("Catalog loaded", path=str(path), item_count=len(catalog))
    return catalog


def load_default_catalog() -> Catalog:
    """Load the catalog shipped with the package."""
    return load_catalog(DEFAULT_CATALOG_PATH)


def build_catalog(raw: Any, source: str = "<memory>") -> Catalog:
    """Validate raw decoded data and build a catalog from it.

    Args:
        raw: Decoded file content, list of entries or ``{"items": [...]}``
        source: Where the data came from, for error messages

    Returns:
        Catalog: Validated, immutable catalog

    Raises:
        CatalogValidationError: If the structure or any entry is invalid
    """
    if isinstance(raw, dict):
        if "items" not in raw:
            raise CatalogValidationError(
                "Catalog mapping must contain an 'items' list", {"source": source}
            )
        raw = raw["items"]

    if not isinstance(raw, list):
        raise CatalogValidationError(
            "Catalog must be a list of entries",
            {"source": source, "type": type(raw).__name__},
        )

    items: List[SearchItem] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogValidationError(
                f"Catalog entry {index} is not a mapping",
                {"source": source, "index": index},
            )
        try:
            items.append(SearchItem(**entry))
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise CatalogValidationError(
                f"Invalid catalog entry {index}",
                {"source": source, "index": index, "errors": errors},
            ) from e

    return Catalog(items)


def _read_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise CatalogValidationError(
            f"Unsupported catalog format: {suffix or '(none)'}",
            {"path": str(path), "supported": sorted(YAML_SUFFIXES | JSON_SUFFIXES)},
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise CatalogValidationError(
            f"Cannot read catalog file: {e}", {"path": str(path)}
        ) from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogValidationError(
            f"Cannot parse catalog file: {e}", {"path": str(path)}
        ) from e
