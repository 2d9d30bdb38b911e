"""
Catalog loader.

Resolves the parts catalog once, from a primary source with a bundled
fallback dataset, and hands the rest of the package a flat immutable
snapshot. Nothing downstream knows where the parts came from.
"""

import json
import logging
import importlib.resources as resources
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import ValidationError

from bellowscfg.models.parts import PartRecord

logger = logging.getLogger(__name__)


DEFAULT_CATALOG_NAME = "bellows_catalog.json"

CatalogSnapshot = tuple[PartRecord, ...]
CatalogProvider = Callable[[], Iterable[Union[PartRecord, dict[str, Any]]]]


class CatalogLoadError(Exception):
    """The primary catalog source could not be read."""


def _to_part(item: Union[PartRecord, dict[str, Any]]) -> PartRecord:
    if isinstance(item, PartRecord):
        return item
    return PartRecord(**item)


def parse_catalog(items: Iterable[Union[PartRecord, dict[str, Any]]]) -> CatalogSnapshot:
    """
    Validate raw records into a snapshot, keeping source order.

    Raises:
        ValidationError: If a record violates the PartRecord invariants
    """
    return tuple(_to_part(item) for item in items)


def load_catalog_file(path: Union[str, Path]) -> CatalogSnapshot:
    """
    Load parts from a JSON file holding a list of records.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed
    """
    file_path = Path(path)
    if not file_path.exists():
        raise CatalogLoadError(f"Catalog file not found at {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise CatalogLoadError(f"Catalog file {file_path} must hold a JSON list")
        return parse_catalog(data)
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
        raise CatalogLoadError(f"Could not read catalog {file_path}: {e}") from e


def load_default_catalog() -> CatalogSnapshot:
    """Load the dataset bundled with the package."""
    resource = resources.files("bellowscfg.data").joinpath(DEFAULT_CATALOG_NAME)
    with resource.open("r", encoding="utf-8") as f:
        return parse_catalog(json.load(f))


def _file_provider(path: Union[str, Path]) -> CatalogProvider:
    return lambda: load_catalog_file(path)


def load_catalog(
    primary: Optional[CatalogProvider] = None,
    path: Optional[Union[str, Path]] = None,
) -> CatalogSnapshot:
    """
    Resolve the catalog from a primary source, falling back to the bundle.

    Args:
        primary: Callable returning records (e.g. a remote store client)
        path: JSON file to use as the primary source when no callable
              is given

    Returns:
        The primary catalog when it yields at least one part, otherwise
        the bundled default catalog
    """
    if primary is None and path is not None:
        primary = _file_provider(path)

    if primary is not None:
        try:
            parts = parse_catalog(primary())
        except Exception as e:
            logger.warning("Primary catalog unavailable, using bundled dataset: %s", e)
        else:
            if parts:
                logger.info("Loaded %d parts from primary catalog", len(parts))
                return parts
            logger.warning("Primary catalog is empty, using bundled dataset")

    parts = load_default_catalog()
    logger.info("Loaded %d parts from bundled catalog", len(parts))
    return parts


def find_part(catalog: Iterable[PartRecord], part_number: Optional[str]) -> Optional[PartRecord]:
    """Look up a part by part number; None when absent."""
    if not part_number:
        return None
    for part in catalog:
        if part.part_number == part_number:
            return part
    return None
