"""
Parts catalog: loading, suggestion index and tolerant matching.
"""

from bellowscfg.catalog.index import (
    CatalogIndex,
    build_index,
    diameters,
    lengths_for_diameter,
    pressure_labels,
    temperature_labels,
)
from bellowscfg.catalog.loader import (
    CatalogLoadError,
    CatalogSnapshot,
    find_part,
    load_catalog,
    load_catalog_file,
    load_default_catalog,
    parse_catalog,
)
from bellowscfg.catalog.matcher import (
    DIAMETER_TOLERANCE,
    LENGTH_TOLERANCE,
    match,
    relative_difference,
)
from bellowscfg.catalog.specs import SpecRow, specification_rows

__all__ = [
    "CatalogIndex",
    "build_index",
    "diameters",
    "lengths_for_diameter",
    "pressure_labels",
    "temperature_labels",
    "CatalogLoadError",
    "CatalogSnapshot",
    "find_part",
    "load_catalog",
    "load_catalog_file",
    "load_default_catalog",
    "parse_catalog",
    "DIAMETER_TOLERANCE",
    "LENGTH_TOLERANCE",
    "match",
    "relative_difference",
    "SpecRow",
    "specification_rows",
]
