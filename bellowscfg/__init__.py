"""
Bellows Configurator (bellowscfg)

Matches catalog expansion-joint bellows to a requested nominal size,
length, pressure and temperature, and builds a stylized engineering
schematic of the chosen part.

Usage:
    python -m bellowscfg match --diameter 4 --length 10
    python -m bellowscfg schematic BSI-0400-10 --cuff "U CUFF"
    python -m bellowscfg serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Bellows Configurator Project"

from bellowscfg.models.parts import PartRecord, RatedLabel, CuffStyle, CyclesFormat
from bellowscfg.models.query import Query, QueryField, FieldName, MatchResult, MatchedPart
from bellowscfg.models.schematic import SchematicModel
from bellowscfg.catalog.matcher import match
from bellowscfg.catalog.index import build_index, CatalogIndex
from bellowscfg.schematic.builder import build_schematic
from bellowscfg.session import ConfiguratorSession

__all__ = [
    "PartRecord",
    "RatedLabel",
    "CuffStyle",
    "CyclesFormat",
    "Query",
    "QueryField",
    "FieldName",
    "MatchResult",
    "MatchedPart",
    "SchematicModel",
    "match",
    "build_index",
    "CatalogIndex",
    "build_schematic",
    "ConfiguratorSession",
]
