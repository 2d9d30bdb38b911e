"""
Pydantic models for bellows parts, configurator queries and schematics.
"""

from bellowscfg.models.parts import (
    NOT_APPLICABLE,
    APPLICATION_OPTIONS,
    CUFF_OPTIONS,
    CuffStyle,
    CyclesFormat,
    PartRecord,
    RatedLabel,
)
from bellowscfg.models.query import (
    FieldName,
    MatchedPart,
    MatchResult,
    Query,
    QueryField,
)
from bellowscfg.models.schematic import (
    Arc,
    Circle,
    Gradient,
    GradientStop,
    Line,
    Polyline,
    Rect,
    SchematicModel,
    Style,
    Text,
)

__all__ = [
    "NOT_APPLICABLE",
    "APPLICATION_OPTIONS",
    "CUFF_OPTIONS",
    "CuffStyle",
    "CyclesFormat",
    "PartRecord",
    "RatedLabel",
    "FieldName",
    "MatchedPart",
    "MatchResult",
    "Query",
    "QueryField",
    "Arc",
    "Circle",
    "Gradient",
    "GradientStop",
    "Line",
    "Polyline",
    "Rect",
    "SchematicModel",
    "Style",
    "Text",
]
