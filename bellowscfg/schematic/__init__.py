"""
Schematic geometry for bellows parts.
"""

from bellowscfg.schematic.builder import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    NUM_CONVOLUTIONS,
    INNER_RADIUS,
    OUTER_RADIUS,
    CUFF_LENGTH,
    build_schematic,
    has_cuffs,
    is_u_cuff,
)

__all__ = [
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "NUM_CONVOLUTIONS",
    "INNER_RADIUS",
    "OUTER_RADIUS",
    "CUFF_LENGTH",
    "build_schematic",
    "has_cuffs",
    "is_u_cuff",
]
