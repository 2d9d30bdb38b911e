"""
Tolerant catalog matching.

Admits parts whose size is within a relative tolerance of the query and
whose pressure/temperature labels contain the query text, then ranks
them by how far size and length are from the request.
"""

import logging
from typing import Iterable

from bellowscfg.models.parts import PartRecord
from bellowscfg.models.query import FieldName, MatchedPart, MatchResult, Query

logger = logging.getLogger(__name__)


# Relative admission tolerances
DIAMETER_TOLERANCE = 0.20
LENGTH_TOLERANCE = 0.30


def relative_difference(actual: float, requested: float) -> float:
    """|actual - requested| / requested, or 0 when nothing was requested."""
    if requested <= 0:
        return 0.0
    return abs(actual - requested) / requested


def _score_part(
    part: PartRecord,
    query: Query,
    diameter_in: float,
    length_in: float,
) -> tuple[bool, float]:
    """
    Decide admission and rank score for one part.

    Returns:
        Tuple of (admitted, score)
    """
    dia_diff = relative_difference(part.pipe_size, diameter_in)
    oal_diff = relative_difference(part.overall_length_oal_in, length_in)

    dia_match = query.diameter.is_empty or dia_diff <= DIAMETER_TOLERANCE
    oal_match = query.length.is_empty or oal_diff <= LENGTH_TOLERANCE
    press_match = query.pressure.is_empty or part.pressure_psig.contains(query.pressure.text)
    temp_match = query.temperature.is_empty or part.temperature_f.contains(query.temperature.text)

    admitted = dia_match and oal_match and press_match and temp_match
    return admitted, dia_diff + oal_diff


def match(catalog: Iterable[PartRecord], query: Query) -> MatchResult:
    """
    Filter and rank catalog parts for a query.

    Args:
        catalog: Catalog parts, in catalog order
        query: Current query; diameter and length are canonicalized here

    Returns:
        MatchResult, best first. An empty query returns every part in
        catalog order with score 0. No matches is an empty result.
    """
    snapshot = tuple(catalog)

    if query.is_empty:
        return MatchResult(matches=[MatchedPart(part=p, score=0.0) for p in snapshot])

    diameter_in = query.canonical(FieldName.DIAMETER)
    length_in = query.canonical(FieldName.LENGTH)

    matches = []
    for part in snapshot:
        admitted, score = _score_part(part, query, diameter_in, length_in)
        if admitted:
            matches.append(MatchedPart(part=part, score=score))

    # list.sort is stable, so ties keep catalog order
    matches.sort(key=lambda m: m.score)

    logger.debug(
        "Matched %d of %d parts (diameter=%.3f in, length=%.3f in)",
        len(matches), len(snapshot), diameter_in, length_in,
    )
    return MatchResult(matches=matches)
