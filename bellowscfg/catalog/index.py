"""
Read-only projections over the parts catalog.

These feed the suggestion lists next to each query field. They are
recomputed from the catalog snapshot on every call.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from bellowscfg.models.parts import PartRecord


# Absolute diameter window (inches) for suggesting lengths
LENGTH_SUGGESTION_WINDOW_IN = 0.1


class CatalogIndex(BaseModel):
    """Distinct catalog values, sorted, in canonical units."""
    diameters: list[float] = Field(default_factory=list, description="Distinct pipe sizes (in)")
    pressures: list[str] = Field(default_factory=list, description="Distinct pressure labels")
    temperatures: list[str] = Field(default_factory=list, description="Distinct temperature labels")
    lengths: list[float] = Field(
        default_factory=list,
        description="Distinct overall lengths (in) for the chosen diameter",
    )


def diameters(catalog: Iterable[PartRecord]) -> list[float]:
    """Sorted distinct pipe sizes across the whole catalog."""
    return sorted({p.pipe_size for p in catalog})


def pressure_labels(catalog: Iterable[PartRecord]) -> list[str]:
    """Sorted distinct pressure labels, not-applicable excluded."""
    return sorted({p.pressure_psig.text for p in catalog if p.pressure_psig.is_applicable})


def temperature_labels(catalog: Iterable[PartRecord]) -> list[str]:
    """Sorted distinct temperature labels, not-applicable excluded."""
    return sorted({p.temperature_f.text for p in catalog if p.temperature_f.is_applicable})


def lengths_for_diameter(catalog: Iterable[PartRecord], diameter_in: Optional[float]) -> list[float]:
    """
    Sorted distinct overall lengths of parts near a diameter.

    A part qualifies when its pipe size is within 0.1 inch (absolute) of
    `diameter_in`. No diameter (None or 0) means no suggestions.
    """
    if not diameter_in:
        return []
    return sorted({
        p.overall_length_oal_in
        for p in catalog
        if abs(p.pipe_size - diameter_in) < LENGTH_SUGGESTION_WINDOW_IN
    })


def build_index(catalog: Iterable[PartRecord], diameter_in: Optional[float] = None) -> CatalogIndex:
    """All projections for one catalog snapshot."""
    snapshot = tuple(catalog)
    return CatalogIndex(
        diameters=diameters(snapshot),
        pressures=pressure_labels(snapshot),
        temperatures=temperature_labels(snapshot),
        lengths=lengths_for_diameter(snapshot, diameter_in),
    )
