"""
Configurator session.

Holds one user's query and unit selections and derives everything else
(matches, suggestions, schematic, specification table) from them on demand. A
session belongs to a single user; create one per user.
"""

import logging
from typing import Iterable, Optional

from bellowscfg.catalog.index import CatalogIndex, build_index
from bellowscfg.catalog.loader import CatalogSnapshot, find_part
from bellowscfg.catalog.matcher import match
from bellowscfg.catalog.specs import SpecRow, specification_rows
from bellowscfg.models.parts import PartRecord
from bellowscfg.models.query import FIELD_DIMENSIONS, FieldName, MatchResult, Query
from bellowscfg.models.schematic import SchematicModel
from bellowscfg.schematic.builder import build_schematic
from bellowscfg.units.conversion import Dimension, from_canonical, normalize_unit, re_express

logger = logging.getLogger(__name__)


class ConfiguratorSession:
    """
    Query state plus the catalog snapshot it is matched against.

    Nothing is cached: matches() and schematic() recompute from the
    current query every time they are called.
    """

    def __init__(self, catalog: Iterable[PartRecord], query: Optional[Query] = None):
        """
        Args:
            catalog: Parts to match against, in catalog order
            query: Starting query (defaults to an empty one)
        """
        self._catalog: CatalogSnapshot = tuple(catalog)
        self.query = query.model_copy(deep=True) if query is not None else Query()

    @property
    def catalog(self) -> CatalogSnapshot:
        return self._catalog

    def replace_catalog(self, catalog: Iterable[PartRecord]) -> None:
        """Swap in a refreshed catalog snapshot."""
        self._catalog = tuple(catalog)
        logger.info("Catalog replaced: %d parts", len(self._catalog))

    # === Query editing ===

    def set_field(self, name: FieldName, text: str) -> None:
        """Store display text for a field, in that field's current unit."""
        entry = self.query.field(name)
        entry.text = text or ""
        entry.value = None

    def set_unit(self, name: FieldName, unit: str) -> None:
        """
        Change a field's display unit.

        The text is re-expressed from the field's canonical value, which
        is pinned on the first change, so PSIG -> BAR -> PSIG returns to
        the number as typed.
        """
        name = FieldName(name)
        dimension = FIELD_DIMENSIONS[name]
        entry = self.query.field(name)
        new_unit = normalize_unit(unit)
        if not entry.is_empty:
            entry.value = entry.canonical(dimension)
        entry.text = re_express(entry.text, entry.unit, new_unit, dimension, entry.value)
        entry.unit = new_unit

    def set_cuff_style(self, cuff_style: str) -> None:
        self.query.cuff_style = cuff_style

    def clear(self) -> None:
        """Empty all four fields and drop the selection; units are kept."""
        for name in FieldName:
            entry = self.query.field(name)
            entry.text = ""
            entry.value = None
        self.query.selected_part_number = None

    # === Derived views ===

    def matches(self) -> MatchResult:
        return match(self._catalog, self.query)

    def index(self) -> CatalogIndex:
        """Suggestion lists, in canonical units."""
        diameter_in = self.query.canonical(FieldName.DIAMETER)
        return build_index(self._catalog, diameter_in or None)

    def diameter_options(self) -> list[str]:
        """Catalog diameters formatted in the diameter field's unit."""
        unit = self.query.diameter.unit
        return [from_canonical(d, unit, Dimension.LENGTH) for d in self.index().diameters]

    def length_options(self) -> list[str]:
        """Lengths available near the entered diameter, in the length field's unit."""
        unit = self.query.length.unit
        return [from_canonical(oal, unit, Dimension.LENGTH) for oal in self.index().lengths]

    def pressure_options(self) -> list[str]:
        return self.index().pressures

    def temperature_options(self) -> list[str]:
        return self.index().temperatures

    # === Part selection ===

    @property
    def selected_part(self) -> Optional[PartRecord]:
        return find_part(self._catalog, self.query.selected_part_number)

    def select_part(self, part_number: Optional[str]) -> Optional[PartRecord]:
        """
        Select a part and fill the query fields from it.

        Diameter and length are written in the current display units,
        pressure as the part's label (converted when the pressure unit
        is not psig) and temperature in the current temperature unit.
        Not-applicable ratings leave their field empty. An empty or
        unknown part number clears the selection and leaves the fields
        alone.
        """
        part = find_part(self._catalog, part_number)
        if part is None:
            if part_number:
                logger.debug("Part %s not in catalog", part_number)
            self.query.selected_part_number = None
            return None

        self.query.selected_part_number = part.part_number
        q = self.query
        q.diameter.text = from_canonical(part.pipe_size, q.diameter.unit, Dimension.LENGTH)
        q.diameter.value = part.pipe_size
        q.length.text = from_canonical(part.overall_length_oal_in, q.length.unit, Dimension.LENGTH)
        q.length.value = part.overall_length_oal_in

        q.pressure.value = None
        if not part.pressure_psig.is_applicable:
            q.pressure.text = ""
        elif q.pressure.unit == "PSIG":
            q.pressure.text = part.pressure_psig.text
        else:
            q.pressure.value = part.pressure_psig.numeric_value
            q.pressure.text = from_canonical(q.pressure.value, q.pressure.unit, Dimension.PRESSURE)

        if part.temperature_f.is_applicable:
            q.temperature.value = part.temperature_f.numeric_value
            q.temperature.text = from_canonical(q.temperature.value, q.temperature.unit, Dimension.TEMPERATURE)
        else:
            q.temperature.value = None
            q.temperature.text = ""
        return part

    def _step(self, offset: int) -> Optional[PartRecord]:
        numbers = self.matches().part_numbers
        if not numbers:
            return None
        current = self.query.selected_part_number
        if current not in numbers:
            # only forward steps enter the list
            return self.select_part(numbers[0]) if offset > 0 else self.selected_part
        position = numbers.index(current) + offset
        if 0 <= position < len(numbers):
            return self.select_part(numbers[position])
        return self.selected_part

    def next_part(self) -> Optional[PartRecord]:
        """Select the match after the current one; stays put at the end."""
        return self._step(1)

    def previous_part(self) -> Optional[PartRecord]:
        """
        Select the match before the current one.

        Stays put at the start, and does nothing while the selection is
        not among the matches.
        """
        return self._step(-1)

    def schematic(self) -> SchematicModel:
        return build_schematic(self.selected_part, self.query.cuff_style)

    def specification_rows(self, application: Optional[str] = None) -> list[SpecRow]:
        return specification_rows(self.selected_part, self.query.cuff_style, application)
