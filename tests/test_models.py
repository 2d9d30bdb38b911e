"""
Tests for pydantic models.

Tests part record validation, the not-applicable label and query
field helpers.
"""

import pytest
from pydantic import ValidationError

from bellowscfg.models.parts import CyclesFormat, PartRecord, RatedLabel
from bellowscfg.models.query import FieldName, Query, QueryField
from bellowscfg.units.conversion import Dimension


class TestRatedLabel:
    """Tests for the tagged optional rating label."""

    @pytest.mark.parametrize("raw", ["NIL", "nil", "", "  ", None])
    def test_sentinel_and_blank_are_not_applicable(self, raw):
        label = RatedLabel.parse(raw)
        assert not label.is_applicable
        assert label.display() == "NIL"

    def test_numbers_become_text(self):
        assert RatedLabel.parse(150).text == "150"
        assert RatedLabel.parse(12.5).text == "12.5"

    def test_contains_is_case_insensitive(self):
        label = RatedLabel.parse("150 @ 500°F")
        assert label.contains("150")
        assert label.contains("500°f")
        assert not label.contains("300")

    def test_not_applicable_contains_nothing(self):
        """The sentinel never matches, not even the text 'nil'."""
        label = RatedLabel.not_applicable()
        assert not label.contains("nil")
        assert not label.contains("")

    def test_numeric_value(self):
        assert RatedLabel.parse("650").numeric_value == 650.0
        assert RatedLabel.not_applicable().numeric_value == 0.0


class TestPartRecord:
    """Tests for PartRecord validation."""

    def test_valid_part(self, part_factory):
        part = part_factory("P-1", 4.0, 10.0)
        assert part.pipe_size == 4.0
        assert part.cycles_format == CyclesFormat.NON_CONCURRENT

    def test_od_must_exceed_id(self, part_factory):
        with pytest.raises(ValidationError):
            part_factory("P-1", 4.0, 10.0, bellows_id_in=5.0, bellows_od_in=5.0)

    def test_positive_length_and_size(self, part_factory):
        with pytest.raises(ValidationError):
            part_factory("P-1", 4.0, 0.0)
        with pytest.raises(ValidationError):
            part_factory("P-1", 0.0, 10.0)

    def test_negative_id_rejected(self, part_factory):
        with pytest.raises(ValidationError):
            part_factory("P-1", 4.0, 10.0, bellows_id_in=-1.0)

    def test_nil_parsed_to_not_applicable(self, part_factory):
        part = part_factory("P-1", 4.0, 10.0, pressure_psig="NIL")
        assert not part.pressure_psig.is_applicable

    def test_labels_serialize_back_to_catalog_form(self, part_factory):
        part = part_factory("P-1", 4.0, 10.0, pressure_psig="NIL", temperature_f=500)
        data = part.model_dump()
        assert data["pressure_psig"] == "NIL"
        assert data["temperature_f"] == "500"
        assert PartRecord(**data) == part

    def test_frozen(self, part_factory):
        part = part_factory("P-1", 4.0, 10.0)
        with pytest.raises(ValidationError):
            part.pipe_size = 6.0

    def test_derived_diameters(self, part_factory):
        part = part_factory("P-1", 10.0, 16.0, bellows_id_in=10.0, bellows_od_in=14.0)
        assert part.mean_diameter_in == 12.0
        assert part.convolution_depth_in == 2.0

    def test_plys_coerced_to_text(self, part_factory):
        part = part_factory("P-1", 4.0, 10.0, number_of_plys=3)
        assert part.number_of_plys == "3"


class TestQuery:
    """Tests for Query helpers."""

    def test_default_units(self):
        query = Query()
        assert query.diameter.unit == "IN"
        assert query.length.unit == "IN"
        assert query.pressure.unit == "PSIG"
        assert query.temperature.unit == "°F"

    def test_empty_query(self):
        assert Query().is_empty

    def test_whitespace_counts_as_empty(self):
        query = Query(pressure=QueryField(text="   ", unit="PSIG"))
        assert query.is_empty

    def test_canonical_value(self):
        query = Query(length=QueryField(text="254 mm", unit="MM"))
        assert not query.is_empty
        assert query.canonical(FieldName.LENGTH) == pytest.approx(10.0)

    def test_empty_field_canonical_is_zero(self):
        assert QueryField(unit="IN").canonical(Dimension.LENGTH) == 0.0

    def test_pinned_value_wins_over_text(self):
        field = QueryField(text="10.34", unit="BAR", value=150.0)
        assert field.canonical(Dimension.PRESSURE) == 150.0

    def test_pinned_value_ignored_when_text_empty(self):
        assert QueryField(text="", unit="BAR", value=150.0).canonical(Dimension.PRESSURE) == 0.0
