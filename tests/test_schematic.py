"""
Tests for the parametric schematic builder.
"""

import pytest

from bellowscfg.models.parts import CuffStyle
from bellowscfg.models.schematic import Arc, Rect, Text
from bellowscfg.schematic.builder import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    NUM_CONVOLUTIONS,
    TITLE,
    build_schematic,
    has_cuffs,
    is_u_cuff,
)


def texts(model) -> list[str]:
    return [p.text for p in model.primitives if isinstance(p, Text)]


class TestPlaceholder:
    """No selected part gives an empty canvas."""

    def test_no_part_is_empty(self):
        model = build_schematic(None)
        assert model.is_empty
        assert model.part_number is None
        assert model.width == CANVAS_WIDTH
        assert model.height == CANVAS_HEIGHT


class TestBody:
    """Tests for the convolution body."""

    def test_fixed_convolution_count(self, u_cuff_part):
        model = build_schematic(u_cuff_part)
        shells = [p for p in model.by_role("convolution") if isinstance(p, Arc)]

        assert len(shells) == NUM_CONVOLUTIONS * 2
        assert len(model.by_role("highlight")) == NUM_CONVOLUTIONS
        assert len(model.by_role("body")) == NUM_CONVOLUTIONS

    def test_body_independent_of_dimensions(self, part_factory):
        """The drawing is stylized: body geometry does not scale."""
        small = build_schematic(part_factory("S", 2.0, 8.0))
        large = build_schematic(part_factory("L", 48.0, 36.0))
        assert small.by_role("convolution") == large.by_role("convolution")

    def test_deterministic(self, u_cuff_part):
        assert build_schematic(u_cuff_part, "U CUFF") == build_schematic(u_cuff_part, "U CUFF")

    def test_gradients_present(self, u_cuff_part):
        model = build_schematic(u_cuff_part)
        assert {g.name for g in model.gradients} == {"metal_top", "metal_bottom", "body_shading"}


class TestCuffs:
    """Tests for cuff styles."""

    def test_u_cuff_spans_outer_radius(self, u_cuff_part):
        cuffs = build_schematic(u_cuff_part, CuffStyle.U_CUFF.value).by_role("cuff")

        assert len(cuffs) == 2
        for cuff in cuffs:
            assert isinstance(cuff, Rect)
            assert cuff.height == 300
            assert cuff.y == 150

    def test_standard_cuff_spans_inner_radius(self, u_cuff_part):
        cuffs = build_schematic(u_cuff_part, CuffStyle.STANDARD.value).by_role("cuff")

        assert len(cuffs) == 2
        assert all(c.height == 200 and c.y == 200 for c in cuffs)

    def test_cuffs_flank_the_body(self, u_cuff_part):
        left, right = build_schematic(u_cuff_part).by_role("cuff")
        assert left.x + left.width == 190
        assert right.x == 610

    @pytest.mark.parametrize("style", ["WITHOUT CUFF", "TRUNCATED CONVOLUTION"])
    def test_no_cuffs(self, u_cuff_part, style):
        assert build_schematic(u_cuff_part, style).by_role("cuff") == []

    def test_unknown_style_draws_standard(self, u_cuff_part):
        cuffs = build_schematic(u_cuff_part, "FLANGED").by_role("cuff")
        assert [c.height for c in cuffs] == [200, 200]

    def test_style_predicates(self):
        assert is_u_cuff("U CUFF")
        assert is_u_cuff("DOUBLE U CUFF")
        assert not is_u_cuff("u cuff")
        assert has_cuffs("STANDARD I CUFF")
        assert not has_cuffs("WITHOUT CUFF")
        assert not has_cuffs("TRUNCATED CONVOLUTION")


class TestAnnotations:
    """Tests for dimension labels."""

    def test_dimension_labels(self, u_cuff_part):
        labels = texts(build_schematic(u_cuff_part))

        assert 'OD: 14"' in labels
        assert 'ID: 10"' in labels
        assert 'OAL: 16"' in labels
        assert 'MEAN DIA: 12.000"' in labels
        assert 'CONVOLUTION DEPTH: 2.000"' in labels

    def test_fractional_values_kept_as_written(self, part_factory):
        part = part_factory("F", 4.0, 10.5, bellows_id_in=4.5, bellows_od_in=5.75)
        labels = texts(build_schematic(part))

        assert 'OD: 5.75"' in labels
        assert 'OAL: 10.5"' in labels
        assert 'MEAN DIA: 5.125"' in labels

    def test_feature_callouts(self, u_cuff_part):
        labels = texts(build_schematic(u_cuff_part))
        for callout in ("TANGENT", "CREST", "ROOT", "PITCH"):
            assert callout in labels

    def test_mean_diameter_label_is_vertical(self, u_cuff_part):
        model = build_schematic(u_cuff_part)
        mean = next(t for t in model.primitives if isinstance(t, Text) and t.text.startswith("MEAN DIA"))
        assert mean.rotate == -90

    def test_title_block(self, u_cuff_part):
        model = build_schematic(u_cuff_part)
        titles = [p.text for p in model.by_role("title")]

        assert model.title == TITLE
        assert titles == [TITLE, "PART NO: U-1"]

    def test_json_round_trip(self, u_cuff_part):
        """Primitives keep their kind through serialization."""
        model = build_schematic(u_cuff_part, "U CUFF")
        restored = type(model).model_validate_json(model.model_dump_json())
        assert restored == model
