"""
Pytest configuration and shared fixtures.
"""

import pytest

from bellowscfg.models.parts import PartRecord


def make_part(part_number: str, pipe_size: float, oal: float, **overrides) -> PartRecord:
    """Build a catalog part with plausible defaults for everything else."""
    fields = dict(
        part_number=part_number,
        pipe_size=pipe_size,
        overall_length_oal_in=oal,
        bellows_id_in=pipe_size + 0.5,
        bellows_od_in=pipe_size + 1.75,
        live_length_ll_in=oal * 0.6,
        number_of_plys="2",
        bellows_material="SA-240",
        bellows_material_grade="321",
        weld_neck_material="SA-106",
        weld_neck_grade="B",
        pressure_psig="150",
        temperature_f="500",
        number_of_cycles=2000,
        cycles_format="Non-concurrent",
        axial_movement_in=0.75,
        axial_spring_rate_lbf_in=850,
        lateral_movement_in=0.25,
        lateral_spring_rate_lbf_in=4200,
        angular_movement_deg=3.0,
        angular_spring_rate_ft_lbs_deg=12.5,
        max_allowable_pressure_psig=225,
    )
    fields.update(overrides)
    return PartRecord(**fields)


@pytest.fixture
def part_factory():
    """Expose make_part to tests."""
    return make_part


@pytest.fixture
def abc_catalog() -> list[PartRecord]:
    """Three parts: two near 4 in x 10 in and one far away."""
    return [
        make_part("A", 4.0, 10.0),
        make_part("B", 4.5, 10.5, pressure_psig="150 @ 500°F"),
        make_part("C", 8.0, 20.0, pressure_psig="300", temperature_f="NIL"),
    ]


@pytest.fixture
def u_cuff_part() -> PartRecord:
    """Part with ID 10 and OD 14."""
    return make_part("U-1", 10.0, 16.0, bellows_id_in=10.0, bellows_od_in=14.0)
