"""
Technical specification table for a selected part.
"""

from typing import Optional

from pydantic import BaseModel

from bellowscfg.models.parts import PartRecord
from bellowscfg.units.conversion import format_literal

DEFAULT_END_CONFIGURATION = "Standard I Cuff"
DEFAULT_APPLICATION = "Industrial/General"


class SpecRow(BaseModel):
    label: str
    value: str


def _inches(value: Optional[float]) -> str:
    return f'{format_literal(value)}"' if value is not None else "-"


def _with_unit(value: Optional[float], unit: str) -> str:
    return f"{format_literal(value)} {unit}" if value is not None else "-"


def specification_rows(
    part: Optional[PartRecord],
    cuff_style: Optional[str] = None,
    application: Optional[str] = None,
) -> list[SpecRow]:
    """
    Label/value rows describing a part, in display order.

    No part gives no rows.
    """
    if part is None:
        return []

    cycles = format_literal(part.number_of_cycles)
    rows = [
        ("Part Number", part.part_number),
        ("Nominal Size (Pipe)", _inches(part.pipe_size)),
        ("Bellows ID", _inches(part.bellows_id_in)),
        ("Bellows OD", _inches(part.bellows_od_in)),
        ("Overall Length (OAL)", _inches(part.overall_length_oal_in)),
        ("Number of Plys", part.number_of_plys or "Single Ply"),
        ("Live Length", _inches(part.live_length_ll_in)),
        ("Bellows Material", f"{part.bellows_material} {part.bellows_material_grade}".strip()),
        ("Weld Neck Detail", f"{part.weld_neck_material} {part.weld_neck_grade}".strip()),
        ("Design Pressure", part.pressure_psig.display()),
        ("Design Temperature", part.temperature_f.display()),
        ("Required Cycles", f"{cycles} ({part.cycles_format.value})"),
        ("End Configuration", cuff_style or DEFAULT_END_CONFIGURATION),
        ("Selected Application", application or DEFAULT_APPLICATION),
        ("Axial Movement", _inches(part.axial_movement_in)),
        ("Axial Spring Rate", _with_unit(part.axial_spring_rate_lbf_in, "lbf/in")),
        ("Lateral Movement", _inches(part.lateral_movement_in)),
        ("Lateral Spring Rate", _with_unit(part.lateral_spring_rate_lbf_in, "lbf/in")),
        ("Angular Movement", f"{format_literal(part.angular_movement_deg)}°"
            if part.angular_movement_deg is not None else "-"),
        ("Angular Spring Rate", _with_unit(part.angular_spring_rate_ft_lbs_deg, "ft-lbs/deg")),
        ("Max Allowable Pressure", _with_unit(part.max_allowable_pressure_psig, "psig")),
    ]
    return [SpecRow(label=label, value=value) for label, value in rows]
