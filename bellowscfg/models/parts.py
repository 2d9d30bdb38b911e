"""
Pydantic models for bellows catalog data.

A PartRecord is one row of the parts catalog. Records are frozen: the
matcher, index and schematic builder only ever read them.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from bellowscfg.units.conversion import parse_value


# Catalog sentinel for "not applicable"
NOT_APPLICABLE = "NIL"


class CyclesFormat(str, Enum):
    """How the rated cycle count applies to the movements."""
    CONCURRENT = "Concurrent"
    NON_CONCURRENT = "Non-concurrent"


class RatedLabel(BaseModel):
    """
    A free-text rating label that may be not applicable.

    Catalog pressure and temperature columns hold labels such as
    "150" or "150 @ 500°F", or the sentinel "NIL". The sentinel is
    parsed into ``text=None`` so it never takes part in comparisons.
    """
    model_config = {"frozen": True}

    text: Optional[str] = Field(default=None, description="Label text, None when not applicable")

    @classmethod
    def parse(cls, raw) -> "RatedLabel":
        """Build a label from a raw catalog cell."""
        if isinstance(raw, RatedLabel):
            return raw
        if raw is None or isinstance(raw, bool):
            return cls.not_applicable()
        if isinstance(raw, (int, float)):
            text = str(int(raw)) if float(raw).is_integer() else str(raw)
        else:
            text = str(raw).strip()
        if not text or text.upper() == NOT_APPLICABLE:
            return cls.not_applicable()
        return cls(text=text)

    @classmethod
    def not_applicable(cls) -> "RatedLabel":
        return cls(text=None)

    @property
    def is_applicable(self) -> bool:
        return self.text is not None

    def contains(self, needle: str) -> bool:
        """Case-insensitive substring test; never true when not applicable."""
        if self.text is None:
            return False
        return needle.lower() in self.text.lower()

    @property
    def numeric_value(self) -> float:
        """Leading number of the label, 0 when not applicable."""
        return parse_value(self.text)

    def display(self) -> str:
        return self.text if self.text is not None else NOT_APPLICABLE

    def __str__(self) -> str:
        return self.display()


class PartRecord(BaseModel):
    """
    One bellows part from the catalog.

    Dimensions are in inches, pressures in psig, temperatures in °F.
    """
    part_number: str = Field(..., min_length=1, description="Unique catalog part number")
    pipe_size: float = Field(..., gt=0, description="Nominal pipe size in inches")
    overall_length_oal_in: float = Field(..., gt=0, description="Overall length (OAL) in inches")
    bellows_id_in: float = Field(..., ge=0, description="Bellows inside diameter in inches")
    bellows_od_in: float = Field(..., description="Bellows outside diameter in inches")
    live_length_ll_in: Optional[float] = Field(default=None, ge=0, description="Live length in inches")
    number_of_plys: Optional[str] = Field(default=None, description="Ply count, e.g. '2'")
    bellows_material: str = Field(default="", description="Bellows material")
    bellows_material_grade: str = Field(default="", description="Bellows material grade")
    weld_neck_material: str = Field(default="", description="Weld neck material")
    weld_neck_grade: str = Field(default="", description="Weld neck grade")
    pressure_psig: RatedLabel = Field(
        default_factory=RatedLabel.not_applicable,
        description="Design pressure label in psig",
    )
    temperature_f: RatedLabel = Field(
        default_factory=RatedLabel.not_applicable,
        description="Design temperature label in °F",
    )
    number_of_cycles: Optional[int] = Field(default=None, ge=0, description="Rated cycle count")
    cycles_format: CyclesFormat = Field(
        default=CyclesFormat.NON_CONCURRENT,
        description="Whether movements are concurrent",
    )
    axial_movement_in: Optional[float] = Field(default=None, description="Axial movement in inches")
    axial_spring_rate_lbf_in: Optional[float] = Field(default=None, description="Axial spring rate in lbf/in")
    lateral_movement_in: Optional[float] = Field(default=None, description="Lateral movement in inches")
    lateral_spring_rate_lbf_in: Optional[float] = Field(default=None, description="Lateral spring rate in lbf/in")
    angular_movement_deg: Optional[float] = Field(default=None, description="Angular movement in degrees")
    angular_spring_rate_ft_lbs_deg: Optional[float] = Field(
        default=None,
        description="Angular spring rate in ft-lbs/deg",
    )
    max_allowable_pressure_psig: Optional[float] = Field(
        default=None,
        description="Maximum allowable pressure in psig",
    )
    image_url: Optional[str] = Field(default=None, description="Product image URL")

    @field_validator("pressure_psig", "temperature_f", mode="before")
    @classmethod
    def parse_label(cls, v) -> RatedLabel:
        """Turn raw catalog cells (including 'NIL') into RatedLabel."""
        if isinstance(v, dict):
            return RatedLabel(**v)
        return RatedLabel.parse(v)

    @field_serializer("pressure_psig", "temperature_f")
    def dump_label(self, label: RatedLabel) -> str:
        """Serialize labels back to catalog form, sentinel included."""
        return label.display()

    @field_validator("number_of_plys", mode="before")
    @classmethod
    def plys_as_text(cls, v):
        if v is None or v == "":
            return None
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        return str(v)

    @model_validator(mode="after")
    def check_diameters(self) -> "PartRecord":
        """Bellows OD must exceed ID."""
        if self.bellows_od_in <= self.bellows_id_in:
            raise ValueError("bellows_od_in must be greater than bellows_id_in")
        return self

    @property
    def mean_diameter_in(self) -> float:
        """Mean of the bellows inside and outside diameters."""
        return (self.bellows_id_in + self.bellows_od_in) / 2

    @property
    def convolution_depth_in(self) -> float:
        """Radial depth of a convolution."""
        return (self.bellows_od_in - self.bellows_id_in) / 2

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "part_number": "BSI-0400-10",
                "pipe_size": 4.0,
                "overall_length_oal_in": 10.0,
                "bellows_id_in": 4.5,
                "bellows_od_in": 5.75,
                "live_length_ll_in": 6.0,
                "number_of_plys": "2",
                "bellows_material": "SA-240",
                "bellows_material_grade": "321",
                "weld_neck_material": "SA-106",
                "weld_neck_grade": "B",
                "pressure_psig": "150",
                "temperature_f": "500",
                "number_of_cycles": 2000,
                "cycles_format": "Non-concurrent",
                "axial_movement_in": 0.75,
                "axial_spring_rate_lbf_in": 850,
                "lateral_movement_in": 0.25,
                "lateral_spring_rate_lbf_in": 4200,
                "angular_movement_deg": 3.0,
                "angular_spring_rate_ft_lbs_deg": 12.5,
                "max_allowable_pressure_psig": 225,
            }
        },
    }


class CuffStyle(str, Enum):
    """End-cuff variants offered by the configurator."""
    STANDARD = "STANDARD I CUFF"
    U_CUFF = "U CUFF"
    WITHOUT_CUFF = "WITHOUT CUFF"
    TRUNCATED = "TRUNCATED CONVOLUTION"


CUFF_OPTIONS = [style.value for style in CuffStyle]

APPLICATION_OPTIONS = [
    "Oil & Gas",
    "Power Generation",
    "Aerospace, Space and Defense",
    "Marine Bellows and Expansion Joints",
    "Industrial and OEM",
    "Water and Wastewater",
    "Automotive",
    "Pulp and Paper",
    "Other",
]
