"""
Query and match-result models.

A Query holds what the user typed (display text and display unit per
field). The canonical value is parsed from the text until a unit change
or a part selection pins it, so later unit changes format from it
instead of from the rounded text.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from bellowscfg.models.parts import CuffStyle, PartRecord
from bellowscfg.units.conversion import DEFAULT_UNITS, Dimension, to_canonical


class FieldName(str, Enum):
    """The four searchable query fields."""
    DIAMETER = "diameter"
    LENGTH = "length"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"


FIELD_DIMENSIONS = {
    FieldName.DIAMETER: Dimension.LENGTH,
    FieldName.LENGTH: Dimension.LENGTH,
    FieldName.PRESSURE: Dimension.PRESSURE,
    FieldName.TEMPERATURE: Dimension.TEMPERATURE,
}


class QueryField(BaseModel):
    """Display text for one field plus the unit it is expressed in."""
    text: str = Field(default="", description="Value as typed or displayed")
    unit: str = Field(..., description="Display unit token, e.g. 'IN', 'BAR', '°C'")
    value: Optional[float] = Field(
        default=None,
        description="Canonical value behind the text, kept across unit changes; parsed from the text when None",
    )

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def canonical(self, dimension: Dimension) -> float:
        """Value in the canonical unit; 0 when empty or unreadable."""
        if self.is_empty:
            return 0.0
        if self.value is not None:
            return self.value
        return to_canonical(self.text, self.unit, dimension)


def _field(name: FieldName) -> QueryField:
    return QueryField(unit=DEFAULT_UNITS[FIELD_DIMENSIONS[name]])


class Query(BaseModel):
    """
    Current configurator inputs.

    Lengths default to inches, pressure to psig and temperature to °F.
    """
    diameter: QueryField = Field(default_factory=lambda: _field(FieldName.DIAMETER))
    length: QueryField = Field(default_factory=lambda: _field(FieldName.LENGTH))
    pressure: QueryField = Field(default_factory=lambda: _field(FieldName.PRESSURE))
    temperature: QueryField = Field(default_factory=lambda: _field(FieldName.TEMPERATURE))
    cuff_style: str = Field(default=CuffStyle.STANDARD.value, description="Selected end-cuff style")
    selected_part_number: Optional[str] = Field(default=None, description="Selected catalog part")

    def field(self, name: FieldName) -> QueryField:
        return getattr(self, FieldName(name).value)

    @property
    def is_empty(self) -> bool:
        """True when none of the four searchable fields has text."""
        return all(self.field(name).is_empty for name in FieldName)

    def canonical(self, name: FieldName) -> float:
        name = FieldName(name)
        return self.field(name).canonical(FIELD_DIMENSIONS[name])

    model_config = {
        "json_schema_extra": {
            "example": {
                "diameter": {"text": "4", "unit": "IN"},
                "length": {"text": "254", "unit": "MM"},
                "pressure": {"text": "150", "unit": "PSIG"},
                "temperature": {"text": "", "unit": "°F"},
                "cuff_style": "U CUFF",
            }
        }
    }


class MatchedPart(BaseModel):
    """A catalog part admitted by the matcher, with its rank score."""
    part: PartRecord = Field(..., description="The admitted catalog part")
    score: float = Field(
        default=0.0,
        ge=0,
        description="Relative diameter difference plus relative length difference (lower is better)",
    )


class MatchResult(BaseModel):
    """Ranked matcher output, best match first."""
    matches: list[MatchedPart] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def parts(self) -> list[PartRecord]:
        return [m.part for m in self.matches]

    @property
    def part_numbers(self) -> list[str]:
        return [m.part.part_number for m in self.matches]

    def __len__(self) -> int:
        return len(self.matches)
