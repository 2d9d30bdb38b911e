"""
Drawable primitives for the bellows schematic.

Coordinates are logical canvas units with the origin at the top-left
corner and y growing downward. Fills reference gradients by name; the
gradient definitions travel with the model so a renderer needs nothing
else to reproduce the drawing.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class Style(BaseModel):
    """Paint attributes shared by all primitives."""
    fill: Optional[str] = Field(default=None, description="Colour or gradient name; None for no fill")
    stroke: Optional[str] = Field(default=None, description="Stroke colour")
    stroke_width: float = Field(default=1.0, ge=0)
    dash: Optional[tuple[float, float]] = Field(default=None, description="Dash/gap lengths")
    opacity: float = Field(default=1.0, ge=0, le=1)
    role: str = Field(default="", description="What the primitive depicts, e.g. 'cuff' or 'dimension'")


class Arc(BaseModel):
    """Cubic (or quadratic, when c2 is None) Bézier arc."""
    kind: Literal["arc"] = "arc"
    start: tuple[float, float]
    c1: tuple[float, float]
    c2: Optional[tuple[float, float]] = None
    end: tuple[float, float]
    style: Style = Field(default_factory=Style)


class Rect(BaseModel):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    style: Style = Field(default_factory=Style)


class Line(BaseModel):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    style: Style = Field(default_factory=Style)


class Polyline(BaseModel):
    """Open polyline; used for leaders and arrow heads."""
    kind: Literal["polyline"] = "polyline"
    points: list[tuple[float, float]]
    style: Style = Field(default_factory=Style)


class Circle(BaseModel):
    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float = Field(..., ge=0)
    style: Style = Field(default_factory=Style)


class Text(BaseModel):
    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    anchor: Literal["start", "middle", "end"] = "middle"
    rotate: float = Field(default=0.0, description="Rotation in degrees about (x, y)")
    font_size: float = Field(default=10.0, gt=0)
    style: Style = Field(default_factory=Style)


Primitive = Annotated[
    Union[Arc, Rect, Line, Polyline, Circle, Text],
    Field(discriminator="kind"),
]


class GradientStop(BaseModel):
    offset: float = Field(..., ge=0, le=1)
    color: str


class Gradient(BaseModel):
    """Vertical linear gradient referenced by name from Style.fill."""
    name: str
    reversed: bool = Field(default=False, description="Runs bottom-to-top when True")
    stops: list[GradientStop]


class SchematicModel(BaseModel):
    """
    Complete schematic for one part.

    An empty primitive list is the placeholder drawn before a part is
    selected.
    """
    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=600.0, gt=0)
    part_number: Optional[str] = None
    cuff_style: Optional[str] = None
    title: str = ""
    gradients: list[Gradient] = Field(default_factory=list)
    primitives: list[Primitive] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.primitives

    def by_role(self, role: str) -> list:
        """Primitives whose style role equals `role`."""
        return [p for p in self.primitives if p.style.role == role]
