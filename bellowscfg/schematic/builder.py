"""
Parametric schematic of a bellows part.

Builds the primitives for a side-view engineering drawing: convolution
arcs, end cuffs and dimension call-outs, on a fixed 800 x 600 canvas.

ASSUMPTIONS:
- The drawing is stylized, not to scale: it always shows 7
  convolutions with fixed radii, whatever the real convolution count.
- Dimension labels quote the part's catalog values, not measurements
  of the stylized geometry.
- Cuff styles are matched by case-sensitive substring; anything
  unrecognized is drawn as a standard cuff.
"""

import logging
from typing import Optional

from bellowscfg.models.parts import CuffStyle, PartRecord
from bellowscfg.models.schematic import (
    Arc,
    Circle,
    Gradient,
    GradientStop,
    Line,
    Polyline,
    Rect,
    SchematicModel,
    Style,
    Text,
)
from bellowscfg.units.conversion import format_literal

logger = logging.getLogger(__name__)


# Canvas
CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 600.0
CENTER_X = CANVAS_WIDTH / 2
CENTER_Y = CANVAS_HEIGHT / 2

# Body geometry
NUM_CONVOLUTIONS = 7
BODY_SPAN = 420.0
INNER_RADIUS = 100.0
CONVOLUTION_HEIGHT = 50.0
OUTER_RADIUS = INNER_RADIUS + CONVOLUTION_HEIGHT
ARC_OVERSHOOT = 12.0  # control points sit past the crest so the curve peaks near it
CUFF_LENGTH = 80.0

CELL_WIDTH = BODY_SPAN / NUM_CONVOLUTIONS
START_X = CENTER_X - BODY_SPAN / 2
END_X = CENTER_X + BODY_SPAN / 2

TITLE = "TECHNICAL SCHEMATIC - REV.A"

# Colours
OUTLINE = "#1a1a1a"
LABEL_COLOR = "#414042"
DIM_LINE_COLOR = "#9ca3af"
ACCENT_COLOR = "#C80A37"

METAL_TOP = "metal_top"
METAL_BOTTOM = "metal_bottom"
BODY_SHADING = "body_shading"


def _stops(*pairs: tuple[float, str]) -> list[GradientStop]:
    return [GradientStop(offset=offset, color=color) for offset, color in pairs]


GRADIENTS = [
    Gradient(
        name=METAL_TOP,
        stops=_stops((0.0, "#414a4c"), (0.2, "#d1d5db"), (0.5, "#f3f4f6"), (0.8, "#9ca3af"), (1.0, "#111827")),
    ),
    Gradient(
        name=METAL_BOTTOM,
        reversed=True,
        stops=_stops((0.0, "#111827"), (0.2, "#d1d5db"), (0.5, "#f3f4f6"), (0.8, "#9ca3af"), (1.0, "#414a4c")),
    ),
    Gradient(
        name=BODY_SHADING,
        stops=_stops(
            (0.0, "#1a202c"), (0.1, "#e2e8f0"), (0.35, "#94a3b8"), (0.5, "#f1f5f9"),
            (0.65, "#94a3b8"), (0.9, "#e2e8f0"), (1.0, "#1a202c"),
        ),
    ),
]


def is_u_cuff(cuff_style: str) -> bool:
    """U-profile cuffs span the full outer radius."""
    return CuffStyle.U_CUFF.value in cuff_style or cuff_style == CuffStyle.U_CUFF


def has_cuffs(cuff_style: str) -> bool:
    """False for the without-cuff and truncated variants."""
    return not ("WITHOUT" in cuff_style or "TRUNCATED" in cuff_style)


def _convolutions() -> list:
    """Shading band, top arc, crest highlight and bottom arc for each cell."""
    top_inner = CENTER_Y - INNER_RADIUS
    bottom_inner = CENTER_Y + INNER_RADIUS
    top_ctrl = CENTER_Y - OUTER_RADIUS - ARC_OVERSHOOT
    bottom_ctrl = CENTER_Y + OUTER_RADIUS + ARC_OVERSHOOT
    shell = Style(stroke=OUTLINE, stroke_width=1.2, role="convolution")

    primitives = []
    for i in range(NUM_CONVOLUTIONS):
        x_start = START_X + i * CELL_WIDTH
        x_mid = x_start + CELL_WIDTH / 2
        x_end = x_start + CELL_WIDTH

        primitives.append(Rect(
            x=x_start,
            y=top_inner,
            width=CELL_WIDTH,
            height=INNER_RADIUS * 2,
            style=Style(fill=BODY_SHADING, role="body"),
        ))
        primitives.append(Arc(
            start=(x_start, top_inner),
            c1=(x_start, top_ctrl),
            c2=(x_end, top_ctrl),
            end=(x_end, top_inner),
            style=shell.model_copy(update={"fill": METAL_TOP}),
        ))
        primitives.append(Arc(
            start=(x_start + 6, CENTER_Y - OUTER_RADIUS + 4),
            c1=(x_mid, CENTER_Y - OUTER_RADIUS - 3),
            end=(x_end - 6, CENTER_Y - OUTER_RADIUS + 4),
            style=Style(stroke="white", stroke_width=3, opacity=0.4, role="highlight"),
        ))
        primitives.append(Arc(
            start=(x_start, bottom_inner),
            c1=(x_start, bottom_ctrl),
            c2=(x_end, bottom_ctrl),
            end=(x_end, bottom_inner),
            style=shell.model_copy(update={"fill": METAL_BOTTOM}),
        ))
    return primitives


def _cuffs(cuff_style: str) -> list:
    """Cuff rectangles on both ends of the body."""
    if not has_cuffs(cuff_style):
        return []

    radius = OUTER_RADIUS if is_u_cuff(cuff_style) else INNER_RADIUS
    style = Style(fill=BODY_SHADING, stroke=OUTLINE, stroke_width=1.5, role="cuff")
    return [
        Rect(x=START_X - CUFF_LENGTH, y=CENTER_Y - radius, width=CUFF_LENGTH, height=radius * 2, style=style),
        Rect(x=END_X, y=CENTER_Y - radius, width=CUFF_LENGTH, height=radius * 2, style=style),
    ]


def _annotations(part: PartRecord) -> list:
    """Dimension lines, leaders and labels."""
    accent = Style(stroke=ACCENT_COLOR, stroke_width=1, role="dimension")
    dim = Style(stroke=DIM_LINE_COLOR, stroke_width=0.5, dash=(2, 2), role="dimension")
    leader = Style(stroke=DIM_LINE_COLOR, stroke_width=0.5, role="leader")
    label = Style(fill=LABEL_COLOR, role="label")

    mean_x = START_X - 120
    top_inner = CENTER_Y - INNER_RADIUS
    bottom_inner = CENTER_Y + INNER_RADIUS
    top_outer = CENTER_Y - OUTER_RADIUS
    bottom_outer = CENTER_Y + OUTER_RADIUS
    left_cuff = START_X - CUFF_LENGTH
    right_cuff = END_X + CUFF_LENGTH

    return [
        # Mean diameter
        Line(x1=mean_x, y1=top_inner, x2=mean_x, y2=bottom_inner,
             style=accent.model_copy(update={"dash": (4, 2)})),
        Polyline(points=[(mean_x - 3, top_inner + 8), (mean_x, top_inner), (mean_x + 3, top_inner + 8)],
                 style=accent),
        Polyline(points=[(mean_x - 3, bottom_inner - 8), (mean_x, bottom_inner), (mean_x + 3, bottom_inner - 8)],
                 style=accent),
        Text(x=mean_x - 5, y=CENTER_Y, anchor="end", rotate=-90,
             text=f'MEAN DIA: {part.mean_diameter_in:.3f}"',
             style=Style(fill=ACCENT_COLOR, role="label")),

        # Bellows OD
        Line(x1=CENTER_X - 50, y1=top_outer, x2=CENTER_X + 50, y2=top_outer, style=dim),
        Text(x=CENTER_X, y=top_outer - 10, text=f'OD: {format_literal(part.bellows_od_in)}"', style=label),

        # Bellows ID
        Line(x1=CENTER_X - 30, y1=top_inner, x2=CENTER_X + 30, y2=top_inner, style=dim),
        Text(x=CENTER_X, y=top_inner + 15, text=f'ID: {format_literal(part.bellows_id_in)}"', style=label),

        # Overall length
        Line(x1=left_cuff, y1=bottom_outer + 40, x2=right_cuff, y2=bottom_outer + 40,
             style=Style(stroke=LABEL_COLOR, stroke_width=1, role="dimension")),
        Circle(cx=left_cuff, cy=bottom_outer + 40, r=2, style=Style(fill=LABEL_COLOR, role="dimension")),
        Circle(cx=right_cuff, cy=bottom_outer + 40, r=2, style=Style(fill=LABEL_COLOR, role="dimension")),
        Text(x=CENTER_X, y=bottom_outer + 55,
             text=f'OAL: {format_literal(part.overall_length_oal_in)}"', style=label),

        # Tangent
        Line(x1=left_cuff, y1=bottom_outer + 20, x2=START_X, y2=bottom_outer + 20,
             style=Style(stroke=DIM_LINE_COLOR, stroke_width=1, role="dimension")),
        Text(x=START_X - CUFF_LENGTH / 2, y=bottom_outer + 32, text="TANGENT", font_size=8, style=label),

        # Crest and root
        Polyline(points=[
            (START_X + CELL_WIDTH / 2, top_outer - 5),
            (START_X + CELL_WIDTH / 2 + 10, top_outer - 30),
            (START_X + CELL_WIDTH / 2 + 25, top_outer - 30),
        ], style=leader),
        Text(x=START_X + CELL_WIDTH / 2 + 28, y=top_outer - 30, anchor="start", text="CREST", style=label),
        Polyline(points=[
            (START_X + CELL_WIDTH, top_inner),
            (START_X + CELL_WIDTH + 5, top_inner - 15),
            (START_X + CELL_WIDTH + 20, top_inner - 15),
        ], style=leader),
        Text(x=START_X + CELL_WIDTH + 22, y=top_inner - 15, anchor="start", text="ROOT", style=label),

        # Pitch
        Line(x1=START_X + CELL_WIDTH, y1=top_outer - 40, x2=START_X + CELL_WIDTH * 2, y2=top_outer - 40,
             style=Style(stroke=DIM_LINE_COLOR, stroke_width=1, role="dimension")),
        Text(x=START_X + CELL_WIDTH * 1.5, y=top_outer - 45, text="PITCH", font_size=8, style=label),

        # Convolution depth
        Polyline(points=[
            (START_X + CELL_WIDTH / 2, CENTER_Y - OUTER_RADIUS / 2),
            (START_X + CELL_WIDTH / 2 - 60, CENTER_Y - OUTER_RADIUS / 2 - 40),
        ], style=leader),
        Text(x=START_X - 65, y=CENTER_Y - OUTER_RADIUS / 2 - 40, anchor="end",
             text=f'CONVOLUTION DEPTH: {part.convolution_depth_in:.3f}"', style=label),
    ]


def _title_block(part: PartRecord) -> list:
    style = Style(fill=LABEL_COLOR, opacity=0.4, role="title")
    return [
        Text(x=CANVAS_WIDTH - 24, y=30, anchor="end", text=TITLE, font_size=12, style=style),
        Text(x=CANVAS_WIDTH - 24, y=46, anchor="end", text=f"PART NO: {part.part_number}",
             style=Style(fill=DIM_LINE_COLOR, role="title")),
    ]


def build_schematic(
    part: Optional[PartRecord],
    cuff_style: str = CuffStyle.STANDARD.value,
) -> SchematicModel:
    """
    Build the schematic for a part.

    Args:
        part: Selected catalog part, or None for the placeholder
        cuff_style: End-cuff style name

    Returns:
        SchematicModel on the fixed canvas. Calling twice with the same
        arguments yields equal models.
    """
    cuff_style = cuff_style or ""
    if part is None:
        return SchematicModel(width=CANVAS_WIDTH, height=CANVAS_HEIGHT, cuff_style=cuff_style)

    primitives = _convolutions() + _cuffs(cuff_style) + _annotations(part) + _title_block(part)
    logger.debug("Built schematic for %s (%s): %d primitives", part.part_number, cuff_style, len(primitives))

    return SchematicModel(
        width=CANVAS_WIDTH,
        height=CANVAS_HEIGHT,
        part_number=part.part_number,
        cuff_style=cuff_style,
        title=TITLE,
        gradients=[g.model_copy(deep=True) for g in GRADIENTS],
        primitives=primitives,
    )
