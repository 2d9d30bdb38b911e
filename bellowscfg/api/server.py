"""
FastAPI server for the bellows configurator.

Each request builds its own ConfiguratorSession over the shared
read-only catalog snapshot.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query as QueryParam
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from bellowscfg import __version__
from bellowscfg.catalog.loader import CatalogSnapshot, find_part, load_catalog
from bellowscfg.catalog.specs import SpecRow, specification_rows
from bellowscfg.config import get_settings
from bellowscfg.models.parts import APPLICATION_OPTIONS, CUFF_OPTIONS, CuffStyle, PartRecord
from bellowscfg.models.query import FieldName, MatchResult, Query
from bellowscfg.models.schematic import SchematicModel
from bellowscfg.schematic.builder import build_schematic
from bellowscfg.session import ConfiguratorSession
from bellowscfg.units.conversion import Dimension, units_for

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Bellows Configurator API",
    description="""
    Match catalog bellows to a size, length, pressure and temperature
    requirement, and build a schematic of the chosen part.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_catalog() -> CatalogSnapshot:
    """Catalog snapshot, resolved once per process."""
    return load_catalog(path=get_settings().catalog_path)


def _require_part(catalog: CatalogSnapshot, part_number: str) -> PartRecord:
    part = find_part(catalog, part_number)
    if part is None:
        raise HTTPException(status_code=404, detail=f"Part {part_number} not found")
    return part


class HealthResponse(BaseModel):
    status: str
    version: str
    part_count: int


class IndexResponse(BaseModel):
    """Suggestion lists formatted in the requested units."""
    diameters: list[str]
    lengths: list[str]
    pressures: list[str]
    temperatures: list[str]


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(catalog: CatalogSnapshot = Depends(get_catalog)):
    """Check API health."""
    return HealthResponse(status="healthy", version=__version__, part_count=len(catalog))


@app.get("/parts", response_model=list[PartRecord], tags=["Catalog"])
async def list_parts(catalog: CatalogSnapshot = Depends(get_catalog)):
    """All catalog parts in catalog order."""
    return list(catalog)


@app.get("/parts/{part_number}", response_model=PartRecord, tags=["Catalog"])
async def get_part(part_number: str, catalog: CatalogSnapshot = Depends(get_catalog)):
    """One catalog part."""
    return _require_part(catalog, part_number)


@app.get("/parts/{part_number}/specs", response_model=list[SpecRow], tags=["Catalog"])
async def get_part_specs(
    part_number: str,
    cuff_style: Optional[str] = QueryParam(default=None, description="End-cuff style"),
    application: Optional[str] = QueryParam(default=None, description="Application name"),
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Technical specification table for a part."""
    return specification_rows(_require_part(catalog, part_number), cuff_style, application)


@app.get("/index", response_model=IndexResponse, tags=["Catalog"])
async def get_index(
    diameter: str = QueryParam(default="", description="Entered diameter"),
    diameter_unit: str = QueryParam(default="IN"),
    length_unit: str = QueryParam(default="IN"),
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Diameter, length, pressure and temperature suggestions."""
    session = ConfiguratorSession(catalog)
    session.set_unit(FieldName.DIAMETER, diameter_unit)
    session.set_unit(FieldName.LENGTH, length_unit)
    session.set_field(FieldName.DIAMETER, diameter)
    return IndexResponse(
        diameters=session.diameter_options(),
        lengths=session.length_options(),
        pressures=session.pressure_options(),
        temperatures=session.temperature_options(),
    )


@app.post("/match", response_model=MatchResult, tags=["Matching"])
async def match_parts(query: Query, catalog: CatalogSnapshot = Depends(get_catalog)):
    """
    Rank catalog parts for a query.

    An empty query returns the whole catalog; no matches is an empty
    list, not an error.
    """
    result = ConfiguratorSession(catalog, query).matches()
    logger.info("Match request: %d parts found", result.count)
    return result


@app.get("/schematic/{part_number}", response_model=SchematicModel, tags=["Schematic"])
async def get_schematic(
    part_number: str,
    cuff_style: str = QueryParam(default=CuffStyle.STANDARD.value, description="End-cuff style"),
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Schematic model for a part on the fixed 800 x 600 canvas."""
    return build_schematic(_require_part(catalog, part_number), cuff_style)


@app.get("/cuff-styles", tags=["Reference"])
async def list_cuff_styles():
    """Supported end-cuff styles."""
    return {"cuff_styles": CUFF_OPTIONS, "default": CuffStyle.STANDARD.value}


@app.get("/applications", tags=["Reference"])
async def list_applications():
    """Application choices offered on the quote form."""
    return {"applications": APPLICATION_OPTIONS}


@app.get("/units", tags=["Reference"])
async def list_units():
    """Display units per dimension, with the canonical unit first."""
    return {dimension.value: list(units_for(dimension)) for dimension in Dimension}
