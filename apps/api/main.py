"""FastAPI application for fence measurement calculations.

Stateless: every endpoint takes the records it needs in the request body
and returns derived values.  Nothing is stored between requests.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from packages.core.settings import MaterialSettings, MeasurementSettings, Settings
from packages.core.types import (
    CalibrationData,
    CornerAngle,
    FenceProject,
    FenceSegment,
    MaterialEstimate,
    Point3D,
    ProjectReport,
    ProjectSummary,
)
from packages.measure.corners import project_corners
from packages.measure.materials import estimate_materials
from packages.measure.process import build_report
from packages.measure.segments import measure_segment
from packages.measure.summary import project_summary
from packages.measure.validation import validate_project, validate_segment

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Fence Measure API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


class _Request(PydanticBaseModel):
    # same key casing as the records in packages.core.types
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class MeasureSegmentRequest(_Request):
    """Body for the segment measurement endpoint."""
    start: Point3D
    end: Point3D
    confidence_score: float = 1.0
    segment_index: int = 0
    calibration: Optional[CalibrationData] = None


@app.post("/segments/measure", response_model=FenceSegment)
def measure(req: MeasureSegmentRequest):
    """Compute length and slope for a segment between two captured points."""
    return measure_segment(
        req.start,
        req.end,
        confidence_score=req.confidence_score,
        calibration=req.calibration,
        segment_index=req.segment_index,
    )


@app.post("/summary", response_model=ProjectSummary)
def summary(project: FenceProject):
    """Whole-project statistics recomputed from the posted segments."""
    logger.info(f"📐 Summarising {len(project.segments)} segments for {project.project_name!r}")
    return project_summary(project)


class MaterialsRequest(_Request):
    """Body for the material estimate endpoint."""
    total_linear_feet: float
    num_gates: int = 0
    settings: MaterialSettings = Field(default_factory=MaterialSettings)


@app.post("/materials", response_model=MaterialEstimate)
def materials(req: MaterialsRequest):
    """Basic bill of materials from linear footage and gate count."""
    return estimate_materials(
        req.total_linear_feet,
        req.num_gates,
        post_spacing_feet=req.settings.post_spacing_feet,
        picket_width_inches=req.settings.picket_width_inches,
        picket_spacing_inches=req.settings.picket_spacing_inches,
        rails_per_section=req.settings.rails_per_section,
    )


@app.post("/validate/segment")
def validate_segment_endpoint(segment: dict[str, Any]):
    """Advisory checks on a (possibly incomplete) segment record."""
    errors = validate_segment(segment)
    return {"valid": not errors, "errors": errors}


@app.post("/validate/project")
def validate_project_endpoint(project: dict[str, Any]):
    """Advisory checks on a (possibly incomplete) project record."""
    errors = validate_project(project)
    return {"valid": not errors, "errors": errors}


@app.post("/report", response_model=ProjectReport)
def report(project: FenceProject):
    """Summary, material estimate, corners and validation issues in one response."""
    return build_report(project, settings=Settings())


class CornersRequest(_Request):
    """Body for the corner angle endpoint."""
    segments: list[FenceSegment]
    settings: MeasurementSettings = Field(default_factory=MeasurementSettings)


@app.post("/corners", response_model=list[CornerAngle])
def corners(req: CornersRequest):
    """Angle, snapped angle and right/45° classification at each joint."""
    return project_corners(req.segments, req.settings)
