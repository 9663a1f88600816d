"""Pydantic models for fence measurements and their derived values.

Every record is an immutable value: the computation layer never mutates a
model it is handed, it returns new ones.  Field names are snake_case; the
capture client's camelCase keys (``lengthFeet``, ``confidenceScore`` …) are
accepted on input as aliases.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ── geometry ─────────────────────────────────────────────────────────
class Point3D(_Record):
    """A point (x, y, z) in metres, AR-session-local frame.  ``y`` is up."""

    x: float
    y: float
    z: float


class BoundingBox(_Record):
    """Axis-aligned bounding box with centre and per-axis extents."""

    min: Point3D
    max: Point3D
    center: Point3D
    width: float
    height: float
    depth: float


class Dimensions(_Record):
    """A length split into whole feet and remaining inches."""

    feet: int
    inches: float
    total_inches: float
    meters: float


# ── enumerations ─────────────────────────────────────────────────────
class ProjectStatus(str, Enum):
    DRAFT = "draft"
    MEASURING = "measuring"
    REVIEW = "review"
    APPROVED = "approved"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class FenceStyle(str, Enum):
    BOARD_ON_BOARD = "board-on-board"
    SHADOWBOX = "shadowbox"
    PRIVACY = "privacy"
    PICKET = "picket"
    CHAIN_LINK = "chain-link"
    VINYL = "vinyl"
    COMPOSITE = "composite"
    SPLIT_RAIL = "split-rail"
    OTHER = "other"


class PostType(str, Enum):
    WOOD_4X4 = "4x4"
    WOOD_6X6 = "6x6"
    STEEL = "steel"
    VINYL = "vinyl"
    COMPOSITE = "composite"


class TerrainType(str, Enum):
    FLAT = "flat"
    SLOPED = "sloped"
    STEPPED = "stepped"
    VARIED = "varied"


# ── calibration ──────────────────────────────────────────────────────
class CalibrationData(_Record):
    """Correction derived from a known reference length (e.g. an 8 ft board)."""

    reference_length: float
    measured_length: float
    factor: float = Field(description="reference_length / measured_length (1.0 if measured is 0)")
    confidence: float = 1.0
    timestamp: Optional[datetime] = None


# ── segments & projects ──────────────────────────────────────────────
class FenceSegment(_Record):
    """One fence run between two captured points.

    Lengths and slopes are computed once from ``start``/``end`` and cached
    on the record.  No ranges are enforced here; see ``validate_segment``.
    """

    start: Optional[Point3D] = None
    end: Optional[Point3D] = None
    segment_index: int = 0

    length_feet: Optional[float] = None
    length_inches: Optional[float] = None
    length_meters: Optional[float] = None

    fence_style: Optional[FenceStyle] = None
    fence_height_feet: Optional[float] = None
    post_type: Optional[PostType] = None
    post_spacing_feet: Optional[float] = None

    slope_percent: Optional[float] = None
    slope_angle_degrees: Optional[float] = None
    terrain_type: Optional[TerrainType] = None

    confidence_score: Optional[float] = None

    requires_special_post: bool = False
    requires_gate: bool = False
    notes: Optional[str] = None


class FenceProject(_Record):
    """A fence project: client/site details, segments and summary fields."""

    project_name: str = ""
    project_number: Optional[str] = None

    client_name: str = ""
    client_phone: Optional[str] = None
    client_email: Optional[str] = None

    site_address: str = ""
    site_city: Optional[str] = None
    site_state: Optional[str] = None
    site_zip: Optional[str] = None

    status: ProjectStatus = ProjectStatus.DRAFT

    segments: list[FenceSegment] = Field(default_factory=list)
    num_gates: int = 0

    total_linear_feet: float = 0.0
    total_area_sqft: float = 0.0
    perimeter_feet: float = 0.0
    num_segments: int = 0
    avg_confidence_score: Optional[float] = None
    estimated_accuracy_cm: Optional[float] = None

    calibration_used: bool = False
    calibration_reference_length: Optional[float] = None
    calibration_measured_length: Optional[float] = None
    calibration_factor: Optional[float] = None

    notes: Optional[str] = None


# ── derived projections ──────────────────────────────────────────────
class ProjectSummary(_Record):
    """Whole-project statistics, recomputed from the segment list."""

    total_linear_feet: float = 0.0
    total_area_sqft: float = 0.0
    perimeter_feet: float = 0.0
    avg_confidence: float = 0.0
    estimated_accuracy_cm: float = 0.0
    bounding_box: Optional[BoundingBox] = None


class CornerAngle(_Record):
    """Angle where segment ``segment_index`` meets the next segment of the run."""

    segment_index: int
    vertex: Point3D
    angle: float
    snapped_angle: float
    is_right: bool = False
    is_45: bool = False


class MaterialEstimate(_Record):
    """Basic bill of materials derived from linear footage."""

    posts: int = 0
    pickets: int = 0
    rails: int = 0
    concrete_bags: int = 0
    gate_hardware_sets: int = 0


# ── report ───────────────────────────────────────────────────────────
class ProjectReport(_Record):
    """Top-level report produced for a project: summary, materials, issues."""

    version: str = "0.1.0"
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    units: str = "feet"
    source_file: str = ""
    project_name: str = ""
    summary: ProjectSummary = Field(default_factory=ProjectSummary)
    materials: MaterialEstimate = Field(default_factory=MaterialEstimate)
    corners: list[CornerAngle] = Field(default_factory=list)
    project_issues: list[str] = Field(default_factory=list)
    segment_issues: dict[int, list[str]] = Field(default_factory=dict)
