"""Whole-project statistics.

The summary is a pure projection of the segment list: there is no caching,
so it must be recomputed whenever the segments change.
"""

from __future__ import annotations

import logging
from typing import Optional

from packages.core.types import FenceProject, ProjectSummary
from packages.measure.bounds import project_bounds
from packages.measure.calibration import estimate_accuracy_cm
from packages.measure.segments import CLOSURE_TOLERANCE_M, enclosed_area, perimeter, total_length

logger = logging.getLogger(__name__)


def project_summary(
    project: FenceProject,
    *,
    closure_tolerance: float = CLOSURE_TOLERANCE_M,
) -> ProjectSummary:
    """Compute length, area, perimeter, confidence, accuracy and bounds for *project*."""
    segments = project.segments

    total_feet = total_length(segments)
    if segments:
        avg_confidence = sum((s.confidence_score or 0.0) for s in segments) / len(segments)
    else:
        avg_confidence = 0.0

    return ProjectSummary(
        total_linear_feet=total_feet,
        total_area_sqft=enclosed_area(segments),
        perimeter_feet=perimeter(segments, closure_tolerance),
        avg_confidence=avg_confidence,
        estimated_accuracy_cm=estimate_accuracy_cm(avg_confidence, total_feet),
        bounding_box=project_bounds(project),
    )


def apply_summary(
    project: FenceProject,
    *,
    closure_tolerance: float = CLOSURE_TOLERANCE_M,
    summary: Optional[ProjectSummary] = None,
) -> FenceProject:
    """Return a copy of *project* with its summary fields refreshed.

    Pass an already computed *summary* of the same project to skip the
    recomputation.
    """
    if summary is None:
        summary = project_summary(project, closure_tolerance=closure_tolerance)
    logger.debug(
        "Summary for %r: %.2f ft, %.2f sqft, %d segments",
        project.project_name, summary.total_linear_feet, summary.total_area_sqft, len(project.segments),
    )
    return project.model_copy(
        update={
            "total_linear_feet": summary.total_linear_feet,
            "total_area_sqft": summary.total_area_sqft,
            "perimeter_feet": summary.perimeter_feet,
            "num_segments": len(project.segments),
            "avg_confidence_score": summary.avg_confidence,
            "estimated_accuracy_cm": summary.estimated_accuracy_cm,
        }
    )
