"""End-to-end report: load a project → summary, materials and validation JSON."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from packages.core.settings import Settings
from packages.core.types import FenceProject, ProjectReport
from packages.measure.corners import project_corners
from packages.measure.loader import load_project
from packages.measure.materials import estimate_project_materials
from packages.measure.summary import apply_summary, project_summary
from packages.measure.validation import validate_project, validate_segment

logger = logging.getLogger(__name__)


def build_report(
    project: FenceProject,
    *,
    settings: Optional[Settings] = None,
    source_file: str = "",
) -> ProjectReport:
    """Compute the full report for an in-memory project.

    1. Validate the project and each segment.
    2. Refresh the summary fields from the segments.
    3. Estimate materials from the refreshed linear footage.
    4. Measure the corner angles.
    """
    settings = settings or Settings()
    tolerance = settings.measurement.closure_tolerance_m

    project_issues = validate_project(project)
    segment_issues: dict[int, list[str]] = {}
    for i, seg in enumerate(project.segments):
        issues = validate_segment(seg)
        if issues:
            segment_issues[i] = issues
    if project_issues or segment_issues:
        logger.warning(
            "Project %r has %d project issue(s) and %d segment(s) with issues",
            project.project_name, len(project_issues), len(segment_issues),
        )

    summary = project_summary(project, closure_tolerance=tolerance)
    project = apply_summary(project, summary=summary)
    corners = project_corners(project.segments, settings.measurement)
    materials = estimate_project_materials(project, settings.materials)
    logger.info(
        "Report for %r: %.2f ft, %.2f sqft, %d posts",
        project.project_name, summary.total_linear_feet, summary.total_area_sqft, materials.posts,
    )

    return ProjectReport(
        source_file=source_file,
        project_name=project.project_name,
        summary=summary,
        materials=materials,
        corners=corners,
        project_issues=project_issues,
        segment_issues=segment_issues,
    )


def process_project(
    input_path: str | Path,
    *,
    settings: Optional[Settings] = None,
) -> ProjectReport:
    """Load a project JSON file and build its report."""
    input_path = Path(input_path)
    logger.info("Loading %s …", input_path.name)
    project = load_project(input_path)
    return build_report(project, settings=settings, source_file=input_path.name)


def process_project_to_json(
    input_path: str | Path,
    output_path: str | Path | None = None,
    **kwargs,
) -> str:
    """Build the report and write it next to the input (or to *output_path*).

    Returns the JSON string.
    """
    report = process_project(input_path, **kwargs)
    json_str = report.model_dump_json(indent=2)

    if output_path is None:
        output_path = Path(input_path).with_suffix(".report.json")
    Path(output_path).write_text(json_str)
    logger.info("Wrote report → %s", output_path)
    return json_str
