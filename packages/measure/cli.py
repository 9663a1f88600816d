"""CLI entry-point for fence measurement reports."""

from __future__ import annotations

import logging
import sys

import click

from packages.core.settings import load_settings
from packages.measure.bounds import bounding_box
from packages.measure.corners import project_corners
from packages.measure.loader import load_points, load_project
from packages.measure.materials import estimate_materials
from packages.measure.process import process_project_to_json
from packages.measure.summary import project_summary
from packages.measure.units import format_dimensions
from packages.measure.validation import validate_project, validate_segment

_config_option = click.option(
    "--config", "config_file", default=None,
    type=click.Path(exists=True, dir_okay=False), help="Settings YAML file.",
)


@click.group()
def main():
    """Fence measurement geometry: summaries, materials and validation."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@_config_option
def summary(project_file: str, config_file: str | None):
    """Print the summary statistics of a project JSON file."""
    settings = load_settings(config_file)
    project = load_project(project_file)
    result = project_summary(project, closure_tolerance=settings.measurement.closure_tolerance_m)
    click.echo(f"Total length:  {format_dimensions(result.total_linear_feet, include_meters=True)}")
    click.echo(f"Perimeter:     {result.perimeter_feet:.2f} ft")
    click.echo(f"Area:          {result.total_area_sqft:.2f} sq ft")
    click.echo(f"Confidence:    {result.avg_confidence:.2f}")
    click.echo(f"Accuracy:      ±{result.estimated_accuracy_cm:.1f} cm")


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@_config_option
@click.option("--post-spacing", type=float, default=None, help="Post spacing (feet).")
@click.option("--rails", "rails_per_section", type=int, default=None, help="Rails per section.")
@click.option("--gates", type=int, default=None, help="Override the project's gate count.")
def materials(
    project_file: str,
    config_file: str | None,
    post_spacing: float | None,
    rails_per_section: int | None,
    gates: int | None,
):
    """Print a basic bill of materials for a project JSON file."""
    settings = load_settings(config_file).materials
    project = load_project(project_file)
    total_feet = project_summary(project).total_linear_feet
    estimate = estimate_materials(
        total_feet,
        project.num_gates if gates is None else gates,
        post_spacing_feet=settings.post_spacing_feet if post_spacing is None else post_spacing,
        picket_width_inches=settings.picket_width_inches,
        picket_spacing_inches=settings.picket_spacing_inches,
        rails_per_section=settings.rails_per_section if rails_per_section is None else rails_per_section,
    )
    click.echo(estimate.model_dump_json(indent=2))


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
def validate(project_file: str):
    """Check a project JSON file; exits with status 1 if anything is wrong."""
    project = load_project(project_file)
    problems = list(validate_project(project))
    for i, seg in enumerate(project.segments):
        problems.extend(f"segment {i}: {msg}" for msg in validate_segment(seg))

    if not problems:
        click.echo("OK")
        return
    for msg in problems:
        click.echo(msg)
    sys.exit(1)


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@_config_option
def corners(project_file: str, config_file: str | None):
    """Print the angle at each joint of a project's fence run."""
    settings = load_settings(config_file).measurement
    project = load_project(project_file)
    for corner in project_corners(project.segments, settings):
        kind = "right" if corner.is_right else "45" if corner.is_45 else "-"
        click.echo(
            f"corner {corner.segment_index}: {corner.angle:.2f}° "
            f"(snap {corner.snapped_angle:g}°) {kind}"
        )


@main.command()
@click.argument("points_file", type=click.Path(exists=True, dir_okay=False))
def bounds(points_file: str):
    """Print the bounding box of a captured point file (.json or .ply)."""
    box = bounding_box(load_points(points_file))
    if box is None:
        click.echo("null")
        return
    click.echo(box.model_dump_json(indent=2))


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_file", default=None, help="Output JSON path.")
@_config_option
def report(project_file: str, output_file: str | None, config_file: str | None):
    """Write the full project report (summary, materials, issues) as JSON."""
    json_str = process_project_to_json(
        project_file,
        output_path=output_file,
        settings=load_settings(config_file),
    )
    click.echo(json_str)


if __name__ == "__main__":
    main()
