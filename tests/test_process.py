"""End-to-end test for project reports."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from packages.core.settings import MaterialSettings, MeasurementSettings, Settings
from packages.core.types import FenceProject, FenceSegment, ProjectReport
from packages.measure import process as process_module
from packages.measure import summary as summary_module
from packages.measure.process import build_report, process_project, process_project_to_json
from packages.measure.summary import project_summary


class TestBuildReport:
    def test_clean_project(self, yard_project: FenceProject):
        report = build_report(yard_project)
        assert report.project_name == "Backyard privacy fence"
        assert report.units == "feet"
        assert report.summary.perimeter_feet == 4.0
        assert report.materials.posts == 1 + 2
        assert report.project_issues == []
        assert report.segment_issues == {}

    def test_materials_use_fresh_totals(self, yard_project: FenceProject):
        # stale stored total must not leak into the estimate
        stale = yard_project.model_copy(update={"total_linear_feet": 1000.0})
        assert build_report(stale).materials.posts == 3

    def test_issues(self, unit_square: list[FenceSegment]):
        bad = unit_square[1].model_copy(update={"confidence_score": 2.0})
        project = FenceProject(segments=[unit_square[0], bad, FenceSegment()])
        report = build_report(project)
        assert len(report.project_issues) == 3
        assert set(report.segment_issues) == {1, 2}
        assert len(report.segment_issues[2]) == 2

    def test_settings(self, yard_project: FenceProject):
        settings = Settings(materials=MaterialSettings(post_spacing_feet=1))
        assert build_report(yard_project, settings=settings).materials.posts == 4 + 2

    def test_summary_computed_once(self, yard_project: FenceProject, monkeypatch: pytest.MonkeyPatch):
        calls = []

        def counting(project, **kwargs):
            calls.append(project)
            return project_summary(project, **kwargs)

        monkeypatch.setattr(process_module, "project_summary", counting)
        monkeypatch.setattr(summary_module, "project_summary", counting)
        report = build_report(yard_project)
        assert len(calls) == 1
        assert report.summary.total_linear_feet == 4.0

    def test_corners(self, yard_project: FenceProject):
        corners = build_report(yard_project).corners
        assert len(corners) == 4
        assert all(c.is_right for c in corners)

    def test_corner_settings(self, yard_project: FenceProject):
        settings = Settings(measurement=MeasurementSettings(snap_increment_deg=60))
        corners = build_report(yard_project, settings=settings).corners
        assert all(c.snapped_angle == 120.0 for c in corners)


class TestProcessProject:
    def test_from_file(self, tmp_path: Path, yard_project_json: dict):
        path = tmp_path / "front.json"
        path.write_text(json.dumps(yard_project_json))

        report = process_project(path)
        assert report.source_file == "front.json"
        assert report.summary.total_linear_feet == 40.0
        assert report.summary.total_area_sqft == pytest.approx(100.0, rel=1e-4)
        assert report.materials.posts == 5 + 2

    def test_json_output(self, tmp_path: Path, yard_project_json: dict):
        path = tmp_path / "front.json"
        path.write_text(json.dumps(yard_project_json))

        json_str = process_project_to_json(path)

        out = tmp_path / "front.report.json"
        assert out.exists()
        data = json.loads(json_str)
        assert "summary" in data
        assert "materials" in data
        # round-trips through Pydantic
        report = ProjectReport.model_validate(data)
        assert report.project_name == "Front yard"

    def test_explicit_output_path(self, tmp_path: Path, yard_project_json: dict):
        path = tmp_path / "front.json"
        path.write_text(json.dumps(yard_project_json))
        out = tmp_path / "out"
        out.mkdir()

        process_project_to_json(path, output_path=out / "r.json")
        assert (out / "r.json").exists()
