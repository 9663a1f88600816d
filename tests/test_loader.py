"""Tests for project and point loading."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest
from plyfile import PlyData, PlyElement

from packages.core.types import Point3D
from packages.measure.loader import load_points, load_points_ply, load_project


def _write_ply(path: Path, points: np.ndarray) -> None:
    """Helper: write an (N, 3) array as a binary PLY file."""
    dtype = [("x", "f4"), ("y", "f4"), ("z", "f4")]
    structured = np.empty(len(points), dtype=dtype)
    structured["x"] = points[:, 0]
    structured["y"] = points[:, 1]
    structured["z"] = points[:, 2]
    el = PlyElement.describe(structured, "vertex")
    PlyData([el], text=False).write(str(path))


class TestLoadProject:
    def test_camel_case_export(self, tmp_path: Path, yard_project_json: dict):
        path = tmp_path / "project.json"
        path.write_text(json.dumps(yard_project_json))

        project = load_project(path)
        assert project.project_name == "Front yard"
        assert project.num_gates == 1
        assert len(project.segments) == 4
        assert project.segments[0].length_feet == 10.0
        assert project.segments[0].confidence_score == 0.8

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Malformed"):
            load_project(path)

    def test_not_a_project(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="Invalid project"):
            load_project(path)


class TestLoadPoints:
    def test_json_objects_and_triples(self, tmp_path: Path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps([{"x": 1, "y": 2, "z": 3}, [4, 5, 6]]))

        points = load_points(path)
        assert points == [Point3D(x=1, y=2, z=3), Point3D(x=4, y=5, z=6)]

    def test_json_bad_entry(self, tmp_path: Path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps([[1, 2]]))
        with pytest.raises(ValueError, match="Point 0"):
            load_points(path)

    def test_json_not_a_list(self, tmp_path: Path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"x": 1}))
        with pytest.raises(ValueError, match="list of points"):
            load_points(path)

    def test_ply_round_trip(self, tmp_path: Path):
        pts = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], dtype=np.float32)
        ply_file = tmp_path / "capture.ply"
        _write_ply(ply_file, pts)

        points = load_points_ply(ply_file)
        assert len(points) == 2
        np.testing.assert_allclose([[p.x, p.y, p.z] for p in points], pts, atol=1e-5)

    def test_ply_dispatch(self, tmp_path: Path):
        pts = np.random.default_rng(0).random((10, 3)).astype(np.float32)
        ply_file = tmp_path / "cloud.ply"
        _write_ply(ply_file, pts)

        assert len(load_points(ply_file)) == 10

    def test_unsupported_extension(self, tmp_path: Path):
        fake = tmp_path / "file.xyz"
        fake.write_text("dummy")
        with pytest.raises(ValueError, match="Unsupported"):
            load_points(fake)
