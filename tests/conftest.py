"""Shared test fixtures – segment loops and projects for a small yard."""

from __future__ import annotations

import pytest

from packages.core.types import FenceProject, FenceSegment, Point3D


def _make_loop(
    corners: list[tuple[float, float, float]],
    length_feet: float = 1.0,
    confidence: float = 0.9,
) -> list[FenceSegment]:
    """Chain *corners* into segments; the last corner is the final ``end``."""
    points = [Point3D(x=x, y=y, z=z) for x, y, z in corners]
    return [
        FenceSegment(
            start=a,
            end=b,
            segment_index=i,
            length_feet=length_feet,
            confidence_score=confidence,
        )
        for i, (a, b) in enumerate(zip(points[:-1], points[1:]))
    ]


@pytest.fixture()
def unit_square() -> list[FenceSegment]:
    """Four 1 m segments around a unit square on the ground, closed at the origin."""
    return _make_loop([(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1), (0, 0, 0)])


@pytest.fixture()
def open_square() -> list[FenceSegment]:
    """Same square, but the last segment ends 1 m past the start."""
    return _make_loop([(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1), (0, 0, -1)])


@pytest.fixture()
def yard_project(unit_square: list[FenceSegment]) -> FenceProject:
    return FenceProject(
        project_name="Backyard privacy fence",
        client_name="J. Rivera",
        site_address="12 Elm St",
        segments=unit_square,
        num_gates=1,
    )


@pytest.fixture()
def yard_project_json() -> dict:
    """A project record as exported by the capture client (camelCase keys)."""
    side = 10 / 3.28084  # 10 ft in metres
    corners = [(0, 0, 0), (side, 0, 0), (side, 0, side), (0, 0, side), (0, 0, 0)]
    return {
        "projectName": "Front yard",
        "clientName": "A. Chen",
        "siteAddress": "4 Oak Ave",
        "numGates": 1,
        "segments": [
            {
                "segmentIndex": i,
                "start": dict(zip("xyz", a)),
                "end": dict(zip("xyz", b)),
                "lengthFeet": 10.0,
                "confidenceScore": 0.8,
            }
            for i, (a, b) in enumerate(zip(corners[:-1], corners[1:]))
        ],
    }
