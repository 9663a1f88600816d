"""Axis-aligned bounding boxes over captured points."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from packages.core.types import BoundingBox, FenceProject, Point3D


def _as_point(arr: np.ndarray) -> Point3D:
    return Point3D(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))


def bounding_box(points: Sequence[Point3D]) -> Optional[BoundingBox]:
    """Return the bounding box of *points*, or ``None`` for an empty set."""
    if len(points) == 0:
        return None

    arr = np.array([[p.x, p.y, p.z] for p in points], dtype=np.float64)
    mins = arr.min(axis=0)
    maxs = arr.max(axis=0)
    dims = maxs - mins
    return BoundingBox(
        min=_as_point(mins),
        max=_as_point(maxs),
        center=_as_point((mins + maxs) / 2),
        width=float(dims[0]),
        height=float(dims[1]),
        depth=float(dims[2]),
    )


def project_bounds(project: FenceProject) -> Optional[BoundingBox]:
    """Bounding box over every segment endpoint in *project*."""
    points = [
        p
        for seg in project.segments
        for p in (seg.start, seg.end)
        if p is not None
    ]
    return bounding_box(points)
