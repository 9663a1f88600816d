"""Angle and grid snapping for assisted drafting."""

from __future__ import annotations

import math

from packages.core.types import Point3D


def _snap(value: float, step: float) -> float:
    if not step > 0:
        return value
    steps = value / step + 0.5
    if not math.isfinite(steps):
        return value
    return math.floor(steps) * step


def snap_angle(angle: float, increment: float = 45) -> float:
    """Snap an angle (degrees) to the nearest multiple of *increment*."""
    return _snap(angle, increment)


def snap_to_grid(point: Point3D, grid_size: float) -> Point3D:
    """Round each axis of *point* to the nearest multiple of *grid_size*.

    A non-positive grid size leaves the point where it is.
    """
    if not grid_size > 0:
        return point
    return Point3D(
        x=_snap(point.x, grid_size),
        y=_snap(point.y, grid_size),
        z=_snap(point.z, grid_size),
    )
