"""Distance primitives over captured AR points (metres)."""

from __future__ import annotations

import math

from packages.core.types import FenceSegment, Point3D


def distance_3d(p1: Point3D, p2: Point3D) -> float:
    """Euclidean distance over all three axes."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    dz = p2.z - p1.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_2d(p1: Point3D, p2: Point3D) -> float:
    """Plan-view distance: the (x, z) projection, ignoring height."""
    dx = p2.x - p1.x
    dz = p2.z - p1.z
    return math.sqrt(dx * dx + dz * dz)


def horizontal_distance(p1: Point3D, p2: Point3D) -> float:
    """Horizontal run between two points (``y`` is the vertical axis)."""
    return distance_2d(p1, p2)


def segment_length(segment: FenceSegment) -> float:
    """Raw 3D length of a segment in metres, 0 when an endpoint is missing."""
    if segment.start is None or segment.end is None:
        return 0.0
    return distance_3d(segment.start, segment.end)
