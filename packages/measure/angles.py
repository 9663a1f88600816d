"""Slope and angle calculations.

Degenerate inputs (zero horizontal run, zero-length rays) yield ``0``
rather than an error, since callers feed in half-finished measurements.
"""

from __future__ import annotations

import logging
import math

from packages.core.types import Point3D
from packages.measure.distance import horizontal_distance
from packages.measure.units import round_half_up

logger = logging.getLogger(__name__)


def slope_percent(p1: Point3D, p2: Point3D) -> float:
    """Grade between two points as a percentage (rise / run × 100), 2 decimals."""
    run = horizontal_distance(p1, p2)
    rise = p2.y - p1.y
    if run == 0:
        logger.debug("Zero horizontal run, slope defaults to 0")
        return 0.0
    return round_half_up(rise / run * 100, 2)


def slope_angle_degrees(p1: Point3D, p2: Point3D) -> float:
    """Slope angle above the horizontal in degrees, 2 decimals."""
    run = horizontal_distance(p1, p2)
    rise = p2.y - p1.y
    if run == 0:
        return 0.0
    return round_half_up(math.degrees(math.atan(rise / run)), 2)


def vertex_angle(p1: Point3D, p2: Point3D, p3: Point3D) -> float:
    """Angle at vertex *p2* between the rays to *p1* and *p3*, in degrees.

    Uses the dot-product formula ``acos(v1·v2 / (|v1||v2|))``.  Returns 0
    when either ray has zero length.
    """
    v1 = (p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)
    v2 = (p3.x - p2.x, p3.y - p2.y, p3.z - p2.z)

    dot = v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]
    mag1 = math.sqrt(v1[0] ** 2 + v1[1] ** 2 + v1[2] ** 2)
    mag2 = math.sqrt(v2[0] ** 2 + v2[1] ** 2 + v2[2] ** 2)
    if mag1 == 0 or mag2 == 0:
        return 0.0

    # float error can push the cosine just past ±1
    cosine = max(-1.0, min(1.0, dot / (mag1 * mag2)))
    return round_half_up(math.degrees(math.acos(cosine)), 2)


def is_right_angle(angle: float, tolerance: float = 5) -> bool:
    return abs(angle - 90) <= tolerance


def is_45_angle(angle: float, tolerance: float = 5) -> bool:
    """True for either diagonal orientation (45° or 135°) within *tolerance*."""
    return abs(angle - 45) <= tolerance or abs(angle - 135) <= tolerance
