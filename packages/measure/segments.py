"""Segment construction and aggregation: total length, perimeter, enclosed area."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from packages.core.types import CalibrationData, FenceSegment, Point3D
from packages.measure.angles import slope_angle_degrees, slope_percent
from packages.measure.calibration import apply_calibration
from packages.measure.distance import distance_3d
from packages.measure.units import SQFT_PER_SQM, feet_to_inches, meters_to_feet

logger = logging.getLogger(__name__)

CLOSURE_TOLERANCE_M = 0.1


def measure_segment(
    start: Point3D,
    end: Point3D,
    *,
    confidence_score: float,
    calibration: Optional[CalibrationData] = None,
    **attrs,
) -> FenceSegment:
    """Create a segment with its lengths and slope computed from the endpoints.

    The raw 3D distance is corrected by *calibration* (if any) before being
    converted to feet and inches.  Extra keyword arguments (``fence_style``,
    ``segment_index`` …) are passed through to :class:`FenceSegment`.
    """
    length_m = apply_calibration(distance_3d(start, end), calibration)
    length_ft = meters_to_feet(length_m)
    return FenceSegment(
        start=start,
        end=end,
        length_meters=length_m,
        length_feet=length_ft,
        length_inches=feet_to_inches(length_ft),
        slope_percent=slope_percent(start, end),
        slope_angle_degrees=slope_angle_degrees(start, end),
        confidence_score=confidence_score,
        **attrs,
    )


def total_length(segments: Sequence[FenceSegment]) -> float:
    """Sum of the cached ``length_feet`` of each segment (unset counts as 0)."""
    return sum((s.length_feet or 0.0) for s in segments)


def is_closed_loop(
    segments: Sequence[FenceSegment],
    tolerance: float = CLOSURE_TOLERANCE_M,
) -> bool:
    """True when the last segment ends within *tolerance* metres of the first start."""
    if not segments:
        return False
    first_start = segments[0].start
    last_end = segments[-1].end
    if first_start is None or last_end is None:
        return False
    return distance_3d(last_end, first_start) <= tolerance


def perimeter(
    segments: Sequence[FenceSegment],
    tolerance: float = CLOSURE_TOLERANCE_M,
) -> float:
    """Perimeter in feet of a closed loop; 0 for an empty list or an open run."""
    if not is_closed_loop(segments, tolerance):
        if segments:
            logger.debug("Segments do not close (tolerance %.2fm), perimeter is 0", tolerance)
        return 0.0
    return total_length(segments)


def enclosed_area(segments: Sequence[FenceSegment]) -> float:
    """Area in square feet enclosed by the segments, via the shoelace formula.

    The ring is every segment's ``start`` plus the final ``end``, projected
    onto the horizontal (x, z) plane.  Needs at least 3 segments.  The
    polygon is assumed to be simple; self-intersections are not detected.
    """
    if len(segments) < 3:
        return 0.0

    ring = [s.start for s in segments] + [segments[-1].end]
    if any(p is None for p in ring):
        return 0.0

    xs = np.array([p.x for p in ring], dtype=np.float64)
    zs = np.array([p.z for p in ring], dtype=np.float64)
    cross = xs[:-1] * zs[1:] - xs[1:] * zs[:-1]
    area_sqm = abs(float(cross.sum())) / 2
    return area_sqm * SQFT_PER_SQM
