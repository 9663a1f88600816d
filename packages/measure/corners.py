"""Corner angles between consecutive segments of a fence run."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from packages.core.settings import MeasurementSettings
from packages.core.types import CornerAngle, FenceSegment
from packages.measure.angles import is_45_angle, is_right_angle, vertex_angle
from packages.measure.segments import CLOSURE_TOLERANCE_M, is_closed_loop
from packages.measure.snap import snap_angle

logger = logging.getLogger(__name__)


def corner_angles(
    segments: Sequence[FenceSegment],
    *,
    tolerance: float = 5,
    snap_increment: float = 45,
    closure_tolerance: float = CLOSURE_TOLERANCE_M,
) -> list[CornerAngle]:
    """Angle at each joint of the run, classified and snapped.

    Segment ``i`` meets segment ``i + 1`` at its end point.  A closed loop of
    three or more segments also gets the corner where the last segment
    returns to the first.  Joints with a missing point are skipped.
    """
    pairs = list(zip(segments, segments[1:]))
    if len(segments) > 2 and is_closed_loop(segments, closure_tolerance):
        pairs.append((segments[-1], segments[0]))

    corners = []
    for i, (incoming, outgoing) in enumerate(pairs):
        if incoming.start is None or incoming.end is None or outgoing.end is None:
            logger.debug("Skipping corner %d: missing point", i)
            continue
        angle = vertex_angle(incoming.start, incoming.end, outgoing.end)
        corners.append(CornerAngle(
            segment_index=i,
            vertex=incoming.end,
            angle=angle,
            snapped_angle=snap_angle(angle, snap_increment),
            is_right=is_right_angle(angle, tolerance),
            is_45=is_45_angle(angle, tolerance),
        ))
    return corners


def project_corners(
    segments: Sequence[FenceSegment],
    settings: Optional[MeasurementSettings] = None,
) -> list[CornerAngle]:
    """:func:`corner_angles` with tolerances taken from *settings*."""
    settings = settings or MeasurementSettings()
    return corner_angles(
        segments,
        tolerance=settings.angle_tolerance_deg,
        snap_increment=settings.snap_increment_deg,
        closure_tolerance=settings.closure_tolerance_m,
    )
