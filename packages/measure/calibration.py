"""Calibration against a known reference length, and accuracy estimation."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from packages.core.types import CalibrationData
from packages.measure.units import feet_to_meters, round_half_up

logger = logging.getLogger(__name__)

# LiDAR accuracy (cm) at 1 m with perfect confidence
BASE_ACCURACY_CM = 0.5


def calibration_factor(known_length: float, measured_length: float) -> float:
    """Multiplicative correction ``known / measured``; 1.0 if nothing was measured."""
    if measured_length == 0:
        logger.debug("Measured length is 0, using identity calibration")
        return 1.0
    return known_length / measured_length


def build_calibration(
    reference_length: float,
    measured_length: float,
    confidence: float = 1.0,
) -> CalibrationData:
    """Build a :class:`CalibrationData` record from a reference measurement."""
    return CalibrationData(
        reference_length=reference_length,
        measured_length=measured_length,
        factor=calibration_factor(reference_length, measured_length),
        confidence=confidence,
        timestamp=datetime.now(timezone.utc),
    )


def apply_calibration(measurement: float, calibration: Optional[CalibrationData] = None) -> float:
    if calibration is None:
        return measurement
    return measurement * calibration.factor


def estimate_accuracy_cm(confidence: float, distance_feet: float) -> float:
    """Heuristic measurement error in centimetres, 1 decimal.

    ``0.5 cm × sqrt(distance in metres) × (1 + (1 - confidence) × 2)``: error
    grows with distance and is scaled 1×–3× as confidence drops from 1 to 0.
    This is a display heuristic, not a physical model.
    """
    distance_m = feet_to_meters(distance_feet)
    distance_factor = math.sqrt(distance_m) if distance_m > 0 else 0.0
    confidence_factor = 1 + (1 - confidence) * 2
    return round_half_up(BASE_ACCURACY_CM * distance_factor * confidence_factor, 1)
