"""Length conversions, display rounding and feet/inches formatting."""

from __future__ import annotations

import math

from packages.core.types import Dimensions

FEET_PER_METER = 3.28084
INCHES_PER_FOOT = 12
SQFT_PER_SQM = 10.7639


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to *ndigits* decimals with ties going up (towards +inf).

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    scale = 10 ** ndigits
    scaled = value * scale + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / scale


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    return feet / FEET_PER_METER


def feet_to_inches(feet: float) -> float:
    return feet * INCHES_PER_FOOT


def inches_to_feet(inches: float) -> float:
    return inches / INCHES_PER_FOOT


def feet_to_dimensions(total_feet: float) -> Dimensions:
    """Split *total_feet* into whole feet and inches (2 decimals).

    A non-finite length has no whole-feet part, so ``feet`` and ``inches``
    fall back to zero.
    """
    if math.isfinite(total_feet):
        feet = math.floor(total_feet)
        inches = round_half_up((total_feet - feet) * INCHES_PER_FOOT, 2)
    else:
        feet, inches = 0, 0.0
    return Dimensions(
        feet=feet,
        inches=inches,
        total_inches=feet_to_inches(total_feet),
        meters=feet_to_meters(total_feet),
    )


def dimensions_to_feet(feet: float, inches: float) -> float:
    return feet + inches_to_feet(inches)


def format_dimensions(total_feet: float, include_meters: bool = False) -> str:
    """Format a length for display, e.g. ``10' 6.0"`` or ``10' 6.0" (3.20m)``."""
    dims = feet_to_dimensions(total_feet)
    text = f"{dims.feet}' {dims.inches:.1f}\""
    if include_meters:
        return f"{text} ({dims.meters:.2f}m)"
    return text
