"""Basic bill of materials from linear footage.

A planning estimate only: every count is rounded up (never short a post)
and clamped at zero, and degenerate inputs give zero counts instead of
errors.
"""

from __future__ import annotations

import math
from typing import Optional

from packages.core.settings import MaterialSettings
from packages.core.types import FenceProject, MaterialEstimate


def _ceil(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return max(0, math.ceil(value))


def estimate_materials(
    total_linear_feet: float,
    num_gates: int = 0,
    *,
    post_spacing_feet: float = 8,
    picket_width_inches: float = 6,
    picket_spacing_inches: float = 0.5,
    rails_per_section: int = 3,
) -> MaterialEstimate:
    """Estimate posts, pickets, rails, concrete and gate hardware.

    * sections = ceil(feet / post spacing)
    * posts = sections + 2 per gate
    * pickets = ceil(feet × 12 / (picket width + gap))
    * rails = sections × rails per section
    * one bag of concrete per post, one hardware set per gate
    """
    gates = max(0, num_gates)
    sections = _ceil(total_linear_feet / post_spacing_feet) if post_spacing_feet > 0 else 0

    picket_pitch = picket_width_inches + picket_spacing_inches
    pickets = _ceil(total_linear_feet * (12 / picket_pitch)) if picket_pitch > 0 else 0

    posts = sections + gates * 2
    return MaterialEstimate(
        posts=posts,
        pickets=pickets,
        rails=sections * max(0, rails_per_section),
        concrete_bags=posts,
        gate_hardware_sets=gates,
    )


def estimate_project_materials(
    project: FenceProject,
    settings: Optional[MaterialSettings] = None,
) -> MaterialEstimate:
    """Estimate materials from a project's ``total_linear_feet`` and gate count."""
    settings = settings or MaterialSettings()
    return estimate_materials(
        project.total_linear_feet,
        project.num_gates,
        post_spacing_feet=settings.post_spacing_feet,
        picket_width_inches=settings.picket_width_inches,
        picket_spacing_inches=settings.picket_spacing_inches,
        rails_per_section=settings.rails_per_section,
    )
