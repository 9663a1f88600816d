"""Tunable defaults for measurement checks and material estimates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class _Section(BaseModel):
    # YAML files use snake_case, HTTP clients send camelCase
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class MeasurementSettings(_Section):
    closure_tolerance_m: float = Field(0.1, ge=0.0, description="Max gap (metres) for a closed loop")
    angle_tolerance_deg: float = Field(5.0, ge=0.0, le=45.0)
    snap_increment_deg: float = Field(45.0, gt=0.0, le=180.0)


class MaterialSettings(_Section):
    post_spacing_feet: float = Field(8.0, gt=0.0)
    picket_width_inches: float = Field(6.0, gt=0.0)
    picket_spacing_inches: float = Field(0.5, ge=0.0)
    rails_per_section: int = Field(3, ge=0)


class Settings(_Section):
    measurement: MeasurementSettings = Field(default_factory=MeasurementSettings)
    materials: MaterialSettings = Field(default_factory=MaterialSettings)


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """Read settings from a YAML file; missing keys keep their defaults.

    With no path the built-in defaults are returned.
    """
    if path is None:
        return Settings()

    path = Path(path)
    logger.info("Loading settings from %s", path)
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return Settings.model_validate(data)
