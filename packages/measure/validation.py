"""Advisory checks on segment and project records.

Each validator returns every violation it finds as a human-readable string;
an empty list means the record is acceptable.  Records may be models or
plain mappings (snake_case or camelCase keys), since drafts coming from the
capture client are often incomplete.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from packages.core.types import FenceProject, FenceSegment

Record = Union[BaseModel, Mapping[str, Any]]


def _field(record: Record, name: str) -> Any:
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(to_camel(name))
    return getattr(record, name, None)


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_segment(segment: Union[FenceSegment, Mapping[str, Any]]) -> list[str]:
    errors: list[str] = []

    if _field(segment, "start") is None:
        errors.append("Segment must have start point")
    if _field(segment, "end") is None:
        errors.append("Segment must have end point")

    length_feet = _field(segment, "length_feet")
    if length_feet is not None and not (_is_number(length_feet) and length_feet > 0):
        errors.append("Segment length must be positive")

    confidence = _field(segment, "confidence_score")
    if confidence is not None and not (_is_number(confidence) and 0 <= confidence <= 1):
        errors.append("Confidence score must be between 0 and 1")

    return errors


def validate_project(project: Union[FenceProject, Mapping[str, Any]]) -> list[str]:
    errors: list[str] = []

    if _blank(_field(project, "project_name")):
        errors.append("Project name is required")
    if _blank(_field(project, "client_name")):
        errors.append("Client name is required")
    if _blank(_field(project, "site_address")):
        errors.append("Site address is required")

    return errors
