"""Load fence projects and captured point sets from disk.

Supported formats
-----------------
* **Project JSON** – a project record as exported by the capture client
  (camelCase or snake_case keys), with its segments inline.
* **Point JSON** – a list of ``{"x":…, "y":…, "z":…}`` objects or
  ``[x, y, z]`` triples.
* **PLY** – vertex ``x``/``y``/``z`` properties, via the ``plyfile`` library.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
from plyfile import PlyData
from pydantic import ValidationError

from packages.core.types import FenceProject, Point3D

logger = logging.getLogger(__name__)


def _read_json(path: Path):
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {path.name}: {e}") from e


def load_project(path: str | Path) -> FenceProject:
    """Read a project JSON file into a :class:`FenceProject`.

    Raises ``ValueError`` if the file is not valid JSON or does not describe
    a project.
    """
    path = Path(path)
    logger.info("📄 Reading project %s", path.name)
    data = _read_json(path)
    try:
        project = FenceProject.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid project record in {path.name}: {e}") from e
    logger.info("✅ Project %r loaded: %d segments", project.project_name, len(project.segments))
    return project


def load_points_json(path: str | Path) -> list[Point3D]:
    """Read a JSON list of points (objects or triples)."""
    data = _read_json(Path(path))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of points, got {type(data).__name__}")

    points: list[Point3D] = []
    for i, item in enumerate(data):
        if isinstance(item, dict):
            points.append(Point3D.model_validate(item))
        elif isinstance(item, (list, tuple)) and len(item) == 3:
            points.append(Point3D(x=item[0], y=item[1], z=item[2]))
        else:
            raise ValueError(f"Point {i} is neither an {{x, y, z}} object nor an [x, y, z] triple")
    return points


def load_points_ply(path: str | Path) -> list[Point3D]:
    """Read the vertex positions of a binary or ASCII PLY file."""
    logger.info("📄 Reading PLY file...")
    ply = PlyData.read(str(path))
    vertex = ply["vertex"]
    xs = np.asarray(vertex["x"], dtype=np.float64)
    ys = np.asarray(vertex["y"], dtype=np.float64)
    zs = np.asarray(vertex["z"], dtype=np.float64)
    positions = np.column_stack((xs, ys, zs))
    logger.info("✅ PLY file loaded: %s vertices", f"{len(positions):,}")
    return [Point3D(x=float(x), y=float(y), z=float(z)) for x, y, z in positions]


def load_points(path: str | Path) -> list[Point3D]:
    """Auto-detect format and return the captured points.

    Raises ``ValueError`` for unsupported extensions.
    """
    p = Path(path)
    ext = p.suffix.lower()
    if ext == ".json":
        return load_points_json(p)
    if ext == ".ply":
        return load_points_ply(p)
    raise ValueError(
        f"Unsupported point format '{ext}'. Supported: .json, .ply"
    )
