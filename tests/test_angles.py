"""Tests for slope and angle calculations."""

from __future__ import annotations

import pytest

from packages.core.types import Point3D
from packages.measure.angles import (
    is_45_angle,
    is_right_angle,
    slope_angle_degrees,
    slope_percent,
    vertex_angle,
)

ORIGIN = Point3D(x=0, y=0, z=0)


def _p(x: float, y: float, z: float) -> Point3D:
    return Point3D(x=x, y=y, z=z)


class TestSlope:
    def test_percent(self):
        assert slope_percent(ORIGIN, _p(10, 1, 0)) == 10.0

    def test_percent_rounded(self):
        assert slope_percent(ORIGIN, _p(3, 1, 0)) == 33.33
        assert slope_percent(_p(0, 1, 0), _p(3, 0, 0)) == -33.33

    def test_angle(self):
        assert slope_angle_degrees(ORIGIN, _p(1, 1, 0)) == 45.0
        assert slope_angle_degrees(ORIGIN, _p(0, -2, 2)) == -45.0

    @pytest.mark.parametrize("p", [ORIGIN, _p(1.5, -2, 9), _p(-4, 0.3, 2)])
    def test_identical_points(self, p: Point3D):
        assert slope_percent(p, p) == 0
        assert slope_angle_degrees(p, p) == 0

    def test_vertical_segment(self):
        assert slope_percent(ORIGIN, _p(0, 3, 0)) == 0
        assert slope_angle_degrees(ORIGIN, _p(0, 3, 0)) == 0


class TestVertexAngle:
    def test_right_angle(self):
        assert vertex_angle(_p(1, 0, 0), ORIGIN, _p(0, 0, 1)) == 90.0

    def test_diagonal(self):
        assert vertex_angle(_p(1, 0, 0), ORIGIN, _p(1, 0, 1)) == 45.0

    def test_straight_line(self):
        assert vertex_angle(_p(1, 0, 0), ORIGIN, _p(-1, 0, 0)) == 180.0

    def test_same_direction(self):
        assert vertex_angle(_p(1, 0, 0), ORIGIN, _p(2, 0, 0)) == 0.0

    def test_collinear_rays_with_float_noise(self):
        a = _p(0.1, 0.2, 0.3)
        b = _p(0.2, 0.4, 0.6)
        assert vertex_angle(a, b, _p(0.3, 0.6, 0.9)) == 180.0

    def test_zero_length_ray(self):
        assert vertex_angle(ORIGIN, ORIGIN, _p(1, 0, 0)) == 0
        assert vertex_angle(_p(1, 0, 0), ORIGIN, ORIGIN) == 0


class TestClassification:
    @pytest.mark.parametrize("angle,expected", [(90, True), (85, True), (95, True), (84.9, False), (100, False)])
    def test_right_angle(self, angle: float, expected: bool):
        assert is_right_angle(angle) is expected

    @pytest.mark.parametrize("angle,expected", [(45, True), (41, True), (135, True), (133, True), (90, False), (39, False)])
    def test_45_angle(self, angle: float, expected: bool):
        assert is_45_angle(angle) is expected

    def test_custom_tolerance(self):
        assert is_right_angle(88, tolerance=1) is False
        assert is_45_angle(48, tolerance=3) is True
