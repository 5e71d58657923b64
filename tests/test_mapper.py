import math

import pytest

from core.state import JoystickGeometry, Vector2
from mapper import format_axis, knob_offset, map_offset, map_pointer

RADIUS = 48.0


@pytest.mark.parametrize("dx,dy", [
    (0, 0), (10, 0), (48, 0), (100, 0), (0, -500), (300, 300), (-35, 35), (1e6, -1e6), (33.9, 33.9),
])
def test_norm_never_exceeds_one(dx, dy):
    vec = map_offset(dx, dy, RADIUS)
    assert vec.norm <= 1.0 + 1e-9
    assert -1.0 <= vec.x <= 1.0
    assert -1.0 <= vec.y <= 1.0


@pytest.mark.parametrize("angle_deg", [0, 45, 90, 135, 180, 225, 270, 315])
def test_offset_at_radius_is_unit_vector(angle_deg):
    a = math.radians(angle_deg)
    dx, dy = RADIUS * math.cos(a), RADIUS * math.sin(a)
    vec = map_offset(dx, dy, RADIUS)
    assert pytest.approx(vec.x, abs=1e-9) == math.cos(a)
    # screen Y grows downward, output Y grows upward
    assert pytest.approx(vec.y, abs=1e-9) == -math.sin(a)


def test_zero_offset_maps_to_zero():
    assert map_offset(0, 0, RADIUS) == Vector2.ZERO


def test_pointer_above_center_is_positive_y():
    vec = map_offset(0, -24, RADIUS)
    assert vec.x == 0.0
    assert pytest.approx(vec.y) == 0.5


def test_diagonal_is_circular_not_box_clamped():
    vec = map_offset(100, -100, RADIUS)
    assert pytest.approx(vec.x, rel=1e-6) == math.sqrt(0.5)
    assert pytest.approx(vec.y, rel=1e-6) == math.sqrt(0.5)
    assert pytest.approx(vec.norm, rel=1e-9) == 1.0


def test_inside_radius_is_linear():
    vec = map_offset(12, 24, RADIUS)
    assert pytest.approx(vec.x) == 0.25
    assert pytest.approx(vec.y) == -0.5


def test_map_pointer_uses_geometry_center():
    geom = JoystickGeometry(100, 200, 160, 64)
    vec = map_pointer(124, 176, geom)
    assert pytest.approx(vec.x) == 0.5
    assert pytest.approx(vec.y) == 0.5


def test_map_pointer_without_geometry_or_coordinates():
    geom = JoystickGeometry(100, 200)
    assert map_pointer(1, 2, None) is None
    assert map_pointer(None, 2, geom) is None
    assert map_pointer(1, None, geom) is None


def test_knob_offset_and_readout():
    assert knob_offset(Vector2(0.5, 0.5), RADIUS) == (24.0, -24.0)
    assert format_axis(0.5) == "0.500"
    assert format_axis(-1.0) == "-1.000"
