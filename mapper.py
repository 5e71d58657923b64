"""Mapping engine: raw pointer offsets -> circularly clamped, normalized Vector2"""
import logging
import math
from typing import Optional, Tuple

from core.state import JoystickGeometry, Vector2

LOG = logging.getLogger("petleash.mapper")


def _clip(val: float) -> float:
    return max(-1.0, min(1.0, val))


def map_offset(dx: float, dy: float, radius: float) -> Vector2:
    """Map a screen-space offset from the joystick center to a Vector2.

    Offsets beyond ``radius`` are projected back onto the circle so diagonals
    get the same travel as the axes. Screen Y grows downward, so it is inverted:
    pushing the knob up (away from the user) gives a positive y.
    """
    if radius <= 0:
        LOG.debug("non-positive radius %s, mapping to zero", radius)
        return Vector2.ZERO
    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0:
        return Vector2.ZERO
    if distance > radius:
        scale = radius / distance
        dx *= scale
        dy *= scale
    # clip absorbs float rounding at the rim
    return Vector2(_clip(dx / radius), _clip(-dy / radius))


def map_pointer(client_x, client_y, geometry: Optional[JoystickGeometry]) -> Optional[Vector2]:
    """Map absolute pointer coordinates against a measured joystick.

    Returns None when the geometry has not been measured yet or a coordinate
    is missing; callers treat that as "nothing to do this tick".
    """
    if geometry is None:
        LOG.debug("geometry unavailable, ignoring pointer (%s, %s)", client_x, client_y)
        return None
    if client_x is None or client_y is None:
        LOG.debug("pointer without coordinates ignored")
        return None
    vec = map_offset(client_x - geometry.center_x, client_y - geometry.center_y, geometry.radius)
    LOG.debug("pointer (%.1f, %.1f) -> (%.3f, %.3f)", client_x, client_y, vec.x, vec.y)
    return vec


def knob_offset(vector: Vector2, radius: float) -> Tuple[float, float]:
    """Pixel translation of the knob for a vector (screen Y down)."""
    return vector.x * radius, -vector.y * radius


def format_axis(value: float) -> str:
    return f"{value:.3f}"
