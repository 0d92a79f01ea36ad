"""
Purpose: Axial/cube hex math, world mapping and rounding.
Dependencies: core/config.py (HEX_RADIUS, HEX_HEIGHT), pygame.math (Vector3), math.
Ext Hooks: Add line drawing for line of sight.
"""

import math
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
from pygame.math import Vector3

from core.config import HEX_RADIUS, HEX_HEIGHT

SQRT3 = math.sqrt(3)

# Axial directions, counter-clockwise from +q
AXIAL_DIRECTIONS = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]


def hex_to_world(q, r, h):
    """Convert axial hex coordinates to the center point in world space."""
    x = HEX_RADIUS * 1.5 * r
    y = HEX_HEIGHT * h
    z = HEX_RADIUS * SQRT3 * (q + r / 2)
    return Vector3(x, y, z)


def world_to_hex(point):
    """Convert a world point to the axial coordinates of the hex containing it."""
    x, y, z = point[0], point[1], point[2]
    q = (z * SQRT3 / 3 - x / 3) / HEX_RADIUS
    r = (x * (2 / 3)) / HEX_RADIUS
    h = y / HEX_HEIGHT
    return hex_round(q, r, h)


def axial_to_cube(q, r, h):
    # x = q, z = r, y = -x - z; height rides along
    return (q, -q - r, r, h)


def cube_to_axial(x, y, z, h):
    return (x, z, h)


def cube_round(x, y, z):
    """
    Round fractional cube coordinates to the nearest lattice hex.

    The axis with the largest rounding error is rebuilt from the other two.
    Comparisons are strict and checked x, then y, falling back to z, so
    equal errors resolve toward the later axis.
    """
    rx = round(x)
    ry = round(y)
    rz = round(z)

    x_diff = abs(rx - x)
    y_diff = abs(ry - y)
    z_diff = abs(rz - z)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return int(rx), int(ry), int(rz)


def hex_round(q, r, h):
    """Round fractional axial coordinates (and height) to a valid hex."""
    rx, _, rz = cube_round(q, -q - r, r)
    return rx, rz, int(round(h))


def hex_distance(a, b):
    """Planar cell distance between two (q, r, ...) coordinates; height is ignored."""
    ax, ay, az, _ = axial_to_cube(a[0], a[1], 0)
    bx, by, bz, _ = axial_to_cube(b[0], b[1], 0)
    return (abs(ax - bx) + abs(ay - by) + abs(az - bz)) // 2


def get_neighbors(q, r):
    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def hex_spiral(q, r, radius):
    """Yield planar (q, r) coordinates within radius of the center, center included."""
    for dq in range(-radius, radius + 1):
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            yield q + dq, r + dr

# 1 hex = HEX_RADIUS * sqrt(3) between neighboring centers.
