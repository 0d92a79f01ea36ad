"""
Purpose: Oriented-box overlap queries against level obstacles (edge probes).
Dependencies: core/hex/utils.py (pygame Vector3), dataclasses, logging.
Ext Hooks: Add capsules/meshes; layer masks so probes ignore the player.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from core.hex.utils import Vector3

logger = logging.getLogger(__name__)

WORLD_UP = Vector3(0, 1, 0)
EPSILON = 1e-9


def _vec(value):
    return value if isinstance(value, Vector3) else Vector3(value[0], value[1], value[2])


@dataclass
class Orientation:
    """Orthonormal frame: local x = right, y = up, z = forward."""
    right: Vector3 = field(default_factory=lambda: Vector3(1, 0, 0))
    up: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    forward: Vector3 = field(default_factory=lambda: Vector3(0, 0, 1))

    @classmethod
    def look_rotation(cls, forward, up=WORLD_UP):
        """
        Frame whose forward axis points along `forward`, rolled so its up axis
        is as close to `up` as possible.

        A zero forward gives the identity frame; a forward parallel to `up`
        keeps the forward and picks any perpendicular right axis.
        """
        forward = _vec(forward)
        up = _vec(up)
        if forward.length_squared() < EPSILON:
            return cls()
        forward = forward.normalize()
        right = up.cross(forward)
        if right.length_squared() < EPSILON:
            right = Vector3(1, 0, 0).cross(forward)
            if right.length_squared() < EPSILON:
                right = Vector3(0, 0, 1).cross(forward)
        right = right.normalize()
        return cls(right=right, up=forward.cross(right), forward=forward)

    def axes(self):
        return self.right, self.up, self.forward


@dataclass
class OrientedBox:
    center: Vector3
    half_extents: tuple
    orientation: Orientation = field(default_factory=Orientation)

    def __post_init__(self):
        self.center = _vec(self.center)
        self.half_extents = tuple(float(e) for e in self.half_extents)

    def projected_radius(self, axis):
        return sum(e * abs(a.dot(axis)) for e, a in zip(self.half_extents, self.orientation.axes()))

    def overlaps(self, other):
        """Separating axis test; touching boxes count as overlapping."""
        offset = other.center - self.center
        a_axes = self.orientation.axes()
        b_axes = other.orientation.axes()
        candidates = list(a_axes) + list(b_axes) + [a.cross(b) for a in a_axes for b in b_axes]
        for axis in candidates:
            # Parallel edge pairs give degenerate cross products
            if axis.length_squared() < EPSILON:
                continue
            distance = abs(offset.dot(axis))
            if distance > self.projected_radius(axis) + other.projected_radius(axis):
                return False
        return True


class CollisionWorld:
    """
    Static level geometry made of oriented boxes.

    Anything with the same overlaps(center, half_extents, orientation) method
    can stand in for this as the edge probe.
    """

    def __init__(self, obstacles: List[OrientedBox] = None):
        self.obstacles = list(obstacles or [])

    def add_box(self, center, half_extents, orientation=None):
        box = OrientedBox(center, half_extents, orientation or Orientation())
        self.obstacles.append(box)
        return box

    def add_wall(self, start, end, height=2.0, thickness=0.2):
        """Thin upright box running from start to end, resting on their average height."""
        start, end = _vec(start), _vec(end)
        run = end - start
        run.y = 0
        base = (start + end) / 2
        center = Vector3(base.x, base.y + height / 2, base.z)
        orientation = Orientation.look_rotation(run)
        return self.add_box(center, (thickness / 2, height / 2, run.length() / 2), orientation)

    def overlaps(self, center, half_extents, orientation=None) -> bool:
        probe = OrientedBox(center, half_extents, orientation or Orientation())
        for obstacle in self.obstacles:
            if probe.overlaps(obstacle):
                logger.debug("Probe at %s hit obstacle at %s", tuple(probe.center), tuple(obstacle.center))
                return True
        return False
