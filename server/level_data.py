"""
Purpose: Turn JSON level payloads into an AIController (grid + obstacles).
Dependencies: core/ai/controller.py, core/physics/collision.py.
Ext Hooks: Named level presets; cache controllers per level id.
Server Only: Request parsing.
"""

from core.ai.controller import AIController
from core.physics.collision import CollisionWorld, Orientation


class LevelDataError(ValueError):
    """Raised when a request's level or coordinates cannot be parsed."""


def parse_int(value, name):
    """JSON integers only; floats and strings are rejected rather than truncated."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelDataError(f"{name} must contain integers")
    return value


def parse_number(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LevelDataError(f"{name} must be a number")
    return float(value)


def parse_coords(value, name="coords"):
    """[q, r, h] -> (q, r, h); h defaults to 0 when only [q, r] is given."""
    if not isinstance(value, (list, tuple)) or len(value) not in (2, 3):
        raise LevelDataError(f"{name} must be [q, r] or [q, r, h]")
    coords = tuple(parse_int(v, name) for v in value)
    return coords if len(coords) == 3 else coords + (0,)


def parse_vector(value, name):
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise LevelDataError(f"{name} must be [x, y, z]")
    return tuple(parse_number(v, name) for v in value)


def build_world(obstacles):
    world = CollisionWorld()
    for i, info in enumerate(obstacles or []):
        if not isinstance(info, dict):
            raise LevelDataError(f"obstacles[{i}] must be an object")
        if 'start' in info and 'end' in info:
            world.add_wall(parse_vector(info['start'], f"obstacles[{i}].start"),
                           parse_vector(info['end'], f"obstacles[{i}].end"),
                           height=parse_number(info.get('height', 2.0), f"obstacles[{i}].height"),
                           thickness=parse_number(info.get('thickness', 0.2), f"obstacles[{i}].thickness"))
            continue
        if 'center' not in info or 'half_extents' not in info:
            raise LevelDataError(f"obstacles[{i}] needs center and half_extents, or start and end")
        orientation = None
        if 'forward' in info:
            orientation = Orientation.look_rotation(parse_vector(info['forward'], f"obstacles[{i}].forward"))
        world.add_box(parse_vector(info['center'], f"obstacles[{i}].center"),
                      parse_vector(info['half_extents'], f"obstacles[{i}].half_extents"),
                      orientation)
    return world


def build_controller(level):
    """
    Build a controller from {"cells": [[q, r, h], ...]} or
    {"radius": n, "heights": [...]}, plus optional "obstacles".
    """
    if not isinstance(level, dict):
        raise LevelDataError("level must be an object")
    world = build_world(level.get('obstacles'))
    if 'cells' in level:
        if not isinstance(level['cells'], list):
            raise LevelDataError("level.cells must be a list")
        coords = [parse_coords(c, f"cells[{i}]") for i, c in enumerate(level['cells'])]
        return AIController.from_coords(coords, probe=world)
    if 'radius' in level:
        radius = parse_int(level['radius'], "level.radius")
        heights = level.get('heights', [0])
        if not isinstance(heights, list):
            raise LevelDataError("level.heights must be a list")
        heights = [parse_int(h, "level.heights") for h in heights]
        if radius < 0:
            raise LevelDataError("level.radius must be >= 0")
        return AIController.from_area(radius, heights, probe=world)
    raise LevelDataError("level needs cells or radius")
