"""
Purpose: Pathing cell - spatial identity of one grid coordinate.
Dependencies: core/hex/utils.py (hex_to_world), pygame.math (Vector3).
Ext Hooks: Add cover/visibility flags for AI awareness.
"""

from dataclasses import dataclass, field

from core.hex.utils import Vector3, hex_to_world


@dataclass(eq=False)
class AICell:
    """
    One walkable grid cell.

    Identity is the axial coordinate; two cells at the same (q, r, h) are
    equal and hash alike. center_pos is computed once at creation. Search
    costs and parents live in each search's own maps, not on the cell.
    """
    q: int
    r: int
    h: int
    center_pos: Vector3 = field(init=False, repr=False)

    def __post_init__(self):
        self.center_pos = hex_to_world(self.q, self.r, self.h)

    @property
    def coords(self):
        return (self.q, self.r, self.h)

    def __eq__(self, other):
        if not isinstance(other, AICell):
            return NotImplemented
        return self.coords == other.coords

    def __hash__(self):
        return hash(self.coords)
