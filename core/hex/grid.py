"""
Purpose: Sparse 3D hex grid keyed by (q, r, h), with ring/height-band queries.
Dependencies: core/hex/utils.py (hex_spiral, hex_distance).
Ext Hooks: Procedural levels from scenarios via build_area factories.
"""

from core.hex.utils import hex_spiral, hex_distance


class HexGrid:
    """
    Stores one value per populated (column, row, height) coordinate.

    Lookups of unpopulated coordinates return None rather than raising, so
    callers treat a hole in the level exactly like "no cell". Values are only
    ever inserted or overwritten.
    """

    def __init__(self):
        self.cells = {}  # (q, r, h): value
        self._columns = {}  # (q, r): set of populated heights

    def get(self, q, r, h):
        return self.cells.get((q, r, h))

    def set(self, q, r, h, value):
        self.cells[(q, r, h)] = value
        self._columns.setdefault((q, r), set()).add(h)

    def __getitem__(self, coords):
        q, r, h = coords
        return self.get(q, r, h)

    def __setitem__(self, coords, value):
        q, r, h = coords
        self.set(q, r, h, value)

    def __contains__(self, coords):
        return tuple(coords) in self.cells

    def __len__(self):
        return len(self.cells)

    def coords(self):
        return list(self.cells)

    def items(self):
        return self.cells.items()

    def get_radius(self, q, r, h, ring_distance, height_band=-1):
        """
        Return populated cells 1..ring_distance planar steps away from (q, r).

        Args:
            q, r, h (int): Center coordinate (need not be populated)
            ring_distance (int): Maximum planar hex distance
            height_band (int): Max |dh| from h; -1 means any height

        Returns:
            list: Cell values, in no particular order
        """
        found = []
        for cq, cr in hex_spiral(q, r, ring_distance):
            if hex_distance((q, r), (cq, cr)) == 0:
                continue
            for ch in self._columns.get((cq, cr), ()):
                if height_band != -1 and abs(ch - h) > height_band:
                    continue
                found.append(self.cells[(cq, cr, ch)])
        return found


def build_area(radius, heights=(0,), factory=None, center=(0, 0)):
    """
    Populate a hexagonal area of the given planar radius on each height layer.

    Args:
        radius (int): Planar radius around center; 0 gives a single column
        heights (iterable): Height layers to fill
        factory (callable): (q, r, h) -> value; defaults to the coordinate tuple
        center (tuple): Planar (q, r) center of the area

    Returns:
        HexGrid: The populated grid
    """
    grid = HexGrid()
    for q, r in hex_spiral(center[0], center[1], radius):
        for h in heights:
            grid.set(q, r, h, factory(q, r, h) if factory else (q, r, h))
    return grid
