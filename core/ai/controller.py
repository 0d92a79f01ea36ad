"""
Purpose: AI/pathfinding queries over the level grid - edge validity, reachability, paths.
Dependencies: core/hex/grid.py, core/hex/utils.py, core/ai/cell.py,
    core/physics/collision.py, core/pathfinding/a_star.py, core/config.py.
Ext Hooks: Feed fringes to the UI for move-range overlays.
Game Loop: Called by AI decision code; never renders.
"""

import logging

from core.ai.cell import AICell
from core.config import DEFAULT_SEARCH_HEIGHT, PROBE_HALF_EXTENTS, PROBE_LIFT
from core.hex.grid import HexGrid, build_area
from core.hex.utils import Vector3, hex_distance
from core.pathfinding.a_star import SearchResult, a_star
from core.physics.collision import CollisionWorld, Orientation, WORLD_UP

logger = logging.getLogger(__name__)


class AIController:
    """
    Owns the pathing grid for one level and answers movement queries on it.

    Adjacency is two conditions: the neighbor is within one ring and the
    height band, and an edge probe between the two cell centers hits nothing
    in the collision world. Every search keeps its own cost/parent maps, so
    the cells themselves are never written to by a query.
    """

    def __init__(self, grid=None, probe=None):
        """
        Args:
            grid (HexGrid): Grid of AICell values, populated by the level loader
            probe: Object with overlaps(center, half_extents, orientation);
                defaults to an empty CollisionWorld (nothing blocks)
        """
        self.path_grid = grid if grid is not None else HexGrid()
        self.probe = probe if probe is not None else CollisionWorld()

    @classmethod
    def from_area(cls, radius, heights=(0,), probe=None):
        """Controller over a filled hexagonal area of AICells."""
        return cls(build_area(radius, heights, factory=AICell), probe)

    @classmethod
    def from_coords(cls, coords, probe=None):
        grid = HexGrid()
        for q, r, h in coords:
            grid.set(q, r, h, AICell(q, r, h))
        return cls(grid, probe)

    def __getitem__(self, coords):
        return self.path_grid[coords]

    def __setitem__(self, coords, cell):
        self.path_grid[coords] = cell

    def _resolve(self, cell_or_coords):
        # Cells are looked up again so one from outside this grid reads as absent
        if isinstance(cell_or_coords, AICell):
            cell_or_coords = cell_or_coords.coords
        q, r, h = cell_or_coords
        return self.path_grid.get(q, r, h)

    def edge_blocked(self, cell, neighbor):
        """Probe the middle third of the edge between two cell centers, one unit up."""
        to_edge = (neighbor.center_pos - cell.center_pos) / 2
        rotation = Orientation.look_rotation(to_edge, WORLD_UP)
        probe_pos = to_edge + cell.center_pos + Vector3(0, PROBE_LIFT, 0)
        return self.probe.overlaps(probe_pos, PROBE_HALF_EXTENTS, rotation)

    def valid_neighbors(self, cell, search_height=DEFAULT_SEARCH_HEIGHT):
        """
        Adjacent cells whose shared edge is not obstructed.

        Slower than a plain ring lookup since every candidate edge is probed
        against the collision world.

        Args:
            cell (AICell): Center cell
            search_height (int): How far up or down to look for neighbors; -1 is unbounded

        Returns:
            list: AICells reachable in one step
        """
        neighbors = self.path_grid.get_radius(cell.q, cell.r, cell.h, 1, search_height)
        valid = []
        for n in neighbors:
            if self.edge_blocked(cell, n):
                logger.debug("Edge %s -> %s blocked", cell.coords, n.coords)
                continue
            valid.append(n)
        return valid

    def fringes(self, center, steps):
        """
        Cells grouped by the exact number of steps needed to reach them.

        Index 0 holds the center, index k the cells first reached on step k.
        An unpopulated center gives an empty list.
        """
        start = self._resolve(center)
        if start is None:
            return []
        visited = {start}
        tiers = [[start]]
        for _ in range(steps):
            tier = []
            for cell in tiers[-1]:
                for n in self.valid_neighbors(cell):
                    if n not in visited:
                        visited.add(n)
                        tier.append(n)
            tiers.append(tier)
        return tiers

    def reachable_in_steps(self, center, steps):
        """All cells reachable from center in at most `steps` unblocked moves, center included."""
        return {cell for tier in self.fringes(center, steps) for cell in tier}

    def dist_between(self, cell1, cell2):
        """Cells needed to get from cell1 to cell2. Height is not counted."""
        return hex_distance(cell1.coords, cell2.coords)

    def search(self, start, end):
        """Run a path search and keep its per-search costs; see path_between."""
        c_start = self._resolve(start)
        c_end = self._resolve(end)
        if c_start is None or c_end is None:
            logger.debug("Path search skipped, unpopulated endpoint: %s -> %s", start, end)
            return SearchResult(None)

        def neighbors(coords):
            return [n.coords for n in self.valid_neighbors(self.path_grid[coords])]

        return a_star(c_start.coords, c_end.coords, neighbors, hex_distance)

    def path_between(self, start, end):
        """
        Shortest path between two cells.

        Args:
            start, end: AICells or (q, r, h) coordinates

        Returns:
            list: (q, r, h) tuples ordered end -> start, including both ends;
                empty when start == end; None if either end is missing or no
                path exists
        """
        return self.search(start, end).path
