"""
Purpose: Uniform-cost (A*-shaped) search over hex coordinates with per-search state.
Dependencies: heapq, itertools, logging.
Ext Hooks: Add a real heuristic term; max step limits for combat moves.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Coord = Tuple[int, int, int]


@dataclass
class SearchResult:
    """
    Outcome of one search. g_score and came_from belong to this search only,
    so overlapping searches never see each other's costs.
    """
    path: Optional[List[Coord]]
    g_score: Dict[Coord, int] = field(default_factory=dict)
    came_from: Dict[Coord, Coord] = field(default_factory=dict)
    expanded: int = 0

    @property
    def found(self):
        return self.path is not None


def a_star(start: Coord, goal: Coord,
           neighbors: Callable[[Coord], Iterable[Coord]],
           distance: Callable[[Coord, Coord], int]) -> SearchResult:
    """
    Search from start to goal, always expanding the lowest-g open coordinate.

    The start's g is seeded with distance(start, goal) rather than 0 and is
    never corrected, so every g in the result is offset by that constant.
    Among equal-g coordinates the expansion order is unspecified.

    Args:
        start, goal: Coordinates known to exist in the level
        neighbors: Coordinate -> reachable adjacent coordinates
        distance: Step cost between two adjacent coordinates

    Returns:
        SearchResult: path is end->start (see reconstruct_path) or None
    """
    g_score = {start: distance(start, goal)}
    came_from = {}
    tie = itertools.count()
    open_heap = [(g_score[start], next(tie), start)]
    open_set = {start}
    closed = set()
    expanded = 0

    while open_heap:
        g, _, current = heapq.heappop(open_heap)
        # Stale entry left behind by a relaxation
        if current in closed or g > g_score[current]:
            continue

        if current == goal:
            path = reconstruct_path(came_from, current, start)
            logger.debug("Path %s -> %s found after %d expansions: %s", start, goal, expanded, path)
            return SearchResult(path, g_score, came_from, expanded)

        open_set.discard(current)
        closed.add(current)
        expanded += 1

        for neighbor in neighbors(current):
            if neighbor in closed:
                continue
            tentative_g = g_score[current] + distance(current, neighbor)
            if neighbor not in open_set:
                g_score[neighbor] = tentative_g
                came_from[neighbor] = current
                open_set.add(neighbor)
                heapq.heappush(open_heap, (tentative_g, next(tie), neighbor))
            elif tentative_g < g_score[neighbor]:
                g_score[neighbor] = tentative_g
                came_from[neighbor] = current
                heapq.heappush(open_heap, (tentative_g, next(tie), neighbor))

    logger.debug("No path %s -> %s after %d expansions", start, goal, expanded)
    return SearchResult(None, g_score, came_from, expanded)


def reconstruct_path(came_from, end, start):
    """
    Walk came_from back from end, then append start.

    The list runs end -> start; reverse it for travel order. A path from a
    coordinate to itself is empty, not [start].
    """
    path = []
    if end == start:
        return path
    current = end
    while current != start:
        path.append(current)
        current = came_from[current]
    path.append(start)
    return path
