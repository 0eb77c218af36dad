"""
Shortest-path engine for the Cluedo board.

Every non-wall tile is a node and orthogonally adjacent non-wall tiles are
joined by an edge of weight 1. Distances are purely topological: walls block
movement, other tokens do not. Occupancy is enforced by the Board at the
moment a token actually moves.
"""

import heapq
import logging
from typing import Dict, Mapping, Optional, Set

from cluedo.tiles import Location, Tile, WallTile

logger = logging.getLogger(__name__)


def get_adjacent_locations(location: Location) -> list[Location]:
    """Orthogonal neighbours (no diagonal movement)."""
    return [
        Location(location.x, location.y - 1),  # Up
        Location(location.x, location.y + 1),  # Down
        Location(location.x - 1, location.y),  # Left
        Location(location.x + 1, location.y),  # Right
    ]


class Pathfinder:
    """Single-source shortest distances over a tile map."""

    def __init__(self, tiles: Mapping[Location, Tile]):
        self.tiles = tiles

    def is_passable(self, location: Location) -> bool:
        tile = self.tiles.get(location)
        return tile is not None and not isinstance(tile, WallTile)

    def distances(self, start: Location, max_steps: Optional[int] = None) -> Dict[Location, int]:
        """
        Run a priority-driven scan from `start`.

        Args:
            start: Source location
            max_steps: Stop expanding past this distance (None = whole graph)

        Returns:
            Map of every settled location to its distance from `start`.
            Empty if `start` is a wall or off the board.
        """
        if not self.is_passable(start):
            return {}

        settled: Dict[Location, int] = {}
        queue = [(0, start.x, start.y)]
        while queue:
            dist, x, y = heapq.heappop(queue)
            current = Location(x, y)
            if current in settled:
                continue
            settled[current] = dist

            if max_steps is not None and dist >= max_steps:
                continue
            for neighbour in get_adjacent_locations(current):
                if neighbour not in settled and self.is_passable(neighbour):
                    heapq.heappush(queue, (dist + 1, neighbour.x, neighbour.y))

        return settled

    def distance(self, start: Location, goal: Location) -> Optional[int]:
        """
        Number of edges on the shortest path from `start` to `goal`.

        Returns None when no path exists.
        """
        if not self.is_passable(start) or not self.is_passable(goal):
            return None

        settled: Set[Location] = set()
        queue = [(0, start.x, start.y)]
        while queue:
            dist, x, y = heapq.heappop(queue)
            current = Location(x, y)
            if current in settled:
                continue
            if current == goal:
                return dist
            settled.add(current)
            for neighbour in get_adjacent_locations(current):
                if neighbour not in settled and self.is_passable(neighbour):
                    heapq.heappush(queue, (dist + 1, neighbour.x, neighbour.y))

        logger.debug(f"No path from {start} to {goal}")
        return None

    def reachable_within(self, start: Location, max_steps: int) -> Set[Location]:
        """All locations whose shortest distance from `start` is <= max_steps."""
        if max_steps < 0:
            return set()
        return set(self.distances(start, max_steps))
