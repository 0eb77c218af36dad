"""
Board cells for the Cluedo grid.

A tile is exactly one of:
- WallTile: impassable (void squares and room interiors)
- PathTile: walkable corridor square (start squares included)
- DoorTile: room entrance, walkable, points at its room by name
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, order=True)
class Location:
    """An (x, y) coordinate on the board grid."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class WallTile:
    location: Location


@dataclass(frozen=True)
class PathTile:
    location: Location


@dataclass(frozen=True)
class DoorTile:
    location: Location
    room: str  # Name of the room this door opens into


Tile = Union[WallTile, PathTile, DoorTile]
