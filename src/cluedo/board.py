"""
Board model for the Cluedo game.

The Board owns the tile graph (a map of Location -> Tile), the room registry
and the positions of every token. It is the only place token positions are
changed, and it enforces the movement rules:

- A character cannot move onto a wall or onto a square another character
  stands on. Such moves are ignored, nothing changes.
- Stepping onto a door puts the character inside that door's room.
- Tokens can be placed directly into a room (suggestions, secret passages)
  without any distance check.

Rooms and doors refer to each other by room name rather than by object.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from cluedo.layout import (
    CHARACTER_GLYPHS,
    ROOM_CODES,
    SECRET_PASSAGES,
    STANDARD_LAYOUT,
    START_CODES,
    WEAPONS,
)
from cluedo.pathfinder import Pathfinder, get_adjacent_locations
from cluedo.tiles import DoorTile, Location, PathTile, Tile, WallTile
from cluedo.tokens import CharacterToken, InRoom, OnBoard, Token, WeaponToken

logger = logging.getLogger(__name__)

WALL_CHAR = '#'
PATH_CHAR = '.'
DOOR_CHAR = '+'

# Text board: one header row, then each grid row is prefixed by a 4 character
# label and every cell takes 2 characters.
ROW_OFFSET = 1
COLUMN_OFFSET = 4
CELL_WIDTH = 2


class BoardLayoutError(ValueError):
    """Raised when a board layout cannot be turned into a tile graph."""


@dataclass
class Room:
    """A named room with its entrance doors and current occupants."""
    name: str
    entrances: List[Location] = field(default_factory=list)
    occupants: Set[str] = field(default_factory=set)  # Token names
    secret_passage: Optional[str] = None  # Name of the linked room

    def add_token(self, token_name: str) -> None:
        self.occupants.add(token_name)

    def remove_token(self, token_name: str) -> None:
        self.occupants.discard(token_name)

    def summary(self) -> str:
        """e.g. 'Kitchen: Dagger, Miss Scarlett' (empty string if nobody is here)."""
        if not self.occupants:
            return ""
        return f"{self.name}: {', '.join(sorted(self.occupants))}"


def parse_layout(
    layout: Sequence[str],
    room_codes: Mapping[str, str],
    start_codes: Mapping[str, str],
) -> Tuple[Dict[Location, Tile], Dict[str, Room], Dict[str, Location], List[str]]:
    """
    Turn a string layout into the tile graph.

    Returns:
        (tiles, rooms, start locations by character name, text board template)
    """
    if not layout:
        raise BoardLayoutError("Layout has no rows")
    width = len(layout[0])
    for y, row in enumerate(layout):
        if len(row) != width:
            raise BoardLayoutError(f"Row {y} has width {len(row)}, expected {width}")

    tiles: Dict[Location, Tile] = {}
    starts: Dict[str, Location] = {}
    door_locations: List[Location] = []
    codes_seen: Set[str] = set()

    for y, row in enumerate(layout):
        for x, char in enumerate(row):
            loc = Location(x, y)
            if char == WALL_CHAR:
                tiles[loc] = WallTile(loc)
            elif char == PATH_CHAR:
                tiles[loc] = PathTile(loc)
            elif char == DOOR_CHAR:
                door_locations.append(loc)
            elif char in start_codes:
                tiles[loc] = PathTile(loc)
                starts[start_codes[char]] = loc
            elif char in room_codes:
                tiles[loc] = WallTile(loc)
                codes_seen.add(char)
            else:
                raise BoardLayoutError(f"Unknown layout character {char!r} at {loc}")

    rooms = {
        name: Room(name)
        for code, name in room_codes.items()
        if code in codes_seen
    }

    # Each door opens into the one room interior it touches
    for loc in door_locations:
        touching = set()
        for neighbour in get_adjacent_locations(loc):
            if 0 <= neighbour.y < len(layout) and 0 <= neighbour.x < width:
                char = layout[neighbour.y][neighbour.x]
                if char in room_codes:
                    touching.add(room_codes[char])
        if len(touching) != 1:
            raise BoardLayoutError(
                f"Door at {loc} must touch exactly one room, touches {sorted(touching)}"
            )
        room_name = touching.pop()
        tiles[loc] = DoorTile(loc, room_name)
        rooms[room_name].entrances.append(loc)

    header = " " * COLUMN_OFFSET + "".join(f"{x % 10} " for x in range(width))
    template = [header]
    for y, row in enumerate(layout):
        cells = "".join(
            (PATH_CHAR if char in start_codes else char) + " " for char in row
        )
        template.append(f"{y:2d}| {cells}")

    return tiles, rooms, starts, template


class Board:
    """Tile graph, rooms and token positions."""

    def __init__(
        self,
        layout: Sequence[str] = STANDARD_LAYOUT,
        room_codes: Mapping[str, str] = ROOM_CODES,
        start_codes: Mapping[str, str] = START_CODES,
        glyphs: Mapping[str, str] = CHARACTER_GLYPHS,
        secret_passages: Mapping[str, str] = SECRET_PASSAGES,
    ):
        self.tiles, self.rooms, starts, self.board_strings = parse_layout(
            layout, room_codes, start_codes
        )
        self.width = len(layout[0])
        self.height = len(layout)
        self.pathfinder = Pathfinder(self.tiles)

        for source, destination in secret_passages.items():
            if source not in self.rooms or destination not in self.rooms:
                raise BoardLayoutError(
                    f"Secret passage {source} -> {destination} names a room not on the board"
                )
            self.rooms[source].secret_passage = destination

        # Characters keep the order of the start codes
        self.characters: List[CharacterToken] = [
            CharacterToken(name, glyphs.get(name, name[0].upper()), OnBoard(starts[name]))
            for name in start_codes.values()
            if name in starts
        ]
        self.weapons: List[WeaponToken] = []

    @classmethod
    def standard(cls, rng: Optional[random.Random] = None) -> "Board":
        """The standard board with the six weapons dealt into random rooms."""
        board = cls()
        board.place_weapons(WEAPONS, rng or random.Random())
        return board

    # ========================================================================
    # SETUP
    # ========================================================================

    def place_weapons(self, weapon_names: Sequence[str], rng: random.Random) -> None:
        """Put each weapon into a different, randomly chosen room."""
        room_names = list(self.rooms)
        if len(weapon_names) > len(room_names):
            raise ValueError(
                f"Cannot place {len(weapon_names)} weapons in {len(room_names)} rooms"
            )
        chosen_rooms = rng.sample(room_names, len(weapon_names))
        for weapon_name, room_name in zip(weapon_names, chosen_rooms):
            token = WeaponToken(weapon_name, InRoom(room_name))
            self.weapons.append(token)
            self.rooms[room_name].add_token(weapon_name)
            logger.debug(f"Placed {weapon_name} in the {room_name}")

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def character_names(self) -> List[str]:
        return [c.name for c in self.characters]

    @property
    def weapon_names(self) -> List[str]:
        return [w.name for w in self.weapons]

    @property
    def room_names(self) -> List[str]:
        return list(self.rooms)

    def get_tile(self, loc: Location) -> Optional[Tile]:
        return self.tiles.get(loc)

    def get_room(self, name: str) -> Optional[Room]:
        return self.rooms.get(name)

    def get_character_token(self, name: str) -> Optional[CharacterToken]:
        for token in self.characters:
            if token.name == name:
                return token
        return None

    def get_weapon_token(self, name: str) -> Optional[WeaponToken]:
        for token in self.weapons:
            if token.name == name:
                return token
        return None

    def room_of(self, token: Token) -> Optional[Room]:
        """The room the token is in, None if it stands on the board."""
        if isinstance(token.position, InRoom):
            return self.rooms[token.position.room]
        return None

    def is_occupied_by_character(self, loc: Location, exclude: Optional[CharacterToken] = None) -> bool:
        """True if a character token stands on `loc`. Tokens inside rooms never count."""
        for token in self.characters:
            if token is exclude:
                continue
            if isinstance(token.position, OnBoard) and token.position.location == loc:
                return True
        return False

    def _sources(self, token: Token) -> List[Location]:
        """Where distances are measured from: the token's square, or every door of its room."""
        position = token.position
        if isinstance(position, OnBoard):
            return [position.location]
        if isinstance(position, InRoom):
            return list(self.rooms[position.room].entrances)
        raise TypeError(f"Token {token.name} has no valid position: {position!r}")

    def path_length(self, token: Token, destination: Location) -> Optional[int]:
        """
        Shortest number of steps from the token to `destination`, ignoring
        other tokens. From inside a room this is the shortest distance from
        any of its doors.

        Returns None if the destination cannot be reached.
        """
        lengths = [
            length
            for length in (self.pathfinder.distance(source, destination) for source in self._sources(token))
            if length is not None
        ]
        return min(lengths) if lengths else None

    def reachable_tiles(self, token: Token, steps: int) -> Set[Location]:
        """Every square within `steps` of the token (occupancy is not considered)."""
        reachable: Set[Location] = set()
        for source in self._sources(token):
            reachable |= self.pathfinder.reachable_within(source, steps)
        return reachable

    # ========================================================================
    # MOVEMENT
    # ========================================================================

    def _leave_room(self, token: Token) -> None:
        if isinstance(token.position, InRoom):
            self.rooms[token.position.room].remove_token(token.name)

    def move_character(self, token: CharacterToken, destination: Location) -> bool:
        """
        Move a character to `destination`. Walls and squares held by another
        character are refused and nothing changes.

        Returns True if the token moved.
        """
        tile = self.get_tile(destination)
        if tile is None or isinstance(tile, WallTile):
            logger.debug(f"{token.name} cannot move onto wall at {destination}")
            return False
        if self.is_occupied_by_character(destination, exclude=token):
            logger.debug(f"{token.name} cannot move onto occupied square {destination}")
            return False

        self._leave_room(token)
        if isinstance(tile, PathTile):
            token.position = OnBoard(destination)
        elif isinstance(tile, DoorTile):
            token.position = InRoom(tile.room, destination)
            self.rooms[tile.room].add_token(token.name)
        return True

    def move_token_to_room(self, token: Token, room_name: str) -> None:
        """Place a token straight into a room, regardless of distance or occupancy."""
        room = self.rooms[room_name]
        self._leave_room(token)
        token.position = InRoom(room_name, token.location)
        room.add_token(token.name)

    # ========================================================================
    # TEXT OUTPUT
    # ========================================================================

    def room_info(self) -> str:
        """One line per occupied room listing its tokens."""
        return "\n".join(
            room.summary() for room in self.rooms.values() if room.occupants
        )

    def render(self) -> List[str]:
        """The text board rows with each on-board character glyph spliced in."""
        rows = list(self.board_strings)
        for token in self.characters:
            if not isinstance(token.position, OnBoard):
                continue
            loc = token.position.location
            row_index = loc.y + ROW_OFFSET
            column = loc.x * CELL_WIDTH + COLUMN_OFFSET
            row = rows[row_index]
            rows[row_index] = row[:column] + token.glyph + row[column + 1:]
        return rows

    def __str__(self) -> str:
        return "".join(row + "\n" for row in self.render())
