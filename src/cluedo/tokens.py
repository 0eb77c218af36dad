"""
Movable pieces: character tokens and weapon tokens.

A token's position is a single field holding either OnBoard (standing on a
corridor square) or InRoom (inside a named room). It is never both and never
neither.
"""

from dataclasses import dataclass
from typing import Optional, Union

from cluedo.tiles import Location


@dataclass(frozen=True)
class OnBoard:
    location: Location


@dataclass(frozen=True)
class InRoom:
    room: str
    # Last board square the token stood on (the door it came through).
    # Weapons placed at setup have none.
    location: Optional[Location] = None


Position = Union[OnBoard, InRoom]


@dataclass(eq=False)
class CharacterToken:
    """A suspect's piece. The glyph is used in the text board."""
    name: str
    glyph: str
    position: Position

    @property
    def location(self) -> Optional[Location]:
        return self.position.location


@dataclass(eq=False)
class WeaponToken:
    name: str
    position: Position

    @property
    def location(self) -> Optional[Location]:
        return self.position.location


Token = Union[CharacterToken, WeaponToken]
