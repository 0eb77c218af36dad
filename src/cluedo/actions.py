"""
Actions a player can choose on their turn.

A turn is one of: move to a square, take a secret passage, or accuse.
A suggestion is requested separately after the action, when the player is in
a room.
"""

from dataclasses import dataclass
from typing import Optional, Union

from cluedo.deck import Card
from cluedo.tiles import Location


@dataclass(frozen=True)
class MoveAction:
    location: Location


@dataclass(frozen=True)
class SecretPassageAction:
    destination: str  # Room name


@dataclass(frozen=True)
class AccusationAction:
    character: Card
    weapon: Card
    room: Card


@dataclass(frozen=True)
class SuggestionAction:
    character: Card
    weapon: Card
    room: Card


Action = Union[MoveAction, SecretPassageAction, AccusationAction]


@dataclass
class Suggestion:
    """Public record of a suggestion and how it was answered."""
    suggester: str
    character: str
    weapon: str
    room: str
    refuted_by: Optional[str] = None
    card_shown: Optional[str] = None
