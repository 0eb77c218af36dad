"""
Cards, the hidden solution and dealing.

One card exists per character, weapon and room. One card of each category is
withheld as the solution, the rest are shuffled and dealt round-robin so that
every non-solution card ends up in exactly one hand.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Sequence

if TYPE_CHECKING:
    from cluedo.player import Player

logger = logging.getLogger(__name__)


class CardCategory(Enum):
    CHARACTER = "character"
    WEAPON = "weapon"
    ROOM = "room"


@dataclass(frozen=True)
class Card:
    """A Cluedo card. Cards with the same name and category are equal."""
    name: str
    category: CardCategory

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Solution:
    """The murder: one character, one weapon, one room."""
    character: Card
    weapon: Card
    room: Card

    @property
    def cards(self) -> FrozenSet[Card]:
        return frozenset((self.character, self.weapon, self.room))

    def matches(self, character: Card, weapon: Card, room: Card) -> bool:
        """True if all three accused cards are in the solution."""
        return {character, weapon, room} <= self.cards

    def __str__(self) -> str:
        return f"{self.character} with the {self.weapon} in the {self.room}"


class Deck:
    """The full card universe, the solution and the deal."""

    def __init__(self, characters: Sequence[str], weapons: Sequence[str], rooms: Sequence[str]):
        self.characters = [Card(name, CardCategory.CHARACTER) for name in characters]
        self.weapons = [Card(name, CardCategory.WEAPON) for name in weapons]
        self.rooms = [Card(name, CardCategory.ROOM) for name in rooms]
        self.solution: Optional[Solution] = None

    @property
    def cards(self) -> List[Card]:
        return self.characters + self.weapons + self.rooms

    def get_card(self, name: str) -> Optional[Card]:
        """Look up a card by name (case-insensitive)."""
        for card in self.cards:
            if card.name.lower() == name.lower():
                return card
        return None

    def generate_solution(self, rng: random.Random) -> Solution:
        """Pick one card of each category as the hidden solution."""
        self.solution = Solution(
            character=rng.choice(self.characters),
            weapon=rng.choice(self.weapons),
            room=rng.choice(self.rooms),
        )
        return self.solution

    def deal(self, players: Sequence["Player"], rng: random.Random) -> None:
        """Shuffle every non-solution card and deal them one at a time around the table."""
        if self.solution is None:
            raise RuntimeError("Cannot deal before the solution has been generated")

        remaining = [c for c in self.cards if c not in self.solution.cards]
        rng.shuffle(remaining)
        for i, card in enumerate(remaining):
            players[i % len(players)].hand.add(card)
        logger.debug(f"Dealt {len(remaining)} cards to {len(players)} players")
