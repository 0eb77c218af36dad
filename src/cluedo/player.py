"""Players: a character token, a hand of cards and deduction bookkeeping."""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from cluedo.actions import SuggestionAction
from cluedo.deck import Card, CardCategory
from cluedo.tokens import CharacterToken


@dataclass
class Player:
    """Represents a player in the game."""
    id: int  # Seat number, also the turn order (1-based)
    token: CharacterToken
    hand: Set[Card] = field(default_factory=set)
    eliminated: bool = False  # True after a wrong accusation
    # Cards nobody has refuted yet; starts as every card in the game
    not_refuted: Set[Card] = field(default_factory=set)

    @property
    def name(self) -> str:
        return self.token.name

    def eliminate(self) -> None:
        self.eliminated = True

    def set_not_refuted_cards(self, cards: List[Card]) -> None:
        self.not_refuted = set(cards)

    def refute_card(self, card: Card) -> None:
        """Forget a card that was shown in answer to one of our suggestions."""
        self.not_refuted.discard(card)

    def matching_cards(self, suggestion: SuggestionAction) -> List[Card]:
        """Cards in hand that refute the suggestion, checked character, room, weapon."""
        return [
            card
            for card in (suggestion.character, suggestion.room, suggestion.weapon)
            if card in self.hand
        ]

    def candidates(self) -> Dict[CardCategory, List[Card]]:
        """Cards that could still be in the solution as far as this player knows."""
        possible = self.not_refuted - self.hand
        return {
            category: sorted(
                (c for c in possible if c.category == category),
                key=lambda c: c.name,
            )
            for category in CardCategory
        }
