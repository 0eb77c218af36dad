"""
Tests for Cards and Dealing
"""

import random

import pytest

from cluedo.deck import Card, CardCategory, Deck, Solution
from cluedo.layout import CHARACTERS, ROOMS, WEAPONS
from cluedo.player import Player
from cluedo.board import Board


def make_players(count):
    board = Board()
    return [Player(id=i + 1, token=board.characters[i]) for i in range(count)]


class TestDeck:
    """Test the card universe."""

    def test_one_card_per_name(self):
        """Six characters, six weapons and nine rooms make 21 cards."""
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        assert len(deck.cards) == 21
        assert len(set(deck.cards)) == 21

    def test_categories(self):
        """Cards carry the right category."""
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        assert all(c.category == CardCategory.CHARACTER for c in deck.characters)
        assert all(c.category == CardCategory.WEAPON for c in deck.weapons)
        assert all(c.category == CardCategory.ROOM for c in deck.rooms)

    def test_get_card_is_case_insensitive(self):
        """Names are matched regardless of case."""
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        assert deck.get_card("lead pipe") == Card("Lead Pipe", CardCategory.WEAPON)
        assert deck.get_card("Candelabra") is None

    def test_card_equality_by_value(self):
        """Cards with the same name and category are the same card."""
        assert Card("Rope", CardCategory.WEAPON) == Card("Rope", CardCategory.WEAPON)
        assert Card("Rope", CardCategory.WEAPON) != Card("Rope", CardCategory.ROOM)


class TestSolution:
    """Test the hidden solution."""

    def test_one_card_per_category(self):
        """The solution has a character, a weapon and a room."""
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        solution = deck.generate_solution(random.Random(1))
        assert solution.character.category == CardCategory.CHARACTER
        assert solution.weapon.category == CardCategory.WEAPON
        assert solution.room.category == CardCategory.ROOM
        assert deck.solution is solution

    def test_matches(self):
        """Only the exact three cards match."""
        rope = Card("Rope", CardCategory.WEAPON)
        plum = Card("Professor Plum", CardCategory.CHARACTER)
        hall = Card("Hall", CardCategory.ROOM)
        solution = Solution(plum, rope, hall)
        assert solution.matches(plum, rope, hall)
        assert not solution.matches(plum, rope, Card("Study", CardCategory.ROOM))

    def test_str(self):
        """Reads as a sentence."""
        solution = Solution(
            Card("Mrs. White", CardCategory.CHARACTER),
            Card("Dagger", CardCategory.WEAPON),
            Card("Kitchen", CardCategory.ROOM),
        )
        assert str(solution) == "Mrs. White with the Dagger in the Kitchen"


class TestDeal:
    """Test dealing cards to players."""

    def test_deal_requires_solution(self):
        """Cannot deal before the solution is drawn."""
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        with pytest.raises(RuntimeError):
            deck.deal(make_players(3), random.Random(0))

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("seed", [0, 1, 42])
    def test_every_card_dealt_once(self, count, seed):
        """Hands and solution partition the deck."""
        rng = random.Random(seed)
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        deck.generate_solution(rng)
        players = make_players(count)
        deck.deal(players, rng)

        dealt = [card for p in players for card in p.hand]
        assert len(dealt) == len(set(dealt)) == 18
        assert set(dealt).isdisjoint(deck.solution.cards)
        assert set(dealt) | deck.solution.cards == set(deck.cards)

    def test_hands_are_balanced(self):
        """Hand sizes differ by at most one, earlier seats get the extras."""
        rng = random.Random(7)
        deck = Deck(CHARACTERS, WEAPONS, ROOMS)
        deck.generate_solution(rng)
        players = make_players(4)
        deck.deal(players, rng)
        assert [len(p.hand) for p in players] == [5, 5, 4, 4]

    def test_same_seed_same_deal(self):
        """Dealing is reproducible."""
        hands = []
        for _ in range(2):
            rng = random.Random(99)
            deck = Deck(CHARACTERS, WEAPONS, ROOMS)
            deck.generate_solution(rng)
            players = make_players(3)
            deck.deal(players, rng)
            hands.append([p.hand for p in players])
        assert hands[0] == hands[1]
