"""Shared fixtures: a small two-room board and a scripted interaction."""

import os
import random
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

# Set environment variable before importing crewai
os.environ["CREWAI_TRACING_ENABLED"] = "false"

from cluedo.board import Board
from cluedo.interaction import Interaction


# Columns 0-9, rows 0-4. The Attic fills row 0 and has three doors on row 1,
# the Cellar sits bottom left with one door at (4, 4).
SMALL_LAYOUT = [
    "aaaaaaaaaa",
    "...+.+.+..",
    "1........2",
    "##.###.###",
    "cccc+.....",
]
SMALL_ROOM_CODES = {'a': "Attic", 'c': "Cellar"}
SMALL_START_CODES = {'1': "Alice", '2': "Bob"}
SMALL_GLYPHS = {"Alice": 'A', "Bob": 'B'}
SMALL_PASSAGES = {"Attic": "Cellar", "Cellar": "Attic"}
SMALL_WEAPONS = ["Rope", "Spanner"]


def make_small_board(seed=0, weapons=True):
    board = Board(
        layout=SMALL_LAYOUT,
        room_codes=SMALL_ROOM_CODES,
        start_codes=SMALL_START_CODES,
        glyphs=SMALL_GLYPHS,
        secret_passages=SMALL_PASSAGES,
    )
    if weapons:
        board.place_weapons(SMALL_WEAPONS, random.Random(seed))
    return board


class ScriptedInteraction(Interaction):
    """
    Plays back a fixed list of decisions and records every call.

    Actions and suggestions may be callables taking (player, roll, room) or
    (player, room) so a script can depend on the dealt solution.
    """

    def __init__(self, number_players=2, characters=None, actions=None, suggestions=None):
        self.number_players = number_players
        self.characters = list(characters or [])
        self.actions = list(actions or [])
        self.suggestions = list(suggestions or [])
        self.calls = []

    def request_number_players(self):
        self.calls.append(("number_players",))
        return self.number_players

    def request_character(self, available, ordinal):
        self.calls.append(("character", ordinal))
        return self.characters.pop(0) if self.characters else available[0]

    def request_action(self, player, roll, room):
        self.calls.append(("action", player.name, roll))
        action = self.actions.pop(0) if self.actions else None
        return action(player, roll, room) if callable(action) else action

    def request_suggestion(self, player, room):
        self.calls.append(("suggestion", player.name, room.name))
        suggestion = self.suggestions.pop(0) if self.suggestions else None
        return suggestion(player, room) if callable(suggestion) else suggestion

    def board_updated(self, board):
        self.calls.append(("board_updated",))

    def player_eliminated(self, player):
        self.calls.append(("eliminated", player.name))

    def suggestion_refuted(self, suggester, refuter, card):
        self.calls.append(("refuted", suggester.name, refuter.name, card.name))

    def suggestion_unrefuted(self, suggester, suggestion):
        self.calls.append(("unrefuted", suggester.name))

    def game_over(self, winner, solution):
        self.calls.append(("game_over", winner.name if winner else None))

    def count(self, kind):
        return sum(1 for call in self.calls if call[0] == kind)


@pytest.fixture
def small_board():
    return make_small_board()
