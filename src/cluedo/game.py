"""
Game loop for Cluedo.

Turn order follows seat order. On each turn:
- Eliminated players are skipped
- If only one player is still in the game, that player wins immediately
- Roll two dice, then the player either moves (within the roll), takes a
  secret passage, or accuses
- A player who ends the action inside a room (and has neither won nor been
  eliminated) may make a suggestion about that room
- Suggested character and weapon tokens are moved into the room, then the
  other players, starting with the next seat, try to refute it. The first
  player holding a matching card shows one of them to the suggester.

A correct accusation wins; a wrong one eliminates the accuser, who keeps
refuting other players' suggestions.

All randomness comes from one random.Random so a seeded game replays exactly.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from cluedo.actions import (
    AccusationAction,
    MoveAction,
    SecretPassageAction,
    Suggestion,
    SuggestionAction,
)
from cluedo.board import Board, Room
from cluedo.deck import Deck, Solution
from cluedo.interaction import Interaction
from cluedo.player import Player
from cluedo.tiles import Location

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 6


@dataclass
class GameResult:
    winner: Optional[Player]  # None if the turn limit was reached
    solution: Solution
    turns: int


class Game:
    """Main game state and turn loop."""

    def __init__(
        self,
        interaction: Interaction,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
        max_turns: Optional[int] = None,
    ):
        self.interaction = interaction
        self.rng = rng or random.Random()
        self.board = board or Board.standard(self.rng)
        self.deck = Deck(self.board.character_names, self.board.weapon_names, self.board.room_names)
        self.players: List[Player] = []
        self.winner: Optional[Player] = None
        self.turn_number = 0
        self.max_turns = max_turns
        self.suggestion_history: List[Suggestion] = []

    # ========================================================================
    # SETUP
    # ========================================================================

    def setup(self) -> None:
        """Ask for players and characters, then pick the solution and deal."""
        self.interaction.attach(self.board)

        max_players = min(MAX_PLAYERS, len(self.board.characters))
        number_players = self.interaction.request_number_players()
        if not MIN_PLAYERS <= number_players <= max_players:
            raise ValueError(f"Number of players must be between {MIN_PLAYERS} and {max_players}")

        self.players = self.setup_players(number_players)
        self.deck.generate_solution(self.rng)
        self.deck.deal(self.players, self.rng)
        logger.debug(f"Solution (hidden): {self.deck.solution}")

    def setup_players(self, number_players: int) -> List[Player]:
        """Create the players, each with a unique character chosen through the interaction."""
        available = list(self.board.character_names)
        players = []
        for i in range(number_players):
            name = self.interaction.request_character(list(available), i + 1)
            token = self.board.get_character_token(name)
            if token is None or name not in available:
                raise ValueError(f"Character {name!r} is not available")
            available.remove(name)

            player = Player(id=i + 1, token=token)
            player.set_not_refuted_cards(self.deck.cards)
            players.append(player)
        return players

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_player(self, name: str) -> Optional[Player]:
        """Find a player by character name (case-insensitive)."""
        for player in self.players:
            if player.name.lower() == name.lower():
                return player
        return None

    def players_remaining(self) -> int:
        """Number of players who have not been eliminated."""
        return sum(1 for p in self.players if not p.eliminated)

    def roll_dice(self) -> int:
        """Sum of two six-sided dice."""
        return self.rng.randint(1, 6) + self.rng.randint(1, 6)

    # ========================================================================
    # TURN LOOP
    # ========================================================================

    def play(self) -> GameResult:
        """Play until someone wins (or the turn limit is hit)."""
        if not self.players:
            self.setup()

        index = -1
        while self.winner is None:
            if self.max_turns is not None and self.turn_number >= self.max_turns:
                logger.warning(f"Turn limit of {self.max_turns} reached without a winner")
                break
            index = (index + 1) % len(self.players)
            self.play_turn(self.players[index])

        self.interaction.game_over(self.winner, self.deck.solution)
        return GameResult(winner=self.winner, solution=self.deck.solution, turns=self.turn_number)

    def play_turn(self, player: Player) -> None:
        """Run a single player's turn."""
        if player.eliminated:
            return

        # Last player standing wins without taking a turn
        if self.players_remaining() < 2:
            self.winner = player
            logger.info(f"{player.name} is the last player remaining")
            return

        self.turn_number += 1
        roll = self.roll_dice()
        room = self.board.room_of(player.token)
        logger.debug(f"Turn {self.turn_number}: {player.name} rolled {roll}")

        action = self.interaction.request_action(player, roll, room)

        if isinstance(action, MoveAction):
            self.perform_move(player, action.location, roll)
            room = self.board.room_of(player.token)
        elif isinstance(action, SecretPassageAction):
            self.perform_secret_passage(player, action.destination)
            room = self.board.room_of(player.token)
        elif isinstance(action, AccusationAction):
            self.perform_accusation(player, action)

        if room is not None and self.winner is None and not player.eliminated:
            suggestion = self.interaction.request_suggestion(player, room)
            if suggestion is not None:
                self.perform_suggestion(player, suggestion, room)

    # ========================================================================
    # ACTIONS
    # ========================================================================

    def perform_move(self, player: Player, destination: Location, roll: int) -> bool:
        """Move within the dice roll. Returns True if the token moved."""
        distance = self.board.path_length(player.token, destination)
        if distance is None or distance > roll:
            logger.debug(f"{player.name} cannot reach {destination} with a roll of {roll}")
            return False

        moved = self.board.move_character(player.token, destination)
        if moved:
            self.interaction.board_updated(self.board)
        return moved

    def perform_secret_passage(self, player: Player, destination: str) -> bool:
        """Take the secret passage out of the current room."""
        room = self.board.room_of(player.token)
        if room is None or room.secret_passage != destination:
            logger.debug(f"{player.name} has no secret passage to {destination}")
            return False

        self.board.move_token_to_room(player.token, destination)
        self.interaction.board_updated(self.board)
        return True

    def perform_accusation(self, player: Player, accusation: AccusationAction) -> bool:
        """A correct accusation wins the game, a wrong one eliminates the player."""
        if self.deck.solution.matches(accusation.character, accusation.weapon, accusation.room):
            self.winner = player
            logger.info(f"{player.name} solved the murder")
            return True

        player.eliminate()
        self.interaction.player_eliminated(player)
        return False

    def perform_suggestion(self, player: Player, suggestion: SuggestionAction, room: Room) -> Suggestion:
        """
        Bring the suggested tokens into the room and ask the other players,
        in seat order, to refute the suggestion.
        """
        character = suggestion.character.name
        weapon = suggestion.weapon.name

        character_token = self.board.get_character_token(character)
        if character_token is None:
            logger.warning(f"No token for character {character!r}")
        else:
            self.board.move_token_to_room(character_token, room.name)
            self.interaction.character_moved(character, room)

        weapon_token = self.board.get_weapon_token(weapon)
        if weapon_token is None:
            logger.warning(f"No token for weapon {weapon!r}")
        else:
            self.board.move_token_to_room(weapon_token, room.name)
            self.interaction.weapon_moved(weapon, room)

        record = Suggestion(
            suggester=player.name,
            character=character,
            weapon=weapon,
            room=suggestion.room.name,
        )
        self.suggestion_history.append(record)

        seat = self.players.index(player)
        for offset in range(1, len(self.players)):
            other = self.players[(seat + offset) % len(self.players)]
            matches = other.matching_cards(suggestion)
            if matches:
                card = self.rng.choice(matches)
                player.refute_card(card)
                record.refuted_by = other.name
                record.card_shown = card.name
                self.interaction.suggestion_refuted(player, other, card)
                return record

        self.interaction.suggestion_unrefuted(player, record)
        return record
