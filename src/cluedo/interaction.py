"""
Interaction boundary between the game engine and whoever plays it.

The Game asks an Interaction for decisions (number of players, characters,
actions, suggestions) and tells it what happened. Calls block until the
Interaction answers.

AutomatedInteraction is a computer player for every seat. It keeps no secrets
of its own beyond what each Player already tracks, walks toward rooms it still
suspects and accuses once only one card per category is left.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional

from cluedo.actions import (
    AccusationAction,
    Action,
    MoveAction,
    SecretPassageAction,
    Suggestion,
    SuggestionAction,
)
from cluedo.deck import Card, CardCategory, Solution
from cluedo.player import Player
from cluedo.tiles import DoorTile, Location

if TYPE_CHECKING:
    from cluedo.board import Board, Room

logger = logging.getLogger(__name__)


class Interaction(ABC):
    """Decisions and notifications requested by the game loop."""

    board: Optional["Board"] = None

    def attach(self, board: "Board") -> None:
        """Called once at setup so the interaction can query the board."""
        self.board = board

    # ==================== REQUESTS ====================

    @abstractmethod
    def request_number_players(self) -> int:
        ...

    @abstractmethod
    def request_character(self, available: List[str], ordinal: int) -> str:
        """Pick a character for player number `ordinal` from `available`."""

    @abstractmethod
    def request_action(self, player: Player, roll: int, room: Optional["Room"]) -> Optional[Action]:
        """The action for this turn, or None to stay put."""

    @abstractmethod
    def request_suggestion(self, player: Player, room: "Room") -> Optional[SuggestionAction]:
        """A suggestion about `room`, or None to skip it."""

    # ==================== NOTIFICATIONS ====================

    def board_updated(self, board: "Board") -> None:
        logger.debug(f"Board updated:\n{board}")

    def player_eliminated(self, player: Player) -> None:
        logger.info(f"{player.name} made a wrong accusation and is eliminated")

    def character_moved(self, character: str, room: "Room") -> None:
        logger.info(f"{character} was moved to the {room.name}")

    def weapon_moved(self, weapon: str, room: "Room") -> None:
        logger.info(f"The {weapon} was moved to the {room.name}")

    def suggestion_refuted(self, suggester: Player, refuter: Player, card: Card) -> None:
        logger.info(f"{refuter.name} refuted {suggester.name}'s suggestion")
        logger.debug(f"{refuter.name} showed {suggester.name} the {card}")

    def suggestion_unrefuted(self, suggester: Player, suggestion: Suggestion) -> None:
        logger.info(f"No one could refute {suggester.name}'s suggestion")

    def game_over(self, winner: Optional[Player], solution: Solution) -> None:
        if winner is None:
            logger.info(f"Game ended without a winner. Solution: {solution}")
        else:
            logger.info(f"{winner.name} wins! Solution: {solution}")


class AutomatedInteraction(Interaction):
    """Computer player used for simulations and tests."""

    def __init__(self, number_players: int = 3, rng: Optional[random.Random] = None):
        self.number_players = number_players
        self.rng = rng or random.Random()
        # Player id -> suggestion nobody could refute (and not from their own hand)
        self.unrefuted: Dict[int, SuggestionAction] = {}
        self._last_suggestion: Dict[int, SuggestionAction] = {}

    def request_number_players(self) -> int:
        return self.number_players

    def request_character(self, available: List[str], ordinal: int) -> str:
        return available[0]

    def request_action(self, player: Player, roll: int, room: Optional["Room"]) -> Optional[Action]:
        known = self.unrefuted.get(player.id)
        if known is not None:
            return AccusationAction(known.character, known.weapon, known.room)

        candidates = player.candidates()
        if all(len(cards) == 1 for cards in candidates.values()):
            return AccusationAction(
                candidates[CardCategory.CHARACTER][0],
                candidates[CardCategory.WEAPON][0],
                candidates[CardCategory.ROOM][0],
            )

        current = room.name if room is not None else None
        target_rooms = [c.name for c in candidates[CardCategory.ROOM] if c.name != current]
        if not target_rooms:
            return None  # Stay and suggest here again
        if room is not None and room.secret_passage in target_rooms:
            return SecretPassageAction(room.secret_passage)

        destination = self.choose_destination(player, roll, room, target_rooms)
        if destination is None:
            return None
        return MoveAction(destination)

    def choose_destination(
        self,
        player: Player,
        roll: int,
        room: Optional["Room"],
        target_rooms: List[str],
    ) -> Optional[Location]:
        """
        Pick where to move: a door of a target room if one is in reach,
        otherwise the reachable square closest to any target door.
        """
        board = self.board
        token = player.token
        own_doors = set(room.entrances) if room is not None else set()
        options = sorted(
            loc
            for loc in board.reachable_tiles(token, roll)
            if loc not in own_doors and not board.is_occupied_by_character(loc, exclude=token)
        )
        if not options:
            return None

        target_doors = {
            door
            for name in target_rooms
            for door in board.rooms[name].entrances
        }
        doors_in_reach = [loc for loc in options if loc in target_doors]
        if doors_in_reach:
            return self.rng.choice(doors_in_reach)

        # Distance from every square to the nearest target door
        nearest: Dict[Location, int] = {}
        for door in sorted(target_doors):
            for loc, dist in board.pathfinder.distances(door).items():
                if dist < nearest.get(loc, dist + 1):
                    nearest[loc] = dist

        scored = [(nearest[loc], loc) for loc in options if loc in nearest]
        if not scored:
            return None
        # Never step into a room that is no longer interesting
        scored = [
            (dist, loc) for dist, loc in scored
            if not isinstance(board.get_tile(loc), DoorTile)
        ] or scored
        return min(scored)[1]

    def request_suggestion(self, player: Player, room: "Room") -> Optional[SuggestionAction]:
        candidates = player.candidates()
        suggestion = SuggestionAction(
            character=self.rng.choice(candidates[CardCategory.CHARACTER]),
            weapon=self.rng.choice(candidates[CardCategory.WEAPON]),
            room=Card(room.name, CardCategory.ROOM),
        )
        self._last_suggestion[player.id] = suggestion
        return suggestion

    def suggestion_unrefuted(self, suggester: Player, suggestion: Suggestion) -> None:
        super().suggestion_unrefuted(suggester, suggestion)
        action = self._last_suggestion.get(suggester.id)
        if action is None:
            return
        cards = (action.character, action.weapon, action.room)
        # Nobody else holds any of them, so whatever is not in our hand is the solution
        if not any(card in suggester.hand for card in cards):
            self.unrefuted[suggester.id] = action
