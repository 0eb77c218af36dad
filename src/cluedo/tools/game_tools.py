"""
CrewAI tools for Cluedo players.

Read-only views of the active game for LLM agents. Agents never change the
game through tools: they return a structured decision and the game loop
applies it.

Movement rules the agents are told about:
- Move up to the dice roll in orthogonal steps along corridors
- Entering a door puts you inside that room
- You cannot end on a square another character stands on
"""

from typing import Optional

from crewai.tools import tool

from cluedo.deck import CardCategory
from cluedo.tiles import DoorTile, Location
from cluedo.tokens import InRoom

# The game the tools answer questions about
_active_game = None


def set_active_game(game) -> None:
    """Point the tools at a game (None to clear)."""
    global _active_game
    _active_game = game


def get_active_game():
    """Get the game the tools are bound to."""
    if _active_game is None:
        raise RuntimeError("No active game: call set_active_game() first")
    return _active_game


def _describe_location(player) -> str:
    position = player.token.position
    if isinstance(position, InRoom):
        return f"in the {position.room}"
    return f"in the corridor at {position.location}"


@tool("Get My Cards")
def get_my_cards(player_name: str) -> str:
    """
    Get the cards in your hand. Nobody else holds these cards and none of
    them is part of the solution.

    Args:
        player_name: Your character name

    Returns:
        List of cards in your hand grouped by category
    """
    game = get_active_game()
    player = game.get_player(player_name)

    if not player:
        return f"Error: Player {player_name} not found"

    by_category = {category: [] for category in CardCategory}
    for card in sorted(player.hand, key=lambda c: c.name):
        by_category[card.category].append(card.name)

    result = f"Your cards ({len(player.hand)} total):\n"
    result += f"  Characters: {', '.join(by_category[CardCategory.CHARACTER]) or 'None'}\n"
    result += f"  Weapons: {', '.join(by_category[CardCategory.WEAPON]) or 'None'}\n"
    result += f"  Rooms: {', '.join(by_category[CardCategory.ROOM]) or 'None'}"
    return result


@tool("Get Current Location")
def get_current_location(player_name: str) -> str:
    """
    Get your current location on the board.

    Args:
        player_name: Your character name

    Returns:
        Your room or corridor square, plus any secret passage out of it
    """
    game = get_active_game()
    player = game.get_player(player_name)

    if not player:
        return f"Error: Player {player_name} not found"

    result = f"You are {_describe_location(player)}"
    room = game.board.room_of(player.token)
    if room is not None:
        doors = ", ".join(str(door) for door in room.entrances)
        result += f"\nRoom doors: {doors}"
        if room.secret_passage:
            result += f"\nSecret passage to: {room.secret_passage}"
    return result


@tool("Get Reachable Squares")
def get_reachable_squares(player_name: str, steps: int) -> str:
    """
    List every square you could reach with a given dice roll. Doors are
    marked with the room they lead into.

    Args:
        player_name: Your character name
        steps: Your dice roll

    Returns:
        Reachable doors first, then the number of corridor squares in reach
    """
    game = get_active_game()
    player = game.get_player(player_name)

    if not player:
        return f"Error: Player {player_name} not found"

    board = game.board
    reachable = sorted(board.reachable_tiles(player.token, steps))
    doors = []
    corridor = []
    for loc in reachable:
        tile = board.get_tile(loc)
        if isinstance(tile, DoorTile):
            doors.append(f"{loc} -> {tile.room}")
        elif not board.is_occupied_by_character(loc, exclude=player.token):
            corridor.append(str(loc))

    result = f"Reachable with {steps} steps:\n"
    result += f"  Doors: {'; '.join(doors) or 'None'}\n"
    result += f"  Corridor squares: {', '.join(corridor) or 'None'}"
    return result


@tool("Get Path Length")
def get_path_length(player_name: str, x: int, y: int) -> str:
    """
    Get the number of steps from your position to a square.

    Args:
        player_name: Your character name
        x: Column of the destination
        y: Row of the destination

    Returns:
        The shortest distance, or a message if the square cannot be reached
    """
    game = get_active_game()
    player = game.get_player(player_name)

    if not player:
        return f"Error: Player {player_name} not found"

    destination = Location(x, y)
    distance: Optional[int] = game.board.path_length(player.token, destination)
    if distance is None:
        return f"{destination} cannot be reached"
    return f"{destination} is {distance} steps away"


@tool("Get Room Summary")
def get_room_summary() -> str:
    """
    See which characters and weapons are in each room.

    Returns:
        One line per occupied room
    """
    game = get_active_game()
    return game.board.room_info() or "All rooms are empty"


@tool("View Board")
def view_board() -> str:
    """
    Get a text picture of the board. Letters in capitals are characters,
    '+' marks doors, lowercase letters are room floors and '#' is wall.

    Returns:
        The board as text with column and row numbers
    """
    game = get_active_game()
    return str(game.board)


@tool("Get Candidate Cards")
def get_candidate_cards(player_name: str) -> str:
    """
    Get the cards that could still be part of the solution as far as you
    know: nobody has shown them to you and they are not in your hand.
    When only one card is left per category, accuse!

    Args:
        player_name: Your character name

    Returns:
        Remaining candidates per category
    """
    game = get_active_game()
    player = game.get_player(player_name)

    if not player:
        return f"Error: Player {player_name} not found"

    candidates = player.candidates()
    result = "Possible solution cards:\n"
    result += f"  Characters: {', '.join(c.name for c in candidates[CardCategory.CHARACTER]) or 'None'}\n"
    result += f"  Weapons: {', '.join(c.name for c in candidates[CardCategory.WEAPON]) or 'None'}\n"
    result += f"  Rooms: {', '.join(c.name for c in candidates[CardCategory.ROOM]) or 'None'}"
    if all(len(cards) == 1 for cards in candidates.values()):
        result += "\nOnly one card left in every category: you can make an accusation."
    return result


@tool("Get Suggestion History")
def get_suggestion_history() -> str:
    """
    Get every suggestion made so far and who refuted it. Cards shown are
    private, so only the refuting player is listed.

    Returns:
        One line per suggestion, oldest first
    """
    game = get_active_game()
    if not game.suggestion_history:
        return "No suggestions have been made yet"

    lines = []
    for i, s in enumerate(game.suggestion_history, 1):
        outcome = f"refuted by {s.refuted_by}" if s.refuted_by else "not refuted"
        lines.append(f"{i}. {s.suggester}: {s.character} with the {s.weapon} in the {s.room} ({outcome})")
    return "\n".join(lines)


@tool("Get Valid Options")
def get_valid_options() -> str:
    """
    Get the exact names of all characters, weapons and rooms. Use these
    spellings in suggestions and accusations.

    Returns:
        Valid card names per category
    """
    game = get_active_game()
    board = game.board
    result = f"Characters: {', '.join(board.character_names)}\n"
    result += f"Weapons: {', '.join(board.weapon_names)}\n"
    result += f"Rooms: {', '.join(board.room_names)}"
    return result
