from cluedo.tools.game_tools import (
    get_active_game,
    get_candidate_cards,
    get_current_location,
    get_my_cards,
    get_path_length,
    get_reachable_squares,
    get_room_summary,
    get_suggestion_history,
    get_valid_options,
    set_active_game,
    view_board,
)

__all__ = [
    "get_active_game",
    "get_candidate_cards",
    "get_current_location",
    "get_my_cards",
    "get_path_length",
    "get_reachable_squares",
    "get_room_summary",
    "get_suggestion_history",
    "get_valid_options",
    "set_active_game",
    "view_board",
]
