"""
Cluedo Agent Crew - LLM players

Each decision a seat has to make runs a one-task CrewAI crew. The agent can
inspect the game through the read-only tools and answers with a structured
pydantic decision, which is then turned into a game action. Anything the
agent gets wrong (unknown card, wrong category, missing coordinates) means
the player does nothing this turn.
"""

import logging
from typing import Dict, Literal, Optional, Type

from crewai import Agent, Crew, Process, Task
from pydantic import BaseModel, Field

from cluedo.actions import (
    AccusationAction,
    Action,
    MoveAction,
    SecretPassageAction,
    SuggestionAction,
)
from cluedo.config import DEFAULT_LLM_MODEL
from cluedo.deck import Card, CardCategory, Deck
from cluedo.interaction import Interaction
from cluedo.player import Player
from cluedo.retry import get_error_details, retry_with_backoff
from cluedo.tiles import Location
from cluedo.tools import (
    get_candidate_cards,
    get_current_location,
    get_my_cards,
    get_path_length,
    get_reachable_squares,
    get_room_summary,
    get_suggestion_history,
    get_valid_options,
    view_board,
)

logger = logging.getLogger(__name__)


PLAYER_TOOLS = [
    get_my_cards,
    get_candidate_cards,         # What could still be the solution?
    get_current_location,
    get_reachable_squares,       # Where can I go with this roll?
    get_path_length,
    get_room_summary,
    view_board,
    get_suggestion_history,
    get_valid_options,           # Exact card spellings
]


class ActionDecision(BaseModel):
    """What a player does with their dice roll."""
    action: Literal["move", "secret_passage", "accuse", "stay"]
    x: Optional[int] = Field(default=None, description="Destination column for a move")
    y: Optional[int] = Field(default=None, description="Destination row for a move")
    destination: Optional[str] = Field(default=None, description="Room at the end of the secret passage")
    character: Optional[str] = Field(default=None, description="Accused character")
    weapon: Optional[str] = Field(default=None, description="Accused weapon")
    room: Optional[str] = Field(default=None, description="Accused room")
    reasoning: str = ""


class SuggestionDecision(BaseModel):
    """A suggestion about the room the player is in."""
    character: str
    weapon: str
    reasoning: str = ""


# ==================== DECISION PARSING ====================

def _lookup(deck: Deck, name: Optional[str], category: CardCategory) -> Optional[Card]:
    if not name:
        return None
    card = deck.get_card(name)
    if card is None or card.category != category:
        logger.warning(f"{name!r} is not a valid {category.value}")
        return None
    return card


def decision_to_action(decision: ActionDecision, deck: Deck) -> Optional[Action]:
    """
    Turn an agent's decision into a game action.

    Returns None for "stay" and for decisions that do not name valid
    coordinates or cards.
    """
    if decision.action == "move":
        if decision.x is None or decision.y is None:
            return None
        return MoveAction(Location(decision.x, decision.y))

    if decision.action == "secret_passage":
        room = _lookup(deck, decision.destination, CardCategory.ROOM)
        return SecretPassageAction(room.name) if room else None

    if decision.action == "accuse":
        character = _lookup(deck, decision.character, CardCategory.CHARACTER)
        weapon = _lookup(deck, decision.weapon, CardCategory.WEAPON)
        room = _lookup(deck, decision.room, CardCategory.ROOM)
        if character is None or weapon is None or room is None:
            return None
        return AccusationAction(character, weapon, room)

    return None


def decision_to_suggestion(decision: SuggestionDecision, deck: Deck, room_name: str) -> Optional[SuggestionAction]:
    """Turn an agent's suggestion into a SuggestionAction about `room_name`."""
    character = _lookup(deck, decision.character, CardCategory.CHARACTER)
    weapon = _lookup(deck, decision.weapon, CardCategory.WEAPON)
    if character is None or weapon is None:
        return None
    return SuggestionAction(character, weapon, Card(room_name, CardCategory.ROOM))


# ==================== CREW FACTORIES ====================

def create_player_agent(player_name: str, llm=DEFAULT_LLM_MODEL) -> Agent:
    """
    Create the agent that plays one character.

    Args:
        player_name: The character this agent plays
        llm: Model name or crewai LLM instance

    Returns:
        An agent equipped with the read-only game tools
    """
    return Agent(
        role=f"{player_name}, Cluedo player",
        goal=(
            "Work out who committed the murder, with which weapon and in which room, "
            "before any other player does"
        ),
        backstory=(
            f"You are {player_name}, a sharp detective playing Cluedo. You keep track of "
            "every card you have seen and never accuse until you are certain."
        ),
        tools=PLAYER_TOOLS,
        llm=llm,
        verbose=False,
    )


def create_decision_crew(player_agent: Agent, description: str, output_model: Type[BaseModel]) -> Crew:
    """
    Create a mini-crew for a single decision.

    Args:
        player_agent: The agent making the decision
        description: The task prompt
        output_model: Pydantic model the answer must match

    Returns:
        A crew with one task whose output is parsed into `output_model`
    """
    decision_task = Task(
        description=description,
        expected_output=f"A {output_model.__name__} describing your choice.",
        agent=player_agent,
        output_pydantic=output_model,
    )

    return Crew(
        agents=[player_agent],
        tasks=[decision_task],
        process=Process.sequential,
        verbose=False,
        tracing=False,
    )


def action_prompt(player: Player, roll: int, room_name: Optional[str]) -> str:
    where = f"in the {room_name}" if room_name else "in a corridor"
    return f"""
        It's your turn in Cluedo! You are {player.name} and you are {where}.
        You rolled {roll}.

        Choose ONE action:
        - "move": go to a square at most {roll} steps away (give x and y).
          Stepping onto a door ('+') takes you into that room.
        - "secret_passage": if your room has a secret passage, take it
          (give the destination room).
        - "accuse": name the character, weapon and room. A wrong accusation
          eliminates you, so only accuse when you are certain.
        - "stay": do nothing.

        Use Get Candidate Cards and Get Reachable Squares before deciding.
        Always use the exact names from Get Valid Options.
        """


def suggestion_prompt(player: Player, room_name: str) -> str:
    return f"""
        You are {player.name} and you are in the {room_name}.
        Make a suggestion: name a character and a weapon. The room is the
        {room_name}. Pick cards that are still candidates so the answer
        teaches you something.

        Always use the exact names from Get Valid Options.
        """


# ==================== INTERACTION ====================

class AgentInteraction(Interaction):
    """Every seat is played by an LLM agent."""

    def __init__(
        self,
        number_players: int = 3,
        llm=DEFAULT_LLM_MODEL,
        max_retries: int = 3,
        base_delay: int = 5,
    ):
        self.number_players = number_players
        self.llm = llm
        self.deck: Optional[Deck] = None
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.agents: Dict[str, Agent] = {}

    def attach(self, board) -> None:
        super().attach(board)
        # Used only to resolve card names the agents give
        self.deck = Deck(board.character_names, board.weapon_names, board.room_names)

    def get_agent(self, player_name: str) -> Agent:
        if player_name not in self.agents:
            self.agents[player_name] = create_player_agent(player_name, self.llm)
        return self.agents[player_name]

    def _decide(self, player: Player, description: str, output_model: Type[BaseModel]) -> Optional[BaseModel]:
        """Run a decision crew, returning the parsed output or None on failure."""
        agent = self.get_agent(player.name)
        try:
            result = retry_with_backoff(
                lambda: create_decision_crew(agent, description, output_model).kickoff(),
                max_retries=self.max_retries,
                base_delay=self.base_delay,
            )
        except Exception as e:
            logger.error(f"{player.name} could not decide: {get_error_details(e)}")
            return None

        decision = getattr(result, "pydantic", None)
        if not isinstance(decision, output_model):
            logger.warning(f"{player.name} returned no {output_model.__name__}")
            return None
        logger.debug(f"{player.name} decided {decision}")
        return decision

    def request_number_players(self) -> int:
        return self.number_players

    def request_character(self, available, ordinal):
        return available[0]

    def request_action(self, player, roll, room):
        decision = self._decide(player, action_prompt(player, roll, room.name if room else None), ActionDecision)
        if decision is None:
            return None
        return decision_to_action(decision, self.deck)

    def request_suggestion(self, player, room):
        decision = self._decide(player, suggestion_prompt(player, room.name), SuggestionDecision)
        if decision is None:
            return None
        return decision_to_suggestion(decision, self.deck, room.name)
