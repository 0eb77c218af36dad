#!/usr/bin/env python
"""
Cluedo Simulator
Main entry point for running a game with computer or LLM agent players.
"""

import os
import random
import sys
import logging

# Disable CrewAI tracing before importing crewai
os.environ["CREWAI_TRACING_ENABLED"] = "false"

from dotenv import load_dotenv

from cluedo.config import GameSettings
from cluedo.crew import AgentInteraction
from cluedo.game import Game, GameResult, MAX_PLAYERS, MIN_PLAYERS
from cluedo.interaction import AutomatedInteraction
from cluedo.tools import set_active_game


# Load environment variables
load_dotenv()

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("CLUEDO_DEBUG") else logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MODES = ("auto", "agents")


def check_api_key(model: str) -> bool:
    """Gemini models need GOOGLE_API_KEY; other providers bring their own keys."""
    if model.startswith("gemini") and not os.getenv("GOOGLE_API_KEY"):
        print("❌ Error: GOOGLE_API_KEY environment variable not set.")
        print("Please create a .env file with your Google API key:")
        print("  GOOGLE_API_KEY=your-key-here")
        return False
    return True


def run_game(mode: str = "auto", num_players: int = 3, settings: GameSettings = None) -> GameResult:
    """
    Run a complete game of Cluedo.

    Args:
        mode: "auto" for computer players, "agents" for LLM agents
        num_players: Number of players (2-6)
        settings: Seed, turn limit and model; read from the environment if omitted

    Returns:
        The game result
    """
    settings = settings or GameSettings.from_env()
    rng = random.Random(settings.seed)

    if mode == "agents":
        interaction = AgentInteraction(number_players=num_players, llm=settings.llm_model)
    else:
        interaction = AutomatedInteraction(number_players=num_players, rng=rng)

    game = Game(interaction, rng=rng, max_turns=settings.max_turns)

    print("\n" + "=" * 60)
    print("🔍 CLUEDO 🔍")
    print("=" * 60 + "\n")

    game.setup()
    set_active_game(game)
    try:
        for player in game.players:
            print(f"  {player.name} holds {len(player.hand)} cards")
        result = game.play()
    finally:
        set_active_game(None)

    print("\n" + "=" * 60)
    print("🏆 GAME OVER")
    print("=" * 60)
    print(f"Winner: {result.winner.name if result.winner else 'No winner (max turns reached)'}")
    print(f"Total Turns: {result.turns}")
    print(f"Solution: {result.solution}")
    return result


def main(argv=None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    settings = GameSettings.from_env()

    mode = argv[0] if argv else "auto"
    if mode not in MODES:
        print("Usage: python -m cluedo.main [auto|agents] [num_players]")
        print(f"  num_players: {MIN_PLAYERS}-{MAX_PLAYERS} (default: {settings.num_players})")
        return 2

    try:
        num_players = int(argv[1]) if len(argv) > 1 else settings.num_players
    except ValueError:
        print(f"❌ Error: num_players must be a number, got {argv[1]!r}")
        return 2
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        print(f"❌ Error: Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
        return 2

    if mode == "agents" and not check_api_key(settings.llm_model):
        return 1

    run_game(mode, num_players, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
